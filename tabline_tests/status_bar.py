#!/usr/bin/env python
# License: GPL v3 Copyright: 2018, Kovid Goyal <kovid at kovidgoyal.net>

from tabline.config import Options, defaults
from tabline.constants import ARROW_SEPARATOR
from tabline.status_bar import ModeUpdate, Mouse, MouseAction, PermissionResult, StatusBar, TabUpdate, Timer
from tabline.types import Capabilities, InputMode, LoadAverage, ModeInfo, TabInfo

from . import BaseTest, strip_escape_codes

CLOCK = ' 12:00:00 '
LOAD = LoadAverage(0.5, 0.25, 0.1, 4)
PLAIN = ModeInfo(InputMode.normal, None, Capabilities(arrow_fonts=False))


class FakeHost:

    def __init__(self):
        self.switches = []
        self.timeouts = []

    def switch_tab_to(self, tab_number):
        self.switches.append(tab_number)

    def set_timeout(self, seconds):
        self.timeouts.append(seconds)


def tabs(*names, active=0, **kw):
    return [TabInfo(name, i + 1, i == active, **(kw if i == active else {})) for i, name in enumerate(names)]


class TestStatusBar(BaseTest):

    def setUp(self):
        super().setUp()
        self.host = FakeHost()
        self.load_calls = []

    def read_load(self, previous):
        self.load_calls.append(previous)
        return LOAD

    def create_bar(self, opts: Options = defaults, needs_permissions: bool = False) -> StatusBar:
        bar = StatusBar(self.host, opts, clock=lambda: CLOCK, load_reader=self.read_load, needs_permissions=needs_permissions)
        bar.update(ModeUpdate(PLAIN))
        return bar

    def test_permissions(self):
        bar = StatusBar(self.host)
        self.assertFalse(bar.update(TabUpdate(tabs('a', 'b'))))
        self.ae(bar.tabs, ())
        self.assertFalse(bar.update(PermissionResult(False)))
        self.assertFalse(bar.got_permissions)
        self.assertTrue(bar.update(PermissionResult(True)))
        self.assertTrue(bar.update(TabUpdate(tabs('a', 'b'))))
        self.ae(len(bar.tabs), 2)

    def test_updates(self):
        bar = self.create_bar()
        self.assertTrue(bar.update(TabUpdate(tabs('a', 'b', 'c', active=1))))
        self.ae(bar.active_tab_idx, 2)
        self.assertFalse(bar.update(TabUpdate(tabs('a', 'b', 'c', active=1))))
        self.assertTrue(bar.update(TabUpdate(tabs('a', 'b', 'c', active=2))))
        self.ae(bar.active_tab_idx, 3)
        self.assertTrue(bar.update(TabUpdate(tabs('a', 'x', 'c', active=2))))
        # tab lists without an active tab are ignored
        self.assertFalse(bar.update(TabUpdate([TabInfo('z', 0)])))
        self.ae([t.name for t in bar.tabs], ['a', 'x', 'c'])
        self.assertFalse(bar.update(ModeUpdate(PLAIN)))
        self.assertTrue(bar.update(ModeUpdate(PLAIN._replace(mode=InputMode.locked))))
        self.ae(bar.mode_info.mode, InputMode.locked)
        self.assertTrue(bar.update(Timer(1.0)))
        self.ae(len(self.host.timeouts), 1)
        self.assertTrue(0 < self.host.timeouts[0] <= 1)
        bar.start()
        self.ae(len(self.host.timeouts), 2)

    def test_separator(self):
        bar = self.create_bar()
        self.ae(bar.separator, '>')
        bar.update(ModeUpdate(ModeInfo()))
        self.ae(bar.separator, ARROW_SEPARATOR)
        bar = self.create_bar(Options(arrow_fonts=False))
        bar.update(ModeUpdate(ModeInfo()))
        self.assertFalse(bar.capabilities.arrow_fonts)
        self.ae(bar.separator, '>')
        bar = self.create_bar(Options(plain_tab_separator='|'))
        self.ae(bar.separator, '|')

    def test_render(self):
        bar = self.create_bar()
        self.ae(bar.render(1, 80), '')
        bar.update(TabUpdate(tabs('a', 'b', 'c')))
        line = bar.render(1, 80)
        self.ae(strip_escape_codes(line), ' NORMAL > a >> b >> c >' + ' ' * 28 + '> 0.50 0.25 0.10 >> 12:00:00 ')
        self.ae(self.width_of(bar.tab_line), 80)
        self.assertTrue(line.endswith('\x1b[0K'))
        bar.render(1, 80)
        self.ae(self.load_calls, [None, LOAD])

        bar.update(ModeUpdate(PLAIN._replace(session_name='work')))
        self.assertTrue(strip_escape_codes(bar.render(1, 80)).startswith('(work) NORMAL > a >'))
        bar = self.create_bar(Options(hide_session_name=True, prefix_text='Tabs '))
        bar.update(ModeUpdate(PLAIN._replace(session_name='work')))
        bar.update(TabUpdate(tabs('a')))
        self.assertTrue(strip_escape_codes(bar.render(1, 80)).startswith('Tabs  NORMAL > a >'))

    def test_swap_layout_and_rename(self):
        bar = self.create_bar()
        bar.update(TabUpdate(tabs('a', 'b', active=1, active_swap_layout_name='stack')))
        self.assertIn('> STACK >', strip_escape_codes(bar.render(1, 80)))
        bar.update(TabUpdate(tabs('a', '', active=1, active_swap_layout_name='stack')))
        bar.update(ModeUpdate(PLAIN._replace(mode=InputMode.rename_tab)))
        text = strip_escape_codes(bar.render(1, 80))
        self.assertIn('> Enter name... >', text)
        self.assertIn(' RENAMETAB ', text)
        self.assertNotIn('STACK', text)
        bar = self.create_bar(Options(rename_placeholder='...'))
        bar.update(TabUpdate(tabs('a', '', active=1)))
        bar.update(ModeUpdate(PLAIN._replace(mode=InputMode.rename_tab)))
        self.assertIn('> ... >', strip_escape_codes(bar.render(1, 80)))

    def test_narrow(self):
        bar = self.create_bar()
        bar.update(TabUpdate(tabs(*'abcdefghij', active=5)))
        for cols in range(0, 120):
            bar.render(1, cols)
            self.ae(self.width_of(bar.tab_line), cols, cols)
        bar.render(1, 30)
        self.assertIn(5, [s.tab_index for s in bar.tab_line])

    def test_mouse(self):
        bar = self.create_bar()
        bar.update(TabUpdate(tabs('a', 'b', 'c')))
        bar.render(1, 80)
        # " NORMAL " takes the first 8 cells, each tab is 5 cells wide
        self.assertFalse(bar.update(Mouse(MouseAction.left_click, 0, 14)))
        self.ae(self.host.switches, [2])
        bar.update(Mouse(MouseAction.left_click, 0, 22))
        self.ae(self.host.switches, [2, 3])
        bar.update(Mouse(MouseAction.left_click, 0, 9))
        bar.update(Mouse(MouseAction.left_click, 0, 0))
        bar.update(Mouse(MouseAction.left_click, 0, 70))
        bar.update(Mouse(MouseAction.right_click, 0, 14))
        self.ae(self.host.switches, [2, 3])
        del self.host.switches[:]
        bar.update(Mouse(MouseAction.scroll_up))
        bar.update(Mouse(MouseAction.scroll_down))
        self.ae(self.host.switches, [2, 1])
        bar.update(TabUpdate(tabs('a', 'b', 'c', active=2)))
        del self.host.switches[:]
        bar.update(Mouse(MouseAction.scroll_up))
        bar.update(Mouse(MouseAction.scroll_down))
        self.ae(self.host.switches, [3, 2])

    def test_clicks_with_host_positions(self):
        for first_position in (0, 1, 7):
            del self.host.switches[:]
            bar = self.create_bar()
            bar.update(TabUpdate([TabInfo(name, first_position + i, i == 1) for i, name in enumerate('abc')]))
            bar.render(1, 80)
            self.ae([s.tab_index for s in bar.tab_line[2:5]], [0, 1, 2])
            bar.update(Mouse(MouseAction.left_click, 0, 9))
            bar.update(Mouse(MouseAction.left_click, 0, 14))
            bar.update(Mouse(MouseAction.left_click, 0, 19))
            self.ae(self.host.switches, [1, 3], first_position)

    def test_mouse_without_tabs(self):
        bar = self.create_bar()
        for action in MouseAction:
            bar.update(Mouse(action, 0, 3))
        bar.render(1, 80)
        bar.update(Mouse(MouseAction.scroll_down))
        self.ae(self.host.switches, [])
