#!/usr/bin/env python
# License: GPL v3 Copyright: 2018, Kovid Goyal <kovid at kovidgoyal.net>

from tabline.constants import ARROW_SEPARATOR, PLAIN_SEPARATOR
from tabline.rgb import color_as_sgr
from tabline.tab import get_clicked_segment, get_tab_to_focus, render_tab, tab_separator, tab_style, tab_to_scroll_to
from tabline.types import Capabilities, Segment, TabInfo

from . import BaseTest, strip_escape_codes


class TestTab(BaseTest):

    def test_render_tab(self):
        s = render_tab('abc', TabInfo('abc', 5), 4, False, self.styling, '>')
        self.ae(strip_escape_codes(s.text), '> abc >')
        self.ae((s.width, s.tab_index), (7, 4))
        s = render_tab('日本', TabInfo('日本', 1), 0, False, self.styling, '')
        self.ae(s.width, 6)
        s = render_tab('abc', TabInfo('abc', 2, active=True), 1, False, self.styling, '>')
        self.assertIn('48;' + color_as_sgr(self.styling.ribbon_selected.background), s.text)
        s = render_tab('abc', TabInfo('abc', 2, other_focused_clients=(1, 2)), 1, False, self.styling, '>')
        self.ae(strip_escape_codes(s.text), '> abc [  ]>')
        self.ae(s.width, 11)

    def test_tab_style(self):
        caps = Capabilities(arrow_fonts=True)
        s = tab_style('abc', TabInfo('abc', 0, is_fullscreen_active=True, is_sync_panes_active=True), 0, False, self.styling, caps, '')
        self.ae(strip_escape_codes(s.text), ' abc (FULLSCREEN) ')
        s = tab_style('abc', TabInfo('abc', 0, is_sync_panes_active=True), 0, False, self.styling, caps, '')
        self.ae(strip_escape_codes(s.text), ' abc (SYNC) ')
        self.ae(s.width, len(' abc (SYNC) '))
        s = tab_style('abc', TabInfo('abc', 0), 0, False, self.styling, caps)
        self.ae(strip_escape_codes(s.text), f'{ARROW_SEPARATOR} abc {ARROW_SEPARATOR}')
        alternate_bg = '48;' + color_as_sgr(self.styling.ribbon_unselected.emphasis_1)
        # alternate tabs are only shaded when there are no arrow glyphs
        s = tab_style('abc', TabInfo('abc', 1), 0, True, self.styling, caps, '>')
        self.assertNotIn(alternate_bg, s.text)
        s = tab_style('abc', TabInfo('abc', 1), 0, True, self.styling, Capabilities(arrow_fonts=False), '>')
        self.assertIn(alternate_bg, s.text)
        s = tab_style('abc', TabInfo('abc', 1), 0, True, self.styling, Capabilities(arrow_fonts=False))
        self.ae(strip_escape_codes(s.text), f'{PLAIN_SEPARATOR} abc {PLAIN_SEPARATOR}')

    def test_tab_separator(self):
        self.ae(tab_separator(Capabilities(True)), ARROW_SEPARATOR)
        self.ae(tab_separator(Capabilities(False)), PLAIN_SEPARATOR)
        self.ae(tab_separator(Capabilities(False), 'a', 'b'), 'b')

    def test_clicks(self):
        line = [Segment('a', 2), Segment('', 0, 5), Segment('b', 3, 0), Segment('c', 3, 1)]
        self.ae([get_clicked_segment(line, col) for col in range(9)], [line[0]] * 2 + [line[2]] * 3 + [line[3]] * 3 + [None])
        self.assertIsNone(get_clicked_segment([], 0))
        self.ae(get_tab_to_focus(line, 2, 3), 1)
        self.assertIsNone(get_tab_to_focus(line, 2, 6))
        self.ae(get_tab_to_focus(line, 1, 6), 2)
        self.assertIsNone(get_tab_to_focus(line, 2, 0))
        self.assertIsNone(get_tab_to_focus(line, 2, 100))

    def test_scroll(self):
        self.ae(tab_to_scroll_to(2, 3, up=True), 3)
        self.ae(tab_to_scroll_to(3, 3, up=True), 3)
        self.ae(tab_to_scroll_to(2, 3, up=False), 1)
        self.ae(tab_to_scroll_to(1, 3, up=False), 1)
