#!/usr/bin/env python
# License: GPL v3 Copyright: 2018, Kovid Goyal <kovid at kovidgoyal.net>

import io
import os
from contextlib import redirect_stdout

from tabline.main import main, option_parser, tabs_from_args

from . import BaseTest, strip_escape_codes


class TestCLI(BaseTest):

    def test_tabs_from_args(self):
        t = tabs_from_args(['a', 'b', 'c'], 2, 'stack', True)
        self.ae([x.active for x in t], [False, True, False])
        self.ae([x.position for x in t], [1, 2, 3])
        self.ae(t[1].active_swap_layout_name, 'stack')
        self.assertTrue(t[1].is_swap_layout_dirty)
        self.assertIsNone(t[0].active_swap_layout_name)
        self.assertFalse(t[2].is_swap_layout_dirty)
        self.ae([x.active for x in tabs_from_args(['a', 'b'], 7, None, False)], [False, True])
        self.ae([x.active for x in tabs_from_args(['a', 'b'], 0, None, False)], [True, False])

    def test_option_parser(self):
        args = option_parser().parse_args(['--mode', 'locked', '-o', 'a=b', '-o', 'c=d', 'x', 'y'])
        self.ae(args.tabs, ['x', 'y'])
        self.ae(args.mode, 'locked')
        self.ae(args.override, ['a=b', 'c=d'])
        self.ae(option_parser().parse_args([]).tabs, ['main'])

    def test_main(self):
        out = io.StringIO()
        with redirect_stdout(out):
            main(['tabline', '--columns', '40', '--config', os.devnull, '--no-arrow-fonts', '-o', 'prefix_text=TAB', 'one', 'two'])
        # the clock and the load average need 18 cells each, neither fits
        self.ae(strip_escape_codes(out.getvalue()), 'TAB NORMAL > one >> two >' + ' ' * 15 + '\n')
