#!/usr/bin/env python
# License: GPL v3 Copyright: 2018, Kovid Goyal <kovid at kovidgoyal.net>

from tabline.rgb import color_as_sgr
from tabline.types import InputMode, LoadAverage
from tabline.widgets import clock_status, load_color, load_percent, load_status, load_tier, swap_layout_status

from . import BaseTest, strip_escape_codes


class TestWidgets(BaseTest):

    def test_clock(self):
        s = clock_status(' 08:00:00 月曜日 ', self.styling, '>')
        self.ae(strip_escape_codes(s.text), '> 08:00:00 月曜日 ')
        self.ae(s.width, 1 + 10 + 6 + 1)
        self.assertIsNone(s.tab_index)

    def test_load(self):
        load = LoadAverage(0.52, 0.58, 1.5, 2)
        s = load_status(load, self.styling, '>')
        self.ae(strip_escape_codes(s.text), '> 0.52 0.58 1.50 >')
        self.ae(s.width, 18)
        self.ae(load_percent(LoadAverage(1, 0, 0, 4)), 25)
        self.ae(load_percent(LoadAverage(3, 0, 0, 0)), 300)
        self.ae(load_percent(LoadAverage(0.125, 0, 0, 1)), 13)
        for percent, tier in ((0, 0), (24, 0), (25, 1), (49, 1), (50, 2), (75, 3), (99, 3), (100, 4), (199, 4), (200, 5), (399, 5), (400, 6), (5000, 6)):
            self.ae(load_tier(percent), tier, percent)
        p = self.styling.palette
        self.ae(load_color(LoadAverage(0.1, 0, 0, 4), self.styling), p.green)
        self.ae(load_color(LoadAverage(20, 0, 0, 4), self.styling), p.red)
        # severity changes the colors, never the width
        hot = load_status(LoadAverage(20, 0, 0, 4), self.styling, '>')
        cold = load_status(LoadAverage(0.1, 0, 0, 4), self.styling, '>')
        self.ae(hot.width, cold.width)
        self.assertIn('48;' + color_as_sgr(p.red), hot.text)

    def test_swap_layout(self):
        def swap(max_width, mode=InputMode.normal, dirty=False, name='tall'):
            return swap_layout_status(max_width, name, dirty, mode, self.styling, '>')

        self.assertIsNone(swap(100, name=None))
        s = swap(8)
        self.ae(strip_escape_codes(s.text), '> TALL >')
        self.ae((s.width, s.tab_index), (8, None))
        s = swap(7)
        self.ae(strip_escape_codes(s.text), '> TALL>')
        self.ae(s.width, 7)
        self.assertIsNone(swap(6))
        self.ae(swap(8, InputMode.locked).width, 8)
        self.assertIsNone(swap(7, InputMode.locked))
        green = '48;' + color_as_sgr(self.styling.ribbon_selected.background)
        self.assertIn(green, swap(8).text)
        self.assertNotIn(green, swap(8, dirty=True).text)
        self.assertIn('\x1b[3;', swap(8, InputMode.locked).text)
        self.ae({swap(8, m, d).width for m in (InputMode.locked, InputMode.normal) for d in (True, False)}, {8})
