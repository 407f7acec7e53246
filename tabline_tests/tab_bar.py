#!/usr/bin/env python
# License: GPL v3 Copyright: 2018, Kovid Goyal <kovid at kovidgoyal.net>

from tabline.colors import sgr_for
from tabline.tab import get_clicked_segment
from tabline.tab_bar import (
    compose_right_parts,
    fit,
    left_more_message,
    render_line,
    right_more_message,
    tab_line,
    tab_line_prefix,
    total_width,
)
from tabline.types import InputMode, LoadAverage, Segment

from . import BaseTest, strip_escape_codes, tab_segments, visible_tabs

CLOCK = ' 12:00:00 '
LOAD = LoadAverage(0.5, 0.25, 0.1, 4)


class TestTabBar(BaseTest):

    def fit(self, widths, active, budget, separator=''):
        tabs = tab_segments(*widths)
        return fit(tabs[:active], tabs[active + 1:], tabs[active], budget, self.styling, separator)

    def indicators(self, segments):
        return [strip_escape_codes(s.text) for s in segments if not s.text.startswith('x')]

    def test_more_messages(self):
        s = left_more_message(1, self.styling, '>', 0)
        self.ae(strip_escape_codes(s.text), '> ← +1 >')
        self.ae(s.width, 8)
        self.ae(s.tab_index, 0)
        s = right_more_message(9999, self.styling, '', 7)
        self.ae(strip_escape_codes(s.text), ' +9999 → ')
        self.ae((s.width, s.tab_index), (9, 7))
        self.ae(strip_escape_codes(right_more_message(10000, self.styling, '', 7).text), ' +many → ')
        self.ae(strip_escape_codes(left_more_message(20000, self.styling, '', 7).text), ' ← +many ')
        self.ae(left_more_message(0, self.styling, '>', 0), Segment())
        self.ae(right_more_message(0, self.styling, '>', 0).width, 0)

    def test_fit_everything(self):
        line = self.fit((3, 3, 3), 1, 10)
        self.ae(visible_tabs(line), [0, 1, 2])
        self.ae(self.width_of(line), 9)
        parts, remaining = compose_right_parts(10 - self.width_of(line), self.styling, '', InputMode.normal)
        self.ae((parts, remaining), ([], 1))

    def test_fit_collapses(self):
        widths = (4,) * 7
        # only the active tab fits, with or without the indicators
        for budget in (4, 15):
            self.ae(self.fit(widths, 3, budget), tab_segments(*widths)[3:4])
        line = self.fit(widths, 3, 16)
        self.ae(visible_tabs(line), [3])
        self.ae(self.indicators(line), [' ← +3 ', ' +3 → '])
        line = self.fit(widths, 3, 20)
        self.ae(visible_tabs(line), [2, 3])
        self.ae(self.indicators(line), [' ← +2 ', ' +3 → '])
        self.ae([s.tab_index for s in line], [1, 2, 3, 4])
        self.ae(self.width_of(line), 20)
        line = self.fit(widths, 3, 27)
        self.ae(visible_tabs(line), [2, 3, 4])
        self.ae(self.indicators(line), [' ← +2 ', ' +2 → '])
        self.ae([s.tab_index for s in line], [1, 2, 3, 4, 5])
        line = self.fit(widths, 3, 28)
        self.ae(visible_tabs(line), list(range(7)))
        self.ae(self.indicators(line), [])

    def test_fit_is_monotonic(self):
        widths = (4,) * 7
        counts = [len(visible_tabs(self.fit(widths, 3, budget))) for budget in range(4, 40)]
        self.ae(counts, sorted(counts))
        self.ae((counts[0], counts[-1]), (1, 7))
        for widths in ((5, 2, 7, 3, 3, 9, 1, 4), (7, 4, 2, 8, 1, 7, 7, 1, 8), (1, 9, 1, 1, 9, 2, 12, 1, 3, 3)):
            for active in range(len(widths)):
                for separator in ('', '>'):
                    prev = 0
                    for budget in range(widths[active], sum(widths) + 2):
                        line = self.fit(widths, active, budget, separator)
                        visible = visible_tabs(line)
                        self.assertIn(active, visible)
                        self.assertLessEqual(self.width_of(line), budget)
                        self.assertGreaterEqual(len(visible), prev, f'{widths=} {active=} {budget=}')
                        prev = len(visible)

    def test_fit_with_a_wide_neighbour(self):
        # taking the wide tab 5 first would crowd out tabs 0 to 2
        widths = (7, 4, 2, 8, 1, 7, 7, 1, 8)
        for budget in (31, 32, 33):
            line = self.fit(widths, 4, budget, '>')
            self.ae(visible_tabs(line), [0, 1, 2, 3, 4], budget)
            self.ae(self.indicators(line), ['> +4 → >'])
            self.ae(line[-1].tab_index, 5)

    def test_fit_keeps_active_centered(self):
        widths = (4,) * 9
        for budget, expected in ((24, [3, 4, 5]), (32, [2, 3, 4, 5, 6])):
            line = self.fit(widths, 4, budget)
            visible = visible_tabs(line)
            self.ae(visible, expected)
            before = sum(1 for i in visible if i < 4)
            after = sum(1 for i in visible if i > 4)
            self.assertLessEqual(abs(before - after), 1)

    def test_fit_at_the_edges(self):
        widths = (4,) * 6
        line = self.fit(widths, 0, 20)
        self.ae(visible_tabs(line), [0, 1, 2])
        self.ae(self.indicators(line), [' +3 → '])
        self.ae(line[-1].tab_index, 3)
        line = self.fit(widths, 5, 20)
        self.ae(visible_tabs(line), [3, 4, 5])
        self.ae(self.indicators(line), [' ← +3 '])
        self.ae(line[0].tab_index, 2)

    def test_fit_many_tabs(self):
        widths = (1,) * 20001
        line = self.fit(widths, 10000, 19)
        self.ae(visible_tabs(line), [10000])
        self.ae(self.indicators(line), [' ← +many ', ' +many → '])
        self.ae([s.tab_index for s in line], [9999, 10000, 10001])

    def test_hit_testing_a_fitted_line(self):
        line = self.fit((4,) * 7, 3, 20)
        offset = 0
        for segment in line:
            for col in range(offset, offset + segment.width):
                self.assertIs(get_clicked_segment(line, col), segment)
            offset += segment.width
        self.assertIsNone(get_clicked_segment(line, 20))
        owners = [get_clicked_segment(line, col).tab_index for col in range(20)]
        self.ae(owners, [1] * 6 + [2] * 4 + [3] * 4 + [4] * 6)

    def test_prefix(self):
        prefix = tab_line_prefix('main', InputMode.normal, self.styling, 80)
        self.ae([strip_escape_codes(s.text) for s in prefix], ['', '(main)', ' NORMAL '])
        self.ae([s.width for s in prefix], [0, 6, 8])
        self.assertTrue(all(s.tab_index is None for s in prefix))
        # both are checked against the whole width, not what is left over
        prefix = tab_line_prefix('abcdef', InputMode.normal, self.styling, 8)
        self.ae([s.width for s in prefix], [0, 8, 8])
        self.ae([s.width for s in tab_line_prefix('abcdef', InputMode.normal, self.styling, 7)], [0])
        prefix = tab_line_prefix(None, InputMode.rename_tab, self.styling, 80, prefix_text='>>')
        self.ae([strip_escape_codes(s.text) for s in prefix], ['>>', ' RENAMETAB '])
        tu = self.styling.text_unselected
        for mode, color in ((InputMode.locked, tu.emphasis_3), (InputMode.normal, tu.emphasis_2), (InputMode.pane, tu.emphasis_0)):
            badge = tab_line_prefix(None, mode, self.styling, 80)[-1]
            self.assertTrue(badge.text.startswith(sgr_for(color, tu.background, bold=True)), mode)

    def test_right_parts(self):
        clock_width, load_width = len(CLOCK), len(' 0.50 0.25 0.10 ')

        def names(parts):
            return [strip_escape_codes(p.text) for p in parts]

        parts, remaining = compose_right_parts(clock_width + load_width, self.styling, '', InputMode.normal, CLOCK, LOAD)
        self.ae(names(parts), [CLOCK, ' 0.50 0.25 0.10 '])
        self.ae(remaining, 0)
        # the clock wins over the load average
        parts, remaining = compose_right_parts(load_width + 3, self.styling, '', InputMode.normal, CLOCK, LOAD)
        self.ae(names(parts), [CLOCK])
        self.ae(remaining, load_width + 3 - clock_width)
        # but the load average is still tried when the clock does not fit
        parts, remaining = compose_right_parts(load_width, self.styling, '', InputMode.normal, ' 12:00:00 Monday ', LOAD)
        self.ae(names(parts), [' 0.50 0.25 0.10 '])
        self.ae(remaining, 0)
        parts, remaining = compose_right_parts(
            clock_width + 9, self.styling, '', InputMode.normal, CLOCK, LOAD, active_swap_layout_name='vertical')
        self.ae(names(parts), [CLOCK, ' VERTICAL'])
        self.ae(remaining, 0)
        parts, remaining = compose_right_parts(
            clock_width + 9, self.styling, '', InputMode.locked, CLOCK, LOAD, active_swap_layout_name='vertical')
        self.ae(names(parts), [CLOCK])
        self.ae(remaining, 9)
        self.ae(compose_right_parts(0, self.styling, '', InputMode.normal, CLOCK, LOAD, 'vertical'), ([], 0))

    def test_tab_line(self):
        tabs = tab_segments(5, 5, 5)
        line = tab_line(tabs, 1, 80, self.styling, '', time_text=CLOCK, load=LOAD)
        self.ae(self.width_of(line), 80)
        self.ae(visible_tabs(line), [0, 1, 2])
        texts = [strip_escape_codes(s.text) for s in line]
        self.ae(texts[:2], ['', ' NORMAL '])
        self.ae(texts[-2:], [' 0.50 0.25 0.10 ', CLOCK])
        self.ae(texts[-3], ' ' * (80 - 8 - 15 - 16 - len(CLOCK)))
        self.ae(line[-3].tab_index, None)
        self.ae(strip_escape_codes(render_line(line)), ''.join(texts))
        self.ae(tab_line([], 0, 80, self.styling, ''), [])
        self.ae(tab_line(tabs, 3, 80, self.styling, ''), [])

    def test_tab_line_without_room_for_tabs(self):
        line = tab_line(tab_segments(8), 0, 6, self.styling, '', time_text=CLOCK, load=LOAD)
        self.ae(visible_tabs(line), [])
        self.ae(self.width_of(line), 6)
        self.ae(line[0], Segment('', 0))
        # prefix parts that overflow together are dropped from the end
        line = tab_line(tab_segments(3), 0, 10, self.styling, '', session_name='abcdefgh')
        self.ae([strip_escape_codes(s.text) for s in line], ['', '(abcdefgh)'])
        self.ae(self.width_of(line), 10)
        line = tab_line(tab_segments(3), 0, 11, self.styling, '', session_name='abcdefgh', hide_session_name=True)
        self.ae(visible_tabs(line), [0])

    def test_tab_line_width_is_exact(self):
        tabs = tab_segments(4, 6, 3, 8, 5, 7)
        for active in (0, 2, 5):
            for cols in range(0, 90):
                line = tab_line(
                    tabs, active, cols, self.styling, '>', session_name='s', time_text=CLOCK, load=LOAD,
                    active_swap_layout_name='tall')
                self.ae(self.width_of(line), cols, f'{active=} {cols=}')
                prefix = tab_line_prefix('s', InputMode.normal, self.styling, cols)
                if total_width(prefix) + tabs[active].width <= cols:
                    self.assertIn(active, visible_tabs(line))
                for col in range(cols):
                    segment = get_clicked_segment(line, col)
                    self.assertIsNotNone(segment)
                    if segment.tab_index is not None and segment.text.startswith('x'):
                        self.ae(segment, tabs[segment.tab_index])
