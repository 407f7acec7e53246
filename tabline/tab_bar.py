#!/usr/bin/env python
# License: GPL v3 Copyright: 2018, Kovid Goyal <kovid at kovidgoyal.net>

from collections.abc import Iterable, Sequence
from functools import lru_cache
from typing import NamedTuple

from .colors import Styling, paint
from .constants import MANY_TABS_THRESHOLD
from .types import InputMode, LoadAverage, ModeKind, Segment
from .utils import wcswidth
from .widgets import clock_status, load_status, swap_layout_status


def total_width(segments: Iterable[Segment]) -> int:
    return sum(s.width for s in segments)


def more_message(text: str, tab_index: int, styling: Styling, separator: str) -> Segment:
    text_color = styling.ribbon_unselected.base
    sep_color = styling.text_unselected.background
    plus_ribbon_bg = styling.text_selected.emphasis_0
    styled = (
        paint(separator, sep_color, plus_ribbon_bg) +
        paint(text, text_color, plus_ribbon_bg, bold=True) +
        paint(separator, plus_ribbon_bg, sep_color)
    )
    return Segment(styled, wcswidth(text) + 2 * wcswidth(separator), tab_index)


def left_more_text(tab_count_to_the_left: int) -> str:
    if tab_count_to_the_left <= 0:
        return ''
    if tab_count_to_the_left < MANY_TABS_THRESHOLD:
        return f' ← +{tab_count_to_the_left} '
    return ' ← +many '


def right_more_text(tab_count_to_the_right: int) -> str:
    if tab_count_to_the_right <= 0:
        return ''
    if tab_count_to_the_right < MANY_TABS_THRESHOLD:
        return f' +{tab_count_to_the_right} → '
    return ' +many → '


@lru_cache(maxsize=512)
def more_text_width(text: str) -> int:
    return wcswidth(text)


def left_more_message(tab_count_to_the_left: int, styling: Styling, separator: str, tab_index: int) -> Segment:
    text = left_more_text(tab_count_to_the_left)
    return more_message(text, tab_index, styling, separator) if text else Segment()


def right_more_message(tab_count_to_the_right: int, styling: Styling, separator: str, tab_index: int) -> Segment:
    text = right_more_text(tab_count_to_the_right)
    return more_message(text, tab_index, styling, separator) if text else Segment()


class Window(NamedTuple):
    shown_before: int
    shown_after: int
    # the hidden tabs are summarized by the more messages
    collapsed: bool

    @property
    def num_tabs(self) -> int:
        return 1 + self.shown_before + self.shown_after


def greedy_window(
    before_widths: Sequence[int], after_widths: Sequence[int], active_width: int, budget: int, separator_width: int
) -> Window:
    ''' Add tabs one at a time to whichever side of the active tab has used
    less width so far, falling back to the other side when the preferred one
    does not fit, until neither side fits. '''

    def message_width(text: str) -> int:
        return more_text_width(text) + 2 * separator_width if text else 0

    num_before, num_after = len(before_widths), len(after_widths)
    shown_before = shown_after = 0
    middle_width = active_width
    total_left = total_right = 0
    while True:
        left_count, right_count = num_before - shown_before, num_after - shown_after
        left_width = message_width(left_more_text(left_count))
        right_width = message_width(right_more_text(right_count))
        total_size = left_width + middle_width + right_width
        if total_size > budget:
            # not even the more messages fit
            return Window(shown_before, shown_after, False)

        # adding the last tab on a side also removes that side's message
        left_fits = left_count > 0 and (
            before_widths[left_count - 1] + total_size - (left_width if left_count == 1 else 0) <= budget)
        right_fits = right_count > 0 and (
            after_widths[shown_after] + total_size - (right_width if right_count == 1 else 0) <= budget)

        if (total_left <= total_right or not right_fits) and left_fits:
            width = before_widths[left_count - 1]
            shown_before += 1
            total_left += width
        elif right_fits:
            width = after_widths[shown_after]
            shown_after += 1
            total_right += width
        else:
            return Window(shown_before, shown_after, True)
        middle_width += width


def fit(
    tabs_before_active: Sequence[Segment], tabs_after_active: Sequence[Segment], active: Segment,
    budget: int, styling: Styling, separator: str
) -> list[Segment]:
    ''' Choose which tabs to show in budget cells, always including the
    active tab. Tabs are added one at a time to whichever side of the active
    tab has used less width so far, so that it stays roughly centered. Tabs
    that do not fit are summarized by a "← +N" indicator on the left and a
    "+N →" indicator on the right. Clicking an indicator selects the hidden
    tab adjacent to the visible ones.

    With tabs of differing widths the greedy choice for a smaller budget
    can show more tabs than the one for budget, as a wide tab taken early
    crowds out narrower ones. So every budget up to budget is tried and the
    choice showing the most tabs wins, ties going to the largest budget.
    A wider line therefore never shows fewer tabs. '''
    before = list(tabs_before_active)
    after = list(tabs_after_active)
    if total_width(before) + active.width + total_width(after) <= budget:
        return before + [active] + after
    before_widths = [s.width for s in before]
    after_widths = [s.width for s in after]
    separator_width = wcswidth(separator)
    best = greedy_window(before_widths, after_widths, active.width, budget, separator_width)
    for smaller_budget in range(budget - 1, active.width - 1, -1):
        candidate = greedy_window(before_widths, after_widths, active.width, smaller_budget, separator_width)
        if candidate.num_tabs > best.num_tabs:
            best = candidate

    left_count = len(before) - best.shown_before
    right_count = len(after) - best.shown_after
    tabs = before[left_count:] + [active] + after[:best.shown_after]
    if best.collapsed:
        # the tab just right of the rightmost visible tab
        right_index = left_count + len(tabs)
        if left_count:
            # the tab just left of the leftmost visible tab
            tabs.insert(0, left_more_message(left_count, styling, separator, left_count - 1))
        if right_count:
            tabs.append(right_more_message(right_count, styling, separator, right_index))
    return tabs


def tab_line_prefix(
    session_name: str | None, mode: InputMode, styling: Styling, cols: int, prefix_text: str = ''
) -> list[Segment]:
    ''' The label, session name and mode badge shown before the tabs. The
    session name and the badge are each shown only if they fit in cols on
    their own, they are not checked against each other. '''
    text_color = styling.text_unselected.base
    bg_color = styling.text_unselected.background
    prefix_width = wcswidth(prefix_text)
    parts = [Segment(paint(prefix_text, text_color, bg_color, bold=True), prefix_width)]
    available = max(0, cols - prefix_width)
    if session_name is not None:
        name_part = f'({session_name})'
        name_width = wcswidth(name_part)
        if available >= name_width:
            parts.append(Segment(paint(name_part, text_color, bg_color, bold=True), name_width))
    mode_part = f' {mode.badge} '
    mode_width = wcswidth(mode_part)
    kind = mode.kind
    if kind is ModeKind.locked:
        mode_color = styling.text_unselected.emphasis_3
    elif kind is ModeKind.normal:
        mode_color = styling.text_unselected.emphasis_2
    else:
        mode_color = styling.text_unselected.emphasis_0
    if available >= mode_width:
        parts.append(Segment(paint(mode_part, mode_color, bg_color, bold=True), mode_width))
    return parts


def compose_right_parts(
    remaining: int, styling: Styling, separator: str, mode: InputMode,
    time_text: str | None = None, load: LoadAverage | None = None,
    active_swap_layout_name: str | None = None, is_swap_layout_dirty: bool = False,
) -> tuple[list[Segment], int]:
    ''' Pick the status widgets for the right end of the line, in priority
    order clock, load average, swap layout. Each is shown only if it fits in
    what the earlier ones left over. Returns the widgets in the order they
    were admitted and the number of cells still free. '''
    parts: list[Segment] = []
    if time_text is not None:
        clock = clock_status(time_text, styling, separator)
        if clock.width <= remaining:
            remaining -= clock.width
            parts.append(clock)
    if load is not None:
        load_part = load_status(load, styling, separator)
        if load_part.width <= remaining:
            remaining -= load_part.width
            parts.append(load_part)
    if remaining > 0:
        swap = swap_layout_status(remaining, active_swap_layout_name, is_swap_layout_dirty, mode, styling, separator)
        if swap is not None:
            remaining = max(0, remaining - swap.width)
            parts.append(swap)
    return parts, remaining


def padding(width: int, styling: Styling) -> Segment:
    bg = styling.text_unselected.background
    return Segment(paint(' ' * width, bg, bg), width)


def fill_to(line: list[Segment], cols: int, styling: Styling) -> list[Segment]:
    remaining = cols - total_width(line)
    if remaining > 0:
        line.append(padding(remaining, styling))
    return line


def tab_line(
    all_tabs: Sequence[Segment],
    active_tab_index: int,
    cols: int,
    styling: Styling,
    separator: str,
    mode: InputMode = InputMode.normal,
    session_name: str | None = None,
    hide_session_name: bool = False,
    prefix_text: str = '',
    active_swap_layout_name: str | None = None,
    is_swap_layout_dirty: bool = False,
    time_text: str | None = None,
    load: LoadAverage | None = None,
) -> list[Segment]:
    ''' Lay out a complete status line of exactly cols cells. active_tab_index
    is the 0-based index of the active tab in all_tabs. Returns an empty list
    if there are no tabs or the active tab is not among them. '''
    if not 0 <= active_tab_index < len(all_tabs):
        return []
    tabs_before_active = all_tabs[:active_tab_index]
    active_tab = all_tabs[active_tab_index]
    tabs_after_active = all_tabs[active_tab_index + 1:]
    prefix = tab_line_prefix(None if hide_session_name else session_name, mode, styling, cols, prefix_text)
    prefix_width = total_width(prefix)

    if prefix_width + active_tab.width > cols:
        # no room for even the active tab, show only the prefix
        while prefix and total_width(prefix) > cols:
            prefix.pop()
        return fill_to(prefix, cols, styling)

    line = prefix + fit(tabs_before_active, tabs_after_active, active_tab, cols - prefix_width, styling, separator)
    right_parts, remaining = compose_right_parts(
        cols - total_width(line), styling, separator, mode, time_text, load,
        active_swap_layout_name, is_swap_layout_dirty)
    if remaining > 0:
        line.append(padding(remaining, styling))
    line.extend(reversed(right_parts))
    return line


def render_line(segments: Iterable[Segment]) -> str:
    return ''.join(s.text for s in segments)
