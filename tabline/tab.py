#!/usr/bin/env python
# License: GPL v3 Copyright: 2018, Kovid Goyal <kovid at kovidgoyal.net>

from collections.abc import Sequence

from .colors import Styling, paint
from .constants import ARROW_SEPARATOR, PLAIN_SEPARATOR
from .rgb import PaletteColor
from .types import Capabilities, Segment, TabInfo
from .utils import wcswidth


def tab_separator(capabilities: Capabilities, fancy: str = ARROW_SEPARATOR, plain: str = PLAIN_SEPARATOR) -> str:
    return fancy if capabilities.arrow_fonts else plain


def cursors(focused_clients: Sequence[int], styling: Styling) -> tuple[str, int]:
    ' A block showing one colored cell per other client focused on this tab '
    colors = styling.palette.player_colors
    bg = styling.text_unselected.background
    fg = styling.text_unselected.base
    cells = ''.join(paint(' ', bg=colors[(client_id - 1) % len(colors)]) for client_id in focused_clients)
    return paint('[', fg, bg) + cells + paint(']', fg, bg), len(focused_clients) + 2


def render_tab(text: str, tab: TabInfo, tab_index: int, is_alternate_tab: bool, styling: Styling, separator: str) -> Segment:
    separator_width = wcswidth(separator)
    bar_bg = styling.text_unselected.background
    background_color: PaletteColor
    if tab.active:
        background_color = styling.ribbon_selected.background
        foreground_color = styling.ribbon_selected.base
    else:
        background_color = styling.ribbon_unselected.emphasis_1 if is_alternate_tab else styling.ribbon_unselected.background
        foreground_color = styling.ribbon_unselected.base
    left_separator = paint(separator, bar_bg, background_color)
    # two cells of padding around the title
    width = wcswidth(text) + 2 * separator_width + 2
    styled_title = paint(f' {text} ', foreground_color, background_color, bold=True)
    right_separator = paint(separator, background_color, bar_bg)
    if tab.other_focused_clients:
        cursor_section, extra_width = cursors(tab.other_focused_clients, styling)
        width += extra_width
        styled = left_separator + styled_title + cursor_section + right_separator
    else:
        styled = left_separator + styled_title + right_separator
    return Segment(styled, width, tab_index)


def tab_style(
    name: str, tab: TabInfo, tab_index: int, is_alternate_tab: bool, styling: Styling, capabilities: Capabilities,
    separator: str | None = None
) -> Segment:
    ''' The segment for tab, clicking it selects the tab at tab_index (0-based) in
    the list of all tabs, whatever position numbering the host uses. '''
    if separator is None:
        separator = tab_separator(capabilities)
    if tab.is_fullscreen_active:
        name += ' (FULLSCREEN)'
    elif tab.is_sync_panes_active:
        name += ' (SYNC)'
    # with arrow glyphs the separators already tell neighbouring tabs apart
    if capabilities.arrow_fonts:
        is_alternate_tab = False
    return render_tab(name, tab, tab_index, is_alternate_tab, styling, separator)


def get_clicked_segment(segments: Sequence[Segment], click_column: int) -> Segment | None:
    offset = 0
    for segment in segments:
        if offset <= click_column < offset + segment.width:
            return segment
        offset += segment.width
    return None


def get_tab_to_focus(segments: Sequence[Segment], active_tab_number: int, click_column: int) -> int | None:
    ''' Return the 1-based number of the tab to switch to for a click at
    click_column, or None if the click should do nothing. '''
    segment = get_clicked_segment(segments, click_column)
    if segment is None or segment.tab_index is None:
        return None
    tab_number = segment.tab_index + 1
    if tab_number == active_tab_number:
        return None
    return tab_number


def tab_to_scroll_to(active_tab_number: int, num_tabs: int, up: bool) -> int:
    if up:
        return min(active_tab_number + 1, num_tabs)
    return max(active_tab_number - 1, 1)
