#!/usr/bin/env python
# License: GPL v3 Copyright: 2018, Kovid Goyal <kovid at kovidgoyal.net>

import math

from .colors import Styling, paint
from .rgb import PaletteColor
from .types import InputMode, LoadAverage, ModeKind, Segment
from .utils import wcswidth

# Upper bounds (exclusive) of the load severity tiers, in percent of capacity
LOAD_TIER_BOUNDS = (25, 50, 75, 100, 200, 400)


def clock_status(time_text: str, styling: Styling, separator: str) -> Segment:
    text = separator + time_text
    bg = styling.text_unselected.background
    green = styling.ribbon_selected.background
    return Segment(paint(text, bg, green), wcswidth(text))


def load_percent(load: LoadAverage) -> int:
    return int(math.floor(load.load1 / max(1, load.ncpu) * 100 + 0.5))


def load_tier(percent: int) -> int:
    for i, bound in enumerate(LOAD_TIER_BOUNDS):
        if percent < bound:
            return i
    return len(LOAD_TIER_BOUNDS)


def load_color(load: LoadAverage, styling: Styling) -> PaletteColor:
    p = styling.palette
    tiers = (p.green, p.white, p.blue, p.cyan, p.yellow, p.magenta, p.red)
    return tiers[load_tier(load_percent(load))]


def load_status(load: LoadAverage, styling: Styling, separator: str) -> Segment:
    bg = styling.text_unselected.background
    color = load_color(load, styling)
    loads = f' {load.load1:.2f} {load.load5:.2f} {load.load15:.2f} '
    width = wcswidth(separator + loads + separator)
    text = paint(separator, bg, color) + paint(loads, bg, color) + paint(separator, color, bg)
    return Segment(text, width)


def swap_layout_status(
    max_width: int, swap_layout_name: str | None, is_swap_layout_dirty: bool,
    mode: InputMode, styling: Styling, separator: str
) -> Segment | None:
    ''' The indicator for the active swap layout, in its full form if it fits
    in max_width, else in its short form (one cell less padding), else
    None. In locked mode only the full form is ever used. Whether the layout
    is locked, dirty or clean changes only the colors, never the width. '''
    if swap_layout_name is None:
        return None
    name = swap_layout_name.upper()
    bg = styling.text_unselected.background
    fg = styling.ribbon_unselected.background
    green = styling.ribbon_selected.background
    locked = mode.kind is ModeKind.locked
    if locked:
        ribbon, bold, italic = fg, False, True
    elif is_swap_layout_dirty:
        ribbon, bold, italic = fg, True, False
    else:
        ribbon, bold, italic = green, True, False

    def render(title: str) -> Segment:
        text = paint(separator, bg, ribbon) + paint(title, bg, ribbon, bold=bold, italic=italic) + paint(separator, ribbon, bg)
        return Segment(text, wcswidth(title) + 2 * wcswidth(separator))

    full = render(f' {name} ')
    if full.width <= max_width:
        return full
    if not locked:
        short = render(f' {name}')
        if short.width <= max_width:
            return short
    return None
