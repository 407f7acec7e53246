#!/usr/bin/env python
# License: GPL v3 Copyright: 2017, Kovid Goyal <kovid at kovidgoyal.net>

import re
from typing import NamedTuple, Union


class Color(NamedTuple):
    red: int = 0
    green: int = 0
    blue: int = 0


# A palette entry is either a true color or an index into the 256 color table
PaletteColor = Union[Color, int]

color_names = {
    'black': Color(0, 0, 0),
    'white': Color(255, 255, 255),
    'red': Color(255, 0, 0),
    'green': Color(0, 128, 0),
    'lime': Color(0, 255, 0),
    'blue': Color(0, 0, 255),
    'yellow': Color(255, 255, 0),
    'cyan': Color(0, 255, 255),
    'magenta': Color(255, 0, 255),
    'orange': Color(255, 165, 0),
    'gray': Color(128, 128, 128),
    'grey': Color(128, 128, 128),
    'silver': Color(192, 192, 192),
}
sharp_pat = re.compile(r'^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')
rgb_pat = re.compile(r'^rgb:([0-9a-fA-F]{1,2})/([0-9a-fA-F]{1,2})/([0-9a-fA-F]{1,2})$')


def parse_sharp(raw: str) -> Color | None:
    m = sharp_pat.match(raw)
    if m is None:
        return None
    q = m.group(1)
    if len(q) == 3:
        q = ''.join(x * 2 for x in q)
    return Color(int(q[:2], 16), int(q[2:4], 16), int(q[4:], 16))


def parse_rgb(raw: str) -> Color | None:
    m = rgb_pat.match(raw)
    if m is None:
        return None

    def chan(x: str) -> int:
        return int(x * 2 if len(x) == 1 else x, 16)

    return Color(*map(chan, m.groups()))


def color_as_sgr(x: PaletteColor) -> str:
    if isinstance(x, Color):
        return f'2;{x.red};{x.green};{x.blue}'
    return f'5;{x}'


def to_color(raw: str, validate: bool = False) -> PaletteColor | None:
    raw = raw.strip()
    lraw = raw.lower()
    val: PaletteColor | None = None
    if lraw in color_names:
        val = color_names[lraw]
    elif raw.startswith('#'):
        val = parse_sharp(raw)
    elif lraw.startswith('rgb:'):
        val = parse_rgb(lraw)
    elif raw.isdigit():
        idx = int(raw)
        if 0 <= idx < 256:
            val = idx
    if val is None and validate:
        raise ValueError(f'Invalid color name: {raw!r}')
    return val
