#!/usr/bin/env python
# License: GPL v3 Copyright: 2018, Kovid Goyal <kovid at kovidgoyal.net>

from typing import TYPE_CHECKING, NamedTuple

from .rgb import Color, PaletteColor, color_as_sgr

if TYPE_CHECKING:
    from .config import Options


RESET = '\x1b[0m'


class Palette(NamedTuple):
    foreground: PaletteColor = Color(0xdd, 0xdd, 0xdd)
    background: PaletteColor = Color(0, 0, 0)
    black: PaletteColor = Color(0x1c, 0x1c, 0x1c)
    red: PaletteColor = Color(0xe0, 0x6c, 0x75)
    green: PaletteColor = Color(0x98, 0xc3, 0x79)
    yellow: PaletteColor = Color(0xe5, 0xc0, 0x7b)
    blue: PaletteColor = Color(0x61, 0xaf, 0xef)
    magenta: PaletteColor = Color(0xc6, 0x78, 0xdd)
    cyan: PaletteColor = Color(0x56, 0xb6, 0xc2)
    white: PaletteColor = Color(0xdc, 0xdf, 0xe4)
    orange: PaletteColor = Color(0xd1, 0x9a, 0x66)

    @property
    def player_colors(self) -> tuple[PaletteColor, ...]:
        return (self.magenta, self.blue, self.cyan, self.yellow, self.orange, self.red, self.green, self.white)


class StyleDeclaration(NamedTuple):
    base: PaletteColor
    background: PaletteColor
    emphasis_0: PaletteColor
    emphasis_1: PaletteColor
    emphasis_2: PaletteColor
    emphasis_3: PaletteColor


class Styling(NamedTuple):
    text_unselected: StyleDeclaration
    text_selected: StyleDeclaration
    ribbon_unselected: StyleDeclaration
    ribbon_selected: StyleDeclaration
    palette: Palette


def styling_from_palette(p: Palette) -> Styling:
    return Styling(
        text_unselected=StyleDeclaration(p.foreground, p.black, p.orange, p.cyan, p.green, p.magenta),
        text_selected=StyleDeclaration(p.foreground, p.background, p.orange, p.cyan, p.green, p.magenta),
        ribbon_unselected=StyleDeclaration(p.black, p.foreground, p.red, p.white, p.blue, p.magenta),
        ribbon_selected=StyleDeclaration(p.black, p.green, p.red, p.orange, p.magenta, p.blue),
        palette=p,
    )


def styling_from_opts(opts: 'Options') -> Styling:
    return styling_from_palette(Palette(**{k: getattr(opts, k) for k in Palette._fields}))


def sgr_for(fg: PaletteColor | None = None, bg: PaletteColor | None = None, bold: bool = False, italic: bool = False) -> str:
    parts = []
    if bold:
        parts.append('1')
    if italic:
        parts.append('3')
    if fg is not None:
        parts.append('38;' + color_as_sgr(fg))
    if bg is not None:
        parts.append('48;' + color_as_sgr(bg))
    if not parts:
        return ''
    return '\x1b[' + ';'.join(parts) + 'm'


def paint(text: str, fg: PaletteColor | None = None, bg: PaletteColor | None = None, bold: bool = False, italic: bool = False) -> str:
    ''' Wrap text in the escape codes for the given colors and emphasis. Only
    zero width escape codes are added, so the on screen width of the result
    is the width of text. '''
    if not text:
        return ''
    prefix = sgr_for(fg, bg, bold, italic)
    if not prefix:
        return text
    return prefix + text + RESET


def background_erase(bg: PaletteColor) -> str:
    ' Fill the rest of the line with bg '
    return sgr_for(bg=bg) + '\x1b[0K'
