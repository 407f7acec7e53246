#!/usr/bin/env python
# License: GPL v3 Copyright: 2018, Kovid Goyal <kovid at kovidgoyal.net>

import re
from collections.abc import Iterable, Iterator, Sequence
from typing import NamedTuple

from ..rgb import PaletteColor
from ..rgb import to_color as as_color
from ..utils import log_error

key_pat = re.compile(r'([a-zA-Z][a-zA-Z0-9_-]*)\s+(.+)$')


class BadLine(NamedTuple):
    number: int
    line: str
    exception: Exception
    file: str


class RecursiveInclude(Exception):
    pass


def to_bool(x: str) -> bool:
    return x.lower() in ('y', 'yes', 'true')


def to_color(x: str) -> PaletteColor:
    ans = as_color(x, validate=True)
    if ans is None:  # this is only for type-checking
        ans = 0
    return ans


def python_string(text: str) -> str:
    ' Interpret escapes such as \\x20 so that values can start or end with spaces '
    from ast import literal_eval
    ans: str = literal_eval("'''" + text.replace("'''", "'\\''") + "'''")
    return ans


def string_or_none(x: str) -> str | None:
    return None if x.lower() == 'none' else x


def logical_lines(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    ''' Yield (line number, text) for every non-blank, non-comment line, with
    lines starting with a backslash appended to the line before them. The
    number is that of the first physical line. '''
    pending: tuple[int, str] | None = None
    for number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if pending is not None and line.startswith('\\'):
            pending = pending[0], pending[1] + line[1:]
            continue
        if pending is not None and pending[1] and not pending[1].startswith('#'):
            yield pending
        pending = number, line
    if pending is not None and pending[1] and not pending[1].startswith('#'):
        yield pending


def print_bad_lines(bad_lines: Sequence[BadLine]) -> None:
    for bad_line in bad_lines:
        where = f'{bad_line.file}:{bad_line.number}' if bad_line.file else f'line {bad_line.number}'
        log_error(f'Ignoring invalid config line at {where}: {bad_line.line!r} with error: {bad_line.exception}')
