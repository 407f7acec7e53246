#!/usr/bin/env python
# License: GPL v3 Copyright: 2016, Kovid Goyal <kovid at kovidgoyal.net>

import os
from collections.abc import Callable, Iterable
from typing import Any, NamedTuple

from .colors import Palette
from .conf.utils import (
    BadLine,
    RecursiveInclude,
    key_pat,
    logical_lines,
    print_bad_lines,
    python_string,
    string_or_none,
    to_bool,
    to_color,
)
from .constants import ARROW_SEPARATOR, PLAIN_SEPARATOR, RENAME_PLACEHOLDER, config_dir, defconf
from .rgb import PaletteColor
from .utils import log_error

default_palette = Palette()


class Options(NamedTuple):
    prefix_text: str = ''
    hide_session_name: bool = False
    arrow_fonts: bool = True
    tab_separator: str = ARROW_SEPARATOR
    plain_tab_separator: str = PLAIN_SEPARATOR
    clock_format: str = ' %H:%M:%S %A '
    clock_timezone: str | None = 'Asia/Hong_Kong'
    clock_locale: str = 'ja_JP'
    loadavg_path: str = '/proc/loadavg'
    rename_placeholder: str = RENAME_PLACEHOLDER
    foreground: PaletteColor = default_palette.foreground
    background: PaletteColor = default_palette.background
    black: PaletteColor = default_palette.black
    red: PaletteColor = default_palette.red
    green: PaletteColor = default_palette.green
    yellow: PaletteColor = default_palette.yellow
    blue: PaletteColor = default_palette.blue
    magenta: PaletteColor = default_palette.magenta
    cyan: PaletteColor = default_palette.cyan
    white: PaletteColor = default_palette.white
    orange: PaletteColor = default_palette.orange


defaults = Options()


def clock_locale(x: str) -> str:
    x = x.strip()
    if not x:
        raise ValueError('The clock locale must not be empty')
    return x


option_parsers: dict[str, Callable[[str], Any]] = {
    'prefix_text': python_string,
    'hide_session_name': to_bool,
    'arrow_fonts': to_bool,
    'tab_separator': python_string,
    'plain_tab_separator': python_string,
    'clock_format': python_string,
    'clock_timezone': string_or_none,
    'clock_locale': clock_locale,
    'loadavg_path': str.strip,
    'rename_placeholder': python_string,
}
for color_name in Palette._fields:
    option_parsers[color_name] = to_color
del color_name


class ConfigReader:

    ''' Turns conf file lines into a dict of Options field values. Invalid
    values are collected as BadLines when accumulate_bad_lines is not None,
    otherwise they raise. '''

    def __init__(self, accumulate_bad_lines: list[BadLine] | None = None):
        self.accumulate_bad_lines = accumulate_bad_lines
        self.ans: dict[str, Any] = {}
        self.included: set[str] = set()

    def read_file(self, path: str) -> bool:
        path = os.path.abspath(path)
        try:
            with open(path, encoding='utf-8', errors='replace') as f:
                self.included.add(path)
                self.read(f, path)
        except (FileNotFoundError, PermissionError):
            return False
        return True

    def read(self, lines: Iterable[str], path: str = '') -> None:
        for number, line in logical_lines(lines):
            try:
                self.parse_line(line, path)
            except Exception as e:
                if self.accumulate_bad_lines is None:
                    raise
                self.accumulate_bad_lines.append(BadLine(number, line, e, path))

    def parse_line(self, line: str, path: str) -> None:
        m = key_pat.match(line)
        if m is None:
            log_error(f'Ignoring invalid config line: {line!r}')
            return
        key, val = m.groups()
        if key == 'include':
            self.include(val, os.path.dirname(path) if path else config_dir)
            return
        parser = option_parsers.get(key)
        if parser is None:
            log_error(f'Ignoring unknown config key: {key}')
            return
        self.ans[key] = parser(val)

    def include(self, val: str, base_dir: str) -> None:
        path = os.path.join(base_dir, os.path.expandvars(os.path.expanduser(val.strip())))
        path = os.path.abspath(path)
        if path in self.included:
            raise RecursiveInclude(f'The file {path} has already been included, ignoring')
        try:
            found = self.read_file(path)
        except OSError:
            log_error(f'Could not read from included config file: {path}, ignoring')
            return
        if not found:
            log_error(f'Could not find included config file: {path}, ignoring')


def parse_config(lines: Iterable[str], accumulate_bad_lines: list[BadLine] | None = None) -> dict[str, Any]:
    reader = ConfigReader(accumulate_bad_lines)
    reader.read(lines)
    return reader.ans


def load_config(*paths: str, overrides: Iterable[str] | None = None, accumulate_bad_lines: list[BadLine] | None = None) -> Options:
    ''' Options from the config files at paths (the default config file if
    none are given), later files and then overrides winning. Missing files
    are skipped. Bad lines are logged unless accumulate_bad_lines is given. '''
    report = accumulate_bad_lines is None
    reader = ConfigReader([] if accumulate_bad_lines is None else accumulate_bad_lines)
    for path in paths or (defconf,):
        if path:
            reader.included.clear()
            reader.read_file(path)
    if overrides is not None:
        reader.read(overrides)
    if report and reader.accumulate_bad_lines:
        print_bad_lines(reader.accumulate_bad_lines)
    return defaults._replace(**reader.ans)
