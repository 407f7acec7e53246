#!/usr/bin/env python
# License: GPL v3 Copyright: 2016, Kovid Goyal <kovid at kovidgoyal.net>

import os
from typing import NamedTuple


class Version(NamedTuple):
    major: int
    minor: int
    patch: int


appname: str = 'tabline'
version: Version = Version(0, 4, 1)
str_version: str = '.'.join(map(str, version))

# Powerline glyph used between tabs when the terminal font has it
ARROW_SEPARATOR = '\ue0b0'
PLAIN_SEPARATOR = '>'
RENAME_PLACEHOLDER = 'Enter name...'
# Hidden tab counts at or above this are shown as "many"
MANY_TABS_THRESHOLD = 10000


def _get_config_dir() -> str:
    if 'TABLINE_CONFIG_DIRECTORY' in os.environ:
        return os.path.abspath(os.path.expanduser(os.environ['TABLINE_CONFIG_DIRECTORY']))
    candidate = os.environ.get('XDG_CONFIG_HOME', '~/.config')
    return os.path.join(os.path.abspath(os.path.expanduser(candidate)), appname)


config_dir = _get_config_dir()
del _get_config_dir
defconf = os.path.join(config_dir, f'{appname}.conf')
