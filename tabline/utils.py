#!/usr/bin/env python3
# License: GPL v3 Copyright: 2016, Kovid Goyal <kovid at kovidgoyal.net>

import os
import sys
import time
from contextlib import suppress
from typing import Any

from wcwidth import wcswidth as _wcswidth
from wcwidth import wcwidth


def log_error(*a: Any, **k: str) -> None:
    with suppress(Exception):
        msg = k.get('sep', ' ').join(map(str, a)) + k.get('end', '')
        msg = msg.replace('\0', '')
        if os.environ.get('TABLINE_LOG_TIMESTAMPS', '1') != '0':
            msg = f'[{time.monotonic():.3f}] {msg}'
        print(msg, file=sys.stderr, flush=True)


def wcswidth(text: str) -> int:
    ' Number of terminal cells text occupies, never negative '
    ans = _wcswidth(text)
    if ans < 0:
        ans = sum(max(0, wcwidth(ch)) for ch in text)
    return ans
