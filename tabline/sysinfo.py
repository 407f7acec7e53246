#!/usr/bin/env python
# License: GPL v3 Copyright: 2018, Kovid Goyal <kovid at kovidgoyal.net>

import time
from datetime import datetime, tzinfo
from functools import lru_cache

import psutil

from .types import LoadAverage, run_once
from .utils import log_error

# Monday first, as returned by datetime.weekday()
weekday_names: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    'ja_JP': (
        ('月曜日', '火曜日', '水曜日', '木曜日', '金曜日', '土曜日', '日曜日'),
        ('月', '火', '水', '木', '金', '土', '日'),
    ),
    'zh_CN': (
        ('星期一', '星期二', '星期三', '星期四', '星期五', '星期六', '星期日'),
        ('周一', '周二', '周三', '周四', '周五', '周六', '周日'),
    ),
    'de_DE': (
        ('Montag', 'Dienstag', 'Mittwoch', 'Donnerstag', 'Freitag', 'Samstag', 'Sonntag'),
        ('Mo', 'Di', 'Mi', 'Do', 'Fr', 'Sa', 'So'),
    ),
}


@lru_cache(maxsize=8)
def timezone_for(name: str | None) -> tzinfo | None:
    if not name:
        return None
    from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        log_error(f'Unknown clock timezone: {name!r}, using local time. Error: {e}')
        return None


@lru_cache(maxsize=8)
def report_unknown_locale(locale: str) -> None:
    log_error(f'No weekday names known for the clock locale: {locale!r}, using the C locale')


def localize_format(fmt: str, when: datetime, locale: str) -> str:
    if locale in ('C', 'POSIX', 'en_US') or ('%A' not in fmt and '%a' not in fmt):
        return fmt
    names = weekday_names.get(locale)
    if names is None:
        report_unknown_locale(locale)
        return fmt
    full, short = names
    day = when.weekday()
    ans, i = [], 0
    while i < len(fmt):
        if fmt[i] == '%' and i + 1 < len(fmt):
            code = fmt[i + 1]
            if code == 'A':
                ans.append(full[day])
            elif code == 'a':
                ans.append(short[day])
            else:
                ans.append(fmt[i:i + 2])
            i += 2
            continue
        ans.append(fmt[i])
        i += 1
    return ''.join(ans)


def format_clock(fmt: str, timezone: str | None = None, locale: str = 'C', now: datetime | None = None) -> str:
    if now is None:
        now = datetime.now().astimezone()
    tz = timezone_for(timezone)
    if tz is not None:
        now = now.astimezone(tz)
    return now.strftime(localize_format(fmt, now, locale))


@run_once
def cpu_count() -> int:
    return psutil.cpu_count() or 1


def parse_load_average(raw: str, ncpu: int) -> LoadAverage:
    fields = raw.split()
    if len(fields) < 3:
        raise ValueError(f'Not a load average: {raw!r}')
    return LoadAverage(float(fields[0]), float(fields[1]), float(fields[2]), ncpu)


def read_load_average(path: str = '/proc/loadavg', previous: LoadAverage | None = None) -> LoadAverage:
    ''' Read the load average from path (in the /proc/loadavg format). On
    failure the previous reading is returned, or all zeros if there is none. '''
    try:
        with open(path) as f:
            raw = f.read()
        return parse_load_average(raw, cpu_count())
    except (OSError, ValueError) as e:
        log_error(f'Failed to read the load average from {path} with error: {e}')
    if previous is not None:
        return previous
    return LoadAverage(ncpu=cpu_count())


def seconds_to_next_tick(now: float | None = None) -> float:
    ' Time until the start of the next whole second, so the clock ticks in step with the wall clock '
    if now is None:
        now = time.time()
    return 1.0 - (now - int(now))
