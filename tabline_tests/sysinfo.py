#!/usr/bin/env python
# License: GPL v3 Copyright: 2018, Kovid Goyal <kovid at kovidgoyal.net>

import os
import tempfile
import unittest
from datetime import datetime, timedelta, timezone

import psutil

from tabline.sysinfo import (
    cpu_count,
    format_clock,
    localize_format,
    parse_load_average,
    read_load_average,
    seconds_to_next_tick,
    timezone_for,
)
from tabline.types import LoadAverage

from . import BaseTest


def have_timezone_database() -> bool:
    from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
    try:
        ZoneInfo('Asia/Hong_Kong')
    except ZoneInfoNotFoundError:
        return False
    return True


# 2024-01-01 is a Monday
MONDAY = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


class TestSysinfo(BaseTest):

    def test_weekday_names(self):
        self.ae(localize_format('%a %A %%A', MONDAY, 'ja_JP'), '月 月曜日 %%A')
        self.ae(localize_format('%A', MONDAY + timedelta(days=6), 'ja_JP'), '日曜日')
        self.ae(localize_format('%A', MONDAY, 'C'), '%A')
        self.ae(localize_format('%A', MONDAY, 'xx_YY'), '%A')
        self.ae(format_clock(' %H:%M:%S %A ', None, 'ja_JP', now=MONDAY), ' 00:00:00 月曜日 ')
        self.ae(format_clock('%A %%A', None, 'C', now=MONDAY), 'Monday %A')

    @unittest.skipUnless(have_timezone_database(), 'No timezone database available')
    def test_timezone(self):
        self.ae(format_clock(' %H:%M:%S %A ', 'Asia/Hong_Kong', 'ja_JP', now=MONDAY), ' 08:00:00 月曜日 ')
        self.ae(format_clock('%A', 'America/New_York', 'de_DE', now=MONDAY), 'Sonntag')

    def test_unknown_timezone(self):
        self.assertIsNone(timezone_for('Not/A_Zone'))
        self.assertIsNone(timezone_for(None))
        self.ae(format_clock('%H', 'Not/A_Zone', now=MONDAY), '00')

    def test_load_average(self):
        self.ae(parse_load_average('0.52 0.58 0.59 3/1234 5678\n', 4), LoadAverage(0.52, 0.58, 0.59, 4))
        self.assertRaises(ValueError, parse_load_average, '0.52', 4)
        self.assertRaises(ValueError, parse_load_average, 'a b c', 4)
        with tempfile.TemporaryDirectory() as tdir:
            path = os.path.join(tdir, 'loadavg')
            with open(path, 'w') as f:
                f.write('1.00 2.00 3.00 1/100 200\n')
            self.ae(read_load_average(path), LoadAverage(1, 2, 3, cpu_count()))
            previous = LoadAverage(4, 5, 6, 8)
            with open(path, 'w') as f:
                f.write('garbage\n')
            self.ae(read_load_average(path, previous), previous)
            missing = os.path.join(tdir, 'missing')
            self.ae(read_load_average(missing, previous), previous)
            self.ae(read_load_average(missing), LoadAverage(ncpu=cpu_count()))
        self.ae(cpu_count(), psutil.cpu_count() or 1)

    def test_timer(self):
        self.ae(seconds_to_next_tick(100.25), 0.75)
        self.ae(seconds_to_next_tick(100.0), 1.0)
        self.assertTrue(0 < seconds_to_next_tick() <= 1)
