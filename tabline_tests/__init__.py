#!/usr/bin/env python
# License: GPL v3 Copyright: 2016, Kovid Goyal <kovid at kovidgoyal.net>

import re
from collections.abc import Sequence
from unittest import TestCase

from tabline.colors import Styling, styling_from_palette
from tabline.config import default_palette
from tabline.types import Segment

escape_code_pat = re.compile(r'\x1b\[[0-9;:]*[mK]')


def strip_escape_codes(text: str) -> str:
    return escape_code_pat.sub('', text)


def default_styling() -> Styling:
    return styling_from_palette(default_palette)


def tab_segments(*widths: int) -> list[Segment]:
    ' Plain tab segments, segment i is tab i, shown as width x characters '
    return [Segment('x' * w, w, i) for i, w in enumerate(widths)]


def visible_tabs(segments: Sequence[Segment]) -> list[int]:
    ' Indices of the tabs made by tab_segments() in segments, skipping indicators and the like '
    return [s.tab_index for s in segments if s.tab_index is not None and s.text.startswith('x')]


class BaseTest(TestCase):

    ae = TestCase.assertEqual
    maxDiff = 2048

    def setUp(self) -> None:
        self.styling = default_styling()

    def width_of(self, segments: Sequence[Segment]) -> int:
        return sum(s.width for s in segments)
