#!/usr/bin/env python
# License: GPL v3 Copyright: 2018, Kovid Goyal <kovid at kovidgoyal.net>

import os
import tempfile

from tabline.conf.utils import RecursiveInclude, logical_lines, python_string, to_bool
from tabline.config import Options, defaults, load_config, parse_config
from tabline.rgb import Color, to_color

from . import BaseTest


class TestConfig(BaseTest):

    def test_values(self):
        self.ae(python_string(r'\x20a\tb '), ' a\tb ')
        self.ae(python_string("it's"), "it's")
        for x in ('y', 'yes', 'True'):
            self.assertTrue(to_bool(x))
        for x in ('n', 'no', 'false', 'x'):
            self.assertFalse(to_bool(x))
        self.ae(to_color('#abc'), Color(0xaa, 0xbb, 0xcc))
        self.ae(to_color('#10a0Ff'), Color(0x10, 0xa0, 0xff))
        self.ae(to_color('rgb:1/22/ff'), Color(0x11, 0x22, 0xff))
        self.ae(to_color(' Red '), Color(255, 0, 0))
        self.ae(to_color('12'), 12)
        self.assertIsNone(to_color('256'))
        self.assertIsNone(to_color('#abcd'))
        self.assertIsNone(to_color('nope'))
        self.assertRaises(ValueError, to_color, 'nope', validate=True)

    def test_parsing(self):
        opts = parse_config([
            '# a comment',
            r'prefix_text \x20Zellij\x20',
            'hide_session_name yes',
            'red #f00',
            'blue 12',
            'clock_timezone none',
            'clock_format %H',
            r'    \:%M',
            'no_such_option 1',
        ])
        self.ae(opts, {
            'prefix_text': ' Zellij ', 'hide_session_name': True, 'red': Color(255, 0, 0), 'blue': 12,
            'clock_timezone': None, 'clock_format': '%H:%M',
        })
        bad = []
        self.ae(parse_config(['red notacolor', 'arrow_fonts no'], accumulate_bad_lines=bad), {'arrow_fonts': False})
        self.ae(len(bad), 1)
        self.ae((bad[0].number, bad[0].line), (1, 'red notacolor'))
        self.assertIsInstance(bad[0].exception, ValueError)
        self.assertRaises(ValueError, parse_config, ['green xyz'])

    def test_load_config(self):
        with tempfile.TemporaryDirectory() as tdir:
            self.ae(load_config(os.path.join(tdir, 'missing.conf')), defaults)
            main = os.path.join(tdir, 'tabline.conf')
            with open(main, 'w') as f:
                print('include colors.conf', file=f)
                print('green red', file=f)
                print('clock_locale de_DE', file=f)
            with open(os.path.join(tdir, 'colors.conf'), 'w') as f:
                print('green blue', file=f)
                print('hide_session_name yes', file=f)
            opts = load_config(main, overrides=['prefix_text x', 'clock_locale C'])
            self.assertIsInstance(opts, Options)
            self.ae(opts.green, Color(255, 0, 0))
            self.assertTrue(opts.hide_session_name)
            self.ae((opts.prefix_text, opts.clock_locale), ('x', 'C'))
            self.ae(opts.yellow, defaults.yellow)

            # later files override earlier ones
            other = os.path.join(tdir, 'other.conf')
            with open(other, 'w') as f:
                print('green cyan', file=f)
            self.ae(load_config(main, other).green, Color(0, 255, 255))

            loop = os.path.join(tdir, 'loop.conf')
            with open(loop, 'w') as f:
                print('include loop.conf', file=f)
                print('arrow_fonts no', file=f)
            bad = []
            opts = load_config(loop, accumulate_bad_lines=bad)
            self.assertFalse(opts.arrow_fonts)
            self.ae(len(bad), 1)
            self.assertIsInstance(bad[0].exception, RecursiveInclude)

    def test_logical_lines(self):
        lines = ['a 1\n', '\n', '  # comment\n', 'b 2\n', '  \\3\n', '\\ 4\n', 'c 5']
        self.ae(list(logical_lines(lines)), [(1, 'a 1'), (4, 'b 23 4'), (7, 'c 5')])
        bad = []
        parse_config(['', 'hide_session_name yes', 'red #12', '\\34'], accumulate_bad_lines=bad)
        self.ae([(b.number, b.line) for b in bad], [(3, 'red #1234')])

    def test_includes(self):
        with tempfile.TemporaryDirectory() as tdir:
            with open(os.path.join(tdir, 'colors.conf'), 'w') as f:
                print('green blue', file=f)
            first, second = os.path.join(tdir, 'a.conf'), os.path.join(tdir, 'b.conf')
            with open(first, 'w') as f:
                print('include nonexistent.conf', file=f)
                print('include colors.conf', file=f)
                print('red blue', file=f)
            with open(second, 'w') as f:
                print('green red', file=f)
                print('include colors.conf', file=f)
            bad = []
            opts = load_config(first, second, accumulate_bad_lines=bad)
            self.ae(bad, [])
            self.ae((opts.red, opts.green), (Color(0, 0, 255), Color(0, 0, 255)))
            with open(second, 'w') as f:
                print('include colors.conf', file=f)
                print('include colors.conf', file=f)
            load_config(second, accumulate_bad_lines=bad)
            self.ae([(b.number, type(b.exception)) for b in bad], [(2, RecursiveInclude)])
