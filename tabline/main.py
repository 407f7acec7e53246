#!/usr/bin/env python
# License: GPL v3 Copyright: 2016, Kovid Goyal <kovid at kovidgoyal.net>

import argparse
import shutil
import sys
import time
from collections.abc import Sequence

from .config import load_config
from .constants import appname, str_version
from .status_bar import ModeUpdate, StatusBar, TabUpdate, Timer
from .types import Capabilities, InputMode, ModeInfo, TabInfo
from .utils import log_error


def option_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=appname, description='Render a terminal status line with tabs, a clock and the system load')
    p.add_argument('tabs', nargs='*', default=['main'], help='Names of the tabs, in order')
    p.add_argument('--version', action='version', version=f'{appname} {str_version}')
    p.add_argument('--columns', type=int, default=0, help='Width of the status line, defaults to the width of the terminal')
    p.add_argument('--active', type=int, default=1, help='Number of the active tab, starting from 1')
    p.add_argument(
        '--mode', default=InputMode.normal.value, choices=[m.value for m in InputMode], help='The current input mode')
    p.add_argument('--session', default=None, help='Name of the session')
    p.add_argument('--swap-layout', default=None, help='Name of the swap layout of the active tab')
    p.add_argument('--dirty', action='store_true', help='The active tab no longer matches its swap layout')
    p.add_argument('--no-arrow-fonts', action='store_true', help='Do not use the powerline arrow glyphs')
    p.add_argument('--config', action='append', default=[], help='Path to a config file, can be specified multiple times')
    p.add_argument(
        '-o', '--override', action='append', default=[], metavar='KEY=VALUE',
        help='Override an individual config option, can be specified multiple times')
    p.add_argument('--watch', action='store_true', help='Redraw the status line every second until interrupted')
    return p


def tabs_from_args(names: Sequence[str], active: int, swap_layout: str | None, dirty: bool) -> list[TabInfo]:
    active = max(1, min(active, len(names)))
    ans = []
    for i, name in enumerate(names):
        is_active = i + 1 == active
        ans.append(TabInfo(
            name, i + 1, is_active, is_swap_layout_dirty=dirty and is_active,
            active_swap_layout_name=swap_layout if is_active else None))
    return ans


class CLIHost:

    def __init__(self) -> None:
        self.timeout = 1.0

    def switch_tab_to(self, tab_number: int) -> None:
        log_error(f'Switching to tab: {tab_number}')

    def set_timeout(self, seconds: float) -> None:
        self.timeout = seconds


def main(args: Sequence[str] = sys.argv) -> None:
    opts_args = option_parser().parse_args(list(args[1:]))
    overrides = [x.replace('=', ' ', 1) for x in opts_args.override]
    opts = load_config(*opts_args.config, overrides=overrides)
    host = CLIHost()
    bar = StatusBar(host, opts, needs_permissions=False)
    mode_info = ModeInfo(InputMode(opts_args.mode), opts_args.session, Capabilities(not opts_args.no_arrow_fonts))
    bar.update(ModeUpdate(mode_info))
    bar.update(TabUpdate(tabs_from_args(opts_args.tabs or ['main'], opts_args.active, opts_args.swap_layout, opts_args.dirty)))

    def columns() -> int:
        return opts_args.columns or shutil.get_terminal_size().columns

    if not opts_args.watch:
        print(bar.render(1, columns()))
        return
    bar.start()
    try:
        while True:
            sys.stdout.write('\r' + bar.render(1, columns()))
            sys.stdout.flush()
            time.sleep(host.timeout)
            bar.update(Timer(host.timeout))
    except KeyboardInterrupt:
        print()


if __name__ == '__main__':
    main()
