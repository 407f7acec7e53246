#!/usr/bin/env python
# License: GPL v3 Copyright: 2018, Kovid Goyal <kovid at kovidgoyal.net>

from collections.abc import Callable, Sequence
from enum import Enum
from typing import NamedTuple, Protocol, Union

from .colors import background_erase, styling_from_opts
from .config import Options, defaults
from .sysinfo import format_clock, read_load_average, seconds_to_next_tick
from .tab import get_tab_to_focus, tab_separator, tab_style, tab_to_scroll_to
from .tab_bar import render_line, tab_line
from .types import Capabilities, InputMode, LoadAverage, ModeInfo, Segment, TabInfo
from .utils import log_error


class PermissionResult(NamedTuple):
    granted: bool


class TabUpdate(NamedTuple):
    tabs: Sequence[TabInfo]


class ModeUpdate(NamedTuple):
    mode_info: ModeInfo


class MouseAction(Enum):
    left_click = 1
    right_click = 2
    scroll_up = 3
    scroll_down = 4


class Mouse(NamedTuple):
    action: MouseAction
    line: int = 0
    col: int = 0


class Timer(NamedTuple):
    elapsed: float = 0.


Event = Union[PermissionResult, TabUpdate, ModeUpdate, Mouse, Timer]


class Host(Protocol):

    def switch_tab_to(self, tab_number: int) -> None:
        pass

    def set_timeout(self, seconds: float) -> None:
        pass


class StatusBar:

    ''' Keeps the latest tab and mode information sent by the host, turns
    mouse events into tab switches and renders the status line. '''

    def __init__(
        self, host: Host, opts: Options = defaults,
        clock: Callable[[], str] | None = None,
        load_reader: Callable[[LoadAverage | None], LoadAverage] | None = None,
        needs_permissions: bool = True,
    ):
        self.host = host
        self.opts = opts
        self.styling = styling_from_opts(opts)
        self.clock = clock or self.default_clock
        self.load_reader = load_reader or self.default_load_reader
        self.got_permissions = not needs_permissions
        self.tabs: tuple[TabInfo, ...] = ()
        # 1-based, 0 means no tab is active
        self.active_tab_idx = 0
        self.mode_info = ModeInfo()
        self.tab_line: tuple[Segment, ...] = ()
        self.last_load: LoadAverage | None = None

    def default_clock(self) -> str:
        return format_clock(self.opts.clock_format, self.opts.clock_timezone, self.opts.clock_locale)

    def default_load_reader(self, previous: LoadAverage | None) -> LoadAverage:
        return read_load_average(self.opts.loadavg_path, previous)

    def start(self) -> None:
        self.host.set_timeout(seconds_to_next_tick())

    @property
    def capabilities(self) -> Capabilities:
        return Capabilities(self.mode_info.capabilities.arrow_fonts and self.opts.arrow_fonts)

    @property
    def separator(self) -> str:
        return tab_separator(self.capabilities, self.opts.tab_separator, self.opts.plain_tab_separator)

    def update(self, event: Event) -> bool:
        ' Apply event, returning True if the status line needs to be redrawn '
        if not self.got_permissions:
            if isinstance(event, PermissionResult) and event.granted:
                self.got_permissions = True
                return True
            return False

        should_render = False
        if isinstance(event, ModeUpdate):
            if self.mode_info != event.mode_info:
                should_render = True
            self.mode_info = event.mode_info
        elif isinstance(event, TabUpdate):
            tabs = tuple(event.tabs)
            for i, t in enumerate(tabs):
                if t.active:
                    active_tab_idx = i + 1
                    if self.active_tab_idx != active_tab_idx or self.tabs != tabs:
                        should_render = True
                    self.active_tab_idx = active_tab_idx
                    self.tabs = tabs
                    break
            else:
                log_error('Could not find active tab.')
        elif isinstance(event, Mouse):
            self.handle_mouse(event)
        elif isinstance(event, Timer):
            self.host.set_timeout(seconds_to_next_tick())
            should_render = True
        else:
            log_error(f'Got unrecognized event: {event!r}')
        return should_render

    def handle_mouse(self, event: Mouse) -> None:
        if not self.tabs:
            return
        if event.action is MouseAction.left_click:
            tab_number = get_tab_to_focus(self.tab_line, self.active_tab_idx, event.col)
            if tab_number is not None:
                self.host.switch_tab_to(tab_number)
        elif event.action is MouseAction.scroll_up:
            self.host.switch_tab_to(tab_to_scroll_to(self.active_tab_idx, len(self.tabs), up=True))
        elif event.action is MouseAction.scroll_down:
            self.host.switch_tab_to(tab_to_scroll_to(self.active_tab_idx, len(self.tabs), up=False))

    def build_line(self, cols: int) -> list[Segment]:
        mode = self.mode_info.mode
        capabilities = self.capabilities
        separator = self.separator
        all_tabs: list[Segment] = []
        active_tab_index = -1
        active_swap_layout_name: str | None = None
        is_swap_layout_dirty = False
        is_alternate_tab = False
        for i, t in enumerate(self.tabs):
            name = t.name
            if t.active:
                active_tab_index = i
                if mode is InputMode.rename_tab:
                    if not name:
                        name = self.opts.rename_placeholder
                else:
                    is_swap_layout_dirty = t.is_swap_layout_dirty
                    active_swap_layout_name = t.active_swap_layout_name
            all_tabs.append(tab_style(name, t, i, is_alternate_tab, self.styling, capabilities, separator))
            is_alternate_tab = not is_alternate_tab
        if active_tab_index < 0:
            return []
        self.last_load = self.load_reader(self.last_load)
        return tab_line(
            all_tabs, active_tab_index, cols, self.styling, separator,
            mode=mode, session_name=self.mode_info.session_name,
            hide_session_name=self.opts.hide_session_name, prefix_text=self.opts.prefix_text,
            active_swap_layout_name=active_swap_layout_name, is_swap_layout_dirty=is_swap_layout_dirty,
            time_text=self.clock(), load=self.last_load,
        )

    def render(self, rows: int, cols: int) -> str:
        if not self.tabs:
            return ''
        self.tab_line = tuple(self.build_line(cols))
        return render_line(self.tab_line) + background_erase(self.styling.text_unselected.background)
