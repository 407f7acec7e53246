#!/usr/bin/env python
# License: GPL v3 Copyright: 2017, Kovid Goyal <kovid at kovidgoyal.net>

from collections.abc import Callable, Sequence
from enum import Enum
from functools import update_wrapper
from typing import TYPE_CHECKING, Generic, NamedTuple, TypeVar

_T = TypeVar('_T')


class Segment(NamedTuple):
    ''' A piece of the status line. ``text`` is already styled, so its length
    says nothing about how wide it is on screen, all layout uses ``width``.
    ``tab_index`` is the 0-based index, in the list of all tabs, of the tab a click on this segment
    selects, or None for segments that do nothing when clicked. '''
    text: str = ''
    width: int = 0
    tab_index: int | None = None


class InputMode(Enum):
    normal = 'normal'
    locked = 'locked'
    resize = 'resize'
    pane = 'pane'
    tab = 'tab'
    scroll = 'scroll'
    enter_search = 'enter_search'
    search = 'search'
    rename_tab = 'rename_tab'
    rename_pane = 'rename_pane'
    session = 'session'
    move = 'move'
    prompt = 'prompt'
    tmux = 'tmux'

    @property
    def badge(self) -> str:
        return self.name.replace('_', '').upper()

    @property
    def kind(self) -> 'ModeKind':
        if self is InputMode.locked:
            return ModeKind.locked
        if self is InputMode.normal:
            return ModeKind.normal
        return ModeKind.other


class ModeKind(Enum):
    locked = 1
    normal = 2
    other = 3


class Capabilities(NamedTuple):
    # True when the terminal font has the powerline arrow glyphs
    arrow_fonts: bool = True


class TabInfo(NamedTuple):
    name: str
    position: int
    active: bool = False
    is_fullscreen_active: bool = False
    is_sync_panes_active: bool = False
    is_swap_layout_dirty: bool = False
    active_swap_layout_name: str | None = None
    other_focused_clients: Sequence[int] = ()


class ModeInfo(NamedTuple):
    mode: InputMode = InputMode.normal
    session_name: str | None = None
    capabilities: Capabilities = Capabilities()


class LoadAverage(NamedTuple):
    load1: float = 0.0
    load5: float = 0.0
    load15: float = 0.0
    ncpu: int = 1


if TYPE_CHECKING:
    class RunOnce(Generic[_T]):

        def __init__(self, func: Callable[[], _T]): ...
        def __call__(self) -> _T: ...
        def set_override(self, val: _T) -> None: ...
        def clear_override(self) -> None: ...
        def clear_cached(self) -> None: ...
else:
    class RunOnce:

        def __init__(self, f):
            self._override = RunOnce
            self._cached_result = RunOnce
            update_wrapper(self, f)

        def __call__(self):
            if self._override is not RunOnce:
                return self._override
            if self._cached_result is RunOnce:
                self._cached_result = self.__wrapped__()
            return self._cached_result

        def clear_cached(self):
            self._cached_result = RunOnce

        def set_override(self, val):
            self._override = val

        def clear_override(self):
            self._override = RunOnce


def run_once(f: Callable[[], _T]) -> 'RunOnce[_T]':
    return RunOnce(f)
