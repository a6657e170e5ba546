"""Layouts: user definable arrangements of the clients on a workspace.

A layout function receives the tiled clients, the focused client id (if any),
the region of the screen to fill and the layout's current ``max_main`` and
``ratio`` values. It returns one resize action per client: the client id paired
with the region it should take, or ``None`` if the client should be hidden.
Gaps and borders are applied by the caller, so layouts only split regions.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, TypeVar

from tilekit.data_types import Change, Region

_U32_MAX = 2**32 - 1
_F32_MAX = 3.4028234663852886e38

T = TypeVar("T")


class HasId(Protocol):
    """Anything that can be laid out: it only needs a window id."""

    id: int


ResizeAction = tuple[int, Optional[Region]]
LayoutFunc = Callable[
    [Sequence[Any], Optional[int], Region, int, float], list[ResizeAction]
]


def _f32(value: float) -> float:
    """Round ``value`` to single precision, saturating to infinity."""
    if math.isnan(value) or math.isinf(value):
        return value
    if abs(value) > _F32_MAX:
        return math.copysign(math.inf, value)
    return struct.unpack("f", struct.pack("f", value))[0]


def _to_u32(value: float) -> int:
    """Truncate toward zero and saturate into the unsigned 32 bit range."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return int(value)


def _scaled_split(length: int, ratio: float) -> int:
    return _to_u32(_f32(_f32(float(length)) * _f32(ratio)))


def _pair(regions: Iterable[Region], clients: Sequence[HasId]) -> list[ResizeAction]:
    """Pair each client with a region, stopping at the shorter of the two."""
    return [(client.id, region) for region, client in zip(regions, clients)]


@dataclass(frozen=True)
class LayoutConf:
    """When and how a layout should be applied."""

    floating: bool = False
    """If true the layout function is not called to produce resize actions."""
    gapless: bool = False
    """Drop gaps regardless of the configuration."""
    follow_focus: bool = False
    """Re-apply the layout on focus changes as well as on client add / remove."""
    allow_wrapping: bool = True
    """Whether cycling clients wraps at the first and last client."""


def floating(
    clients: Sequence[HasId],
    focused: int | None,
    monitor_region: Region,
    max_main: int,
    ratio: float,
) -> list[ResizeAction]:
    """A layout function that assigns no region to any client.

    Every window therefore stays where it is.
    """
    return _pair((), clients)


@dataclass
class Layout:
    """A layout function together with its configuration and parameters.

    ``max_main`` is the number of clients in the main area and ``ratio`` the
    size of the main area relative to the rest. Equality ignores the function.
    """

    symbol: str
    conf: LayoutConf
    f: LayoutFunc = field(compare=False, repr=False)
    max_main: int = 1
    ratio: float = 0.6

    def __post_init__(self) -> None:
        if self.max_main < 0:
            raise ValueError(f"max_main must not be negative: {self.max_main}")
        self.ratio = _f32(self.ratio)

    @classmethod
    def floating(cls, symbol: str) -> Layout:
        """A floating layout that does not manage window positions."""
        return cls(
            symbol,
            LayoutConf(floating=True),
            floating,
            max_main=1,
            ratio=1.0,
        )

    def arrange(
        self,
        clients: Sequence[HasId],
        focused: int | None,
        region: Region,
    ) -> list[ResizeAction]:
        """Run the layout function with the current ``max_main`` and ``ratio``."""
        return self.f(clients, focused, region, self.max_main, self.ratio)

    def update_max_main(self, change: Change) -> None:
        """Grow or shrink the main area by one client, never below zero."""
        if change is Change.MORE:
            self.max_main += 1
        elif self.max_main > 0:
            self.max_main -= 1

    def update_main_ratio(self, change: Change, step: float) -> None:
        """Grow or shrink the main area by ``step``, clamped to ``[0.0, 1.0]``."""
        delta = _f32(step) if change is Change.MORE else -_f32(step)
        self.ratio = min(1.0, max(0.0, _f32(self.ratio + delta)))


def client_breakdown(clients: Sequence[T], n_main: int) -> tuple[int, int]:
    """Return how many clients go in the main area and how many in the rest."""
    n = len(clients)
    if n <= n_main:
        return (n, 0)
    return (n_main, n - n_main)


def side_stack(
    clients: Sequence[HasId],
    focused: int | None,
    monitor_region: Region,
    max_main: int,
    ratio: float,
) -> list[ResizeAction]:
    """Main area on the left, remaining clients stacked in a column on the right."""
    n = len(clients)
    if n <= max_main or max_main == 0:
        return _pair(monitor_region.as_rows(n), clients)

    split = _scaled_split(monitor_region.w, ratio)
    main, stack = monitor_region.split_at_width(split)
    regions = main.as_rows(max_main) + stack.as_rows(max(0, n - max_main))
    return _pair(regions, clients)


def bottom_stack(
    clients: Sequence[HasId],
    focused: int | None,
    monitor_region: Region,
    max_main: int,
    ratio: float,
) -> list[ResizeAction]:
    """Main area at the top, remaining clients in a row underneath."""
    n = len(clients)
    if n <= max_main or max_main == 0:
        return _pair(monitor_region.as_columns(n), clients)

    split = _scaled_split(monitor_region.h, ratio)
    main, stack = monitor_region.split_at_height(split)
    regions = main.as_columns(max_main) + stack.as_columns(max(0, n - max_main))
    return _pair(regions, clients)


def monocle(
    clients: Sequence[HasId],
    focused: int | None,
    monitor_region: Region,
    max_main: int,
    ratio: float,
) -> list[ResizeAction]:
    """Give the focused client the whole region and hide every other client."""
    if focused is None:
        return []
    full = Region(*monitor_region.values())
    return [
        (client.id, full if client.id == focused else None) for client in clients
    ]