"""Simple data types and enums shared across the window manager."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, replace

_U32_MAX = 2**32 - 1


class PenroseError(Exception):
    """Raised when a window manager operation can not be carried out."""


@dataclass(frozen=True)
class WinType:
    """The kind of window to create in the X server.

    Use the constructors :meth:`check_win`, :meth:`input_only` and
    :meth:`input_output`; only input/output windows carry an atom, which should
    name a valid ``_NET_WM_WINDOW_TYPE`` (this is not enforced).
    """

    CHECK_WIN = "check_win"
    INPUT_ONLY = "input_only"
    INPUT_OUTPUT = "input_output"

    kind: str
    atom: str | None = None

    def __post_init__(self) -> None:
        if self.kind not in (self.CHECK_WIN, self.INPUT_ONLY, self.INPUT_OUTPUT):
            raise ValueError(f"unknown window type: {self.kind!r}")
        if (self.kind == self.INPUT_OUTPUT) != (self.atom is not None):
            raise ValueError("only input/output windows carry an atom")

    @classmethod
    def check_win(cls) -> WinType:
        """A hidden stub window used to support other API calls."""
        return cls(cls.CHECK_WIN)

    @classmethod
    def input_only(cls) -> WinType:
        """A window that receives input only."""
        return cls(cls.INPUT_ONLY)

    @classmethod
    def input_output(cls, atom: str) -> WinType:
        """A regular window of the given window type atom."""
        return cls(cls.INPUT_OUTPUT, atom)


class RelativePosition(enum.Enum):
    """A relative position along the horizontal and vertical axes."""

    LEFT = "left"
    RIGHT = "right"
    ABOVE = "above"
    BELOW = "below"


class Change(enum.Enum):
    """Increment or decrement a value."""

    MORE = "more"
    LESS = "less"


class Border(enum.Enum):
    """The state a window border is drawn for."""

    URGENT = "urgent"
    FOCUSED = "focused"
    UNFOCUSED = "unfocused"


def _check_u32(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} out of range: {value}")


@dataclass(frozen=True)
class Point:
    """An absolute x, y coordinate pair relative to the root window."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        _check_u32("x", self.x)
        _check_u32("y", self.y)


@dataclass(frozen=True)
class Region:
    """A screen area: top left corner plus width and height."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def __post_init__(self) -> None:
        for name in ("x", "y", "w", "h"):
            _check_u32(name, getattr(self, name))

    def values(self) -> tuple[int, int, int, int]:
        """Return the components as ``(x, y, w, h)``."""
        return (self.x, self.y, self.w, self.h)

    @staticmethod
    def _scaled(value: int, factor: float) -> int:
        return min(_U32_MAX, max(0, math.floor(value * factor)))

    def scale_w(self, factor: float) -> Region:
        """Return a copy whose width is ``factor`` times this width, rounded down."""
        return replace(self, w=self._scaled(self.w, factor))

    def scale_h(self, factor: float) -> Region:
        """Return a copy whose height is ``factor`` times this height, rounded down."""
        return replace(self, h=self._scaled(self.h, factor))

    def contains(self, other: Region) -> bool:
        """Whether ``other`` lies entirely inside this region."""
        return (
            other.x >= self.x
            and other.x + other.w <= self.x + self.w
            and other.y >= self.y
            and other.y + other.h <= self.y + self.h
        )

    def contains_point(self, p: Point) -> bool:
        """Whether ``p`` lies inside this region (right and bottom edges excluded)."""
        return self.x <= p.x < self.x + self.w and self.y <= p.y < self.y + self.h

    def centered_in(self, enclosing: Region) -> Region:
        """Return this region moved to the centre of ``enclosing``.

        Raises PenroseError if this region does not fit inside ``enclosing``.
        """
        if not enclosing.contains(self):
            raise PenroseError(
                f"enclosing does not contain self: {enclosing!r} {self!r}"
            )
        return replace(
            self,
            x=enclosing.x + (enclosing.w - self.w) // 2,
            y=enclosing.y + (enclosing.h - self.h) // 2,
        )

    def as_rows(self, n_rows: int) -> list[Region]:
        """Split this region into ``n_rows`` evenly sized rows."""
        if n_rows <= 1:
            return [self]
        h = self.h // n_rows
        return [Region(self.x, self.y + n * h, self.w, h) for n in range(n_rows)]

    def as_columns(self, n_columns: int) -> list[Region]:
        """Split this region into ``n_columns`` evenly sized columns."""
        if n_columns <= 1:
            return [self]
        w = self.w // n_columns
        return [Region(self.x + n * w, self.y, w, self.h) for n in range(n_columns)]

    def split_at_width(self, new_width: int) -> tuple[Region, Region]:
        """Divide into two columns, the first ``new_width`` wide.

        Raises PenroseError if the split point lies outside this region.
        """
        if new_width > self.w:
            raise PenroseError(
                f"Region split is out of range: {new_width} >= {self.w}"
            )
        return (
            replace(self, w=new_width),
            replace(self, x=self.x + new_width, w=self.w - new_width),
        )

    def split_at_height(self, new_height: int) -> tuple[Region, Region]:
        """Divide into two rows, the first ``new_height`` high.

        Raises PenroseError if the split point lies outside this region.
        """
        if new_height > self.h:
            raise PenroseError(
                f"Region split is out of range: {new_height} >= {self.h}"
            )
        return (
            replace(self, h=new_height),
            replace(self, y=self.y + new_height, h=self.h - new_height),
        )