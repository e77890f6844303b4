"""Panel width specs and the width constraint resolver."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from agent_sidebar.errors import InvalidSpec

_PERCENT_RE = re.compile(r"^\s*([+-]?\d+(?:\.\d+)?)\s*%\s*$")
_COLUMNS_RE = re.compile(r"^\s*\d+\s*$")


@dataclass(frozen=True)
class Absolute:
    """Fixed number of columns."""

    columns: int

    def resolve(self, frame_width: int) -> int:
        del frame_width
        return self.columns

    def __str__(self) -> str:
        return str(self.columns)


@dataclass(frozen=True)
class Percentage:
    """Share of the frame width, in percent."""

    pct: float

    def resolve(self, frame_width: int) -> int:
        return round(frame_width * self.pct / 100)

    def __str__(self) -> str:
        return f"{self.pct:g}%"


WidthSpec = Union[Absolute, Percentage]


def parse_width_spec(value: object) -> WidthSpec:
    """Parse a raw config value (``90``, ``"90"`` or ``"25%"``) into a WidthSpec.

    Raises:
        InvalidSpec: the value is not a positive column count or a positive
            percentage string.
    """
    if isinstance(value, (Absolute, Percentage)):
        return value
    if isinstance(value, bool):
        raise InvalidSpec(value, "expected a column count or percentage")
    if isinstance(value, int):
        if value <= 0:
            raise InvalidSpec(value, "column count must be positive")
        return Absolute(value)
    if isinstance(value, str):
        match = _PERCENT_RE.match(value)
        if match:
            pct = float(match.group(1))
            if pct <= 0:
                raise InvalidSpec(value, "percentage must be positive")
            return Percentage(pct)
        if _COLUMNS_RE.match(value):
            return parse_width_spec(int(value))
    raise InvalidSpec(value, "expected a column count or percentage")


def resolve_width(
    configured: object,
    minimum: object,
    maximum: object,
    frame_width: int,
) -> int:
    """Compute the panel width in columns for a frame of ``frame_width``.

    The configured width is clamped into ``[minimum, maximum]``. When the
    minimum resolves larger than the maximum the minimum wins outright.
    Raw config values are accepted and parsed with :func:`parse_width_spec`.
    """
    want = parse_width_spec(configured).resolve(frame_width)
    low = parse_width_spec(minimum).resolve(frame_width)
    high = parse_width_spec(maximum).resolve(frame_width)
    if low > high:
        return low
    return max(low, min(want, high))
