"""
Cut line values and helpers.

A ``CutLine`` describes one bounded graticule line, either a meridian
(constant longitude, valid over a latitude interval) or a parallel
(constant latitude, valid over a longitude interval), along which
geometries are split before projection.  Instances are immutable; the
engine only ever reads them.

The ``make_cut_line`` helper normalises the kind string and validates
the interval.  The kind itself is checked where it is used so that an
unknown kind fails loudly at the first operation that needs it.  Debug
logging is enabled via the ``CUT_DEBUG`` environment variable.
"""

from __future__ import annotations

import os
import logging
from dataclasses import dataclass
from typing import Iterable, List, Literal, Sequence, Tuple

from .errors import InvalidCutLineKind, NonMonotonicInterval

logger = logging.getLogger(__name__)

MERIDIAN = "meridian"
PARALLEL = "parallel"

Coordinate = Tuple[float, float]


@dataclass(frozen=True)
class CutLine:
    """Immutable description of a graticule cut line.

    Attributes:
        kind: ``"meridian"`` or ``"parallel"``.
        deg: Metalongitude of a meridian or metalatitude of a parallel.
        start: Lower bound of the interval on the orthogonal axis
            (latitude for a meridian, longitude for a parallel).
        end: Upper bound of that interval.  Always greater than ``start``.
    """

    kind: Literal["meridian", "parallel"]
    deg: float
    start: float
    end: float

    def __post_init__(self) -> None:
        if not self.start < self.end:
            raise NonMonotonicInterval(self.start, self.end)


def make_cut_line(kind: str, deg: float, start: float, end: float) -> CutLine:
    """Construct a :class:`CutLine` from loosely typed values.

    Args:
        kind: ``"meridian"`` or ``"parallel"``, case insensitive.
        deg: Position of the line in degrees.
        start: Interval start on the orthogonal axis.
        end: Interval end on the orthogonal axis.

    Returns:
        CutLine: The new cut line.

    Raises:
        NonMonotonicInterval: If ``start >= end``.
    """
    kind_norm = (kind or "").strip().lower()
    cut_line = CutLine(kind=kind_norm, deg=float(deg), start=float(start), end=float(end))
    if os.getenv("CUT_DEBUG"):
        logger.debug(
            "CutLine created: kind=%s deg=%s interval=[%s, %s]",
            cut_line.kind,
            cut_line.deg,
            cut_line.start,
            cut_line.end,
        )
    return cut_line


ANTIMERIDIAN = CutLine(kind=MERIDIAN, deg=180.0, start=-90.0, end=90.0)
NORTH_POLE_LINE = CutLine(kind=PARALLEL, deg=90.0, start=-180.0, end=180.0)
SOUTH_POLE_LINE = CutLine(kind=PARALLEL, deg=-90.0, start=-180.0, end=180.0)


def check_kind(cut_line: CutLine) -> str:
    """Return the kind of *cut_line*, raising if it is not a known kind."""
    if cut_line.kind not in (MERIDIAN, PARALLEL):
        raise InvalidCutLineKind(cut_line.kind)
    return cut_line.kind


def along_axis(cut_line: CutLine) -> int:
    """Index of the coordinate that varies along the cut line.

    Latitude (1) runs along a meridian, longitude (0) along a parallel.
    """
    return 1 if check_kind(cut_line) == MERIDIAN else 0


def is_full_parallel_range(cut_line: CutLine) -> bool:
    """True when the interval spans the whole longitude range."""
    return cut_line.start == -180 and cut_line.end == 180


def is_pole_line(cut_line: CutLine) -> bool:
    """True for a parallel at ±90° spanning all longitudes."""
    return (
        check_kind(cut_line) == PARALLEL
        and abs(cut_line.deg) == 90
        and is_full_parallel_range(cut_line)
    )


def side(point: Sequence[float], cut_line: CutLine) -> int:
    """Return -1 or 1 depending on which side of *cut_line* the point lies.

    On the antimeridian the sign of the longitude decides.  Every point is
    below the north pole parallel.  Meridian sides are negated so that the
    ordering scale runs the same way around both kinds of line.
    """
    kind = check_kind(cut_line)
    if kind == MERIDIAN and abs(cut_line.deg) == 180:
        return 1 if point[0] > 0 else -1
    value = point[1] if kind == PARALLEL else point[0]
    result = -1 if value < cut_line.deg or (kind == PARALLEL and cut_line.deg == 90) else 1
    return -result if kind == MERIDIAN else result


def default_cut_lines(azimuthal: bool = False, extra: Iterable[CutLine] = ()) -> List[CutLine]:
    """Return the engine-synthesized cut lines followed by *extra*.

    Non-azimuthal projections are cut at the antimeridian and at both
    poles; azimuthal projections only at the antipodal (south) pole.
    """
    if azimuthal:
        lines = [SOUTH_POLE_LINE]
    else:
        lines = [ANTIMERIDIAN, NORTH_POLE_LINE, SOUTH_POLE_LINE]
    lines.extend(extra)
    return lines


__all__ = [
    "MERIDIAN",
    "PARALLEL",
    "Coordinate",
    "CutLine",
    "make_cut_line",
    "ANTIMERIDIAN",
    "NORTH_POLE_LINE",
    "SOUTH_POLE_LINE",
    "check_kind",
    "along_axis",
    "is_full_parallel_range",
    "is_pole_line",
    "side",
    "default_cut_lines",
]
