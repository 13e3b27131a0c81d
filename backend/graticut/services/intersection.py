"""
Great-circle segment / cut line intersection.

A segment between two coordinates is treated as the shorter great-circle
arc joining them.  The helpers here decide whether such an arc crosses a
cut line, locate the crossing by solving the spherical triangle formed by
the two endpoints and the pole, and nudge points that sit too close to a
cut line so that reassembly never sees a vertex exactly on the line.

Every function dispatches on the cut line kind and raises
:class:`~.errors.InvalidCutLineKind` for anything other than a meridian
or a parallel.
"""

from __future__ import annotations

import math
from typing import Sequence

from .cutline import MERIDIAN, Coordinate, CutLine, check_kind

# Tolerances (radians) for treating an endpoint as lying on the cut
# meridian, at a pole, or two endpoints as sharing a meridian.
_ON_MERIDIAN_TOL = 1e-4
_AT_POLE_TOL = 1e-6
_SAME_MERIDIAN_TOL = 1e-6


def _clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))


def _sign(value: float) -> int:
    return 1 if value > 0 else -1


def _reduce_longitude(lam: float) -> float:
    """Range-reduce a longitude in radians into [-pi, pi]."""
    while abs(lam) > math.pi:
        lam -= math.copysign(2 * math.pi, lam)
    return lam


def has_intersect(point_a: Sequence[float], point_b: Sequence[float], cut_line: CutLine) -> bool:
    """Decide whether the arc between two points crosses *cut_line*.

    The interval of the cut line is not considered here; see
    :func:`intersect_between`.
    """
    kind = check_kind(cut_line)
    if kind == MERIDIAN:
        if abs(cut_line.deg) == 180:
            return abs(point_a[0] - point_b[0]) > 180
        return ((point_a[0] < cut_line.deg) != (point_b[0] < cut_line.deg)) and (
            abs(point_a[0] - point_b[0]) < 180
        )
    if abs(cut_line.deg) == 90:
        # The arc passes over the pole when the endpoints are nearly
        # antipodal in longitude and close enough to the pole.
        closeness = math.sqrt((90 - abs(point_a[1])) * (90 - abs(point_b[1])))
        over_pole = abs(abs(point_a[0] - point_b[0]) - 180) < 180 - 180 * closeness
        return over_pole and ((point_a[1] + point_b[1] > 0) != (cut_line.deg < 0))
    return (point_a[1] < cut_line.deg) != (point_b[1] < cut_line.deg)


def intersect(point_a: Sequence[float], point_b: Sequence[float], cut_line: CutLine) -> Coordinate:
    """Locate where the arc between two points meets *cut_line*.

    The angular distance ``s`` between the endpoints comes from the
    spherical law of cosines; the angle ``x`` at ``point_b`` between the
    arc and the meridian follows from the same law.  The crossing latitude
    (meridian) or longitude (parallel) is then solved in closed form.
    Endpoints already on the cut meridian or at a pole short-circuit to
    the known coordinate.

    Args:
        point_a: First endpoint ``(lon, lat)`` in degrees.
        point_b: Second endpoint ``(lon, lat)`` in degrees.
        cut_line: The line to intersect.

    Returns:
        The crossing coordinate in degrees.  One of its components is
        exactly ``cut_line.deg``.
    """
    kind = check_kind(cut_line)
    a0, a1 = math.radians(point_a[0]), math.radians(point_a[1])
    b0, b1 = math.radians(point_b[0]), math.radians(point_b[1])

    def angle_at_b() -> float:
        s = math.acos(_clamp(math.sin(a1) * math.sin(b1) + math.cos(a1) * math.cos(b1) * math.cos(b0 - a0)))
        denom = math.cos(b1) * math.sin(s)
        if denom == 0:
            return math.pi / 2
        return math.acos(_clamp((math.sin(a1) - math.sin(b1) * math.cos(s)) / denom))

    if kind == MERIDIAN:
        lam = math.radians(cut_line.deg)
        if abs(a0 - lam) <= _ON_MERIDIAN_TOL:
            phi = a1
        elif abs(b0 - lam) <= _ON_MERIDIAN_TOL:
            phi = b1
        elif math.pi / 2 - abs(a1) <= _AT_POLE_TOL:
            phi = a1
        elif math.pi / 2 - abs(b1) <= _AT_POLE_TOL:
            phi = b1
        else:
            tan_x = math.tan(angle_at_b())
            if tan_x == 0:
                phi = b1
            else:
                phi = math.atan(
                    (math.sin(b1) * math.cos(b0 - lam) + abs(math.sin(b0 - lam)) / tan_x) / math.cos(b1)
                )
        return (cut_line.deg, math.degrees(phi))

    phi = math.radians(cut_line.deg)
    if abs(cut_line.deg) == 90:
        if abs(abs(a1) - math.pi / 2) <= _AT_POLE_TOL:
            lam = b0 + math.pi / 2
        elif abs(abs(b1) - math.pi / 2) <= _AT_POLE_TOL:
            lam = a0 + math.pi / 2
        else:
            lam = (a0 + b0) / 2
        if lam > math.pi / 2:
            lam -= math.pi
    elif abs(a0 - b0) <= _SAME_MERIDIAN_TOL:
        # Arc runs along a meridian
        lam = a0
    else:
        tan_x = math.tan(angle_at_b())
        if tan_x == 0:
            lam = 0.0
        elif abs(phi + b1) <= _SAME_MERIDIAN_TOL:
            lam = -2 * math.atan(tan_x * math.sin(b1))
        else:
            cot_x = 1 / tan_x
            root = math.sqrt(
                max(0.0, cot_x ** 2 - (math.cos(b1) * math.tan(phi)) ** 2 + math.sin(b1) ** 2)
            )
            denom = math.cos(b1) * math.tan(phi) + math.sin(b1)
            if denom == 0:
                lam = 0.0
            else:
                lam = 2 * math.atan((cot_x - (1 if a1 > b1 else -1) * root) / denom)
        lam = _reduce_longitude(b0 - _sign(math.sin(b0 - a0)) * lam)
    return (math.degrees(lam), cut_line.deg)


def intersect_between(point: Sequence[float], cut_line: CutLine) -> bool:
    """True when *point* falls inside the interval of *cut_line* (inclusive)."""
    kind = check_kind(cut_line)
    value = point[1] if kind == MERIDIAN else point[0]
    return cut_line.start <= value <= cut_line.end


def move(point: Sequence[float], cut_line: CutLine, e: float) -> Sequence[float]:
    """Push *point* ``e`` degrees off *cut_line* when it lies closer than that.

    Points outside the interval of the cut line, or far enough from it,
    are returned unchanged (the same object).
    """
    kind = check_kind(cut_line)
    if not intersect_between(point, cut_line):
        return point
    if kind == MERIDIAN:
        if abs(cut_line.deg) == 180:
            if abs(point[0]) > 180 - e:
                return ((1 if point[0] > 0 else -1) * (180 - e), point[1])
            return point
        if abs(point[0] - cut_line.deg) < e:
            return (cut_line.deg + (1 if point[0] >= cut_line.deg else -1) * e, point[1])
        return point
    if abs(point[1] - cut_line.deg) < e:
        direction = 1 if point[1] >= cut_line.deg and cut_line.deg < 90 else -1
        return (point[0], cut_line.deg + direction * e)
    return point


def move_intersection(
    point: Sequence[float],
    neighbor: Sequence[float],
    cut_line: CutLine,
    e: float,
) -> Coordinate:
    """Place a crossing point ``e`` degrees off *cut_line* on *neighbor*'s side."""
    kind = check_kind(cut_line)
    if kind == MERIDIAN:
        if abs(cut_line.deg) == 180:
            return ((1 if neighbor[0] > 0 else -1) * (180 - e), point[1])
        return (cut_line.deg + (1 if neighbor[0] >= cut_line.deg else -1) * e, point[1])
    if abs(cut_line.deg) == 90:
        return (neighbor[0], cut_line.deg + (1 if cut_line.deg < 0 else -1) * e)
    return (point[0], cut_line.deg + (1 if neighbor[1] >= cut_line.deg else -1) * e)


__all__ = [
    "has_intersect",
    "intersect",
    "intersect_between",
    "move",
    "move_intersection",
]
