"""
Tests for great-circle / cut line intersection routines defined in
intersection.py.

Crossing detection, crossing location and the nudging of points away
from a cut line are exercised with hand-computed values.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from graticut.services.cutline import ANTIMERIDIAN, NORTH_POLE_LINE, CutLine, make_cut_line  # type: ignore
from graticut.services.errors import InvalidCutLineKind  # type: ignore
from graticut.services.intersection import (  # type: ignore
    has_intersect,
    intersect,
    intersect_between,
    move,
    move_intersection,
)

E = 1e-6
EQUATOR = make_cut_line("parallel", 0, -180, 180)
GREENWICH = make_cut_line("meridian", 0, -90, 90)


def test_has_intersect_antimeridian() -> None:
    assert has_intersect((170.0, 10.0), (-170.0, 10.0), ANTIMERIDIAN)
    assert not has_intersect((10.0, 0.0), (20.0, 0.0), ANTIMERIDIAN)


def test_has_intersect_meridian_ignores_long_way_round() -> None:
    assert has_intersect((-10.0, -10.0), (10.0, 10.0), GREENWICH)
    assert not has_intersect((-100.0, 0.0), (100.0, 0.0), GREENWICH)


def test_has_intersect_parallel() -> None:
    assert has_intersect((0.0, -5.0), (0.0, 5.0), EQUATOR)
    assert not has_intersect((0.0, 5.0), (10.0, 6.0), EQUATOR)
    # A short arc far from the pole never passes over it
    assert not has_intersect((0.0, 80.0), (180.0, 80.0), NORTH_POLE_LINE)


def test_intersect_symmetric_segment() -> None:
    assert intersect((-10.0, -10.0), (10.0, 10.0), EQUATOR) == pytest.approx((0.0, 0.0), abs=1e-9)
    assert intersect((-10.0, -10.0), (10.0, 10.0), GREENWICH) == pytest.approx((0.0, 0.0), abs=1e-9)


def test_intersect_antimeridian_follows_great_circle() -> None:
    """The arc between two points at 10°N bulges poleward at 180°."""
    lon, lat = intersect((170.0, 10.0), (-170.0, 10.0), ANTIMERIDIAN)
    assert lon == 180.0
    assert lat == pytest.approx(10.15, abs=0.01)
    assert lat > 10.0


def test_intersect_between_is_inclusive() -> None:
    line = make_cut_line("meridian", 0, -10, 10)
    assert intersect_between((0.0, 10.0), line)
    assert not intersect_between((0.0, 10.5), line)


def test_move_pushes_points_off_the_line() -> None:
    assert move((179.9999999, 5.0), ANTIMERIDIAN, E) == (180.0 - E, 5.0)
    assert move((-180.0, 5.0), ANTIMERIDIAN, E) == (-180.0 + E, 5.0)
    assert move((5.0, 1e-8), EQUATOR, E) == (5.0, E)
    assert move((1e-8, 3.0), GREENWICH, E) == (E, 3.0)


def test_move_returns_same_object_when_far_or_outside_interval() -> None:
    point = (10.0, 5.0)
    assert move(point, ANTIMERIDIAN, E) is point
    outside = (0.0, 50.0)
    assert move(outside, make_cut_line("meridian", 0, -10, 10), E) is outside


def test_move_intersection_takes_neighbor_side() -> None:
    crossing = (180.0, 10.15)
    assert move_intersection(crossing, (170.0, 10.0), ANTIMERIDIAN, E) == (180.0 - E, 10.15)
    assert move_intersection(crossing, (-170.0, 10.0), ANTIMERIDIAN, E) == (-180.0 + E, 10.15)
    assert move_intersection((3.0, 0.0), (2.0, -1.0), EQUATOR, E) == (3.0, -E)


def test_invalid_kind_raises() -> None:
    line = CutLine(kind="diagonal", deg=0.0, start=-1.0, end=1.0)  # type: ignore[arg-type]
    with pytest.raises(InvalidCutLineKind):
        has_intersect((0.0, 0.0), (1.0, 1.0), line)
    with pytest.raises(InvalidCutLineKind):
        move((0.0, 0.0), line, E)
