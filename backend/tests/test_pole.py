"""Tests for polygons that enclose a pole."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from graticut.services.cutline import NORTH_POLE_LINE, SOUTH_POLE_LINE  # type: ignore
from graticut.services.pole import cut_pole, pole_wrap_ring, winding  # type: ignore
from graticut.services.reassembly import cut_polygon  # type: ignore

E = 1e-6

WESTWARD_NORTH = [(0.0, 89.0), (-90.0, 89.0), (180.0, 89.0), (90.0, 89.0), (0.0, 89.0)]
EASTWARD_NORTH = [(0.0, 89.5), (90.0, 89.5), (180.0, 89.5), (-90.0, 89.5), (0.0, 89.5)]
EASTWARD_SOUTH = [(0.0, -89.0), (90.0, -89.0), (180.0, -89.0), (-90.0, -89.0), (0.0, -89.0)]


def test_winding_counts_signed_antimeridian_jumps() -> None:
    assert winding(WESTWARD_NORTH) == 1
    assert winding(EASTWARD_NORTH) == -1
    assert winding([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 0.0)]) == 0


def test_pole_wrap_ring_walks_round_the_parallel() -> None:
    ring = pole_wrap_ring(NORTH_POLE_LINE, 1)
    assert len(ring) == 721
    assert ring[0] == (0.0, 90.0)
    assert ring[-1] == (0.0, 90.0)
    assert all(lat == 90.0 for _, lat in ring)
    lons = [lon for lon, _ in ring]
    assert max(lons) == 179.5
    assert min(lons) == -180.0


def test_north_pole_polygon_gets_pole_boundary() -> None:
    result = cut_polygon([WESTWARD_NORTH], NORTH_POLE_LINE, E)
    assert len(result) == 1
    pole_ring, ring = result[0]
    assert ring == WESTWARD_NORTH
    assert len(pole_ring) == 721
    assert all(lat == 90.0 for _, lat in pole_ring)


def test_polygon_wrapping_other_pole_is_left_alone() -> None:
    assert cut_polygon([EASTWARD_NORTH], NORTH_POLE_LINE, E) == [[EASTWARD_NORTH]]
    assert cut_polygon([WESTWARD_NORTH], SOUTH_POLE_LINE, E) == [[WESTWARD_NORTH]]


def test_south_pole_polygon_gets_pole_boundary() -> None:
    result = cut_polygon([EASTWARD_SOUTH], SOUTH_POLE_LINE, E)
    pole_ring, ring = result[0]
    assert ring == EASTWARD_SOUTH
    assert pole_ring[0] == pole_ring[-1]
    assert all(lat == -90.0 for _, lat in pole_ring)


def test_cancelling_ring_becomes_exterior() -> None:
    polygon = [WESTWARD_NORTH, EASTWARD_NORTH]
    result = cut_pole(polygon, NORTH_POLE_LINE, E)
    assert result == [EASTWARD_NORTH, WESTWARD_NORTH]
    # Input is not modified
    assert polygon == [WESTWARD_NORTH, EASTWARD_NORTH]
