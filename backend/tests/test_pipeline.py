"""
Tests for the end-to-end cutting pipeline.

Geometries go through orientation normalisation, optional rotation and
the default antimeridian and pole cuts followed by any extra cut lines.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from graticut.services.cutline import make_cut_line  # type: ignore
from graticut.services.errors import DEGENERATE_GEOMETRY, InvalidCutLineKind  # type: ignore
from graticut.services.geometry import (  # type: ignore
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
)
from graticut.services.pipeline import CUT_EPSILON, cut_feature_geometry, cut_features  # type: ignore
from graticut.services.rotation import RotationParameters, rotate  # type: ignore


def antimeridian_square() -> list[tuple[float, float]]:
    ring = [(170.0, float(lat)) for lat in range(0, 10)]
    ring += [(float(lon), 10.0) for lon in range(170, 180)]
    ring += [(float(lon), 10.0) for lon in range(-179, -170)]
    ring += [(-170.0, float(lat)) for lat in range(10, 0, -1)]
    ring += [(float(lon), 0.0) for lon in range(-170, -180, -1)]
    ring += [(float(lon), 0.0) for lon in range(179, 170, -1)]
    ring.append(ring[0])
    return ring


def test_point_on_antimeridian_is_moved() -> None:
    assert cut_feature_geometry(Point((180.0, 0.0))) == Point((180.0 - CUT_EPSILON, 0.0))


def test_line_across_antimeridian_is_split() -> None:
    result = cut_feature_geometry(LineString([(170.0, 10.0), (-170.0, 10.0)]))
    assert isinstance(result, MultiLineString)
    assert len(result.coordinates) == 2


def test_polygon_across_antimeridian_becomes_multipolygon() -> None:
    diagnostics: list = []
    result = cut_feature_geometry(Polygon([antimeridian_square()]), diagnostics=diagnostics)
    assert isinstance(result, MultiPolygon)
    assert len(result.coordinates) == 2
    assert diagnostics == []


def test_extra_cut_line_is_applied_after_defaults() -> None:
    greenwich = make_cut_line("meridian", 0, -90, 90)
    result = cut_feature_geometry(LineString([(-10.0, -10.0), (10.0, 10.0)]), [greenwich])
    assert isinstance(result, MultiLineString)
    first, second = result.coordinates
    assert first[-1][0] == -CUT_EPSILON
    assert second[0][0] == CUT_EPSILON


def test_azimuthal_skips_antimeridian() -> None:
    line = LineString([(170.0, 10.0), (-170.0, 10.0)])
    assert cut_feature_geometry(line, azimuthal=True) == line


def test_rotation_is_applied() -> None:
    rotation = RotationParameters(metapole_lon=20.0, metapole_lat=60.0, meta_meridian=-10.0)
    result = cut_feature_geometry(Point((10.0, 20.0)), rotation=rotation)
    assert result.coordinates == pytest.approx(rotate((10.0, 20.0), 20.0, 60.0, -10.0))


def test_cut_features_collects_diagnostics_per_geometry() -> None:
    sliver = Polygon([[(0.0, 0.0), (1.0, 0.0), (0.0, 0.0)]])
    results, diagnostics = cut_features([Point((0.0, 0.0)), sliver])
    assert results[0] == Point((0.0, 0.0))
    assert results[1] == Polygon([[(0.0, 0.0), (0.0, 0.0)]])
    assert diagnostics[0] == []
    assert [d.kind for d in diagnostics[1]] == [DEGENERATE_GEOMETRY]


def test_invalid_cut_line_aborts() -> None:
    with pytest.raises(InvalidCutLineKind):
        cut_feature_geometry(Point((0.0, 0.0)), [make_cut_line("loxodrome", 0, -1, 1)])
