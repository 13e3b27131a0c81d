"""
Geometry variants consumed and produced by the cutting engine.

The set of geometry kinds is closed: ``Point``, ``LineString``,
``Polygon`` and their multi counterparts.  Each is a plain value holding
nested coordinate lists; the functions below dispatch on the variant and
never store cutting state on the geometry itself.

Functions defined here:

- ``cut_geometry(geometry, cut_line, e)`` – cut one geometry at one cut
  line, returning the same kind or its multi counterpart.
- ``clockwise_geometry(geometry)`` – normalise polygon ring orientation.
- ``map_coordinates(geometry, fn)`` – apply a point transform to every
  coordinate.
- ``geometry_from_mapping`` / ``geometry_to_mapping`` – convert to and
  from GeoJSON-shaped ``{"type", "coordinates"}`` dictionaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from .cutline import Coordinate, CutLine
from .errors import CutDiagnostic
from .intersection import move
from .line_cutter import cut_line_string
from .orientation import clockwise
from .reassembly import cut_polygon


@dataclass(frozen=True)
class Point:
    coordinates: Coordinate


@dataclass(frozen=True)
class LineString:
    coordinates: List[Coordinate]


@dataclass(frozen=True)
class Polygon:
    """Rings of a polygon; ``coordinates[0]`` is the exterior."""

    coordinates: List[List[Coordinate]]


@dataclass(frozen=True)
class MultiPoint:
    coordinates: List[Coordinate]


@dataclass(frozen=True)
class MultiLineString:
    coordinates: List[List[Coordinate]]


@dataclass(frozen=True)
class MultiPolygon:
    coordinates: List[List[List[Coordinate]]]


Geometry = Union[Point, LineString, Polygon, MultiPoint, MultiLineString, MultiPolygon]


# Nesting depth of the coordinate arrays of each variant.
_DEPTH: Dict[type, int] = {
    Point: 0,
    LineString: 1,
    MultiPoint: 1,
    Polygon: 2,
    MultiLineString: 2,
    MultiPolygon: 3,
}
_TYPES: Dict[str, type] = {cls.__name__: cls for cls in _DEPTH}


def _as_coordinate(point: Sequence[float]) -> Coordinate:
    return (point[0], point[1])


def _map(coords: Any, depth: int, fn: Callable[[Sequence[float]], Coordinate]) -> Any:
    if depth == 0:
        return fn(coords)
    return [_map(item, depth - 1, fn) for item in coords]


def map_coordinates(geometry: Geometry, fn: Callable[[Sequence[float]], Coordinate]) -> Geometry:
    """Return a geometry of the same kind with *fn* applied to every coordinate."""
    cls = type(geometry)
    if cls not in _DEPTH:
        raise TypeError(f"Unsupported geometry: {geometry!r}")
    return cls(_map(geometry.coordinates, _DEPTH[cls], fn))


def cut_geometry(
    geometry: Geometry,
    cut_line: CutLine,
    e: float,
    diagnostics: Optional[List[CutDiagnostic]] = None,
) -> Geometry:
    """Cut *geometry* at *cut_line*.

    Points are only moved off the line.  A line string or polygon that
    falls apart into several pieces is returned as its multi counterpart;
    one that does not cross the line keeps its kind.

    Args:
        geometry: The geometry to cut.
        cut_line: The line to cut at.
        e: Minimum distance from the cut line in degrees.
        diagnostics: Optional list collecting recoverable problems.

    Returns:
        The cut geometry.

    Raises:
        TypeError: If *geometry* is not one of the supported variants.
    """
    if isinstance(geometry, Point):
        return Point(_as_coordinate(move(geometry.coordinates, cut_line, e)))
    if isinstance(geometry, MultiPoint):
        return MultiPoint([_as_coordinate(move(p, cut_line, e)) for p in geometry.coordinates])
    if isinstance(geometry, LineString):
        pieces = cut_line_string(geometry.coordinates, cut_line, e)
        if len(pieces) == 1:
            return LineString(pieces[0])
        return MultiLineString(pieces)
    if isinstance(geometry, MultiLineString):
        lines: List[List[Coordinate]] = []
        for line in geometry.coordinates:
            lines.extend(cut_line_string(line, cut_line, e))
        return MultiLineString(lines)
    if isinstance(geometry, Polygon):
        polygons = cut_polygon(geometry.coordinates, cut_line, e, diagnostics)
        if len(polygons) == 1:
            return Polygon(polygons[0])
        return MultiPolygon(polygons)
    if isinstance(geometry, MultiPolygon):
        out: List[List[List[Coordinate]]] = []
        for polygon in geometry.coordinates:
            out.extend(cut_polygon(polygon, cut_line, e, diagnostics))
        return MultiPolygon(out)
    raise TypeError(f"Unsupported geometry: {geometry!r}")


def clockwise_geometry(
    geometry: Geometry,
    diagnostics: Optional[List[CutDiagnostic]] = None,
) -> Geometry:
    """Orient polygon exteriors clockwise and holes counter-clockwise."""
    if isinstance(geometry, Polygon):
        return Polygon(clockwise(geometry.coordinates, diagnostics))
    if isinstance(geometry, MultiPolygon):
        return MultiPolygon([clockwise(polygon, diagnostics) for polygon in geometry.coordinates])
    return geometry


def geometry_from_mapping(mapping: Dict[str, Any]) -> Geometry:
    """Build a geometry from a GeoJSON-shaped dictionary.

    Extra coordinate dimensions (altitude, measure) are dropped.

    Raises:
        ValueError: If the type is unknown or the coordinates are malformed.
    """
    cls = _TYPES.get(mapping.get("type", ""))
    if cls is None:
        raise ValueError(f"Unsupported geometry type: {mapping.get('type')!r}")
    try:
        coords = _map(mapping["coordinates"], _DEPTH[cls], lambda p: (float(p[0]), float(p[1])))
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise ValueError(f"Malformed {cls.__name__} coordinates") from exc
    return cls(coords)


def geometry_to_mapping(geometry: Geometry) -> Dict[str, Any]:
    """Serialise a geometry to a GeoJSON-shaped dictionary."""
    cls = type(geometry)
    if cls not in _DEPTH:
        raise TypeError(f"Unsupported geometry: {geometry!r}")
    return {
        "type": cls.__name__,
        "coordinates": _map(geometry.coordinates, _DEPTH[cls], lambda p: [p[0], p[1]]),
    }


__all__ = [
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "Geometry",
    "map_coordinates",
    "cut_geometry",
    "clockwise_geometry",
    "geometry_from_mapping",
    "geometry_to_mapping",
]
