"""
Pydantic data models for the cutting API.

These models define the shapes of requests and responses used by the
backend.  Geometries follow the GeoJSON ``{"type", "coordinates"}``
layout; cut lines use the ``{type, deg, from, to}`` layout expected by
projection definitions.
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field


class GeometryModel(BaseModel):
    """A GeoJSON geometry (no GeometryCollection)."""

    type: Literal["Point", "LineString", "Polygon", "MultiPoint", "MultiLineString", "MultiPolygon"] = Field(
        ..., description="Geometry type"
    )
    coordinates: Any = Field(..., description="Nested coordinate arrays in degrees, [lon, lat] order")


class CutLineModel(BaseModel):
    """A bounded meridian or parallel of the metagraticule."""

    type: Literal["meridian", "parallel"] = Field(..., description="Kind of graticule line")
    deg: float = Field(..., description="Metalongitude of a meridian or metalatitude of a parallel")
    from_: float = Field(..., alias="from", description="Start of the interval on the orthogonal axis")
    to: float = Field(..., description="End of the interval on the orthogonal axis; must exceed 'from'")


class RotationModel(BaseModel):
    """Oblique aspect of the target projection."""

    metapoleLon: float = Field(default=0.0, description="Longitude of the metapole")
    metapoleLat: float = Field(default=90.0, description="Latitude of the metapole")
    metaMeridian: float = Field(default=0.0, description="Metalongitude of the central meridian")


class CutRequest(BaseModel):
    """Request body for cutting a batch of geometries."""

    geometries: List[GeometryModel] = Field(..., description="Geometries in geographic degrees")
    cutLines: List[CutLineModel] = Field(
        default_factory=list,
        description="Projection-specific cut lines; antimeridian and pole cuts are added automatically",
    )
    rotation: Optional[RotationModel] = Field(
        default=None, description="Oblique aspect; omitted for the normal aspect"
    )
    azimuthal: bool = Field(
        default=False,
        description="Cut only at the antipodal pole (azimuthal projections)",
    )
    epsilon: float = Field(default=1e-6, gt=0.0, description="Minimum distance from cut lines (degrees)")


class DiagnosticModel(BaseModel):
    """A recoverable problem met while cutting one geometry."""

    index: int = Field(..., description="Index of the geometry in the request")
    kind: str = Field(..., description="Problem kind (degenerate_geometry, unresolved_hole_assignment)")
    message: str = Field(..., description="Human readable description")


class CutResponse(BaseModel):
    """Cut geometries in metagraticule degrees."""

    geometries: List[GeometryModel] = Field(..., description="Cut geometries, in request order")
    diagnostics: List[DiagnosticModel] = Field(default_factory=list, description="Recovered problems")


class RotateRequest(BaseModel):
    """Request body for rotating points into or out of a metagraticule."""

    points: List[List[float]] = Field(..., description="Points as [lon, lat] pairs in degrees")
    rotation: RotationModel = Field(..., description="Oblique aspect")
    inverse: bool = Field(default=False, description="Map metacoordinates back to geographic ones")


class RotateResponse(BaseModel):
    """Rotated points."""

    points: List[List[float]] = Field(..., description="Points as [lon, lat] pairs in degrees")
