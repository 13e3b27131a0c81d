"""
API routes for geometry cutting and graticule rotation.

``POST /cut`` runs a batch of geometries through the cutting pipeline
and returns them in metagraticule coordinates together with any
recovered problems.  ``POST /rotate`` exposes the oblique aspect
transform so that clients can place markers consistently with the cut
geometries.
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from .models import (
    CutRequest,
    CutResponse,
    DiagnosticModel,
    GeometryModel,
    RotateRequest,
    RotateResponse,
    RotationModel,
)
from ..services.cutline import CutLine, make_cut_line
from ..services.errors import CutError
from ..services.geometry import geometry_from_mapping, geometry_to_mapping
from ..services.pipeline import cut_features
from ..services.rotation import RotationParameters

logger = logging.getLogger(__name__)

router = APIRouter()


def _rotation_from_model(model: RotationModel) -> RotationParameters:
    return RotationParameters(
        metapole_lon=model.metapoleLon,
        metapole_lat=model.metapoleLat,
        meta_meridian=model.metaMeridian,
    )


@router.post("/cut", response_model=CutResponse)
async def cut(body: CutRequest) -> CutResponse:
    """Cut geometries at the antimeridian, the poles and the given cut lines.

    Args:
        body: Geometries, projection-specific cut lines, optional oblique
            aspect and the azimuthal flag.

    Returns:
        The cut geometries and a list of diagnostics indexed by geometry.
    """
    try:
        cut_lines: List[CutLine] = [
            make_cut_line(line.type, line.deg, line.from_, line.to) for line in body.cutLines
        ]
    except CutError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    geometries = []
    for index, model in enumerate(body.geometries):
        try:
            geometries.append(geometry_from_mapping({"type": model.type, "coordinates": model.coordinates}))
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=f"geometries[{index}]: {exc}")
    rotation = _rotation_from_model(body.rotation) if body.rotation is not None else None
    try:
        results, found = cut_features(geometries, cut_lines, rotation, body.azimuthal, body.epsilon)
    except CutError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    diagnostics = [
        DiagnosticModel(index=index, kind=d.kind, message=d.message)
        for index, items in enumerate(found)
        for d in items
    ]
    logger.info(
        "cut: geometries=%d cut_lines=%d diagnostics=%d",
        len(results),
        len(cut_lines),
        len(diagnostics),
    )
    return CutResponse(
        geometries=[GeometryModel(**geometry_to_mapping(g)) for g in results],
        diagnostics=diagnostics,
    )


@router.post("/rotate", response_model=RotateResponse)
async def rotate_points(body: RotateRequest) -> RotateResponse:
    """Rotate points into the metagraticule, or back when ``inverse`` is set."""
    rotation = _rotation_from_model(body.rotation)
    transform = rotation.inverse if body.inverse else rotation.forward
    points: List[List[float]] = []
    for index, point in enumerate(body.points):
        if len(point) < 2:
            raise HTTPException(status_code=400, detail=f"points[{index}] must be a [lon, lat] pair")
        lon, lat = transform(point)
        points.append([lon, lat])
    return RotateResponse(points=points)
