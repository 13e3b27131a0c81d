"""
Entry point of the cutting engine.

``cut_feature_geometry`` takes a geometry in geographic degrees,
normalises its ring orientation, rotates it into the metagraticule of
the target projection and cuts it at the antimeridian, the poles and any
projection-specific cut lines, in that order.  The result stays in
metagraticule degrees, ready for the projection's own plane transform.

Numerically degenerate input never raises: it is reported through the
optional ``diagnostics`` list.  Only an invalid cut line aborts.
"""

from __future__ import annotations

import os
import time
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .cutline import CutLine, default_cut_lines
from .errors import CutDiagnostic
from .geometry import Geometry, clockwise_geometry, cut_geometry, map_coordinates
from .rotation import RotationParameters

logger = logging.getLogger(__name__)

# Minimum distance (degrees) kept between vertices and any cut line.
CUT_EPSILON: float = 1e-6


def cut_feature_geometry(
    geometry: Geometry,
    cut_lines: Iterable[CutLine] = (),
    rotation: Optional[RotationParameters] = None,
    azimuthal: bool = False,
    epsilon: float = CUT_EPSILON,
    diagnostics: Optional[List[CutDiagnostic]] = None,
) -> Geometry:
    """Prepare one geometry for drawing in an oblique or interrupted projection.

    Args:
        geometry: Geometry in geographic (WGS84) degrees.
        cut_lines: Projection-specific cut lines in metagraticule degrees.
            The antimeridian and pole lines are added automatically and
            must not be included.
        rotation: Oblique aspect of the target projection; ``None`` keeps
            the geographic graticule.
        azimuthal: Cut only at the antipodal pole, not at the antimeridian.
        epsilon: Minimum distance from cut lines in degrees.
        diagnostics: Optional list collecting recoverable problems.

    Returns:
        The cut geometry in metagraticule degrees.
    """
    geometry = clockwise_geometry(geometry, diagnostics)
    if rotation is not None and not rotation.is_identity:
        geometry = map_coordinates(geometry, rotation.forward)
    for cut_line in default_cut_lines(azimuthal, cut_lines):
        geometry = cut_geometry(geometry, cut_line, epsilon, diagnostics)
    return geometry


def cut_features(
    geometries: Sequence[Geometry],
    cut_lines: Iterable[CutLine] = (),
    rotation: Optional[RotationParameters] = None,
    azimuthal: bool = False,
    epsilon: float = CUT_EPSILON,
) -> Tuple[List[Geometry], List[List[CutDiagnostic]]]:
    """Cut a batch of geometries with the same settings.

    Returns:
        ``(geometries, diagnostics)`` where ``diagnostics[i]`` lists the
        problems recovered while cutting ``geometries[i]``.
    """
    lines = list(cut_lines)
    started = time.perf_counter()
    results: List[Geometry] = []
    found: List[List[CutDiagnostic]] = []
    for geometry in geometries:
        diagnostics: List[CutDiagnostic] = []
        results.append(
            cut_feature_geometry(geometry, lines, rotation, azimuthal, epsilon, diagnostics)
        )
        found.append(diagnostics)
    if os.getenv("CUT_DEBUG"):
        logger.debug(
            "cut_features: geometries=%d cut_lines=%d azimuthal=%s diagnostics=%d elapsed=%.3fs",
            len(results),
            len(lines),
            azimuthal,
            sum(len(d) for d in found),
            time.perf_counter() - started,
        )
    return results, found


__all__ = ["CUT_EPSILON", "cut_feature_geometry", "cut_features"]
