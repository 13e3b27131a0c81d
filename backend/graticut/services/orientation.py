"""
Ring orientation normalisation.

Rings are compared by an approximate signed spherical area.  The ring
with the largest absolute area becomes the exterior and is oriented
clockwise (interior on the right of travel, negative area); every other
ring becomes a counter-clockwise hole.  Rings of negligible area are
dropped: they are slivers left behind by upstream processing.
"""

from __future__ import annotations

import math
import logging
from typing import List, Optional, Sequence

import numpy as np

from .errors import DEGENERATE_GEOMETRY, CutDiagnostic, report
from .reassembly import PLACEHOLDER_RING, Polygon, Ring

logger = logging.getLogger(__name__)

# Rings with an absolute area (steradians) below this are discarded.
SILVER_AREA: float = 1e-12


def ring_area(ring: Sequence[Sequence[float]]) -> float:
    """Approximate signed area of a closed ring in steradians.

    Each vertex contributes the longitude span between its neighbours
    weighted by the sine of its latitude.  A ring whose longitude spans
    add up to a full turn wraps a pole and is corrected by 4π.  The
    approximation holds while the area is below a hemisphere.

    Args:
        ring: Closed ring of ``(lon, lat)`` coordinates in degrees.

    Returns:
        The area, negative for clockwise rings and positive for
        counter-clockwise ones.
    """
    if len(ring) < 2:
        return 0.0
    coords = np.asarray(ring, dtype=float)
    lon = coords[:-1, 0]
    lat = coords[:-1, 1]
    dl = coords[1:, 0] - np.roll(lon, 1)
    wrapped = np.abs(dl) > 180
    dl = np.where(wrapped, (360 - np.abs(dl)) * np.where(dl > 0, -1.0, 1.0), dl)
    total = float(np.sum(np.radians(dl) * np.sin(np.radians(lat))))
    if abs(float(dl.sum())) > 180:
        total += 4 * math.pi
    if abs(total) > 4 * math.pi:
        total += (-8 if total > 0 else 8) * math.pi
    return -total / 2


def clockwise(
    polygon: Sequence[Sequence[Sequence[float]]],
    diagnostics: Optional[List[CutDiagnostic]] = None,
) -> Polygon:
    """Return the rings of *polygon* with a clockwise exterior first.

    Args:
        polygon: Rings in any order and orientation.
        diagnostics: Optional list collecting recoverable problems.

    Returns:
        A new ring list: the largest ring first with negative area,
        the remaining rings after it with positive area.  A polygon made
        only of negligible rings becomes the placeholder ring.
    """
    rings: List[Ring] = []
    areas: List[float] = []
    for ring in polygon:
        area = ring_area(ring)
        if abs(area) < SILVER_AREA:
            continue
        rings.append(list(ring))
        areas.append(area)
    if not rings:
        report(diagnostics, DEGENERATE_GEOMETRY, "every ring of the polygon has negligible area")
        return [list(PLACEHOLDER_RING)]
    biggest = max(range(len(rings)), key=lambda i: abs(areas[i]))
    if biggest > 0:
        rings.insert(0, rings.pop(biggest))
        areas.insert(0, areas.pop(biggest))
    for i, ring in enumerate(rings):
        if (areas[i] > 0) == (i == 0):
            ring.reverse()
    return rings


__all__ = ["SILVER_AREA", "ring_area", "clockwise"]
