"""
Pole handling for polygons cut at a full pole parallel.

A ring that encloses a pole never crosses the pole parallel, so plain
cutting leaves it alone even though it cannot be drawn as is.  The
number of antimeridian jumps along the rings tells whether the polygon
wraps the pole; if it does, a boundary walking round the pole parallel
is synthesized and put in front as the new exterior.
"""

from __future__ import annotations

import os
import logging
from typing import List, Optional, Sequence

from .cutline import CutLine
from .errors import CutDiagnostic
from .reassembly import Polygon, Ring, connect_segments, cut_polygon

logger = logging.getLogger(__name__)


def winding(ring: Sequence[Sequence[float]]) -> int:
    """Net number of times *ring* wraps round the globe in longitude.

    Every jump of more than 180° between consecutive vertices counts as
    one crossing of the antimeridian, signed by its direction.
    """
    count = 0
    for a, b in zip(ring, ring[1:]):
        delta = a[0] - b[0]
        if delta > 180:
            count -= 1
        elif delta < -180:
            count += 1
    return count


def pole_wrap_ring(cut_line: CutLine, turns: int) -> Ring:
    """Closed ring running along the pole parallel from longitude 0 round to 0."""
    deg = cut_line.deg
    ring = connect_segments([(0.0, deg)], [(turns * 180.0, deg)], cut_line)
    ring.pop()
    ring.extend(connect_segments([(-turns * 180.0, deg)], [(0.0, deg)], cut_line))
    return ring


def cut_pole(
    polygon: Polygon,
    cut_line: CutLine,
    e: float,
    diagnostics: Optional[List[CutDiagnostic]] = None,
) -> Polygon:
    """Give a pole-enclosing polygon an exterior along the pole parallel.

    Args:
        polygon: Rings of a polygon that does not cross *cut_line*.
        cut_line: A full parallel at ±90°.
        e: Minimum distance from the cut line in degrees.
        diagnostics: Optional list collecting recoverable problems.

    Returns:
        The polygon unchanged when it does not wrap this pole; otherwise a
        new ring list.  When a later ring cancels the wrap it is promoted
        to the exterior, else a synthesized pole boundary is prepended.
    """
    exterior = polygon[0]
    pole = winding(exterior)
    if pole == 0 or (pole < 0) != (cut_line.deg < 0) or exterior[0][1] == -cut_line.deg:
        return polygon
    for j in range(1, len(polygon)):
        pole += winding(polygon[j])
        if pole == 0:
            rings = list(polygon)
            promoted = rings.pop(j)
            rings.insert(0, cut_polygon([promoted], cut_line, e, diagnostics)[0][0])
            if os.getenv("CUT_DEBUG"):
                logger.debug("cut_pole: promoted ring %d to exterior at deg=%s", j, cut_line.deg)
            return rings
    if os.getenv("CUT_DEBUG"):
        logger.debug("cut_pole: synthesized pole boundary at deg=%s turns=%d", cut_line.deg, pole)
    return [pole_wrap_ring(cut_line, pole)] + list(polygon)


__all__ = ["winding", "pole_wrap_ring", "cut_pole"]
