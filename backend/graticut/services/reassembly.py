"""
Reassembly of cut polygon rings.

Cutting a ring at a cut line leaves open fragments whose endpoints sit
just off the line.  This module orders those endpoints along the line,
joins every fragment end to the next fragment start with points
interpolated along the cut line, and emits the closed rings.  Rings that
were not touched by the cut line are kept as holes and handed to the
first rebuilt ring whose bounding box contains them.

Fragments live in one list and are referred to by index while chains are
built, so no fragment is ever aliased by two chains.
"""

from __future__ import annotations

import os
import math
import logging
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .cutline import CutLine, along_axis, is_full_parallel_range, is_pole_line, side
from .errors import DEGENERATE_GEOMETRY, UNRESOLVED_HOLE_ASSIGNMENT, CutDiagnostic, report
from .line_cutter import cut_line_string

logger = logging.getLogger(__name__)

# Spacing (degrees) of points inserted along a cut line when joining
# fragments.
INTERPOLATION_STEP: float = 0.5

# Fragments with this many coordinates or fewer are tangential slivers
# and are dropped before ordering.
MIN_FRAGMENT_LENGTH: int = 4

# Returned in place of a polygon that loses every ring.
PLACEHOLDER_RING: List[Tuple[float, float]] = [(0.0, 0.0), (0.0, 0.0)]

Ring = List[Sequence[float]]
Polygon = List[Ring]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _make_point(xy: int, along: float, across: float) -> Tuple[float, float]:
    """Build a coordinate from its along-line and across-line components."""
    return (along, across) if xy == 0 else (across, along)


def _interpolate(a: float, b: float, xy: int, across: float, out: List[Sequence[float]]) -> None:
    """Append points strictly between *a* and *b* along the cut line."""
    steps = _round_half_up(abs(b - a) / INTERPOLATION_STEP)
    for i in range(1, steps):
        along = a + i * (b - a) / steps
        if along > 180:
            along -= 360
        out.append(_make_point(xy, along, across))


def _sort_key(point: Sequence[float], cut_line: CutLine) -> float:
    """Position of *point* on one monotonic scale around the cut line.

    Points on side -1 keep their natural coordinate; points on side 1
    are folded past the largest natural value via ``400 - value``.
    """
    value = point[along_axis(cut_line)]
    return 400 - value if side(point, cut_line) == 1 else value


def order_line_strings(
    fragments: Sequence[Sequence[Sequence[float]]],
    cut_line: CutLine,
) -> Tuple[List[int], List[int]]:
    """Order fragments by their start points and by their end points.

    Args:
        fragments: Open fragments of one or more cut rings.
        cut_line: The line the fragments were cut at.

    Returns:
        ``(start, end)``: two lists of fragment indices.  Rank ``i`` pairs
        the fragment ending at ``end[i]`` with the one starting at
        ``start[i]``.
    """
    indices = range(len(fragments))
    start = sorted(indices, key=lambda i: _sort_key(fragments[i][0], cut_line))
    end = sorted(indices, key=lambda i: _sort_key(fragments[i][-1], cut_line))
    first_start = _sort_key(fragments[start[0]][0], cut_line)
    first_end = _sort_key(fragments[end[0]][-1], cut_line)
    if first_start - first_end < 0:
        # The first start logically follows the last end: rotate.
        globe_spanning = is_full_parallel_range(cut_line) and abs(cut_line.deg) < 90
        if globe_spanning and len(start) > 1:
            last = start.pop(0)
            last_side = side(fragments[last][0], cut_line)
            i = 0
            while i != len(start) and last_side == side(fragments[start[i]][0], cut_line):
                i += 1
            if i != len(start):
                start.insert(i, last)
                start.append(start.pop(i + 1))
            else:
                start.append(last)
        else:
            start.append(start.pop(0))
    return start, end


def connecting_points(
    start: Sequence[float],
    end: Sequence[float],
    cut_line: CutLine,
) -> List[Sequence[float]]:
    """Points walking along *cut_line* from a fragment exit to an entry.

    Neither *start* nor *end* is included.  When the two points lie on
    opposite sides of a bounded line the walk goes round the nearer end
    of the interval.

    Args:
        start: Last coordinate of the fragment being extended.
        end: First coordinate of the fragment being joined.
        cut_line: The line the fragments were cut at.

    Returns:
        The interpolated coordinates in walking order.
    """
    xy = along_axis(cut_line)
    across = 1 - xy
    start_side = side(start, cut_line)
    end_side = side(end, cut_line)
    full = is_full_parallel_range(cut_line)
    if full and start_side != end_side and os.getenv("CUT_DEBUG"):
        logger.debug("connecting_points: sides differ on a full parallel: %s -> %s", start, end)
    out: List[Sequence[float]] = []
    if full and start_side * start[xy] < start_side * end[xy] - 1e-4:
        _interpolate(
            start[xy] + (0 if start_side == -1 else 360),
            end[xy] + (0 if start_side == 1 else 360),
            xy,
            start[across],
            out,
        )
    elif start_side == end_side:
        _interpolate(start[xy], end[xy], xy, start[across], out)
    else:
        bound = cut_line.end if start_side == -1 else cut_line.start
        _interpolate(start[xy], bound, xy, start[across], out)
        out.append(_make_point(xy, bound, start[across]))
        out.append(_make_point(xy, bound, end[across]))
        _interpolate(bound, end[xy], xy, end[across], out)
    return out


def connect_segments(
    a: Sequence[Sequence[float]],
    b: Sequence[Sequence[float]],
    cut_line: CutLine,
) -> List[Sequence[float]]:
    """Join fragment *b* after fragment *a* along *cut_line*.

    When *a* and *b* are the same object the result is *a* closed into a
    ring.  The inputs are not modified.
    """
    joined = list(a)
    joined.extend(connecting_points(a[-1], b[0], cut_line))
    if a is b:
        joined.append(joined[0])
    else:
        joined.extend(b)
    return joined


def reassemble_rings(
    fragments: Sequence[Sequence[Sequence[float]]],
    cut_line: CutLine,
) -> List[Ring]:
    """Chain ordered fragments into closed rings.

    Each chain is keyed by the index of its first fragment.  Joining the
    fragment that ends a chain to the fragment that starts the same chain
    closes it.
    """
    start, end = order_line_strings(fragments, cut_line)
    chains: Dict[int, Ring] = {i: list(fragment) for i, fragment in enumerate(fragments)}
    head_of = list(range(len(fragments)))
    rings: List[Ring] = []
    for tail, head_next in zip(end, start):
        head = head_of[tail]
        chain = chains[head]
        chain.extend(connecting_points(chain[-1], fragments[head_next][0], cut_line))
        if head == head_next:
            chain.append(chain[0])
            rings.append(chains.pop(head))
            continue
        chain.extend(chains.pop(head_next))
        for i, h in enumerate(head_of):
            if h == head_next:
                head_of[i] = head
    if os.getenv("CUT_DEBUG"):
        logger.debug(
            "reassemble_rings: fragments=%d rings=%d kind=%s deg=%s",
            len(fragments),
            len(rings),
            cut_line.kind,
            cut_line.deg,
        )
    return rings


def hole_in_ring(hole: Sequence[Sequence[float]], ring: Sequence[Sequence[float]]) -> bool:
    """Bounding box test: True when *ring*'s box contains *hole*'s box."""
    if len(hole) == 0 or len(ring) == 0:
        return False
    hole_arr = np.asarray(hole, dtype=float)
    ring_arr = np.asarray(ring, dtype=float)
    return bool(
        np.all(hole_arr.min(axis=0) >= ring_arr.min(axis=0))
        and np.all(hole_arr.max(axis=0) <= ring_arr.max(axis=0))
    )


def _join_seam(pieces: List[Ring]) -> List[Ring]:
    """Merge the last fragment of a cut ring with its first.

    A closed ring starts and ends at the same vertex, so the first and
    last fragments are two halves of one fragment.
    """
    return [pieces[-1] + pieces[0][1:]] + pieces[1:-1]


def cut_polygon(
    polygon: Polygon,
    cut_line: CutLine,
    e: float,
    diagnostics: Optional[List[CutDiagnostic]] = None,
) -> List[Polygon]:
    """Cut a polygon at *cut_line* and rebuild closed polygons.

    Args:
        polygon: Rings of the polygon; ``polygon[0]`` is the exterior.
        cut_line: The line to cut at.
        e: Minimum distance from the cut line in degrees.
        diagnostics: Optional list collecting recoverable problems.

    Returns:
        A list of polygons.  When the exterior does not cross the line
        the input polygon is returned as the only element (after pole
        handling for a pole line).
    """
    segments = cut_line_string(polygon[0], cut_line, e)
    if len(segments) == 1:
        if is_pole_line(cut_line):
            # Import lazily to avoid circular dependency
            from .pole import cut_pole

            polygon = cut_pole(polygon, cut_line, e, diagnostics)
        return [polygon]
    segments = _join_seam(segments)
    holes: List[Ring] = []
    for ring in polygon[1:]:
        pieces = cut_line_string(ring, cut_line, e)
        if len(pieces) == 1:
            holes.append(pieces[0])
        else:
            segments.extend(_join_seam(pieces))
    segments = [segment for segment in segments if len(segment) > MIN_FRAGMENT_LENGTH]
    if not segments:
        report(
            diagnostics,
            DEGENERATE_GEOMETRY,
            f"every fragment cut at {cut_line.kind} {cut_line.deg} was degenerate",
        )
        return [[list(PLACEHOLDER_RING)]]
    polygons: List[Polygon] = [[ring] for ring in reassemble_rings(segments, cut_line)]
    for hole in holes:
        owner = next((p for p in polygons if hole_in_ring(hole, p[0])), None)
        if owner is None:
            report(
                diagnostics,
                UNRESOLVED_HOLE_ASSIGNMENT,
                f"no rebuilt ring contains a hole of {len(hole)} points; assigned to the first ring",
            )
            owner = polygons[0]
        owner.append(hole)
    return polygons


__all__ = [
    "INTERPOLATION_STEP",
    "MIN_FRAGMENT_LENGTH",
    "PLACEHOLDER_RING",
    "order_line_strings",
    "connecting_points",
    "connect_segments",
    "reassemble_rings",
    "hole_in_ring",
    "cut_polygon",
]
