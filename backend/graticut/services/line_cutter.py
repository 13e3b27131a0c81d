"""
Splitting of coordinate sequences at a cut line.

``cut_line_string`` walks consecutive coordinate pairs and starts a new
fragment at every crossing that falls inside the interval of the cut
line.  Crossing points are pushed off the line towards the side of the
vertex they belong to, so every fragment endpoint lies strictly off the
line.  Callers tell a cut sequence from an untouched one by the number of
fragments returned.
"""

from __future__ import annotations

import os
import logging
from typing import List, Sequence

from .cutline import PARALLEL, CutLine, check_kind
from .intersection import (
    has_intersect,
    intersect,
    intersect_between,
    move,
    move_intersection,
)

logger = logging.getLogger(__name__)


def add_point(line: List[Sequence[float]], point: Sequence[float], cut_line: CutLine) -> None:
    """Append *point* to *line* unless it repeats the last coordinate.

    On a pole parallel two consecutive points mirrored about the pole
    latitude are also treated as duplicates.
    """
    if not line:
        line.append(point)
        return
    last = line[-1]
    mirrored = (
        check_kind(cut_line) == PARALLEL
        and abs(cut_line.deg) >= 90
        and last[1] + point[1] == 2 * cut_line.deg
    )
    if not mirrored and (last[0] != point[0] or last[1] != point[1]):
        line.append(point)


def cut_line_string(
    line: Sequence[Sequence[float]],
    cut_line: CutLine,
    e: float,
) -> List[List[Sequence[float]]]:
    """Cut a line string into fragments at *cut_line*.

    Vertices closer than ``e`` to the cut line are moved away from it as
    they are appended.  The first fragment is always emitted; later
    fragments with a single coordinate are dropped.

    Args:
        line: Coordinates ``(lon, lat)`` in degrees.
        cut_line: The line to cut at.
        e: Minimum distance from the cut line in degrees.

    Returns:
        A list of fragments.  A single fragment means no crossing.
    """
    if not line:
        return [[]]
    out: List[List[Sequence[float]]] = []
    stack: List[Sequence[float]] = []
    crossings = 0
    for prev, curr in zip(line, line[1:]):
        add_point(stack, move(prev, cut_line, e), cut_line)
        if not has_intersect(prev, curr, cut_line):
            continue
        crossing = intersect(prev, curr, cut_line)
        if not intersect_between(crossing, cut_line):
            continue
        crossings += 1
        add_point(stack, move_intersection(crossing, prev, cut_line, e), cut_line)
        if len(stack) > 1 or not out:
            out.append(stack)
        stack = [move_intersection(crossing, curr, cut_line, e)]
    add_point(stack, move(line[-1], cut_line, e), cut_line)
    out.append(stack)
    if os.getenv("CUT_DEBUG"):
        logger.debug(
            "cut_line_string: points=%d crossings=%d fragments=%d kind=%s deg=%s",
            len(line),
            crossings,
            len(out),
            cut_line.kind,
            cut_line.deg,
        )
    return out


__all__ = ["add_point", "cut_line_string"]
