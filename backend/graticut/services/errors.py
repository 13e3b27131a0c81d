"""
Error taxonomy for the cutting engine.

Only structurally invalid cut lines are fatal and raised as exceptions.
Numerically degenerate geometry is recovered locally and reported as a
:class:`CutDiagnostic` so that one malformed feature never aborts a
whole batch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal, Optional

logger = logging.getLogger(__name__)

DEGENERATE_GEOMETRY = "degenerate_geometry"
UNRESOLVED_HOLE_ASSIGNMENT = "unresolved_hole_assignment"


class CutError(Exception):
    """Base class for fatal cutting errors."""


class InvalidCutLineKind(CutError, ValueError):
    """Raised when a cut line is neither a meridian nor a parallel."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"Invalid cut line kind: {kind!r}")
        self.kind = kind


class NonMonotonicInterval(CutError, ValueError):
    """Raised when a cut line interval does not satisfy ``start < end``."""

    def __init__(self, start: float, end: float) -> None:
        super().__init__(f"Cut line interval must be increasing, got from={start} to={end}")
        self.start = start
        self.end = end


@dataclass(frozen=True)
class CutDiagnostic:
    """A recoverable problem encountered while cutting a geometry."""

    kind: Literal["degenerate_geometry", "unresolved_hole_assignment"]
    message: str


def report(
    diagnostics: Optional[List[CutDiagnostic]],
    kind: Literal["degenerate_geometry", "unresolved_hole_assignment"],
    message: str,
) -> None:
    """Log a recoverable problem and append it to *diagnostics* when given."""
    logger.warning("%s: %s", kind, message)
    if diagnostics is not None:
        diagnostics.append(CutDiagnostic(kind=kind, message=message))
