"""
Oblique aspect rotation between the geographic graticule and a
metagraticule.

The metagraticule is defined by a metapole (the point that becomes the
pole of the oblique aspect) and the metalongitude of the central
meridian.  ``rotate`` maps a geographic coordinate into metacoordinates;
calling it again with ``(180 - lm, f0, 180 - l0)`` maps back, which is
what ``inverse_rotate`` does.  All angles are in degrees.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

from .cutline import Coordinate

PointTransform = Callable[[Sequence[float]], Coordinate]


def rotate(point: Sequence[float], l0: float, f0: float, lm: float) -> Coordinate:
    """Transform *point* into the oblique aspect.

    Args:
        point: ``(lon, lat)`` in degrees.
        l0: Longitude of the metapole.  Zero keeps the metapole on the
            Greenwich meridian.
        f0: Latitude of the metapole.  90 leaves the pole in place.
        lm: Metalongitude of the central meridian.

    Returns:
        The ``(metalon, metalat)`` pair in degrees.  The longitude is
        range-reduced into [-180, 180] only when ``l0`` or ``lm`` is non
        zero; with the identity parameters the input is returned as is.
    """
    if l0 == 0 and lm == 0 and f0 == 90:
        return (point[0], point[1])
    lam = math.radians(point[0])
    phi = math.radians(point[1])
    l0 = math.radians(l0)
    f0 = math.radians(f0)
    lm = math.radians(lm)
    if l0 != 0:
        lam -= l0
    if math.sin(f0) == -1:
        # Metapole at the south pole: a half turn about the polar axis
        phi = -phi
        lam = -lam
        lam += -math.pi if lam > 0 else math.pi
    elif math.sin(f0) < 1:
        z = math.sin(f0) * math.sin(phi) + math.cos(f0) * math.cos(phi) * math.cos(lam)
        lam, phi = (
            math.atan2(
                math.cos(phi) * math.sin(lam),
                -math.cos(f0) * math.sin(phi) + math.sin(f0) * math.cos(phi) * math.cos(lam),
            ),
            math.asin(max(-1.0, min(1.0, z))),
        )
    if lm != 0:
        lam -= lm
    while abs(lam) > math.pi and (l0 != 0 or lm != 0):
        lam -= math.copysign(2 * math.pi, lam)
    return (math.degrees(lam), math.degrees(phi))


def inverse_rotate(point: Sequence[float], l0: float, f0: float, lm: float) -> Coordinate:
    """Undo :func:`rotate` performed with the same parameters."""
    return rotate(point, 180 - lm, f0, 180 - l0)


@dataclass(frozen=True)
class RotationParameters:
    """Parameters of an oblique aspect, fixed per registered projection."""

    metapole_lon: float = 0.0
    metapole_lat: float = 90.0
    meta_meridian: float = 0.0

    @property
    def is_identity(self) -> bool:
        return self.metapole_lon == 0 and self.metapole_lat == 90 and self.meta_meridian == 0

    def forward(self, point: Sequence[float]) -> Coordinate:
        """Geographic → metagraticule."""
        return rotate(point, self.metapole_lon, self.metapole_lat, self.meta_meridian)

    def inverse(self, point: Sequence[float]) -> Coordinate:
        """Metagraticule → geographic."""
        return inverse_rotate(point, self.metapole_lon, self.metapole_lat, self.meta_meridian)


IDENTITY_ROTATION = RotationParameters()


def compose_projection(
    rotation: RotationParameters,
    to_plane: PointTransform,
    from_plane: PointTransform,
) -> Tuple[PointTransform, PointTransform]:
    """Compose a rotation with a projection's own plane transforms.

    The returned pair maps geographic coordinates to the rotated
    projection's plane and back.  Registering the pair is left to the
    projection registry.

    Args:
        rotation: The oblique aspect.
        to_plane: Metagraticule degrees → projected plane.
        from_plane: Projected plane → metagraticule degrees.

    Returns:
        ``(forward, inverse)`` transform functions.
    """

    def forward(point: Sequence[float]) -> Coordinate:
        return to_plane(rotation.forward(point))

    def inverse(point: Sequence[float]) -> Coordinate:
        return rotation.inverse(from_plane(point))

    return forward, inverse
