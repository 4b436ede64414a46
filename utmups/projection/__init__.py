"""
This package contains the projection primitives for the sphere
(:mod:`~utmups.projection.sphere`) and the ellipsoid
(:mod:`~utmups.projection.tm`, :mod:`~utmups.projection.dmatm`
and :mod:`~utmups.projection.ps`).

The primitives take the projection parameters (semi-major axis or sphere
radius, squared eccentricity, scale factor, central meridian or hemisphere,
false northing and false easting) explicitly and do not know anything about
the UTM and UPS grids. Zone selection is done in :mod:`utmups.grid`.

Angles are in radians, distances in the unit of the semi-major axis
(usually meters). Inputs may be scalars or numpy arrays.
"""

from enum import Enum

class Hemisphere(Enum):
    """
    Hemisphere of a grid position. For the polar stereographic primitives
    it selects the pole at which the projection plane is tangent.
    """
    NORTH = 'N'
    SOUTH = 'S'

    def __str__(self):
        return self.value

def _checkHemisphere(hemisphere):
    if not isinstance(hemisphere, Hemisphere):
        raise ValueError('Hemisphere must be NORTH or SOUTH, not ' + repr(hemisphere))
