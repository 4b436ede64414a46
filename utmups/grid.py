# Copyright European Space Agency, 2013

"""
Conversion between geographic coordinates and the UTM/UPS grids.

:func:`geographic_to_grid` selects the UTM zone or UPS region of a position
(unless a zone is requested explicitly), applies the fixed scale factor and
false origin of the grid and dispatches to the projection primitives of
:mod:`utmups.projection`. :func:`grid_to_geographic` does the reverse for a
given zone and hemisphere.

If the squared eccentricity is zero the spherical primitives are used and
the semi-major axis is taken as the sphere radius.

The UTM zones are 6 degrees wide and cover the latitudes from 80S to 84N,
with the exceptions of zone 32V (Norway) which is widened to 3E-12E between
56N and 64N, and of the Svalbard zones 31X, 33X, 35X and 37X which are
12 degrees wide between 72N and 84N. The polar caps are covered by the
two UPS regions.
"""

import logging
import numbers
from collections import namedtuple

import numpy as np

from utmups.angle import wrapLongitude
from utmups.projection import Hemisphere
from utmups.projection.sphere import sphere_forward_tm, sphere_forward_tm_with_convergence_and_scale,\
    sphere_inverse_tm, sphere_forward_ps, sphere_forward_ps_with_convergence_and_scale,\
    sphere_inverse_ps
from utmups.projection.ps import ellipsoid_forward_ps, ellipsoid_forward_ps_with_convergence_and_scale,\
    ellipsoid_inverse_ps
from utmups.projection.tm import KRUEGER

__all__ = ['Zone', 'Hemisphere', 'AUTO', 'GridPosition',
           'GridError', 'LatitudeDomainError', 'LongitudeDomainError',
           'InvalidZoneError',
           'geographic_to_grid', 'grid_to_geographic', 'centralMeridian']

UTM_K0 = 0.9996
UTM_FN_NH = 0.0
UTM_FN_SH = 10000000.0
UTM_FE = 500000.0

UPS_K0 = 0.994
UPS_FN = 2000000.0
UPS_FE = 2000000.0

RAD = np.deg2rad

class GridError(ValueError):
    """Base class for positions and zone requests that cannot be resolved to the grid."""

class LatitudeDomainError(GridError):
    """Raised for latitudes outside [-90, 90] degrees."""

class LongitudeDomainError(GridError):
    """Raised for longitudes which are NaN or infinite."""

class InvalidZoneError(GridError):
    """Raised for zone numbers outside 1..60 or an unresolved hemisphere."""

class _AutoSelect(object):
    """
    Request to select the zone or hemisphere from the geographic position.
    Never returned as a result.
    """
    def __repr__(self):
        return 'AUTO'

AUTO = _AutoSelect()

class Zone(namedtuple('Zone', ['number', 'pole'])):
    """
    A UTM zone (`number` 1..60, `pole` None) or a UPS region
    (`number` None, `pole` the :class:`Hemisphere` of the pole).

    Use :meth:`utm` to create UTM zones and the class attributes
    :attr:`UPS_NORTH` and :attr:`UPS_SOUTH` for the UPS regions.
    """
    __slots__ = ()

    @classmethod
    def utm(cls, number):
        """
        :raise InvalidZoneError: if `number` is not an integer in 1..60
        """
        if isinstance(number, bool) or not isinstance(number, numbers.Integral) or not 1 <= number <= 60:
            raise InvalidZoneError('UTM zone number must be within 1..60, not ' + repr(number))
        return cls(int(number), None)

    @classmethod
    def parse(cls, text):
        """
        Parse a zone as written by :meth:`__str__`, i.e. ``'1'`` to ``'60'``,
        ``'NP'`` or ``'SP'``.
        """
        text = text.strip().upper()
        if text == 'NP':
            return cls.UPS_NORTH
        if text == 'SP':
            return cls.UPS_SOUTH
        try:
            number = int(text)
        except ValueError:
            raise InvalidZoneError('Not a zone: "' + text + '"')
        return cls.utm(number)

    @property
    def isUPS(self):
        return self.pole is not None

    def __str__(self):
        if self.pole == Hemisphere.NORTH:
            return 'NP'
        elif self.pole == Hemisphere.SOUTH:
            return 'SP'
        return str(self.number)

Zone.UPS_NORTH = Zone(None, Hemisphere.NORTH)
Zone.UPS_SOUTH = Zone(None, Hemisphere.SOUTH)

GridPosition = namedtuple('GridPosition', ['zone', 'hemisphere', 'northing', 'easting',
                                           'convergence', 'scale'])
GridPosition.__doc__ = """
Result of :func:`geographic_to_grid`. Northing and easting are in units of
the semi-major axis. Grid convergence (radians, grid north clockwise from
true north) and point scale are None unless requested.
"""

def _zone(zone):
    if isinstance(zone, Zone):
        if zone.isUPS:
            if zone not in (Zone.UPS_NORTH, Zone.UPS_SOUTH):
                raise InvalidZoneError('Invalid UPS zone: ' + repr(zone))
            return zone
        return Zone.utm(zone.number)
    return Zone.utm(zone)

def centralMeridian(number):
    """
    Return the central meridian in radians of the given UTM zone number.
    """
    return RAD((number - 1)*6.0 - 180 + 3)

def _autoZone(lat, lon):
    """
    Select the UTM zone or UPS region for the position (radians).

    The zone boundaries are whole degrees. The position is compared in degrees
    rounded to 1e-9 degrees (about 0.1 mm) so that a boundary given in radians
    still selects the zone east of it.
    """
    latDeg = np.round(np.rad2deg(lat), 9)
    lonDeg = np.round(np.rad2deg(lon), 9)

    if latDeg >= 84:
        return Zone.UPS_NORTH
    if latDeg < -80:
        return Zone.UPS_SOUTH

    number = int(np.floor((lonDeg + 180)/6)) + 1
    if number > 60:
        logging.debug('longitude 180, using zone 60')
        number = 60

    if 56 <= latDeg < 64 and 3 <= lonDeg < 12:
        logging.debug('Norway exception, using zone 32 instead of ' + str(number))
        number = 32
    elif 72 <= latDeg < 84 and 0 <= lonDeg < 42:
        if lonDeg < 9:
            number = 31
        elif lonDeg < 21:
            number = 33
        elif lonDeg < 33:
            number = 35
        else:
            number = 37
        logging.debug('Svalbard exception, using zone ' + str(number))
    return Zone.utm(number)

def geographic_to_grid(a, e2, lat, lon, zone=AUTO, hemisphere=AUTO,
                       withConvergenceAndScale=False, projection=KRUEGER):
    """
    Convert geographic coordinates to the UTM or UPS grid.

    :param a: semi-major axis, or sphere radius if `e2` is 0
    :param e2: squared eccentricity
    :param lat: latitude in radians [-pi/2, pi/2]
    :param lon: longitude in radians, wrapped into (-pi, pi] if outside
    :param zone: :data:`AUTO`, a UTM zone number, or a :class:`Zone`.
        An explicit UTM zone bypasses the zone selection which allows to
        project positions across zone boundaries.
    :param hemisphere: :data:`AUTO` or a :class:`Hemisphere`.
        For UTM, AUTO selects NORTH for lat >= 0 and SOUTH otherwise.
        For UPS, the hemisphere of the pole is always used.
    :param bool withConvergenceAndScale: whether to calculate grid convergence
        and point scale
    :param TransverseMercator projection: ellipsoidal transverse Mercator
        formulation, :data:`~utmups.projection.tm.KRUEGER` or
        :data:`~utmups.projection.dmatm.DMA`
    :rtype: GridPosition
    :raise LatitudeDomainError: if the latitude is outside [-pi/2, pi/2]
    :raise LongitudeDomainError: if the longitude is NaN or infinite
    :raise InvalidZoneError: if the zone or hemisphere request is invalid
    """
    if not -np.pi/2 <= lat <= np.pi/2:
        raise LatitudeDomainError('Latitude outside [-90,90] degrees: ' + str(np.rad2deg(lat)))
    if not np.isfinite(lon):
        raise LongitudeDomainError('Longitude must be finite, not ' + str(lon))
    lon = float(wrapLongitude(lon))

    if hemisphere is not AUTO and not isinstance(hemisphere, Hemisphere):
        raise InvalidZoneError('Hemisphere must be AUTO, NORTH or SOUTH, not ' + repr(hemisphere))

    if zone is AUTO:
        zone = _autoZone(lat, lon)
        logging.debug('selected zone ' + str(zone))
    else:
        zone = _zone(zone)

    convergence, scale = None, None

    if zone.isUPS:
        hemisphere = zone.pole
        args = (a, e2, UPS_K0, hemisphere, UPS_FN, UPS_FE, lat, lon)
        if e2 != 0:
            if withConvergenceAndScale:
                N, E, convergence, scale = ellipsoid_forward_ps_with_convergence_and_scale(*args)
            else:
                N, E = ellipsoid_forward_ps(*args)
        else:
            args = args[:1] + args[2:]
            if withConvergenceAndScale:
                N, E, convergence, scale = sphere_forward_ps_with_convergence_and_scale(*args)
            else:
                N, E = sphere_forward_ps(*args)
    else:
        if hemisphere is AUTO:
            hemisphere = Hemisphere.NORTH if lat >= 0 else Hemisphere.SOUTH
        fn = UTM_FN_NH if hemisphere == Hemisphere.NORTH else UTM_FN_SH
        args = (UTM_K0, centralMeridian(zone.number), fn, UTM_FE, lat, lon)
        if e2 != 0:
            if withConvergenceAndScale:
                N, E, convergence, scale = projection.forwardWithConvergenceAndScale(a, e2, *args)
            else:
                N, E = projection.forward(a, e2, *args)
        else:
            if withConvergenceAndScale:
                N, E, convergence, scale = sphere_forward_tm_with_convergence_and_scale(a, *args)
            else:
                N, E = sphere_forward_tm(a, *args)

    if withConvergenceAndScale:
        convergence, scale = float(convergence), float(scale)
    return GridPosition(zone, hemisphere, float(N), float(E), convergence, scale)

def grid_to_geographic(a, e2, zone, hemisphere, northing, easting, projection=KRUEGER):
    """
    Convert UTM or UPS grid coordinates to geographic coordinates.

    Zone and hemisphere must be given as returned by :func:`geographic_to_grid`,
    there is no automatic selection. For UPS zones the hemisphere is implied
    by the zone and `hemisphere` is ignored.

    :param a: semi-major axis, or sphere radius if `e2` is 0
    :param e2: squared eccentricity
    :param zone: UTM zone number or :class:`Zone`
    :param Hemisphere hemisphere:
    :param northing, easting: scalars or arrays
    :param TransverseMercator projection: ellipsoidal transverse Mercator formulation
    :rtype: tuple (lat, lon) in radians
    :raise InvalidZoneError: if the zone is invalid or the hemisphere is not resolved
    """
    if zone is AUTO or zone is None:
        raise InvalidZoneError('The zone must be given for grid to geographic conversion')
    zone = _zone(zone)

    if zone.isUPS:
        args = (zone.pole, UPS_FN, UPS_FE, northing, easting)
        if e2 != 0:
            return ellipsoid_inverse_ps(a, e2, UPS_K0, *args)
        else:
            return sphere_inverse_ps(a, UPS_K0, *args)

    if not isinstance(hemisphere, Hemisphere):
        raise InvalidZoneError('The hemisphere must be NORTH or SOUTH, not ' + repr(hemisphere))

    fn = UTM_FN_NH if hemisphere == Hemisphere.NORTH else UTM_FN_SH
    args = (UTM_K0, centralMeridian(zone.number), fn, UTM_FE, northing, easting)
    if e2 != 0:
        return projection.inverse(a, e2, *args)
    else:
        return sphere_inverse_tm(a, *args)
