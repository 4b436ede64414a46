# Copyright European Space Agency, 2013

"""
Exact Transverse Mercator and Polar Stereographic projections for a sphere.

The equations are from "Map Projections - A Working Manual", John P. Snyder,
USGS Professional Paper 1395, 1987, pages 59-60 and 157-158.
No series expansion or iteration is involved, the inverse transforms
reproduce the input of the forward transforms to floating-point precision.
"""

import numpy as np

from utmups.projection import Hemisphere, _checkHemisphere

def sphere_forward_tm(R, k0, centralMeridian, falseNorthing, falseEasting, lat, lon):
    """
    Project geographic coordinates with the transverse Mercator projection
    of a sphere.

    :param R: sphere radius
    :param k0: scale factor on the central meridian
    :param centralMeridian: in radians
    :param falseNorthing, falseEasting: in units of `R`
    :param lat, lon: in radians
    :rtype: tuple (northing, easting)
    """
    Rk0 = R*k0
    dlon = lon - centralMeridian
    B = np.cos(lat)*np.sin(dlon)
    E = falseEasting + Rk0*np.arctanh(B)
    N = falseNorthing + Rk0*np.arctan(np.tan(lat)/np.cos(dlon))
    return N, E

def sphere_forward_tm_with_convergence_and_scale(R, k0, centralMeridian, falseNorthing, falseEasting,
                                                 lat, lon):
    """
    As :func:`sphere_forward_tm` but additionally returns the grid
    convergence (radians, grid north clockwise from true north)
    and the point scale.

    :rtype: tuple (northing, easting, convergence, scale)
    """
    N, E = sphere_forward_tm(R, k0, centralMeridian, falseNorthing, falseEasting, lat, lon)
    dlon = lon - centralMeridian
    B = np.cos(lat)*np.sin(dlon)
    convergence = np.arctan(np.tan(dlon)*np.sin(lat))
    scale = k0/np.sqrt(1 - B*B)
    return N, E, convergence, scale

def sphere_inverse_tm(R, k0, centralMeridian, falseNorthing, falseEasting, N, E):
    """
    Inverse of :func:`sphere_forward_tm`.

    :rtype: tuple (lat, lon) in radians
    """
    Rk0 = R*k0
    D = (N - falseNorthing)/Rk0
    x = (E - falseEasting)/Rk0
    lon = centralMeridian + np.arctan(np.sinh(x)/np.cos(D))
    lat = np.arcsin(np.sin(D)/np.cosh(x))
    return lat, lon

def _psRadius(Rk0, hemisphere, lat):
    if hemisphere == Hemisphere.NORTH:
        return 2*Rk0*np.tan(np.pi/4 - lat/2)
    else:
        return 2*Rk0*np.tan(np.pi/4 + lat/2)

def sphere_forward_ps(R, k0, hemisphere, falseNorthing, falseEasting, lat, lon):
    """
    Project geographic coordinates with the polar stereographic projection
    of a sphere. The longitude origin (0) points towards the negative
    northing axis for the north pole and the positive one for the south pole.

    :param R: sphere radius
    :param k0: scale factor at the pole
    :param Hemisphere hemisphere: the pole the projection is centered at
    :param falseNorthing, falseEasting: grid coordinates of the pole
    :param lat, lon: in radians
    :rtype: tuple (northing, easting)
    """
    _checkHemisphere(hemisphere)
    rho = _psRadius(R*k0, hemisphere, lat)
    E = falseEasting + rho*np.sin(lon)
    if hemisphere == Hemisphere.NORTH:
        N = falseNorthing - rho*np.cos(lon)
    else:
        N = falseNorthing + rho*np.cos(lon)
    return N, E

def sphere_forward_ps_with_convergence_and_scale(R, k0, hemisphere, falseNorthing, falseEasting,
                                                 lat, lon):
    """
    As :func:`sphere_forward_ps` but additionally returns the grid
    convergence (radians, grid north clockwise from true north)
    and the point scale.

    :rtype: tuple (northing, easting, convergence, scale)
    """
    N, E = sphere_forward_ps(R, k0, hemisphere, falseNorthing, falseEasting, lat, lon)
    if hemisphere == Hemisphere.NORTH:
        convergence = lon
        scale = 2*k0/(1 + np.sin(lat))
    else:
        convergence = -lon
        scale = 2*k0/(1 - np.sin(lat))
    return N, E, convergence, scale

def sphere_inverse_ps(R, k0, hemisphere, falseNorthing, falseEasting, N, E):
    """
    Inverse of :func:`sphere_forward_ps`.

    The pole itself has no defined longitude, 0 is returned in that case.

    :rtype: tuple (lat, lon) in radians
    """
    _checkHemisphere(hemisphere)
    Rk0 = R*k0
    x = E - falseEasting
    y = N - falseNorthing
    rho = np.hypot(x, y)
    c = 2*np.arctan(rho/(2*Rk0))
    if hemisphere == Hemisphere.NORTH:
        lat = np.arcsin(np.cos(c))
        lon = np.arctan2(x, -y)
    else:
        lat = -np.arcsin(np.cos(c))
        lon = np.arctan2(x, y)
    lon = np.where(rho == 0, 0.0, lon)[()]
    return lat, lon
