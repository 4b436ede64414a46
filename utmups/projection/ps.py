# Copyright European Space Agency, 2013

"""
Polar stereographic projection of an ellipsoid as described in
"The Universal Grids", Defense Mapping Agency Technical Manual (DMATM) 8358.2,
chapter 3.

The inverse converts the isometric colatitude back to geographic latitude
with a fixed four-term series in the squared eccentricity.
"""

import numpy as np

from utmups.projection import Hemisphere, _checkHemisphere
from utmups.util.series import evenSineMultiples

def _C0(a, e2):
    e = np.sqrt(e2)
    return 2*a/np.sqrt(1 - e2)*np.power((1 - e)/(1 + e), e/2)

def _tanHalfZ(e2, hemisphere, lat):
    e = np.sqrt(e2)
    sinLat = np.sin(lat)
    if hemisphere == Hemisphere.NORTH:
        return np.power((1 + e*sinLat)/(1 - e*sinLat), e/2)*np.tan(np.pi/4 - lat/2)
    else:
        return np.power((1 - e*sinLat)/(1 + e*sinLat), e/2)*np.tan(np.pi/4 + lat/2)

def ellipsoid_forward_ps(a, e2, k0, hemisphere, falseNorthing, falseEasting, lat, lon):
    """
    Project geographic coordinates with the polar stereographic
    projection of an ellipsoid.

    :param a: semi-major axis
    :param e2: squared eccentricity
    :param k0: scale factor at the pole
    :param Hemisphere hemisphere: the pole the projection is centered at
    :param falseNorthing, falseEasting: grid coordinates of the pole
    :param lat, lon: in radians
    :rtype: tuple (northing, easting)
    """
    _checkHemisphere(hemisphere)
    R = k0*_C0(a, e2)*_tanHalfZ(e2, hemisphere, lat)
    E = falseEasting + R*np.sin(lon)
    if hemisphere == Hemisphere.NORTH:
        N = falseNorthing - R*np.cos(lon)
    else:
        N = falseNorthing + R*np.cos(lon)
    return N, E

def ellipsoid_forward_ps_with_convergence_and_scale(a, e2, k0, hemisphere, falseNorthing, falseEasting,
                                                    lat, lon):
    """
    As :func:`ellipsoid_forward_ps` but additionally returns the grid
    convergence (radians, grid north clockwise from true north)
    and the point scale. At the pole the point scale is `k0`.

    :rtype: tuple (northing, easting, convergence, scale)
    """
    _checkHemisphere(hemisphere)
    R = k0*_C0(a, e2)*_tanHalfZ(e2, hemisphere, lat)
    E = falseEasting + R*np.sin(lon)
    if hemisphere == Hemisphere.NORTH:
        N = falseNorthing - R*np.cos(lon)
        convergence = lon
    else:
        N = falseNorthing + R*np.cos(lon)
        convergence = -lon

    cosLat = np.cos(lat)
    isPole = np.abs(cosLat) < 1e-15
    with np.errstate(invalid='ignore', divide='ignore'):
        scale = R*np.sqrt(1 - e2*np.square(np.sin(lat)))/(a*cosLat)
    scale = np.where(isPole, k0, scale)[()]
    return N, E, convergence, scale

def ellipsoid_inverse_ps(a, e2, k0, hemisphere, falseNorthing, falseEasting, N, E):
    """
    Inverse of :func:`ellipsoid_forward_ps`.

    The pole itself has no defined longitude, 0 is returned in that case.

    :rtype: tuple (lat, lon) in radians
    """
    _checkHemisphere(hemisphere)
    e4 = e2*e2
    e6 = e4*e2
    e8 = e6*e2
    Abar = e2/2 + 5*e4/24 + e6/12 + 13*e8/360
    Bbar = 7*e4/48 + 29*e6/240 + 811*e8/11520
    Cbar = 7*e6/120 + 81*e8/1120
    Dbar = 4279*e8/161280

    x = E - falseEasting
    y = N - falseNorthing
    isPole = (x == 0) & (y == 0)

    if hemisphere == Hemisphere.NORTH:
        lon = np.arctan2(x, -y)
    else:
        lon = np.arctan2(x, y)

    R = np.hypot(x, y)
    tanHalfZ = R/(k0*_C0(a, e2))
    chi = np.pi/2 - 2*np.arctan(tanHalfZ)

    s2chi, s4chi, s6chi, s8chi = evenSineMultiples(chi)
    phi = chi + Abar*s2chi + Bbar*s4chi + Cbar*s6chi + Dbar*s8chi
    phi = np.where(isPole, np.pi/2, phi)

    if hemisphere == Hemisphere.NORTH:
        lat = phi[()]
    else:
        lat = -phi[()]
    lon = np.where(isPole, 0.0, lon)[()]
    return lat, lon
