# Copyright European Space Agency, 2013

"""
Transverse Mercator projection of an ellipsoid using the Krüger series
to fourth order in the third flattening, as given in

- C. F. F. Karney, "Transverse Mercator with an accuracy of a few nanometers",
  J. Geodesy 85(8), 475-485, 2011, https://arxiv.org/abs/1002.1417
- K. Kawase, "A General Formula for Calculating Meridian Arc Length and its
  Application to Coordinate Conversion in the Gauss-Krüger Projection",
  Bulletin of the GSI 59, 2011 and "Concise Derivation of Extensive Coordinate
  Conversion Formulae in the Gauss-Krüger Projection", Bulletin of the GSI 60, 2013

Forward and inverse transforms are closed-form, there is no iteration.
Within the width of a UTM zone the round trip is exact to well below
a micrometer.

This module also defines the :class:`TransverseMercator` interface
which is implemented by this formulation (:data:`KRUEGER`) and by the
legacy formulation of :mod:`utmups.projection.dmatm`.
"""

from abc import ABCMeta, abstractmethod

import numpy as np

from utmups.util.series import poly4, sumMultipleAngleSeries, sumMultipleAngleDerivatives

class TransverseMercator(metaclass=ABCMeta):
    """
    An ellipsoidal transverse Mercator formulation.

    All methods take the ellipsoid as semi-major axis `a` and squared
    eccentricity `e2`, the scale factor `k0` on the central meridian,
    the central meridian in radians, and the false northing and
    easting in units of `a`.
    """

    name = None

    @abstractmethod
    def forward(self, a, e2, k0, centralMeridian, falseNorthing, falseEasting, lat, lon):
        """
        Project geographic coordinates.

        :param lat, lon: in radians
        :rtype: tuple (northing, easting)
        """

    @abstractmethod
    def forwardWithConvergenceAndScale(self, a, e2, k0, centralMeridian, falseNorthing, falseEasting,
                                       lat, lon):
        """
        Project geographic coordinates and return the grid convergence
        (radians, grid north clockwise from true north) and the point scale.

        :rtype: tuple (northing, easting, convergence, scale)
        """

    @abstractmethod
    def inverse(self, a, e2, k0, centralMeridian, falseNorthing, falseEasting, N, E):
        """
        Convert grid coordinates back to geographic coordinates.

        :rtype: tuple (lat, lon) in radians
        """

    def __repr__(self):
        return '<TransverseMercator ' + self.name + '>'

def _thirdFlattening(e2):
    f = 1 - np.sqrt(1 - e2)
    return f/(2 - f)

def _rectifyingRadius(a, n):
    return a/(1 + n)*poly4(n*n, 1., 1./4, 1./64, 1./256, 25./16384)

def _alpha(n):
    return (poly4(n, 0, 1./2,  -2./3,   5./16,       41./180),
            poly4(n, 0,    0, 13./48,   -3./5,     557./1440),
            poly4(n, 0,    0,      0, 61./240,     -103./140),
            poly4(n, 0,    0,      0,       0, 49561./161280))

def _beta(n):
    return (poly4(n, 0, 1./2,  -2./3,  37./96,       -1./360),
            poly4(n, 0,    0,  1./48,   1./15,    -437./1440),
            poly4(n, 0,    0,      0, 17./480,      -37./840),
            poly4(n, 0,    0,      0,       0,  4397./161280))

def _delta(n):
    return (poly4(n, 0,   2.,  -2./3,     -2.,       116./45),
            poly4(n, 0,    0,   7./3,   -8./5,      -227./45),
            poly4(n, 0,    0,      0,  56./15,      -136./35),
            poly4(n, 0,    0,      0,       0,     4279./630))

def _conformal(n, lat, dlon):
    """
    Return the tangent of the conformal latitude and the Gauss-Schreiber
    transverse coordinates (xi, eta).
    """
    sinLat = np.sin(lat)
    tFactor = 2*np.sqrt(n)/(1 + n)
    t = np.sinh(np.arctanh(sinLat) - tFactor*np.arctanh(tFactor*sinLat))
    xi = np.arctan(t/np.cos(dlon))
    eta = np.arctanh(np.sin(dlon)/np.sqrt(1 + t*t))
    return t, xi, eta

def ellipsoid_forward_tm(a, e2, k0, centralMeridian, falseNorthing, falseEasting, lat, lon):
    """
    Project geographic coordinates with the ellipsoidal transverse
    Mercator projection (Krüger series).

    :param a: semi-major axis
    :param e2: squared eccentricity
    :param k0: scale factor on the central meridian
    :param centralMeridian: in radians
    :param falseNorthing, falseEasting: in units of `a`
    :param lat, lon: in radians
    :rtype: tuple (northing, easting)
    """
    n = _thirdFlattening(e2)
    k0A = k0*_rectifyingRadius(a, n)
    _, xi, eta = _conformal(n, lat, lon - centralMeridian)
    xiSum, etaSum = sumMultipleAngleSeries(_alpha(n), xi, eta)
    E = falseEasting + k0A*(eta + etaSum)
    N = falseNorthing + k0A*(xi + xiSum)
    return N, E

def ellipsoid_forward_tm_with_convergence_and_scale(a, e2, k0, centralMeridian, falseNorthing, falseEasting,
                                                    lat, lon):
    """
    As :func:`ellipsoid_forward_tm` but additionally returns the grid
    convergence and the point scale, derived from the derivatives
    of the Krüger series.

    :rtype: tuple (northing, easting, convergence, scale)
    """
    n = _thirdFlattening(e2)
    A = _rectifyingRadius(a, n)
    alpha = _alpha(n)
    dlon = lon - centralMeridian
    t, xi, eta = _conformal(n, lat, dlon)
    xiSum, etaSum = sumMultipleAngleSeries(alpha, xi, eta)
    E = falseEasting + k0*A*(eta + etaSum)
    N = falseNorthing + k0*A*(xi + xiSum)

    sigma, tau = sumMultipleAngleDerivatives(alpha, xi, eta)
    tanDlon = np.tan(dlon)
    sqrt1t2 = np.sqrt(1 + t*t)
    convergence = np.arctan((tau*sqrt1t2 + sigma*t*tanDlon)/
                            (sigma*sqrt1t2 - tau*t*tanDlon))
    scale = k0*A/a*np.sqrt((1 + np.square((1 - n)/(1 + n)*np.tan(lat)))*(sigma*sigma + tau*tau)/
                           (t*t + np.square(np.cos(dlon))))
    return N, E, convergence, scale

def ellipsoid_inverse_tm(a, e2, k0, centralMeridian, falseNorthing, falseEasting, N, E):
    """
    Inverse of :func:`ellipsoid_forward_tm`.

    The correction series is inverted with the beta coefficients, the
    resulting conformal latitude is converted to geographic latitude with
    a second series.

    :rtype: tuple (lat, lon) in radians
    """
    n = _thirdFlattening(e2)
    k0A = k0*_rectifyingRadius(a, n)

    xi = (N - falseNorthing)/k0A
    eta = (E - falseEasting)/k0A

    xiSum, etaSum = sumMultipleAngleSeries(_beta(n), xi, eta)
    xiPrime = xi - xiSum
    etaPrime = eta - etaSum

    chi = np.arcsin(np.sin(xiPrime)/np.cosh(etaPrime))
    d1, d2, d3, d4 = _delta(n)
    lat = chi + d1*np.sin(2*chi) + d2*np.sin(4*chi) + d3*np.sin(6*chi) + d4*np.sin(8*chi)
    lon = centralMeridian + np.arctan(np.sinh(etaPrime)/np.cos(xiPrime))
    return lat, lon

class KruegerTM(TransverseMercator):
    """
    Closed-form transverse Mercator after Karney (2011) and Kawase (2011, 2013).
    """
    name = 'krueger'

    def forward(self, a, e2, k0, centralMeridian, falseNorthing, falseEasting, lat, lon):
        return ellipsoid_forward_tm(a, e2, k0, centralMeridian, falseNorthing, falseEasting, lat, lon)

    def forwardWithConvergenceAndScale(self, a, e2, k0, centralMeridian, falseNorthing, falseEasting,
                                       lat, lon):
        return ellipsoid_forward_tm_with_convergence_and_scale(a, e2, k0, centralMeridian,
                                                               falseNorthing, falseEasting, lat, lon)

    def inverse(self, a, e2, k0, centralMeridian, falseNorthing, falseEasting, N, E):
        return ellipsoid_inverse_tm(a, e2, k0, centralMeridian, falseNorthing, falseEasting, N, E)

KRUEGER = KruegerTM()
