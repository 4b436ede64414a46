# Copyright European Space Agency, 2013

"""
Legacy transverse Mercator projection of an ellipsoid as described in
"The Universal Grids", Defense Mapping Agency Technical Manual (DMATM) 8358.2.

The forward transform is a series in even powers of the longitude offset
from the central meridian. The inverse transform first iterates to find the
footpoint latitude, i.e. the latitude on the central meridian whose
meridional distance equals the northing, and then applies a second series.
The variable names follow the DMA manual.

This formulation is superseded by :mod:`utmups.projection.tm` but is kept
for reproducing historical outputs, e.g. the worked examples of the manual
(section 2-11) which it matches to 0.01 meter.
"""

import logging

import numpy as np

from utmups.projection.tm import TransverseMercator
from utmups.util.series import evenSineMultiples

TM_TO_GEOGRAPHIC_TOLERANCE_M = 0.001
"""Tolerance of the footpoint latitude iteration, in meters on the ground."""

MAX_ITERATIONS = 20

class NonConvergenceError(ArithmeticError):
    """
    Raised when the footpoint latitude iteration does not reach
    the requested tolerance within the allowed number of iterations.
    """

def _arcCoefficients(a, n):
    n2 = n*n
    n3 = n2*n
    n4 = n3*n
    n5 = n4*n
    Ap = a*(1 - n + 5*(n2-n3)/4 + 81*(n4-n5)/64)
    Bp = 3*a*(n - n2 + 7*(n3-n4)/8 + 55*n5/64)/2
    Cp = 15*a*(n2 - n3 + 3*(n4-n5)/4)/16
    Dp = 35*a*(n3 - n4 + 11*n5/16)/48
    Ep = 315*a*(n4-n5)/512
    return Ap, Bp, Cp, Dp, Ep

def meridionalArc(a, e2, lat):
    """
    Return the distance along the meridian from the equator
    to the given latitude(s).

    :param a: semi-major axis
    :param e2: squared eccentricity
    :param lat: in radians
    :rtype: distance in units of `a`
    """
    f = 1 - np.sqrt(1 - e2)
    n = f/(2 - f)
    return _meridionalArc(_arcCoefficients(a, n), lat)

def _meridionalArc(coeffs, phi):
    Ap, Bp, Cp, Dp, Ep = coeffs
    s2phi, s4phi, s6phi, s8phi = evenSineMultiples(phi)
    return Ap*phi - Bp*s2phi + Cp*s4phi - Dp*s6phi + Ep*s8phi

def legacy_ellipsoid_forward_tm(a, e2, k0, centralMeridian, falseNorthing, falseEasting, lat, lon):
    """
    Project geographic coordinates with the DMA transverse Mercator series.

    :param a: semi-major axis
    :param e2: squared eccentricity
    :param k0: scale factor on the central meridian
    :param centralMeridian: in radians
    :param falseNorthing, falseEasting: in units of `a`
    :param lat, lon: in radians
    :rtype: tuple (northing, easting)
    """
    ep2 = e2/(1 - e2)
    f = 1 - np.sqrt(1 - e2)
    n = f/(2 - f)

    phi = lat
    s = np.sin(phi)
    c = np.cos(phi)
    s2 = s*s
    c2 = c*c

    nu = a/np.sqrt(1 - e2*s2)

    S = _meridionalArc(_arcCoefficients(a, n), phi)

    nuck0 = nu*c*k0
    nusck0 = nu*s*c*k0

    c4 = c2*c2
    c6 = c4*c2

    t = s/c
    t2 = t*t
    t4 = t2*t2
    t6 = t4*t2

    epc2 = ep2*c2
    epc4 = epc2*epc2
    epc6 = epc4*epc2
    epc8 = epc6*epc2

    T1 = S*k0
    T2 = nusck0/2
    T3 = nusck0*c2*(5 - t2 + 9*epc2 + 4*epc4)/24
    T4 = nusck0*c4*(61 - 58*t2 + t4 + 270*epc2 - 330*t2*epc2
                    + 445*epc4 + 324*epc6 - 680*t2*epc4
                    + 88*epc8 - 660*t2*epc6 - 192*t2*epc8)/720
    T5 = nusck0*c6*(1385 - 3111*t2 + 543*t4 - t6)/40320

    T6 = nuck0
    T7 = nuck0*c2*(1 - t2 + epc2)/6
    T8 = nuck0*c4*(5 - 18*t2 + t4 + 14*epc2 - 58*t2*epc2 + 13*epc4
                   + 4*epc6 - 64*t2*epc4 - 24*t2*epc6)/120
    T9 = nuck0*c6*(61 - 479*t2 + 179*t4 - t6)/5040

    dl = lon - centralMeridian
    dl2 = dl*dl
    dl4 = dl2*dl2
    dl6 = dl4*dl2
    dl8 = dl6*dl2

    N = falseNorthing + T1 + dl2*T2 + dl4*T3 + dl6*T4 + dl8*T5
    E = falseEasting + dl*(T6 + dl2*T7 + dl4*T8 + dl6*T9)
    return N, E

def legacy_ellipsoid_forward_tm_with_convergence_and_scale(a, e2, k0, centralMeridian,
                                                           falseNorthing, falseEasting, lat, lon):
    """
    As :func:`legacy_ellipsoid_forward_tm` but additionally returns the grid
    convergence and the point scale, both as series in the longitude offset.

    :rtype: tuple (northing, easting, convergence, scale)
    """
    N, E = legacy_ellipsoid_forward_tm(a, e2, k0, centralMeridian, falseNorthing, falseEasting, lat, lon)

    ep2 = e2/(1 - e2)
    s = np.sin(lat)
    c = np.cos(lat)
    c2 = c*c
    c4 = c2*c2
    t2 = np.square(np.tan(lat))
    t4 = t2*t2
    epc2 = ep2*c2
    epc4 = epc2*epc2
    epc6 = epc4*epc2

    dl = lon - centralMeridian
    dl2 = dl*dl
    dl4 = dl2*dl2
    dl6 = dl4*dl2

    convergence = dl*s*(1 + dl2*c2*(1 + 3*epc2 + 2*epc4)/3
                        + dl4*c4*(2 - t2)/15)
    scale = k0*(1 + dl2*c2*(1 + epc2)/2
                + dl4*c4*(5 - 4*t2 + 14*epc2 + 13*epc4 - 28*t2*epc2
                          + 4*epc6 - 48*t2*epc4 - 24*t2*epc6)/24
                + dl6*c4*c2*(61 - 148*t2 + 16*t4)/720)
    return N, E, convergence, scale

def legacy_ellipsoid_inverse_tm(a, e2, k0, centralMeridian, falseNorthing, falseEasting, N, E,
                                tolerance=TM_TO_GEOGRAPHIC_TOLERANCE_M, maxIterations=MAX_ITERATIONS):
    """
    Inverse of :func:`legacy_ellipsoid_forward_tm`.

    :param tolerance: maximum difference in meters between the northing and
        the meridional distance of the footpoint latitude at which the
        iteration stops
    :param maxIterations: maximum number of evaluations of the meridional distance
    :rtype: tuple (lat, lon) in radians
    :raise NonConvergenceError: if the tolerance is not reached within `maxIterations`
    """
    ep2 = e2/(1 - e2)
    f = 1 - np.sqrt(1 - e2)
    n = f/(2 - f)
    b = a*(1 - f)

    x = E - falseEasting
    y = N - falseNorthing

    arcCoeffs = _arcCoefficients(a, n)

    # footpoint latitude, denoted as phi prime in DMA 8358.2
    phi = y/b/k0
    for iteration in range(1, maxIterations + 1):
        T1 = _meridionalArc(arcCoeffs, phi)*k0
        converged = np.abs(T1 - y) < tolerance
        logging.debug('footpoint iteration ' + str(iteration) + ': residual ' +
                      str(np.max(np.abs(T1 - y))) + 'm')
        if np.all(converged):
            break
        with np.errstate(invalid='ignore', divide='ignore'):
            phi = np.where(converged, phi, phi*y/T1)[()]
    else:
        raise NonConvergenceError('Footpoint latitude did not converge to ' + str(tolerance) +
                                  'm within ' + str(maxIterations) + ' iterations (northing: ' +
                                  str(N) + ')')

    s = np.sin(phi)
    s2 = s*s

    nu = a/np.sqrt(1 - e2*s2)
    rho = nu/(1 - e2*s2)*(1 - e2)

    c = np.cos(phi)
    c2 = c*c

    t = s/c
    t2 = t*t
    t4 = t2*t2
    t6 = t4*t2

    nuk0 = nu*k0
    nuk02 = nuk0*nuk0
    nuk04 = nuk02*nuk02
    nuk06 = nuk04*nuk02

    t_rhonuk0k0 = t/(rho*nuk0*k0)
    _nuck0 = 1/(nu*c*k0)

    epc2 = ep2*c2
    epc4 = epc2*epc2
    epc6 = epc4*epc2
    epc8 = epc6*epc2

    T10 = t_rhonuk0k0/2
    T11 = t_rhonuk0k0/nuk02*(5 + 3*t2 + epc2 - 4*epc4 - 9*t2*epc2)/24
    T12 = t_rhonuk0k0/nuk04*(61 + 90*t2 + 46*epc2 + 45*t4 - 252*t2*epc2
                             - 3*epc4 + 100*epc6 - 66*t2*epc4
                             - 90*t4*epc2 + 88*epc8 + 225*t4*epc4
                             + 84*t2*epc6 - 192*t2*epc8)/720
    T13 = t_rhonuk0k0/nuk06*(1385 + 3633*t2 + 4095*t4 + 1575*t6)/40320

    T14 = _nuck0
    T15 = _nuck0/nuk02*(1 + 2*t2 + epc2)/6
    T16 = _nuck0/nuk04*(5 + 6*epc2 + 28*t2 - 3*epc4 + 8*t2*epc2
                        + 24*t4 - 4*epc6 + 4*t2*epc4 + 24*t2*epc6)/120
    T17 = _nuck0/nuk06*(61 + 662*t2 + 1320*t4 + 720*t6)/5040

    x2 = x*x
    x4 = x2*x2
    x6 = x4*x2
    x8 = x6*x2

    lat = phi - x2*T10 + x4*T11 - x6*T12 + x8*T13
    lon = centralMeridian + x*(T14 - x2*T15 + x4*T16 - x6*T17)
    return lat, lon

class DMATM(TransverseMercator):
    """
    Series transverse Mercator of DMA TM 8358.2 with iterative inverse.

    :param tolerance: see :func:`legacy_ellipsoid_inverse_tm`
    :param maxIterations: see :func:`legacy_ellipsoid_inverse_tm`
    """
    name = 'dma'

    def __init__(self, tolerance=TM_TO_GEOGRAPHIC_TOLERANCE_M, maxIterations=MAX_ITERATIONS):
        self.tolerance = tolerance
        self.maxIterations = maxIterations

    def forward(self, a, e2, k0, centralMeridian, falseNorthing, falseEasting, lat, lon):
        return legacy_ellipsoid_forward_tm(a, e2, k0, centralMeridian, falseNorthing, falseEasting,
                                           lat, lon)

    def forwardWithConvergenceAndScale(self, a, e2, k0, centralMeridian, falseNorthing, falseEasting,
                                       lat, lon):
        return legacy_ellipsoid_forward_tm_with_convergence_and_scale(a, e2, k0, centralMeridian,
                                                                      falseNorthing, falseEasting,
                                                                      lat, lon)

    def inverse(self, a, e2, k0, centralMeridian, falseNorthing, falseEasting, N, E):
        return legacy_ellipsoid_inverse_tm(a, e2, k0, centralMeridian, falseNorthing, falseEasting,
                                           N, E, self.tolerance, self.maxIterations)

DMA = DMATM()
