# Copyright European Space Agency, 2013

"""
Evaluation helpers for the truncated series used by the ellipsoidal
projections.
"""

import numpy as np
from numpy.polynomial import polynomial

def poly4(x, c0, c1, c2, c3, c4):
    """
    Evaluate the polynomial `c0 + c1*x + c2*x**2 + c3*x**3 + c4*x**4`
    with Horner's scheme.
    """
    return polynomial.polyval(x, [c0, c1, c2, c3, c4])

def evenSineMultiples(angle):
    """
    Return sin(2x), sin(4x), sin(6x) and sin(8x) for the given angle(s).

    Only sin(x) and cos(x) are evaluated, the multiples are built with
    the double-angle and addition identities.

    :param angle: radians, scalar or array
    :rtype: tuple (s2, s4, s6, s8)
    """
    s = np.sin(angle)
    c = np.cos(angle)
    s2 = 2.0*s*c
    c2 = c*c - s*s
    s4 = 2.0*s2*c2
    c4 = c2*c2 - s2*s2
    s6 = s4*c2 + s2*c4
    s8 = 2.0*s4*c4
    return s2, s4, s6, s8

def sumMultipleAngleSeries(coeffs, xi, eta):
    """
    Evaluate the complex multiple-angle series of the Krüger expansion.

    For coefficients c1..cn the two real sums

        sum_k c_k sin(2k xi) cosh(2k eta)
        sum_k c_k cos(2k xi) sinh(2k eta)

    are returned, i.e. the imaginary and real part of
    sum_k c_k sin(2k (xi + i eta)).

    :param coeffs: sequence of coefficients c1..cn
    :rtype: tuple (xiSum, etaSum)
    """
    xiSum = 0.0
    etaSum = 0.0
    for k, c in enumerate(coeffs, 1):
        xiSum = xiSum + c*np.sin(2*k*xi)*np.cosh(2*k*eta)
        etaSum = etaSum + c*np.cos(2*k*xi)*np.sinh(2*k*eta)
    return xiSum, etaSum

def sumMultipleAngleDerivatives(coeffs, xi, eta):
    """
    Evaluate the derivatives of :func:`sumMultipleAngleSeries` as used
    for the grid convergence and point scale.

    :rtype: tuple (sigma, tau) where
        sigma = 1 + sum_k 2k c_k cos(2k xi) cosh(2k eta) and
        tau = sum_k 2k c_k sin(2k xi) sinh(2k eta)
    """
    sigma = 1.0
    tau = 0.0
    for k, c in enumerate(coeffs, 1):
        sigma = sigma + 2*k*c*np.cos(2*k*xi)*np.cosh(2*k*eta)
        tau = tau + 2*k*c*np.sin(2*k*xi)*np.sinh(2*k*eta)
    return sigma, tau
