# Copyright European Space Agency, 2013

import unittest
import numpy as np
from numpy.testing import assert_almost_equal, assert_array_almost_equal

from utmups.ellipsoid import ellipsoid
from utmups.projection.tm import ellipsoid_forward_tm, ellipsoid_forward_tm_with_convergence_and_scale
from utmups.projection.dmatm import legacy_ellipsoid_forward_tm,\
    legacy_ellipsoid_forward_tm_with_convergence_and_scale, legacy_ellipsoid_inverse_tm,\
    meridionalArc, NonConvergenceError, DMATM, DMA

WGS84 = ellipsoid('WE')
INT24 = ellipsoid('IN')

def dms(d, m, s):
    sign = -1 if d < 0 else 1
    return np.deg2rad(sign*(abs(d) + m/60 + s/3600))

class Test(unittest.TestCase):

    def testTable211(self):
        # DMA TM 8358.2, table 2-11, test points 1 and 3
        N, E = legacy_ellipsoid_forward_tm(INT24.a, INT24.e2, 0.9996, np.deg2rad(45), 0, 500000,
                                           np.deg2rad(73), np.deg2rad(45))
        assert_almost_equal(N, 8100702.90, 2)
        assert_almost_equal(E, 500000.00, 2)

        N, E = legacy_ellipsoid_forward_tm(INT24.a, INT24.e2, 0.9996, np.deg2rad(-111), 0, 500000,
                                           dms(72, 4, 32.110), dms(-113, 54, 43.321))
        assert_almost_equal(N, 8000000, 1)
        assert_almost_equal(E, 400000, 1)

    def testInverseTable211(self):
        lat, lon = legacy_ellipsoid_inverse_tm(INT24.a, INT24.e2, 0.9996, np.deg2rad(-111), 0, 500000,
                                               8000000, 400000)
        assert_almost_equal(lat, dms(72, 4, 32.110), 7)
        assert_almost_equal(lon, dms(-113, 54, 43.321), 7)

        lat, lon = legacy_ellipsoid_inverse_tm(INT24.a, INT24.e2, 0.9996, np.deg2rad(45), 0, 500000,
                                               8100702.90, 500000)
        assert_almost_equal(lat, np.deg2rad(73), 8)
        assert_almost_equal(lon, np.deg2rad(45), 12)

    def testMeridionalArc(self):
        assert_almost_equal(meridionalArc(WGS84.a, WGS84.e2, 0), 0)
        assert_almost_equal(meridionalArc(WGS84.a, WGS84.e2, np.pi/2), 10001965.729, 3)
        arc = meridionalArc(WGS84.a, WGS84.e2, np.deg2rad([-30, 30]))
        assert_almost_equal(arc[0], -arc[1])

    def testAgreesWithKrueger(self):
        lat, lon = np.meshgrid(np.deg2rad([-79, -60, -20, 0, 30, 60, 83]),
                               np.deg2rad([-3, -1, 0.5, 2.9]))
        args = (WGS84.a, WGS84.e2, 0.9996, 0, 10000000, 500000, lat, lon)
        N, E, convergence, scale = legacy_ellipsoid_forward_tm_with_convergence_and_scale(*args)
        NRef, ERef, convergenceRef, scaleRef = ellipsoid_forward_tm_with_convergence_and_scale(*args)
        assert_array_almost_equal(N, NRef, 2)
        assert_array_almost_equal(E, ERef, 2)
        assert_array_almost_equal(convergence, convergenceRef, 8)
        assert_array_almost_equal(scale, scaleRef, 7)

        N2, E2 = legacy_ellipsoid_forward_tm(*args)
        assert_array_almost_equal(N2, N)
        assert_array_almost_equal(E2, E)

        N2, E2 = ellipsoid_forward_tm(*args)
        assert_array_almost_equal(N2, NRef)

    def testRoundTrip(self):
        lat, lon = np.meshgrid(np.deg2rad(np.linspace(-80, 84, 30)),
                               np.deg2rad(np.linspace(-3, 3, 7)))
        cm = np.deg2rad(27)
        lon += cm
        for fn in [0, 10000000]:
            N, E = legacy_ellipsoid_forward_tm(WGS84.a, WGS84.e2, 0.9996, cm, fn, 500000, lat, lon)
            latR, lonR = legacy_ellipsoid_inverse_tm(WGS84.a, WGS84.e2, 0.9996, cm, fn, 500000, N, E)
            assert_array_almost_equal(latR, lat, 8)
            assert_array_almost_equal(lonR, lon, 8)

    def testNonConvergence(self):
        with self.assertRaises(NonConvergenceError):
            legacy_ellipsoid_inverse_tm(INT24.a, INT24.e2, 0.9996, np.deg2rad(45), 0, 500000,
                                        8100702.90, 500000, maxIterations=1)

        with self.assertRaises(ArithmeticError):
            DMATM(maxIterations=1).inverse(INT24.a, INT24.e2, 0.9996, np.deg2rad(45), 0, 500000,
                                           8100702.90, 500000)

    def testEquator(self):
        lat, lon = DMA.inverse(WGS84.a, WGS84.e2, 0.9996, 0, 0, 500000, 0, 500000)
        self.assertEqual(lat, 0)
        self.assertEqual(lon, 0)

    def testInterface(self):
        self.assertEqual(repr(DMA), '<TransverseMercator dma>')
        self.assertEqual(DMA.maxIterations, 20)
        self.assertEqual(DMA.tolerance, 0.001)
