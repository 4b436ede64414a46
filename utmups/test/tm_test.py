# Copyright European Space Agency, 2013

import unittest
import numpy as np
from numpy.testing import assert_almost_equal, assert_array_almost_equal

from utmups.ellipsoid import ellipsoid
from utmups.projection.tm import ellipsoid_forward_tm, ellipsoid_forward_tm_with_convergence_and_scale,\
    ellipsoid_inverse_tm, KRUEGER, TransverseMercator

WGS84 = ellipsoid('WE')
INT24 = ellipsoid('IN')

def dms(d, m, s):
    sign = -1 if d < 0 else 1
    return np.deg2rad(sign*(abs(d) + m/60 + s/3600))

class Test(unittest.TestCase):

    def testCentralMeridian(self):
        # DMA TM 8358.2, table 2-11, test point 1
        N, E = ellipsoid_forward_tm(INT24.a, INT24.e2, 0.9996, np.deg2rad(45), 0, 500000,
                                    np.deg2rad(73), np.deg2rad(45))
        assert_almost_equal(N, 8100702.90, 2)
        self.assertEqual(E, 500000)

    def testOffCentralMeridian(self):
        # DMA TM 8358.2, table 2-11, test point 3
        N, E = ellipsoid_forward_tm(INT24.a, INT24.e2, 0.9996, np.deg2rad(-111), 0, 500000,
                                    dms(72, 4, 32.110), dms(-113, 54, 43.321))
        assert_almost_equal(N, 8000000, 1)
        assert_almost_equal(E, 400000, 1)

    def testRoundTrip(self):
        lat, lon = np.meshgrid(np.deg2rad(np.linspace(-80, 84, 42)),
                               np.deg2rad(np.linspace(-4, 4, 17)))
        cm = np.deg2rad(-3)
        lon += cm
        N, E = ellipsoid_forward_tm(WGS84.a, WGS84.e2, 0.9996, cm, 10000000, 500000, lat, lon)
        latR, lonR = ellipsoid_inverse_tm(WGS84.a, WGS84.e2, 0.9996, cm, 10000000, 500000, N, E)
        assert_array_almost_equal(latR, lat, 9)
        assert_array_almost_equal(lonR, lon, 9)

    def testScaleAndConvergenceOnCentralMeridian(self):
        lat = np.deg2rad(np.linspace(-80, 84, 20))
        N, E, convergence, scale = ellipsoid_forward_tm_with_convergence_and_scale(
            WGS84.a, WGS84.e2, 0.9996, 0, 0, 500000, lat, 0)
        assert_array_almost_equal(convergence, 0)
        assert_array_almost_equal(scale, 0.9996, 9)

        NRef, ERef = ellipsoid_forward_tm(WGS84.a, WGS84.e2, 0.9996, 0, 0, 500000, lat, 0)
        assert_array_almost_equal(N, NRef)
        assert_array_almost_equal(E, ERef)

    def testScaleAndConvergenceOffCentralMeridian(self):
        lat, dlon = np.deg2rad(45), np.deg2rad(3)
        _, _, convergence, scale = ellipsoid_forward_tm_with_convergence_and_scale(
            WGS84.a, WGS84.e2, 0.9996, 0, 0, 500000, lat, dlon)
        # convergence has the sign of the longitude offset in the north
        self.assertGreater(convergence, 0)
        assert_almost_equal(convergence, np.arctan(np.tan(dlon)*np.sin(lat)), 4)
        self.assertGreater(scale, 0.9996)

        _, _, convergence, _ = ellipsoid_forward_tm_with_convergence_and_scale(
            WGS84.a, WGS84.e2, 0.9996, 0, 0, 500000, -lat, dlon)
        self.assertLess(convergence, 0)

    def testInterface(self):
        self.assertIsInstance(KRUEGER, TransverseMercator)
        self.assertEqual(repr(KRUEGER), '<TransverseMercator krueger>')
        N, E = KRUEGER.forward(WGS84.a, WGS84.e2, 0.9996, 0, 0, 500000, 0.5, 0.02)
        lat, lon = KRUEGER.inverse(WGS84.a, WGS84.e2, 0.9996, 0, 0, 500000, N, E)
        assert_almost_equal(lat, 0.5, 12)
        assert_almost_equal(lon, 0.02, 12)
        with self.assertRaises(TypeError):
            TransverseMercator()
