# Copyright European Space Agency, 2013

import unittest
import numpy as np
from numpy.testing import assert_almost_equal, assert_array_almost_equal

from utmups.ellipsoid import ellipsoid
from utmups.projection import Hemisphere
from utmups.projection.ps import ellipsoid_forward_ps, ellipsoid_forward_ps_with_convergence_and_scale,\
    ellipsoid_inverse_ps
from utmups.projection.sphere import sphere_forward_ps

WGS84 = ellipsoid('WE')

def dms(d, m, s):
    sign = -1 if d < 0 else 1
    return np.deg2rad(sign*(abs(d) + m/60 + s/3600))

class Test(unittest.TestCase):

    def testTable37(self):
        # DMA TM 8358.2, table 3-7, test point 1
        lat, lon = dms(84, 17, 14.042), dms(-132, 14, 52.761)
        N, E = ellipsoid_forward_ps(WGS84.a, WGS84.e2, 0.994, Hemisphere.NORTH, 2e6, 2e6, lat, lon)
        assert_almost_equal(N, 2426773.60, 1)
        assert_almost_equal(E, 1530125.78, 1)

        latR, lonR = ellipsoid_inverse_ps(WGS84.a, WGS84.e2, 0.994, Hemisphere.NORTH, 2e6, 2e6, N, E)
        assert_almost_equal(latR, lat, 10)
        assert_almost_equal(lonR, lon, 12)

    def testPole(self):
        for hemisphere, pole in [(Hemisphere.NORTH, np.pi/2), (Hemisphere.SOUTH, -np.pi/2)]:
            N, E, convergence, scale = ellipsoid_forward_ps_with_convergence_and_scale(
                WGS84.a, WGS84.e2, 0.994, hemisphere, 2e6, 2e6, pole, 0)
            assert_almost_equal(N, 2e6, 6)
            assert_almost_equal(E, 2e6, 6)
            self.assertEqual(scale, 0.994)
            self.assertEqual(convergence, 0)

            lat, lon = ellipsoid_inverse_ps(WGS84.a, WGS84.e2, 0.994, hemisphere, 2e6, 2e6, 2e6, 2e6)
            self.assertEqual(lat, pole)
            self.assertEqual(lon, 0)

    def testRoundTrip(self):
        for hemisphere, lats in [(Hemisphere.NORTH, np.linspace(80, 89.99, 12)),
                                 (Hemisphere.SOUTH, np.linspace(-89.99, -76, 12))]:
            lat, lon = np.meshgrid(np.deg2rad(lats), np.deg2rad(np.linspace(-179, 180, 11)))
            N, E = ellipsoid_forward_ps(WGS84.a, WGS84.e2, 0.994, hemisphere, 2e6, 2e6, lat, lon)
            latR, lonR = ellipsoid_inverse_ps(WGS84.a, WGS84.e2, 0.994, hemisphere, 2e6, 2e6, N, E)
            assert_array_almost_equal(latR, lat, 9)
            assert_array_almost_equal(lonR, lon, 9)

    def testConvergenceAndScale(self):
        lat, lon = np.deg2rad(-85), np.deg2rad(30)
        N, E, convergence, scale = ellipsoid_forward_ps_with_convergence_and_scale(
            WGS84.a, WGS84.e2, 0.994, Hemisphere.SOUTH, 2e6, 2e6, lat, lon)
        NRef, ERef = ellipsoid_forward_ps(WGS84.a, WGS84.e2, 0.994, Hemisphere.SOUTH, 2e6, 2e6, lat, lon)
        self.assertEqual(N, NRef)
        self.assertEqual(E, ERef)
        assert_almost_equal(convergence, -lon)
        # scale grows away from the pole and is close to the spherical value
        self.assertGreater(scale, 0.994)
        assert_almost_equal(scale, 2*0.994/(1 - np.sin(lat)), 4)

    def testCloseToSphere(self):
        # with a tiny eccentricity the ellipsoidal and spherical projections coincide
        a, e2 = 6371000., 1e-12
        lat, lon = np.deg2rad(70), np.deg2rad(-100)
        N, E = ellipsoid_forward_ps(a, e2, 0.994, Hemisphere.NORTH, 0, 0, lat, lon)
        NRef, ERef = sphere_forward_ps(a, 0.994, Hemisphere.NORTH, 0, 0, lat, lon)
        assert_almost_equal(N, NRef, 3)
        assert_almost_equal(E, ERef, 3)
