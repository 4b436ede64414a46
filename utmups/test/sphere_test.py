# Copyright European Space Agency, 2013

import unittest
import numpy as np
from numpy.testing import assert_almost_equal, assert_array_almost_equal

from utmups.projection import Hemisphere
from utmups.projection.sphere import sphere_forward_tm, sphere_forward_tm_with_convergence_and_scale,\
    sphere_inverse_tm, sphere_forward_ps, sphere_forward_ps_with_convergence_and_scale,\
    sphere_inverse_ps

R = 6371000.

class Test(unittest.TestCase):

    def testTMOnCentralMeridian(self):
        lat = np.deg2rad(45)
        cm = np.deg2rad(9)
        N, E = sphere_forward_tm(R, 1.0, cm, 0, 500000, lat, cm)
        assert_almost_equal(E, 500000)
        assert_almost_equal(N, R*lat, 6)

        _, _, convergence, scale = sphere_forward_tm_with_convergence_and_scale(R, 0.9996, cm, 0, 500000,
                                                                               lat, cm)
        assert_almost_equal(convergence, 0)
        assert_almost_equal(scale, 0.9996, 12)

    def testTMRoundTrip(self):
        lat, lon = np.meshgrid(np.deg2rad(np.linspace(-80, 84, 15)),
                               np.deg2rad(np.linspace(-6, 6, 9)))
        N, E = sphere_forward_tm(R, 0.9996, 0, 0, 500000, lat, lon)
        latR, lonR = sphere_inverse_tm(R, 0.9996, 0, 0, 500000, N, E)
        assert_array_almost_equal(latR, lat, 10)
        assert_array_almost_equal(lonR, lon, 10)

    def testTMScaleAndConvergence(self):
        lat, dlon = np.deg2rad(30), np.deg2rad(2)
        _, _, convergence, scale = sphere_forward_tm_with_convergence_and_scale(R, 1.0, 0, 0, 0, lat, dlon)
        assert_almost_equal(convergence, np.arctan(np.tan(dlon)*np.sin(lat)))
        self.assertGreater(scale, 1)

    def testPSPole(self):
        N, E = sphere_forward_ps(R, 0.994, Hemisphere.NORTH, 2e6, 2e6, np.pi/2, 1.0)
        assert_almost_equal(N, 2e6, 6)
        assert_almost_equal(E, 2e6, 6)

        _, _, _, scale = sphere_forward_ps_with_convergence_and_scale(R, 0.994, Hemisphere.SOUTH, 2e6, 2e6,
                                                                     -np.pi/2, 0)
        assert_almost_equal(scale, 0.994)

        lat, lon = sphere_inverse_ps(R, 0.994, Hemisphere.NORTH, 2e6, 2e6, 2e6, 2e6)
        assert_almost_equal(lat, np.pi/2)
        self.assertEqual(lon, 0)

        lat, lon = sphere_inverse_ps(R, 0.994, Hemisphere.SOUTH, 2e6, 2e6, 2e6, 2e6)
        assert_almost_equal(lat, -np.pi/2)
        self.assertEqual(lon, 0)

    def testPSOrientation(self):
        # longitude 0 points down the grid in the north, up in the south
        N, E = sphere_forward_ps(R, 1.0, Hemisphere.NORTH, 0, 0, np.deg2rad(80), 0)
        self.assertLess(N, 0)
        assert_almost_equal(E, 0)
        N, E = sphere_forward_ps(R, 1.0, Hemisphere.SOUTH, 0, 0, np.deg2rad(-80), 0)
        self.assertGreater(N, 0)
        N, E = sphere_forward_ps(R, 1.0, Hemisphere.NORTH, 0, 0, np.deg2rad(80), np.pi/2)
        self.assertGreater(E, 0)

        _, _, convergence, _ = sphere_forward_ps_with_convergence_and_scale(R, 1.0, Hemisphere.SOUTH, 0, 0,
                                                                           np.deg2rad(-80), 0.5)
        assert_almost_equal(convergence, -0.5)

    def testPSRoundTrip(self):
        for hemisphere, lats in [(Hemisphere.NORTH, np.linspace(60, 89.9, 10)),
                                 (Hemisphere.SOUTH, np.linspace(-89.9, -60, 10))]:
            lat, lon = np.meshgrid(np.deg2rad(lats), np.deg2rad(np.linspace(-179, 180, 13)))
            N, E = sphere_forward_ps(R, 0.994, hemisphere, 2e6, 2e6, lat, lon)
            latR, lonR = sphere_inverse_ps(R, 0.994, hemisphere, 2e6, 2e6, N, E)
            assert_array_almost_equal(latR, lat, 10)
            assert_array_almost_equal(lonR, lon, 10)

    def testInvalidHemisphere(self):
        with self.assertRaises(ValueError):
            sphere_forward_ps(R, 1.0, 'N', 0, 0, 1.0, 0)
