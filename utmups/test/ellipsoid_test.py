# Copyright European Space Agency, 2013

import unittest
from numpy.testing import assert_almost_equal

from utmups.ellipsoid import ellipsoid, ellipsoids, eccentricitySquared, Ellipsoid

class Test(unittest.TestCase):

    def testWGS84(self):
        e = ellipsoid('WE')
        self.assertEqual(e.a, 6378137)
        assert_almost_equal(e.e2, 0.00669437999014, 13)
        self.assertIs(ellipsoid('wgs84'), e)
        self.assertIs(ellipsoid('WGS-84'), e)

    def testTable(self):
        self.assertEqual(len(ellipsoids), 23)
        for code, e in ellipsoids.items():
            self.assertIsInstance(e, Ellipsoid)
            self.assertEqual(e.code, code)
            self.assertTrue(6377000 < e.a < 6379000, e.name)
            self.assertTrue(0.0066 < e.e2 < 0.0069, e.name)

        e = ellipsoid('in')
        self.assertEqual(e.name, 'International 1924')
        assert_almost_equal(e.e2, 0.006722670022, 12)
        self.assertIs(ellipsoid('INT24'), e)

    def testEccentricity(self):
        assert_almost_equal(eccentricitySquared(298.257222101), 0.006694380022901, 14)

    def testUnknown(self):
        with self.assertRaises(KeyError):
            ellipsoid('XX')

    def testReadOnly(self):
        with self.assertRaises(TypeError):
            ellipsoids['XX'] = Ellipsoid('Sphere', 'XX', 6371000, 0)
