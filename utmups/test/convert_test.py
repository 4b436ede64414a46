# Copyright European Space Agency, 2013

import io
import os
import tempfile
import unittest
from unittest import mock
from numpy.testing import assert_almost_equal

from utmups.cli.convert import convertForward, convertInverse, main, parseargs
from utmups.ellipsoid import ellipsoid
from utmups.grid import InvalidZoneError
from utmups.projection.dmatm import DMA

WGS84 = ellipsoid('WE')
INT24 = ellipsoid('IN')

class Test(unittest.TestCase):

    def testForward(self):
        fields = convertForward('45 73', INT24.a, INT24.e2, DMA).split()
        self.assertEqual(len(fields), 4)
        assert_almost_equal(float(fields[0]), 8100702.90, 2)
        self.assertEqual(fields[1:], ['500000.000', '38', 'N'])

        fields = convertForward('45d00m00s 73:00:00', INT24.a, INT24.e2, DMA,
                                withConvergenceAndScale=True, precision=1).split()
        self.assertEqual(len(fields), 6)
        self.assertEqual(fields[1], '500000.0')
        self.assertEqual(float(fields[4]), 0)
        self.assertEqual(fields[5], '0.9996000000')

        fields = convertForward('0 -89', WGS84.a, WGS84.e2).split()
        self.assertEqual(fields[2:], ['SP', 'S'])

    def testInverse(self):
        out = convertInverse('43 N 9000000 500000', WGS84.a, WGS84.e2)
        self.assertEqual(out.split()[1], '75.000000000')

        out = convertInverse('np n 2000000 2000000', WGS84.a, WGS84.e2)
        self.assertEqual(out, '90.000000000 0.000000000')

        out = convertInverse('12 N 8000000 400000', INT24.a, INT24.e2, DMA, dms=True)
        lat, lon = out.split()
        self.assertTrue(lat.startswith('+72:04:3'))
        self.assertTrue(lon.startswith('-113:54:4'))

    def testInvalidRecords(self):
        with self.assertRaises(ValueError):
            convertForward('45', WGS84.a, WGS84.e2)
        with self.assertRaises(ValueError):
            convertForward('0 95', WGS84.a, WGS84.e2)
        with self.assertRaises(InvalidZoneError):
            convertInverse('61 N 0 500000', WGS84.a, WGS84.e2)
        with self.assertRaises(ValueError):
            convertInverse('31 X 0 500000', WGS84.a, WGS84.e2)
        with self.assertRaises(ValueError):
            convertInverse('31 N north 500000', WGS84.a, WGS84.e2)

    def _run(self, argv, content):
        fd, path = tempfile.mkstemp(suffix='.txt')
        with os.fdopen(fd, 'w') as f:
            f.write(content)
        try:
            with mock.patch('sys.stdout', new_callable=io.StringIO) as stdout,\
                 mock.patch('sys.stderr', new_callable=io.StringIO) as stderr:
                try:
                    main(argv + [path])
                    status = 0
                except SystemExit as e:
                    status = e.code
            return status, stdout.getvalue(), stderr.getvalue()
        finally:
            os.remove(path)

    def testMain(self):
        status, out, err = self._run(['--ellipsoid', 'IN', '--legacy'], '# lon lat\n45 73\n\n3 0\n')
        self.assertEqual(status, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].endswith(' 500000.000 38 N'))
        self.assertEqual(lines[1], '0.000 500000.000 31 N')
        self.assertEqual(err, '')

    def testMainFailedRecord(self):
        status, out, err = self._run(['--inverse'], '31 N 0 500000\n99 N 0 0\n31 S 10000000 500000\n')
        self.assertEqual(status, 1)
        self.assertEqual(out.splitlines(), ['0.000000000 3.000000000'] * 2)
        self.assertIn('line 2', err)

    def testMainSphere(self):
        status, out, _ = self._run(['--radius', '6371000', '--convergence'], '3 0\n')
        self.assertEqual(status, 0)
        self.assertEqual(out.split()[2:4], ['31', 'N'])

    def testArguments(self):
        args = parseargs(['--ellipsoid', 'grs80'])
        self.assertEqual(args.ellipsoid.code, 'RF')
        with mock.patch('sys.stderr', new_callable=io.StringIO):
            for argv in [['--dms'], ['--inverse', '--convergence'], ['--ellipsoid', 'XX'],
                         ['--radius', '-1'], ['--radius', '1', '--ellipsoid', 'WE']]:
                with self.assertRaises(SystemExit):
                    parseargs(argv)

    def testDatumArgument(self):
        args = parseargs(['--datum', 'nas-c'])
        self.assertEqual(args.datum.code, 'NAS-C')
        self.assertEqual(args.ellipsoid.code, 'CC')

        args = parseargs([])
        self.assertIsNone(args.datum)
        self.assertEqual(args.ellipsoid.code, 'WE')

        with mock.patch('sys.stderr', new_callable=io.StringIO):
            for argv in [['--datum', 'XXX'], ['--datum', 'NAS-C', '--ellipsoid', 'WE'],
                         ['--datum', 'NAS-C', '--radius', '6371000']]:
                with self.assertRaises(SystemExit):
                    parseargs(argv)

    def testMainDatum(self):
        status, out, err = self._run(['--datum', 'EUR-M', '--legacy'], '45 73\n')
        self.assertEqual(status, 0)
        assert_almost_equal(float(out.split()[0]), 8100702.90, 2)
        self.assertTrue(out.rstrip().endswith(' 500000.000 38 N'))
        self.assertEqual(err, '')
