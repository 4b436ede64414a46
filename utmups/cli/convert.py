# Copyright European Space Agency, 2013

"""
Converts geographic coordinates to UTM/UPS grid coordinates and back,
one position per input line.
"""

import argparse
import logging
import sys

import numpy as np

from utmups._version import __version__
from utmups.angle import parseDMS, formatDMS
from utmups.datum import datum
from utmups.ellipsoid import ellipsoid
from utmups.grid import geographic_to_grid, grid_to_geographic, Zone, Hemisphere
from utmups.projection.tm import KRUEGER
from utmups.projection.dmatm import DMA

__all__ = ['main']

description = '''
This tool converts geographic coordinates to UTM/UPS grid coordinates
(or the reverse with --inverse). Positions are read line by line from
the given file or from standard input.

Forward input lines are "LON LAT" in decimal degrees or as degrees,
minutes and seconds (e.g. -113d54m43.321s or -113:54:43.321).
Output lines are "NORTHING EASTING ZONE HEMISPHERE" where ZONE is
1..60 for UTM and NP or SP for UPS.

Inverse input lines are "ZONE HEMISPHERE NORTHING EASTING",
output lines are "LAT LON".
'''

epilog = '''
Examples:

Convert a position on the WGS84 ellipsoid:
echo "45 73" | utmups-convert

Convert with the International 1924 ellipsoid and the DMA series,
including grid convergence and point scale:
echo "45 73" | utmups-convert --ellipsoid IN --legacy --convergence

Convert with the reference ellipsoid of the North American 1927 datum
(CONUS), the position itself is not shifted:
echo "-100 40" | utmups-convert --datum NAS-C

Convert grid coordinates back to degrees, minutes and seconds:
echo "12 N 8000000 400000" | utmups-convert --inverse --dms

Records which cannot be converted are reported on stderr and
the exit status is 1.
'''

def getParser():
    parser = argparse.ArgumentParser(prog='utmups-convert',
                                     epilog=epilog, description=description,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('file', metavar='FILE', nargs='?',
                        help='Input file, by default standard input')
    parser.add_argument('--inverse', help='Convert grid coordinates to geographic coordinates',
                        action='store_true')

    earth = parser.add_argument_group('earth model')
    earthModel = earth.add_mutually_exclusive_group()
    earthModel.add_argument('--ellipsoid', metavar='CODE',
                            help='Two-letter DMA ellipsoid code (e.g. IN, CC) or a name '
                                 'like WGS84 or GRS80, default is WE (WGS84)')
    earthModel.add_argument('--radius', metavar='R', type=float,
                            help='Use a sphere of the given radius in meters instead of an ellipsoid')
    earthModel.add_argument('--datum', metavar='CODE',
                            help='DMA local datum code (e.g. NAS-C, EUR-M), uses the reference '
                                 'ellipsoid of the datum. No datum shift is applied.')
    earth.add_argument('--legacy',
                       help='Use the transverse Mercator series of DMA TM 8358.2 instead of the '
                            'Krueger series. Only reproduces historical results, '
                            'the Krueger series is more accurate.',
                       action='store_true')

    outputArgs = parser.add_argument_group('output')
    outputArgs.add_argument('--dms', help='Print latitude and longitude as degrees, minutes '
                                          'and seconds (only with --inverse)',
                            action='store_true')
    outputArgs.add_argument('--convergence', help='Also print grid convergence in degrees and '
                                                  'point scale (not with --inverse)',
                            action='store_true')
    outputArgs.add_argument('--precision', type=int, default=3,
                            help='Decimal places of northing and easting in meters, default 3')

    parser.add_argument('--verbose', '-v', action='store_true', help='Print debug output')
    parser.add_argument('--version', action='version', version='utmups ' + __version__)
    return parser

def parseargs(argv=None):
    parser = getParser()
    args = parser.parse_args(argv)
    if args.radius is not None and args.radius <= 0:
        parser.error('--radius must be positive')
    if args.dms and not args.inverse:
        parser.error('--dms is only usable with --inverse')
    if args.convergence and args.inverse:
        parser.error('--convergence is not usable with --inverse')
    if args.radius is None:
        try:
            if args.datum:
                args.datum = datum(args.datum)
                args.ellipsoid = args.datum.ellipsoid
            else:
                args.ellipsoid = ellipsoid(args.ellipsoid or 'WE')
        except KeyError as e:
            parser.error(e.args[0])
    return args

def _fields(line, count):
    fields = line.split()
    if len(fields) != count:
        raise ValueError('Expected ' + str(count) + ' fields, got ' + str(len(fields)))
    return fields

def convertForward(line, a, e2, projection=KRUEGER, withConvergenceAndScale=False, precision=3):
    """
    Convert a "LON LAT" line to "NORTHING EASTING ZONE HEMISPHERE".

    :raise ValueError: if the line cannot be parsed or the position is invalid
    """
    lon, lat = map(parseDMS, _fields(line, 2))
    pos = geographic_to_grid(a, e2, lat, lon, withConvergenceAndScale=withConvergenceAndScale,
                             projection=projection)
    out = '{:.{p}f} {:.{p}f} {} {}'.format(pos.northing, pos.easting, pos.zone, pos.hemisphere,
                                           p=precision)
    if withConvergenceAndScale:
        out += ' {:.9f} {:.10f}'.format(np.rad2deg(pos.convergence), pos.scale)
    return out

def convertInverse(line, a, e2, projection=KRUEGER, dms=False):
    """
    Convert a "ZONE HEMISPHERE NORTHING EASTING" line to "LAT LON".

    :raise ValueError: if the line cannot be parsed or the zone is invalid
    :raise ArithmeticError: if the legacy iteration does not converge
    """
    zone, hemisphere, northing, easting = _fields(line, 4)
    zone = Zone.parse(zone)
    hemisphere = Hemisphere(hemisphere.upper())
    lat, lon = grid_to_geographic(a, e2, zone, hemisphere, float(northing), float(easting),
                                  projection=projection)
    if dms:
        return formatDMS(lat) + ' ' + formatDMS(lon)
    return '{:.9f} {:.9f}'.format(np.rad2deg(lat), np.rad2deg(lon))

def main(argv=None):
    args = parseargs(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.radius is not None:
        a, e2 = args.radius, 0.0
    else:
        a, e2 = args.ellipsoid.a, args.ellipsoid.e2
        if args.datum:
            logging.debug('using datum ' + args.datum.name)
        logging.debug('using ellipsoid ' + args.ellipsoid.name)
    projection = DMA if args.legacy else KRUEGER

    if args.inverse:
        convert = lambda line: convertInverse(line, a, e2, projection, args.dms)
    else:
        convert = lambda line: convertForward(line, a, e2, projection, args.convergence,
                                              args.precision)

    failed = 0
    infile = open(args.file) if args.file else sys.stdin
    try:
        for lineNo, line in enumerate(infile, 1):
            if not line.strip() or line.lstrip().startswith('#'):
                continue
            try:
                print(convert(line))
            except (ValueError, ArithmeticError) as e:
                print('line ' + str(lineNo) + ': ' + str(e), file=sys.stderr)
                failed += 1
    finally:
        if infile is not sys.stdin:
            infile.close()

    if failed:
        sys.exit(1)

main.__doc__ = """
::

  {}


""".format(getParser().format_help().replace('\n', '\n  '))

if __name__ == '__main__':
    main()
