# Copyright European Space Agency, 2013

"""
Reference ellipsoids as listed in appendix A of "Department of Defense
World Geodetic System 1984", NIMA TR8350.2, together with their two-letter
identification codes.

The table is created once at import time and cannot be modified.
The projection functions consume an ellipsoid only as the pair
(semi-major axis `a`, squared eccentricity `e2`).
"""

from collections import namedtuple
from types import MappingProxyType

from geographiclib.constants import Constants

__all__ = ['Ellipsoid', 'ellipsoid', 'ellipsoids', 'eccentricitySquared']

Ellipsoid = namedtuple('Ellipsoid', ['name', 'code', 'a', 'e2']) # a in meters

def eccentricitySquared(inverseFlattening):
    """
    Return the squared first eccentricity e2 = 2f - f^2 for the given
    inverse flattening 1/f.
    """
    f = 1/inverseFlattening
    return f*(2 - f)

def _ellipsoid(name, code, a, inverseFlattening):
    return Ellipsoid(name, code, a, eccentricitySquared(inverseFlattening))

_ellipsoids = [
    _ellipsoid('Airy 1830', 'AA', 6377563.396, 299.3249646),
    _ellipsoid('Australian National', 'AN', 6378160, 298.25),
    _ellipsoid('Bessel 1841, Ethiopia, Indonesia, Japan and Korea', 'BR', 6377397.155, 299.1528128),
    _ellipsoid('Bessel 1841, Namibia', 'BN', 6377483.865, 299.1528128),
    _ellipsoid('Clarke 1866', 'CC', 6378206.4, 294.9786982),
    _ellipsoid('Clarke 1880', 'CD', 6378249.145, 293.465),
    _ellipsoid('Everest, Brunei and E. Malaysia (Sabah and Sarawak)', 'EB', 6377298.556, 300.8017),
    _ellipsoid('Everest, India 1830', 'EA', 6377276.345, 300.8017),
    _ellipsoid('Everest, India 1956', 'EC', 6377301.243, 300.8017),
    _ellipsoid('Everest, Pakistan', 'EF', 6377309.613, 300.8017),
    _ellipsoid('Everest, W. Malaysia and Singapore 1948', 'EE', 6377304.063, 300.8017),
    _ellipsoid('Everest, W. Malaysia 1969', 'ED', 6377295.664, 300.8017),
    _ellipsoid('Geodetic Reference System 1980', 'RF', 6378137, 298.257222101),
    _ellipsoid('Helmert 1906', 'HE', 6378200, 298.3),
    _ellipsoid('Hough 1960', 'HO', 6378270, 297),
    _ellipsoid('Indonesian 1974', 'ID', 6378160, 298.247),
    _ellipsoid('International 1924', 'IN', 6378388, 297),
    _ellipsoid('Krassovsky 1940', 'KA', 6378245, 298.3),
    _ellipsoid('Modified Airy', 'AM', 6377340.189, 299.3249646),
    _ellipsoid('Modified Fischer 1960', 'FA', 6378155, 298.3),
    _ellipsoid('South American 1969', 'SA', 6378160, 298.25),
    _ellipsoid('WGS 1972', 'WD', 6378135, 298.26),
    _ellipsoid('WGS 1984', 'WE', Constants.WGS84_a, 1/Constants.WGS84_f),
    ]

_aliases = {
    'AUSTRALIAN': 'AN',
    'BESSEL': 'BR',
    'CLARKE1866': 'CC',
    'CLARKE1880': 'CD',
    'GRS80': 'RF',
    'INT24': 'IN',
    'INTERNATIONAL': 'IN',
    'WGS72': 'WD',
    'WGS84': 'WE',
    }

ellipsoids = MappingProxyType({e.code: e for e in _ellipsoids})
"""Read-only mapping from two-letter code to :class:`Ellipsoid`."""

def ellipsoid(code):
    """
    Return the reference ellipsoid for the given two-letter code
    (e.g. ``'WE'``) or alias (e.g. ``'WGS84'``), case-insensitive.

    :rtype: Ellipsoid
    :raise KeyError: if the code is unknown
    """
    key = code.upper().replace(' ', '').replace('-', '')
    key = _aliases.get(key, key)
    try:
        return ellipsoids[key]
    except KeyError:
        raise KeyError('Unknown ellipsoid: ' + code)
