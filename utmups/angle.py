# Copyright European Space Agency, 2013

"""
Helpers for longitudes and for angles given in degrees, minutes and seconds.
"""

import re
from math import pi

import numpy as np
from astropy.coordinates import Angle
import astropy.units as u

__all__ = ['wrapLongitude', 'parseDMS', 'formatDMS']

_DECIMAL = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)$')
_DMS = re.compile(r'^([+-]?)(\d+)[d:](\d+)[m:](\d+(?:\.\d*)?)s?$')

def wrapLongitude(lon):
    """
    Wrap longitude(s) into (-pi, pi]. Values already inside the interval
    are returned unchanged.

    :param lon: in radians, scalar or array
    """
    lon = np.asarray(lon, dtype=float)
    outside = (lon <= -pi) | (lon > pi)
    if np.any(outside):
        wrapped = Angle(lon, u.rad).wrap_at(pi*u.rad).radian
        # wrap_at returns [-pi, pi)
        wrapped = np.where(wrapped <= -pi, wrapped + 2*pi, wrapped)
        lon = np.where(outside, wrapped, lon)
    return lon[()]

def parseDMS(text):
    """
    Parse an angle given in decimal degrees or as degrees, minutes
    and seconds.

    Accepted are for example ``45.5``, ``+045d00m00.000s``, ``72d04m32.110``
    and ``-113:54:43.321``. The sign applies to the whole angle.

    :param str text:
    :rtype: angle in radians
    :raise ValueError: if the text cannot be parsed
    """
    text = text.strip()
    if _DECIMAL.match(text):
        return Angle(float(text), u.deg).radian

    match = _DMS.match(text)
    if not match:
        raise ValueError('Not an angle in degrees: "' + text + '"')
    sign, degrees, minutes, seconds = match.groups()
    if int(minutes) >= 60 or float(seconds) >= 60:
        raise ValueError('Minutes and seconds must be below 60: "' + text + '"')
    canonical = '{}{}d{}m{}s'.format(sign, degrees, minutes, seconds)
    return Angle(canonical).radian

def formatDMS(rad, precision=3, sep=':'):
    """
    Format an angle as degrees, minutes and seconds with explicit sign,
    e.g. ``-113:54:43.321``. The angle is wrapped into [-180, 180) degrees first.

    :param rad: angle in radians
    :param int precision: number of decimal places of the seconds
    :param str sep: separator, ``':'`` or ``'dms'`` for ``-113d54m43.321s``
    :rtype: str
    """
    angle = Angle(rad, u.rad).wrap_at(180*u.deg)
    return angle.to_string(unit=u.deg, sep=sep, precision=precision,
                           alwayssign=True, pad=True)
