"""
The utmups package converts between geographic coordinates and the
Universal Transverse Mercator (UTM) and Universal Polar Stereographic (UPS)
grids.

The :mod:`utmups.projection` package contains the projection primitives:
exact spherical Transverse Mercator and Polar Stereographic transforms
(:mod:`~utmups.projection.sphere`), the ellipsoidal Transverse Mercator
based on the Krüger series (:mod:`~utmups.projection.tm`) together with the
legacy formulation of the Defense Mapping Agency Technical Manual 8358.2
(:mod:`~utmups.projection.dmatm`), and the ellipsoidal Polar Stereographic
transform (:mod:`~utmups.projection.ps`). All primitives work on scalars
and numpy arrays alike.

The :mod:`utmups.grid` module selects the UTM zone or UPS region for a
geographic position, applies the scale factors and false origins of the
grids and dispatches to the primitives. This is the main entry point::

    from utmups.grid import geographic_to_grid
    from utmups.ellipsoid import ellipsoid
    wgs84 = ellipsoid('WGS84')
    pos = geographic_to_grid(wgs84.a, wgs84.e2, lat, lon)

The :mod:`utmups.ellipsoid` module holds the table of reference ellipsoids,
:mod:`utmups.datum` the local datums with their reference ellipsoids,
and :mod:`utmups.angle` contains helpers to parse and format angles
given in degrees, minutes and seconds.

The :mod:`utmups.cli` package contains the command-line tool which will be
installed as `utmups-convert`. It is not intended to be used from within
Python code.
"""

from ._version import __version__, __version_info__
