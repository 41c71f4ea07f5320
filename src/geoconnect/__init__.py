"""GeoConnect: spherical centroid, connection topology and great-circle distances for a globe view."""

__version__ = "0.1.0"
