"""Planar polygon geometry: hulls, areas, centroids, containment, offsets and overlap."""

__version__ = "0.1.0"