"""
Grid notations (MGRS and UTM) backed by external grid math libraries.
"""

from coordkit.core.grids.base import GridBackend
from coordkit.core.grids.mgrs import LibraryMGRS
from coordkit.core.grids.utm import PyprojUTM, detect_utm_zone, get_utm_epsg

__all__ = [
    "GridBackend",
    "LibraryMGRS",
    "PyprojUTM",
    "detect_utm_zone",
    "get_utm_epsg",
]
