"""
coordkit - parse, validate and convert geographic coordinates.

Coordinates can be read from Decimal Degrees, Degrees Decimal Minutes,
Degrees Minutes Seconds, MGRS or UTM text, from number pairs, or from
latitude/longitude mappings, and rendered in any of those notations in
either axis ordering.
"""

__version__ = "0.1.0"

from coordkit.core.coordinate import create_coordinate
from coordkit.core.systems import coordinate_systems, get_coordinate_system
from coordkit.models.coordinate import Coordinate, CoordinateSystem, Format

__all__ = [
    "Coordinate",
    "CoordinateSystem",
    "Format",
    "coordinate_systems",
    "create_coordinate",
    "get_coordinate_system",
    "__version__",
]
