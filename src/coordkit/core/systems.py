"""
The five coordinate notations as uniform CoordinateSystem objects.
"""

from typing import NamedTuple, Union

from coordkit.core.errors import ConfigurationError
from coordkit.core.grids import mgrs, utm
from coordkit.core.parsers import (
    decimal_degrees,
    degrees_decimal_minutes,
    degrees_minutes_seconds,
)
from coordkit.models.coordinate import CoordinateSystem

system_decimal_degrees = CoordinateSystem(
    name="dd",
    label="Decimal Degrees",
    parse=decimal_degrees.parse_decimal_degrees,
    to_float=decimal_degrees.to_float,
    to_format=decimal_degrees.to_format,
)

system_degrees_decimal_minutes = CoordinateSystem(
    name="ddm",
    label="Degrees Decimal Minutes",
    parse=degrees_decimal_minutes.parse_degrees_decimal_minutes,
    to_float=degrees_decimal_minutes.to_float,
    to_format=degrees_decimal_minutes.to_format,
)

system_degrees_minutes_seconds = CoordinateSystem(
    name="dms",
    label="Degrees Minutes Seconds",
    parse=degrees_minutes_seconds.parse_degrees_minutes_seconds,
    to_float=degrees_minutes_seconds.to_float,
    to_format=degrees_minutes_seconds.to_format,
)

system_mgrs = mgrs.create_system()

system_utm = utm.create_system()


class CoordinateSystems(NamedTuple):
    """Read-only registry of the available notations."""

    dd: CoordinateSystem
    ddm: CoordinateSystem
    dms: CoordinateSystem
    mgrs: CoordinateSystem
    utm: CoordinateSystem


coordinate_systems = CoordinateSystems(
    dd=system_decimal_degrees,
    ddm=system_degrees_decimal_minutes,
    dms=system_degrees_minutes_seconds,
    mgrs=system_mgrs,
    utm=system_utm,
)


def get_coordinate_system(system: Union[CoordinateSystem, str]) -> CoordinateSystem:
    """
    Resolve a notation by name.

    Args:
        system: A CoordinateSystem, or its name (dd, ddm, dms, mgrs, utm)

    Returns:
        The matching CoordinateSystem

    Raises:
        ConfigurationError: If no notation has that name
    """
    if isinstance(system, CoordinateSystem):
        return system

    resolved = getattr(coordinate_systems, str(system).lower(), None)
    if not isinstance(resolved, CoordinateSystem):
        raise ConfigurationError(
            f"Unknown coordinate system '{system}'",
            config_key="default_system",
            details={"available": list(CoordinateSystems._fields)},
        )
    return resolved
