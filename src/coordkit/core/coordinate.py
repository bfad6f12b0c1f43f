"""
Coordinate factory.

``create_coordinate`` returns a function turning text, a number pair or a
mapping into an immutable ``Coordinate``. Whatever the input, one signed
decimal degree pair is derived once; every notation and axis ordering is
rendered from that pair on request and memoized per coordinate. The text a
coordinate was created from is kept as the rendering of its own notation,
so it is never re-derived from floats.

Example:
    >>> create = create_coordinate(coordinate_systems.dd, "LATLON")
    >>> coord = create("40.7128 / -74.0060")
    >>> coord.dd()
    '40.7128 N / 74.006 W'
    >>> coord.ddm("LONLAT")
    '74 0.36 W / 40 42.768 N'
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Optional, Union

from coordkit.core.cache import create_cache
from coordkit.core.config import settings
from coordkit.core.normalize import (
    is_coordinate_tuple,
    normalize_object_to_lat_lon,
    tuple_to_lat_lon,
)
from coordkit.core.parsers.parse import violation
from coordkit.core.symbols import DIVIDER
from coordkit.core.systems import coordinate_systems, get_coordinate_system
from coordkit.core.validate import validate_numeric_coordinate
from coordkit.models.coordinate import (
    EMPTY_RAW,
    Coordinate,
    CoordinateSystem,
    Format,
    FormatLike,
)

logger = logging.getLogger(__name__)

INVALID_OBJECT = violation(
    "Invalid coordinate object; object must contain valid latitude and longitude properties."
)
INVALID_INPUT = violation(
    "Invalid coordinate input; expected a string, [lat, lon] tuple, or { lat, lon } object."
)

FormatCache = Dict[str, Dict[Format, str]]


def _no_output(name: str, fmt: Optional[FormatLike] = None) -> str:
    return ""


def error_coordinate(errors: Iterable[str]) -> Coordinate:
    """An invalid coordinate carrying its errors; every formatter returns ''."""
    return Coordinate(
        errors=tuple(errors), raw=EMPTY_RAW, valid=False, _formatter=_no_output
    )


def create_formatter(
    raw: Mapping,
    cache: FormatCache,
    init_format: Format,
) -> Callable[[str, Optional[FormatLike]], str]:
    """
    Build the memoizing renderer behind a coordinate's formatter methods.

    Args:
        raw: ``{"LAT": float, "LON": float}``
        cache: Renderings already known, keyed by notation then format
        init_format: Format used when a call does not name one

    Returns:
        ``render(notation_name, format=None) -> str``
    """

    def render(name: str, fmt: Optional[FormatLike] = None) -> str:
        fmt = Format(fmt) if fmt else init_format
        entries = cache.setdefault(name, {})

        if fmt not in entries:
            system = get_coordinate_system(name)
            first, second = fmt.axes
            entries[fmt] = system.to_format(fmt, (raw[first.value], raw[second.value]))

        return entries[fmt]

    return render


def _valid_coordinate(
    lat: float, lon: float, cache: FormatCache, init_format: Format
) -> Coordinate:
    raw = MappingProxyType({"LAT": float(lat), "LON": float(lon)})
    return Coordinate(
        errors=(),
        raw=raw,
        valid=True,
        _formatter=create_formatter(raw, cache, init_format),
    )


def create_coordinate(
    system: Optional[Union[CoordinateSystem, str]] = None,
    fmt: Optional[FormatLike] = None,
) -> Callable[[Any], Coordinate]:
    """
    Create a coordinate factory for a notation and axis ordering.

    Text is parsed in that notation and format, number pairs are read in
    that format, and both become the defaults of the formatters.

    Args:
        system: Notation or its name; the configured default when omitted
        fmt: Axis ordering; the configured default when omitted

    Returns:
        Function accepting a string, a ``[a, b]`` pair or a mapping with
        latitude/longitude keys and returning a Coordinate

    Raises:
        ConfigurationError: If the notation name is unknown
    """
    init_system = get_coordinate_system(system or settings.default_system)
    init_format = Format(fmt or settings.default_format)

    def from_text(text: str) -> Coordinate:
        tokens, errors = init_system.parse(init_format, text)
        if errors:
            return error_coordinate(errors)

        divider_index = tokens.index(DIVIDER)
        first, second = init_format.axes
        values = {
            first.value: init_system.to_float(tokens[:divider_index]),
            second.value: init_system.to_float(tokens[divider_index + 1 :]),
        }

        errors = validate_numeric_coordinate(values["LAT"], values["LON"])
        if errors:
            return error_coordinate(errors)

        seed = init_system.display(text) if init_system.display else " ".join(tokens)
        cache = {init_system.name: create_cache(init_format, seed)}

        return _valid_coordinate(values["LAT"], values["LON"], cache, init_format)

    def from_numbers(lat: Any, lon: Any) -> Coordinate:
        errors = validate_numeric_coordinate(lat, lon)
        if errors:
            return error_coordinate(errors)

        return _valid_coordinate(lat, lon, {}, init_format)

    def create(value: Any) -> Coordinate:
        if isinstance(value, str):
            coordinate = from_text(value)
        elif is_coordinate_tuple(value):
            coordinate = from_numbers(*tuple_to_lat_lon(init_format, value))
        elif isinstance(value, Mapping):
            pair = normalize_object_to_lat_lon(value)
            if pair is None:
                coordinate = error_coordinate([INVALID_OBJECT])
            else:
                coordinate = from_numbers(pair["lat"], pair["lon"])
        else:
            coordinate = error_coordinate([INVALID_INPUT])

        if not coordinate.valid:
            logger.debug(
                f"Invalid {init_system.name} coordinate {value!r}: {list(coordinate.errors)}"
            )
        return coordinate

    return create


__all__ = ["coordinate_systems", "create_coordinate", "error_coordinate"]
