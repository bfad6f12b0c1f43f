"""
Universal Transverse Mercator (UTM), e.g. ``18N 585628 4511322``.

Zone detection follows the Norway and Svalbard exceptions; the projection
itself is done by pyproj between EPSG:4326 and the EPSG:326zz/327zz zone
systems.
"""

import logging
import math
import re
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from pyproj import CRS, Transformer

from coordkit.core.errors import GridConversionError
from coordkit.core.grids.base import (
    GridBackend,
    grid_violation,
    in_grid_domain,
    lat_lon,
    point_to_tokens,
)
from coordkit.core.parsers import decimal_degrees
from coordkit.models.coordinate import CoordinateSystem, FormatLike, ParseResult

logger = logging.getLogger(__name__)

EXPECTED = "ZZ N|S DDD DDD"
WGS84_EPSG = 4326

_ZONE_PREFIX = re.compile(r"^(\d{1,2})([NS])\s+")
_STRICT = re.compile(r"^(\d{1,2}) ([NS]) (\d+(?:\.\d*)?) (\d+(?:\.\d*)?)$")
_PARTS = re.compile(
    r"^(?P<zone>[-+]?\d*)\s*(?P<band>[A-Z]?)\s*"
    r"(?P<easting>\d+(?:\.\d*)?)?\s*(?P<northing>\d+(?:\.\d*)?)?$"
)


def detect_utm_zone(longitude: float, latitude: float) -> Tuple[int, bool]:
    """
    Detect the UTM zone for WGS84 coordinates.

    Zones are 6 degrees wide and numbered 1 to 60 from 180°W. Norway uses
    zone 32 for 56°N to 64°N and 3°E to 12°E, and Svalbard uses zones 31, 33,
    35 and 37 between 72°N and 84°N.

    Args:
        longitude: Longitude in decimal degrees (-180 to 180)
        latitude: Latitude in decimal degrees (-90 to 90)

    Returns:
        Tuple of (zone_number, is_northern_hemisphere)

    Raises:
        ValueError: If coordinates are out of valid range
    """
    if not -180 <= longitude <= 180:
        raise ValueError(f"Longitude must be between -180 and 180, got {longitude}")
    if not -90 <= latitude <= 90:
        raise ValueError(f"Latitude must be between -90 and 90, got {latitude}")

    is_northern = latitude >= 0

    zone_number = int((longitude + 180) / 6) + 1

    # 180° belongs to zone 1
    if zone_number > 60:
        zone_number = 1

    if 56.0 <= latitude < 64.0 and 3.0 <= longitude < 12.0:
        zone_number = 32

    if 72.0 <= latitude < 84.0:
        if 0.0 <= longitude < 9.0:
            zone_number = 31
        elif 9.0 <= longitude < 21.0:
            zone_number = 33
        elif 21.0 <= longitude < 33.0:
            zone_number = 35
        elif 33.0 <= longitude < 42.0:
            zone_number = 37

    return zone_number, is_northern


def get_utm_epsg(zone_number: int, is_northern: bool) -> int:
    """
    Get the EPSG code of a WGS84 UTM zone.

    Raises:
        ValueError: If zone_number is out of valid range
    """
    if not 1 <= zone_number <= 60:
        raise ValueError(f"UTM zone must be between 1 and 60, got {zone_number}")

    return (32600 if is_northern else 32700) + zone_number


@lru_cache(maxsize=128)
def _transformer(source_epsg: int, target_epsg: int) -> Transformer:
    return Transformer.from_crs(
        CRS.from_epsg(source_epsg), CRS.from_epsg(target_epsg), always_xy=True
    )


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def normalize(text: str) -> str:
    """Uppercase, collapse whitespace and separate a zone written as ``18N``."""
    text = " ".join(text.upper().split())
    return _ZONE_PREFIX.sub(r"\1 \2 ", text)


class PyprojUTM:
    """UTM backend projecting with pyproj."""

    def point_to_grid(self, lat: float, lon: float) -> str:
        try:
            zone, is_northern = detect_utm_zone(lon, lat)
            epsg = get_utm_epsg(zone, is_northern)
            easting, northing = _transformer(WGS84_EPSG, epsg).transform(lon, lat)
        except Exception as e:
            raise GridConversionError(f"UTM projection failed: {e}", grid="utm")

        if not (math.isfinite(easting) and math.isfinite(northing)):
            raise GridConversionError(
                f"UTM projection of ({lat}, {lon}) is not finite", grid="utm"
            )

        hemisphere = "N" if is_northern else "S"
        return f"{zone:02d}{hemisphere} {round_half_up(easting)} {round_half_up(northing)}"

    def grid_to_point(self, text: str) -> Tuple[float, float]:
        match = _STRICT.match(normalize(text))
        if match is None:
            raise GridConversionError(f"Malformed UTM reference: {text}", grid="utm")

        zone, hemisphere, easting, northing = match.groups()
        try:
            epsg = get_utm_epsg(int(zone), hemisphere == "N")
            lon, lat = _transformer(epsg, WGS84_EPSG).transform(
                float(easting), float(northing)
            )
        except Exception as e:
            raise GridConversionError(f"UTM inverse projection failed: {e}", grid="utm")

        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise GridConversionError(f"UTM reference {text} is out of range", grid="utm")

        return lat, lon


def diagnose(text: str) -> List[str]:
    """
    Explain why UTM text was rejected, reporting the first invalid part.

    Args:
        text: Normalized UTM text

    Returns:
        One error message
    """
    match = _PARTS.match(text)
    if match is None:
        return [grid_violation(f"Invalid UTM coordinate ({text}) found", EXPECTED)]

    zone = match.group("zone")
    if not zone.isdigit() or not 1 <= int(zone) <= 60:
        message = f"Invalid Zone number ({zone}) found"
    elif match.group("band") not in ("N", "S"):
        message = f"Invalid Latitude band letter ({match.group('band')}) found"
    elif not match.group("easting"):
        message = f"Invalid Easting number ({match.group('easting') or ''}) found"
    elif not match.group("northing"):
        message = f"Invalid Northing number ({match.group('northing') or ''}) found"
    else:
        message = f"Invalid UTM coordinate ({text}) found"

    return [grid_violation(message, EXPECTED)]


def create_system(backend: Optional[GridBackend] = None) -> CoordinateSystem:
    """
    Build the UTM coordinate system around a grid backend.

    Args:
        backend: Grid backend, pyproj by default

    Returns:
        CoordinateSystem for UTM
    """
    backend = backend or PyprojUTM()

    def parse(fmt: FormatLike, text: str) -> ParseResult:
        normalized = normalize(text)
        if _STRICT.match(normalized) is None:
            return ParseResult([], diagnose(normalized))

        try:
            lat, lon = backend.grid_to_point(normalized)
        except GridConversionError as e:
            logger.debug(f"Rejected UTM {text!r}: {e.message}")
            return ParseResult([], diagnose(normalized))

        return point_to_tokens(fmt, lat, lon)

    def to_format(fmt: FormatLike, values: Tuple[float, float]) -> str:
        lat, lon = lat_lon(fmt, values)
        if not in_grid_domain(lat):
            return ""

        try:
            return backend.point_to_grid(lat, lon)
        except GridConversionError as e:
            logger.warning(f"Could not render ({lat}, {lon}) as UTM: {e.message}")
            return ""

    def display(text: str) -> str:
        zone, hemisphere, easting, northing = _STRICT.match(normalize(text)).groups()
        return f"{int(zone):02d}{hemisphere} {easting} {northing}"

    return CoordinateSystem(
        name="utm",
        label="Universal Transverse Mercator",
        parse=parse,
        to_float=decimal_degrees.to_float,
        to_format=to_format,
        display=display,
    )
