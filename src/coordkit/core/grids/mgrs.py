"""
Military Grid Reference System (MGRS), e.g. ``30U WB 85358 69660``.

The grid math is done by the ``mgrs`` library; this module validates the
text first so that each kind of mistake gets its own message.
"""

import logging
import re
from typing import List, Optional, Tuple

import mgrs

from coordkit.core.config import settings
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

EXPECTED = "DDZ AA DDD DDD"

BAND_LETTERS = "CDEFGHJKLMNPQRSTUVWX"
COLUMN_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"
ROW_LETTERS = "ABCDEFGHJKLMNPQRSTUV"

_REFERENCE = re.compile(
    r"^(?P<zone>[-+]?\d+)?\s*(?P<band>[A-Z])?\s*(?P<square>[A-Z]{2})?\s*"
    r"(?P<easting>\d*)\s*(?P<northing>\d*)$"
)
_COMPACT = re.compile(r"^(\d{1,2})([A-Z])([A-Z]{2})(\d*)$")


def split_reference(text: str) -> Optional[Tuple[str, str, str, str, str]]:
    """
    Break grid reference text into its parts.

    A single run of digits is split into equal easting and northing halves.

    Args:
        text: Grid reference in any spacing and case

    Returns:
        Tuple of (zone, band, square, easting, northing), missing parts as
        empty strings, or None when the text has no grid reference shape
    """
    match = _REFERENCE.match(" ".join(text.upper().split()))
    if match is None:
        return None

    zone, band, square, easting, northing = (value or "" for value in match.groups())
    if easting and not northing and len(easting) % 2 == 0:
        middle = len(easting) // 2
        easting, northing = easting[:middle], easting[middle:]

    return zone, band, square, easting, northing


def validate_reference(text: str) -> List[str]:
    """
    Check each part of a grid reference, reporting the first invalid one.

    Args:
        text: Grid reference text

    Returns:
        Error messages, empty when the reference is well formed
    """
    if not text.strip():
        return [grid_violation("No input provided", EXPECTED)]

    parts = split_reference(text)
    if parts is None:
        return [grid_violation(f"Invalid MGRS grid reference ({text.strip()}) found", EXPECTED)]

    zone, band, square, easting, northing = parts

    if not zone.isdigit() or not 1 <= int(zone) <= 60:
        message = f"Invalid UTM zone number ({zone}) found in grid zone designation"
    elif not band or band not in BAND_LETTERS:
        message = f"Invalid Latitude band letter ({band}) found in grid zone designation"
    elif square and (square[0] not in COLUMN_LETTERS or square[1] not in ROW_LETTERS):
        message = f"Invalid 100K m square identification ({square}) found"
    elif (
        not square
        or not easting
        or len(easting) != len(northing)
        or len(easting) > 5
    ):
        message = f"Invalid numerical location ({easting},{northing}) found"
    else:
        return []

    return [grid_violation(message, EXPECTED)]


def format_reference(reference: str) -> str:
    """
    Space a compact grid reference into its parts.

    >>> format_reference("30UXC9931610163")
    '30U XC 99316 10163'
    """
    match = _COMPACT.match(reference.strip().upper())
    if match is None:
        return reference

    zone, band, square, digits = match.groups()
    middle = len(digits) // 2
    return " ".join(
        part
        for part in (f"{int(zone)}{band}", square, digits[:middle], digits[middle:])
        if part
    )


class LibraryMGRS:
    """MGRS backend using the ``mgrs`` library."""

    def __init__(self, precision: Optional[int] = None):
        self.precision = precision or settings.mgrs_precision
        self._converter = mgrs.MGRS()

    def point_to_grid(self, lat: float, lon: float) -> str:
        try:
            reference = self._converter.toMGRS(lat, lon, MGRSPrecision=self.precision)
        except Exception as e:
            raise GridConversionError(f"MGRS conversion failed: {e}", grid="mgrs")

        if isinstance(reference, bytes):
            reference = reference.decode("utf-8")
        return format_reference(reference)

    def grid_to_point(self, text: str) -> Tuple[float, float]:
        compact = "".join(text.upper().split())
        try:
            lat, lon = self._converter.toLatLon(compact)
        except Exception as e:
            raise GridConversionError(f"MGRS conversion of {text} failed: {e}", grid="mgrs")

        return float(lat), float(lon)


def create_system(backend: Optional[GridBackend] = None) -> CoordinateSystem:
    """
    Build the MGRS coordinate system around a grid backend.

    Args:
        backend: Grid backend, the ``mgrs`` library by default

    Returns:
        CoordinateSystem for MGRS
    """
    backend = backend or LibraryMGRS()

    def parse(fmt: FormatLike, text: str) -> ParseResult:
        errors = validate_reference(text)
        if errors:
            return ParseResult([], errors)

        try:
            lat, lon = backend.grid_to_point(text)
        except GridConversionError as e:
            logger.debug(f"Rejected MGRS {text!r}: {e.message}")
            return ParseResult(
                [],
                [grid_violation(f"Invalid MGRS grid reference ({text.strip()}) found", EXPECTED)],
            )

        return point_to_tokens(fmt, lat, lon)

    def to_format(fmt: FormatLike, values: Tuple[float, float]) -> str:
        lat, lon = lat_lon(fmt, values)
        if not in_grid_domain(lat):
            return ""

        try:
            return backend.point_to_grid(lat, lon)
        except GridConversionError as e:
            logger.warning(f"Could not render ({lat}, {lon}) as MGRS: {e.message}")
            return ""

    def display(text: str) -> str:
        zone, band, square, easting, northing = split_reference(text)
        return f"{int(zone)}{band} {square} {easting} {northing}"

    return CoordinateSystem(
        name="mgrs",
        label="Military Grid Reference System",
        parse=parse,
        to_float=decimal_degrees.to_float,
        to_format=to_format,
        display=display,
    )
