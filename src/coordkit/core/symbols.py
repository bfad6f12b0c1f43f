"""
Symbols, bearing tables and limits shared by the coordinate parsers.
"""

import re
from typing import Dict, Tuple

from coordkit.core.config import settings
from coordkit.models.coordinate import Format

DIVIDER = settings.divider
DEGREES = "°"
MINUTES = "'"
SECONDS = '"'
NEGATIVE = "-"
POSITIVE = "+"

SYMBOLS: Dict[str, str] = {
    "DIVIDER": DIVIDER,
    "DEGREES": DEGREES,
    "MINUTES": MINUTES,
    "SECONDS": SECONDS,
    "NEGATIVE": NEGATIVE,
    "POSITIVE": POSITIVE,
}

# Replaced before tokenizing; "''" must come after the single quote forms.
ALTERNATE_GLYPHS: Tuple[Tuple[str, str], ...] = (
    ("º", DEGREES),
    ("˚", DEGREES),
    ("′", MINUTES),
    ("’", MINUTES),
    ("″", SECONDS),
    ("”", SECONDS),
    ("''", SECONDS),
)

# Bearing letters per axis position, indexed by sign: (positive, negative)
BEARINGS: Dict[Format, Tuple[Tuple[str, str], Tuple[str, str]]] = {
    Format.LATLON: (("N", "S"), ("E", "W")),
    Format.LONLAT: (("E", "W"), ("N", "S")),
}

LIMITS: Dict[Format, Tuple[int, int]] = {
    Format.LATLON: (90, 180),
    Format.LONLAT: (180, 90),
}

# Token classes used by the grammars
NUMBER = "n"
LAT_BEARING = "a"
LON_BEARING = "o"
WORD = "w"
DIVIDER_CLASS = "/"

# Named pieces that format templates are written with
PARTIAL_PATTERNS: Dict[str, str] = {
    "degLat": NUMBER,
    "degLon": NUMBER,
    "degLatDec": NUMBER,
    "degLonDec": NUMBER,
    "minDec": NUMBER,
    "min": NUMBER,
    "secDec": NUMBER,
    "NS": LAT_BEARING,
    "EW": LON_BEARING,
}

SYMBOL_PATTERNS: Dict[str, "re.Pattern[str]"] = {
    "NSEW": re.compile(r"^[NSEW]$"),
    "NS": re.compile(r"^[NS]$"),
    "EW": re.compile(r"^[EW]$"),
    "DEGREES": re.compile(DEGREES),
    "MINUTES": re.compile(MINUTES),
    "SECONDS": re.compile(SECONDS),
    "NEGATIVE_SIGN": re.compile(r"^-"),
    "GLYPHS": re.compile(f"[{DEGREES}{MINUTES}{SECONDS}]"),
}
