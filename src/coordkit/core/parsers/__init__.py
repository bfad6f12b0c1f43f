"""
Text parsers for the degree based notations (DD, DDM and DMS).
"""

from coordkit.core.parsers.decimal_degrees import parse_decimal_degrees
from coordkit.core.parsers.degrees_decimal_minutes import parse_degrees_decimal_minutes
from coordkit.core.parsers.degrees_minutes_seconds import parse_degrees_minutes_seconds
from coordkit.core.parsers.parse import create_parser

__all__ = [
    "create_parser",
    "parse_decimal_degrees",
    "parse_degrees_decimal_minutes",
    "parse_degrees_minutes_seconds",
]
