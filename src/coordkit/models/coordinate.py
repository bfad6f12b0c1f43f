"""
Data models for parsed coordinates and coordinate notations.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union


class Axis(str, Enum):
    """A coordinate axis."""

    LAT = "LAT"
    LON = "LON"


class Format(str, Enum):
    """Axis ordering of a coordinate, for both parsing and formatting."""

    LATLON = "LATLON"
    LONLAT = "LONLAT"

    @classmethod
    def _missing_(cls, value: object) -> Optional["Format"]:
        # Case-insensitive lookup, e.g. "latlon"
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None

    @property
    def axes(self) -> Tuple[Axis, Axis]:
        """Axes in the order this format lists them."""
        if self is Format.LATLON:
            return (Axis.LAT, Axis.LON)
        return (Axis.LON, Axis.LAT)

    @property
    def other(self) -> "Format":
        """The opposite axis ordering."""
        return Format.LONLAT if self is Format.LATLON else Format.LATLON


FormatLike = Union[Format, str]


class ParseResult(NamedTuple):
    """
    Outcome of parsing coordinate text.

    Exactly one of the two lists is non-empty: ``tokens`` holds the
    normalized pieces of both halves separated by the divider, ``errors``
    holds every problem found.
    """

    tokens: List[str]
    errors: List[str]


@dataclass(frozen=True)
class CoordinateSystem:
    """
    A coordinate notation.

    Attributes:
        name: Short key of the notation (dd, ddm, dms, mgrs, utm)
        label: Human readable name
        parse: ``(format, text) -> ParseResult``
        to_float: Converts the tokens of one half into signed decimal degrees
        to_format: ``(format, (first, second)) -> str`` where the values are
            ordered by ``format``
        display: Optional hook rendering the text a coordinate was created
            from; used by notations without an axis order
    """

    name: str
    label: str
    parse: Callable[[FormatLike, str], ParseResult] = field(repr=False)
    to_float: Callable[[Sequence[str]], float] = field(repr=False)
    to_format: Callable[[FormatLike, Tuple[float, float]], str] = field(repr=False)
    display: Optional[Callable[[str], str]] = field(default=None, repr=False)


EMPTY_RAW: Mapping[str, float] = MappingProxyType({})


@dataclass(frozen=True)
class Coordinate:
    """
    Immutable result of creating a coordinate.

    Formatter methods render the coordinate in a notation, in the format the
    coordinate was created with unless another is given. Every rendering is
    computed once from ``raw`` and memoized.

    Attributes:
        errors: Every problem found while creating the coordinate
        raw: ``{"LAT": float, "LON": float}`` in signed decimal degrees,
            empty when invalid
        valid: Whether the coordinate could be created
    """

    errors: Tuple[str, ...]
    raw: Mapping[str, float]
    valid: bool
    _formatter: Callable[[str, Optional[FormatLike]], str] = field(
        repr=False, compare=False
    )

    def dd(self, fmt: Optional[FormatLike] = None) -> str:
        """Decimal Degrees, e.g. ``40.7128 N / 74.006 W``."""
        return self._formatter("dd", fmt)

    def ddm(self, fmt: Optional[FormatLike] = None) -> str:
        """Degrees Decimal Minutes, e.g. ``40 42.768 N / 74 0.36 W``."""
        return self._formatter("ddm", fmt)

    def dms(self, fmt: Optional[FormatLike] = None) -> str:
        """Degrees Minutes Seconds, e.g. ``40 42 46.08 N / 74 0 21.6 W``."""
        return self._formatter("dms", fmt)

    def mgrs(self, fmt: Optional[FormatLike] = None) -> str:
        """Military Grid Reference System, e.g. ``18T WL 83764 07747``."""
        return self._formatter("mgrs", fmt)

    def utm(self, fmt: Optional[FormatLike] = None) -> str:
        """Universal Transverse Mercator, e.g. ``18N 583964 4507523``."""
        return self._formatter("utm", fmt)
