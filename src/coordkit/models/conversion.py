"""
Pydantic models for the coordinate conversion endpoints.
"""

from typing import Any, Dict, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from coordkit.models.coordinate import Format

SystemName = Literal["dd", "ddm", "dms", "mgrs", "utm"]


class ConvertRequest(BaseModel):
    """
    Request to parse a coordinate and render it in every notation.

    Attributes:
        input: Coordinate text, a two number pair ordered by ``format``, or
            an object with latitude/longitude keys
        system: Notation the text is written in
        format: Axis ordering of the input
    """

    input: Union[str, Tuple[float, float], Dict[str, Any]] = Field(
        ..., description="Coordinate text, [a, b] pair or {lat, lon} object"
    )
    system: SystemName = Field(default="dd", description="Notation of the input text")
    format: Format = Field(default=Format.LATLON, description="Axis ordering of the input")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "input": "40° 42' 46.08\" N / 74° 0' 21.6\" W",
                "system": "dms",
                "format": "LATLON",
            }
        }
    )


class ConvertResponse(BaseModel):
    """
    A valid coordinate rendered in every notation and axis ordering.

    Attributes:
        valid: Always true; invalid coordinates are answered with an error
        raw: Signed decimal degrees keyed by ``LAT`` and ``LON``
        formats: Rendering per notation, then per axis ordering
    """

    valid: bool = Field(..., description="Whether the coordinate is valid")
    raw: Dict[str, float] = Field(..., description="Signed decimal degrees")
    formats: Dict[str, Dict[str, str]] = Field(
        ..., description="Rendering per notation and axis ordering"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "valid": True,
                "raw": {"LAT": 40.7128, "LON": -74.006},
                "formats": {
                    "dd": {
                        "LATLON": "40.7128 N / 74.006 W",
                        "LONLAT": "74.006 W / 40.7128 N",
                    },
                    "utm": {
                        "LATLON": "18N 583960 4507523",
                        "LONLAT": "18N 583960 4507523",
                    },
                },
            }
        }
    )


class SystemInfo(BaseModel):
    """A notation the API can parse and render."""

    name: SystemName = Field(..., description="Short key of the notation")
    label: str = Field(..., description="Human readable name")


class SystemsResponse(BaseModel):
    """Available notations and the configured defaults."""

    systems: List[SystemInfo]
    default_system: SystemName
    default_format: Format
