"""
Tests for the coordinate factory.
"""

import dataclasses

import pytest

from coordkit import Format, coordinate_systems, create_coordinate
from coordkit.core.errors import ConfigurationError


def reverse(value: str) -> str:
    return " / ".join(reversed(value.split(" / ")))


@pytest.fixture
def create():
    """Decimal Degrees factory reading LATLON."""
    return create_coordinate(coordinate_systems.dd, "LATLON")


class TestCreateFromText:
    """Tests for coordinates created from text."""

    @pytest.mark.parametrize(
        "system,fmt,text,dd,ddm,dms",
        [
            (
                coordinate_systems.dd,
                "LONLAT",
                "12.3456 E / 67.8901 N",
                "12.3456 E / 67.8901 N",
                "12 20.736 E / 67 53.406 N",
                "12 20 44.16 E / 67 53 24.36 N",
            ),
            (
                coordinate_systems.ddm,
                "LATLON",
                "11 33.02 N / 3 1.2 W",
                "3.02 W / 11.550333333 N",
                "3 1.2 W / 11 33.02 N",
                "3 1 12 W / 11 33 1.1999988 N",
            ),
            (
                coordinate_systems.dms,
                "LATLON",
                "11 22 33.44 N / 3 2 1.1 W",
                "3.033638889 W / 11.375955556 N",
                "3 2.01833334 W / 11 22.55733336 N",
                "3 2 1.1 W / 11 22 33.44 N",
            ),
        ],
    )
    def test_all_notations(self, system, fmt, text, dd, ddm, dms) -> None:
        """Every notation renders in both axis orderings."""
        coord = create_coordinate(system, fmt)(text)

        assert coord.valid is True
        assert coord.errors == ()

        assert coord.dd("LONLAT") == dd
        assert coord.dd("LATLON") == reverse(dd)
        assert coord.ddm("LONLAT") == ddm
        assert coord.ddm("LATLON") == reverse(ddm)
        assert coord.dms("LONLAT") == dms
        assert coord.dms("LATLON") == reverse(dms)

    def test_end_to_end(self, create) -> None:
        """Text is normalized and decomposed consistently."""
        coord = create("40.7128 N / 74.0060 W")

        assert coord.valid is True
        assert dict(coord.raw) == {"LAT": 40.7128, "LON": -74.006}
        assert coord.dd() == "40.7128 N / 74.006 W"
        assert coord.ddm() == "40 42.768 N / 74 0.36 W"
        assert coord.dms() == "40 42 46.08 N / 74 0 21.6 W"

    def test_default_parameters(self) -> None:
        """Without arguments the factory reads Decimal Degrees in LATLON."""
        coord = create_coordinate()("45.5 N / 90.5 W")

        assert coord.valid is True
        assert coord.dd() == "45.5 N / 90.5 W"

    def test_system_by_name(self) -> None:
        coord = create_coordinate("dms", Format.LATLON)("1 2 3 N / 4 5 6 E")

        assert coord.valid is True
        assert coord.dms() == "1 2 3 N / 4 5 6 E"

    def test_unknown_system(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            create_coordinate("geohash")

        assert exc_info.value.details["config_key"] == "default_system"

    def test_raw_independent_of_format(self) -> None:
        """Raw values are keyed by axis whatever the input order."""
        coord = create_coordinate(coordinate_systems.dd, "LONLAT")("90.5 W / 45.5 N")

        assert dict(coord.raw) == {"LAT": 45.5, "LON": -90.5}

    def test_sign_inference(self, create) -> None:
        assert create("-45.5 75.3").dd() == "45.5 S / 75.3 E"

    @pytest.mark.parametrize("text", ["90 N / 0 E", "90 S / 0 E", "0 N / 180 E", "0 N / 180 W"])
    def test_boundaries(self, create, text: str) -> None:
        assert create(text).valid is True

    def test_out_of_range(self, create) -> None:
        coord = create("91 N / 0 E")

        assert coord.valid is False
        assert coord.errors == ("[ERROR] Degrees value (91) exceeds max value (90).",)

    def test_mismatched_format(self, create) -> None:
        coord = create("1 E / 2 N")

        assert coord.valid is False
        assert coord.errors == (
            '[ERROR] Mismatched formats: "LATLON" expected, "LONLAT" found.',
        )

    def test_wrong_notation(self, create) -> None:
        """Too many numbers for Decimal Degrees."""
        coord = create("1 2 3 N / 5 6 7 W")

        assert coord.errors == ("[ERROR] Invalid coordinate value.",)

    def test_extra_number_rejected(self, create) -> None:
        """A second number in a Decimal Degrees half is not dropped."""
        coord = create("45.5 99 / 75.3")

        assert coord.valid is False
        assert coord.errors == ("[ERROR] Invalid coordinate value.",)
        assert dict(coord.raw) == {}

    @pytest.mark.parametrize("text", ["", "invalid"])
    def test_invalid_text(self, create, text: str) -> None:
        """Invalid coordinates have no raw values and empty renderings."""
        coord = create(text)

        assert coord.valid is False
        assert dict(coord.raw) == {}
        assert coord.dd() == ""
        assert coord.mgrs("LONLAT") == ""


class TestGridInput:
    """Tests for coordinates created from grid references."""

    def test_mgrs(self) -> None:
        coord = create_coordinate(coordinate_systems.mgrs, "LATLON")("30U WB 85358 69660")

        assert coord.valid is True
        assert coord.mgrs() == "30U WB 85358 69660"
        assert coord.raw["LAT"] == pytest.approx(51.171993, abs=1e-4)
        assert coord.raw["LON"] == pytest.approx(-1.779008, abs=1e-4)
        assert coord.dd().endswith(" W")

    def test_mgrs_display_normalized(self) -> None:
        coord = create_coordinate(coordinate_systems.mgrs)("30uwb8535869660")

        assert coord.mgrs() == "30U WB 85358 69660"
        assert coord.mgrs("LONLAT") == "30U WB 85358 69660"

    def test_utm(self) -> None:
        coord = create_coordinate(coordinate_systems.utm, "LATLON")("30 N 585358 5669660")

        assert coord.valid is True
        assert coord.utm() == "30N 585358 5669660"
        assert coord.raw["LAT"] == pytest.approx(51.17199279600467, abs=1e-6)
        assert coord.raw["LON"] == pytest.approx(-1.7790080009934, abs=1e-6)

    def test_invalid_mgrs(self) -> None:
        coord = create_coordinate(coordinate_systems.mgrs)("30I")

        assert coord.valid is False
        assert coord.errors == (
            "[ERROR] Invalid Latitude band letter (I) found in grid zone "
            "designation; expected format DDZ AA DDD DDD.",
        )

    def test_cross_notation(self, create) -> None:
        """A grid reference and its Decimal Degrees rendering agree."""
        from_grid = create_coordinate(coordinate_systems.mgrs)("30U WB 85358 69660")
        from_text = create(from_grid.dd())

        assert from_text.raw["LAT"] == pytest.approx(from_grid.raw["LAT"], abs=1e-9)
        assert from_text.raw["LON"] == pytest.approx(from_grid.raw["LON"], abs=1e-9)


class TestCreateFromNumbers:
    """Tests for coordinates created from pairs and mappings."""

    def test_latlon_tuple(self, create) -> None:
        coord = create([40.7128, -74.006])

        assert coord.valid is True
        assert dict(coord.raw) == {"LAT": 40.7128, "LON": -74.006}

    def test_lonlat_tuple(self) -> None:
        coord = create_coordinate(coordinate_systems.dd, "LONLAT")((-74.006, 40.7128))

        assert dict(coord.raw) == {"LAT": 40.7128, "LON": -74.006}

    @pytest.mark.parametrize(
        "pair,message",
        [
            ([91, 0], "[ERROR] Latitude value (91) is outside valid range (-90 to 90)."),
            ([-91, 0], "[ERROR] Latitude value (-91) is outside valid range (-90 to 90)."),
            ([0, 181], "[ERROR] Longitude value (181) is outside valid range (-180 to 180)."),
            ([0, -181], "[ERROR] Longitude value (-181) is outside valid range (-180 to 180)."),
            ([float("nan"), 0], "[ERROR] Invalid latitude value (NaN); expected a finite number."),
            ([0, float("nan")], "[ERROR] Invalid longitude value (NaN); expected a finite number."),
            ([float("inf"), 0], "[ERROR] Invalid latitude value (Infinity); expected a finite number."),
            ([0, float("inf")], "[ERROR] Invalid longitude value (Infinity); expected a finite number."),
        ],
    )
    def test_invalid_tuple(self, create, pair, message: str) -> None:
        coord = create(pair)

        assert coord.valid is False
        assert message in coord.errors

    def test_both_axes_reported(self, create) -> None:
        coord = create([float("-inf"), float("-inf")])

        assert coord.errors == (
            "[ERROR] Invalid latitude value (-Infinity); expected a finite number.",
            "[ERROR] Invalid longitude value (-Infinity); expected a finite number.",
        )

    def test_negative_boundaries(self, create) -> None:
        coord = create([-90, -180])

        assert coord.valid is True
        assert dict(coord.raw) == {"LAT": -90, "LON": -180}

    @pytest.mark.parametrize(
        "obj",
        [
            {"lat": 40.7128, "lon": -74.006},
            {"LAT": 40.7128, "LON": -74.006},
            {"Lat": 40.7128, "Lon": -74.006},
            {"latitude": 40.7128, "longitude": -74.006},
            {"LATITUDE": 40.7128, "LONGITUDE": -74.006},
        ],
    )
    def test_objects(self, create, obj) -> None:
        """Mapping keys are matched case-insensitively."""
        coord = create(obj)

        assert coord.valid is True
        assert dict(coord.raw) == {"LAT": 40.7128, "LON": -74.006}

    def test_object_ignores_format(self) -> None:
        """Mapping keys are explicit, so the factory format does not apply."""
        coord = create_coordinate(coordinate_systems.dd, "LONLAT")({"lat": 40.7128, "lon": -74.006})

        assert dict(coord.raw) == {"LAT": 40.7128, "LON": -74.006}

    def test_object_out_of_range(self, create) -> None:
        coord = create({"lat": 100, "lon": 0})

        assert "[ERROR] Latitude value (100) is outside valid range (-90 to 90)." in coord.errors

    def test_object_unrecognized_keys(self, create) -> None:
        coord = create({"x": 40, "y": -74})

        assert coord.valid is False
        assert coord.errors == (
            "[ERROR] Invalid coordinate object; object must contain valid "
            "latitude and longitude properties.",
        )

    @pytest.mark.parametrize("value", [None, 42, [1, 2, 3], ["1", "2"], 4.5])
    def test_invalid_input_types(self, create, value) -> None:
        coord = create(value)

        assert coord.valid is False
        assert coord.errors == (
            "[ERROR] Invalid coordinate input; expected a string, [lat, lon] "
            "tuple, or { lat, lon } object.",
        )


class TestFormatters:
    """Tests for rendering numeric input."""

    @pytest.fixture
    def coord(self, create):
        return create([51.5074, -0.1278])

    def test_dd(self, coord) -> None:
        assert coord.dd() == "51.5074 N / 0.1278 W"

    def test_ddm(self, coord) -> None:
        assert coord.ddm() == "51 30.444 N / 0 7.668 W"

    def test_dms(self, coord) -> None:
        assert coord.dms() == "51 30 26.64 N / 0 7 40.08 W"

    def test_mgrs(self, coord) -> None:
        assert coord.mgrs().startswith("30U XC ")

    def test_utm(self, coord) -> None:
        zone, easting, northing = coord.utm().split()

        assert zone == "30N"
        assert int(easting) == pytest.approx(699316, abs=1)
        assert int(northing) == pytest.approx(5710164, abs=1)

    def test_format_parameter(self, coord) -> None:
        assert coord.dd("LONLAT") == "0.1278 W / 51.5074 N"
        assert coord.dd(Format.LONLAT) == "0.1278 W / 51.5074 N"

    def test_format_parameter_any_case(self, coord) -> None:
        assert coord.dd("lonlat") == "0.1278 W / 51.5074 N"
        assert coord.dms("LatLon") == "51 30 26.64 N / 0 7 40.08 W"

    def test_unknown_format_parameter(self, coord) -> None:
        with pytest.raises(ValueError):
            coord.dd("NORTHUP")

    def test_factory_format_any_case(self) -> None:
        coord = create_coordinate("dd", "lonlat")([-0.1278, 51.5074])

        assert dict(coord.raw) == {"LAT": 51.5074, "LON": -0.1278}

    def test_grid_outside_domain(self, create) -> None:
        """Polar coordinates have no grid rendering."""
        coord = create([89.5, 10])

        assert coord.valid is True
        assert coord.mgrs() == ""
        assert coord.utm() == ""

    def test_memoized(self, coord) -> None:
        """Each rendering is computed once."""
        assert coord.ddm() is coord.ddm()
        assert coord.utm("LONLAT") is coord.utm("LONLAT")

    def test_axis_swap_of_source_text(self, create) -> None:
        """The opposite ordering of the source notation is a swap of its halves."""
        coord = create("+27.123456789 , -99.987654321")

        assert coord.dd() == "27.123456789 N / 99.987654321 W"
        assert coord.dd("LONLAT") == "99.987654321 W / 27.123456789 N"


class TestImmutability:
    """Tests for the frozen coordinate value."""

    def test_frozen(self, create) -> None:
        coord = create("1 N / 2 E")

        with pytest.raises(dataclasses.FrozenInstanceError):
            coord.valid = False

    def test_raw_read_only(self, create) -> None:
        coord = create("1 N / 2 E")

        with pytest.raises(TypeError):
            coord.raw["LAT"] = 5.0
