"""
Tests for configuration module.
"""

import pytest
from pydantic import ValidationError

from coordkit.core.config import Settings


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self) -> None:
        """Test that default values are set correctly."""
        settings = Settings()
        assert settings.divider == "/"
        assert settings.default_system == "dd"
        assert settings.default_format == "LATLON"
        assert settings.mgrs_precision == 5
        assert settings.api_v1_prefix == "/api/v1"

    def test_custom_values(self) -> None:
        settings = Settings(
            divider="|",
            default_system="mgrs",
            default_format="LONLAT",
            mgrs_precision=3,
            environment="production",
        )

        assert settings.divider == "|"
        assert settings.default_system == "mgrs"
        assert settings.default_format == "LONLAT"
        assert settings.mgrs_precision == 3
        assert settings.environment == "production"

    def test_environment_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings are read from COORDKIT_ prefixed variables."""
        monkeypatch.setenv("COORDKIT_DEFAULT_SYSTEM", "utm")
        monkeypatch.setenv("COORDKIT_MGRS_PRECISION", "2")

        settings = Settings()

        assert settings.default_system == "utm"
        assert settings.mgrs_precision == 2

    @pytest.mark.parametrize("divider", ["", "//", "a", "1", " ", "-", ".", ",", "°"])
    def test_invalid_divider(self, divider: str) -> None:
        with pytest.raises(ValidationError):
            Settings(divider=divider)

    @pytest.mark.parametrize("precision", [0, 6])
    def test_invalid_mgrs_precision(self, precision: int) -> None:
        with pytest.raises(ValidationError):
            Settings(mgrs_precision=precision)

    def test_invalid_default_system(self) -> None:
        with pytest.raises(ValidationError):
            Settings(default_system="geohash")

    def test_cors_origins_list(self) -> None:
        settings = Settings(cors_origins="http://a.test, http://b.test")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
