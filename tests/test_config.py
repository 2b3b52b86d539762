"""
Tests for tunable reading and validation.
"""

import json

import pytest
from smooth_scroller import (
    DEFAULT_CONFIGURATION,
    ConfigurationError,
    MappingConfigProvider,
    SmoothScrollerProperty,
    read_configuration,
)


class TestReadConfiguration:

    def test_defaults_round_trip(self):
        config = read_configuration(MappingConfigProvider.with_defaults())
        assert config == DEFAULT_CONFIGURATION

    def test_overrides(self):
        config = read_configuration(MappingConfigProvider.with_defaults(friction=0.02))
        assert config.friction == pytest.approx(0.02)
        assert config.threshold == pytest.approx(DEFAULT_CONFIGURATION.threshold)

    def test_enum_and_upper_case_keys(self):
        provider = MappingConfigProvider.with_defaults()
        provider.set(SmoothScrollerProperty.SPEED_LIMIT, 3.0)
        provider.set("MULTIPLIER", 12.0)
        config = read_configuration(provider)
        assert config.speed_limit == pytest.approx(3.0)
        assert config.multiplier == pytest.approx(12.0)

    def test_numeric_strings_accepted(self):
        provider = MappingConfigProvider.with_defaults(threshold="0.2")
        assert read_configuration(provider).threshold == pytest.approx(0.2)


class TestValidation:

    def test_missing_key(self):
        values = DEFAULT_CONFIGURATION.as_dict()
        del values["friction"]
        with pytest.raises(ConfigurationError):
            read_configuration(MappingConfigProvider(values))

    @pytest.mark.parametrize(
        "key, value",
        [
            ("threshold", -0.1),
            ("speed_limit", 0.0),
            ("acceleration_limit", 0.0),
            ("multiplier", -1.0),
            ("friction", -0.001),
            ("threshold", float("nan")),
            ("speed_limit", float("inf")),
            ("friction", "fast"),
            ("multiplier", None),
            ("threshold", True),
        ],
    )
    def test_invalid_values(self, key, value):
        provider = MappingConfigProvider.with_defaults(**{key: value})
        with pytest.raises(ConfigurationError):
            read_configuration(provider)

    def test_zero_threshold_allowed(self):
        """An explicit zero threshold is a user choice, not a missing value."""
        config = read_configuration(MappingConfigProvider.with_defaults(threshold=0.0))
        assert config.threshold == 0.0

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError):
            MappingConfigProvider({"inertia": 1.0})

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)


class TestJsonProvider:

    def test_from_json(self, tmp_path):
        path = tmp_path / "scroller.json"
        values = DEFAULT_CONFIGURATION.as_dict()
        values["speed_limit"] = 4.0
        path.write_text(json.dumps(values), encoding="utf-8")

        config = read_configuration(MappingConfigProvider.from_json(str(path)))

        assert config.speed_limit == pytest.approx(4.0)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "scroller.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            MappingConfigProvider.from_json(str(path))

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "scroller.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            MappingConfigProvider.from_json(str(path))
