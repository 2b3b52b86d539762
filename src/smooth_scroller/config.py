"""
Configuration for the smooth scroller.

The five tunables are owned by a configuration provider and re-read on every
wheel event and every timer tick, so a settings page can tune the feel of the
scroller while it is running.

Date: October 19, 2026
"""

import json
import math
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, Mapping, Optional


class ConfigurationError(ValueError):
    """Raised when a tunable is missing or holds an unusable value."""


class SmoothScrollerProperty(str, Enum):
    THRESHOLD = "threshold"
    SPEED_LIMIT = "speed_limit"
    ACCELERATION_LIMIT = "acceleration_limit"
    MULTIPLIER = "multiplier"
    FRICTION = "friction"


@dataclass(frozen=True)
class SmoothScrollerConfiguration:
    """
    One snapshot of the scroller tunables.

    Attributes:
        threshold: Minimum |velocity| (and |delta v| per wheel event) that is
            considered non-negligible, in offset units per ms.
            Typical: 0.01–0.2.
        speed_limit: Maximum |velocity| in offset units per ms.
            Typical: 2–15.
        acceleration_limit: Maximum velocity change per ms, measured over one
            frame. Typical: 0.1–1.0.
        multiplier: Scales each wheel notch before it becomes a velocity
            increment. Typical: 10–60.
        friction: Exponential decay rate (1/ms) applied once wheel input has
            settled. Typical: 0.002–0.02.
    """
    threshold: float
    speed_limit: float
    acceleration_limit: float
    multiplier: float
    friction: float

    def validate(self) -> "SmoothScrollerConfiguration":
        for prop in SmoothScrollerProperty:
            value = getattr(self, prop.value)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ConfigurationError(f"{prop.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigurationError(f"{prop.name} must be finite, got {value!r}")
        if self.threshold < 0:
            raise ConfigurationError("THRESHOLD must be >= 0")
        if self.speed_limit <= 0:
            raise ConfigurationError("SPEED_LIMIT must be > 0")
        if self.acceleration_limit <= 0:
            raise ConfigurationError("ACCELERATION_LIMIT must be > 0")
        if self.multiplier <= 0:
            raise ConfigurationError("MULTIPLIER must be > 0")
        if self.friction < 0:
            raise ConfigurationError("FRICTION must be >= 0")
        return self

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


DEFAULT_CONFIGURATION = SmoothScrollerConfiguration(
    threshold=0.05,
    speed_limit=8.0,
    acceleration_limit=0.5,
    multiplier=30.0,
    friction=0.005,
)


class ConfigProvider(ABC):
    """Source of tunables. Implementations return the current value for ``key``."""

    @abstractmethod
    def get(self, key: SmoothScrollerProperty) -> float:
        pass


class MappingConfigProvider(ConfigProvider):
    """Config provider backed by a mutable mapping of property name -> value.

    Values can be changed at any time with :meth:`set`; the scroller picks
    them up on its next event or tick.
    """

    def __init__(self, values: Optional[Mapping[str, float]] = None):
        self._values: Dict[str, float] = {}
        for key, value in (values or {}).items():
            self._values[_key_name(key)] = value

    @classmethod
    def with_defaults(cls, **overrides: float) -> "MappingConfigProvider":
        values = DEFAULT_CONFIGURATION.as_dict()
        values.update(overrides)
        return cls(values)

    @classmethod
    def from_json(cls, path: str) -> "MappingConfigProvider":
        """Load tunables from a JSON object such as ``{"threshold": 0.05, ...}``."""
        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid JSON in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a JSON object in {path}, got {type(data).__name__}")
        return cls(data)

    def set(self, key, value: float) -> None:
        self._values[_key_name(key)] = value

    def get(self, key: SmoothScrollerProperty) -> float:
        name = _key_name(key)
        if name not in self._values:
            raise ConfigurationError(f"Missing configuration value for {name!r}")
        return self._values[name]


def read_configuration(provider: ConfigProvider) -> SmoothScrollerConfiguration:
    """Read every tunable from ``provider`` and validate the snapshot."""
    values = {}
    for prop in SmoothScrollerProperty:
        raw = provider.get(prop)
        try:
            values[prop.value] = float(raw) if not isinstance(raw, bool) else raw
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"{prop.name} must be a number, got {raw!r}") from exc
    return SmoothScrollerConfiguration(**values).validate()


def _key_name(key) -> str:
    if isinstance(key, SmoothScrollerProperty):
        return key.value
    name = str(key).lower()
    valid = {prop.value for prop in SmoothScrollerProperty}
    if name not in valid:
        raise ConfigurationError(
            f"Unknown configuration key {key!r}. Valid options: {', '.join(sorted(valid))}"
        )
    return name
