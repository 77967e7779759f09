"""
Conversion between displayed temperatures and Eight Sleep device levels.

The Pod stores an integer level in [-100, 100]. Temperatures are shown in
Celsius with a step of one degree Fahrenheit, which is finer than the
temperature difference between two neighbouring points of the calibration
curve, so a displayed temperature maps to a level and back without moving to
another step.

All functions are pure.
"""

import math
from dataclasses import dataclass
from typing import Sequence

from eightsleep.const import (
    LEVEL_CALIBRATION,
    MAX_LEVEL,
    MAX_TEMP_C,
    MIN_LEVEL,
    MIN_TEMP_C,
)
from eightsleep.exceptions import MappingOutOfRangeException


@dataclass(frozen=True)
class LevelResult:
    """Result of mapping a temperature to a level."""

    level: int

    @property
    def is_valid(self) -> bool:
        return MIN_LEVEL <= self.level <= MAX_LEVEL

    def unwrap(self) -> int:
        """Return the level or raise if it is outside of the device range."""

        if not self.is_valid:
            raise MappingOutOfRangeException(
                f"Level {self.level} out of range [{MIN_LEVEL}, {MAX_LEVEL}]"
            )

        return self.level


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return round((fahrenheit - 32) * 5 / 9, 2)


def _interpolate(
    x: float, points: Sequence[tuple[float, float]], extrapolate: bool
) -> float:
    if not extrapolate:
        x = min(max(x, points[0][0]), points[-1][0])

    for (x0, y0), (x1, y1) in zip(points, points[1:]):
        if x <= x1:
            break

    return y0 + (x - x0) * (y1 - y0) / (x1 - x0)


_FAHRENHEIT_TO_LEVEL = tuple((f, float(level)) for level, f in LEVEL_CALIBRATION)

_MIN_FAHRENHEIT = math.ceil(celsius_to_fahrenheit(MIN_TEMP_C))
_MAX_FAHRENHEIT = math.floor(celsius_to_fahrenheit(MAX_TEMP_C))


def level_to_celsius(level: int) -> float:
    """Return the displayed temperature for a device level."""

    fahrenheit = round(_interpolate(level, LEVEL_CALIBRATION, extrapolate=False))
    return fahrenheit_to_celsius(fahrenheit)


def celsius_to_level(temperature: float) -> LevelResult:
    """Return the device level for a temperature.

    Temperatures outside of the calibrated range produce a level outside of
    [-100, 100]; check `LevelResult.is_valid` before sending it.
    """

    fahrenheit = celsius_to_fahrenheit(temperature)
    level = _interpolate(fahrenheit, _FAHRENHEIT_TO_LEVEL, extrapolate=True)
    return LevelResult(round(level))


def format_celsius(temperature: float) -> float:
    """Snap a temperature to the closest displayable step inside the range."""

    temperature = min(max(temperature, MIN_TEMP_C), MAX_TEMP_C)
    fahrenheit = round(celsius_to_fahrenheit(temperature))
    fahrenheit = min(max(fahrenheit, _MIN_FAHRENHEIT), _MAX_FAHRENHEIT)
    return fahrenheit_to_celsius(fahrenheit)


def get_level_from(fahrenheit: float) -> LevelResult:
    """Return the device level for a temperature in Fahrenheit."""

    return celsius_to_level(fahrenheit_to_celsius(fahrenheit))
