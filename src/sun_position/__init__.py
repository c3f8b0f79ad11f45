"""Low-precision apparent position of the Sun for an observer on Earth."""

from sun_position.astronomy.calculator import (
    SunCalculator,
    compute_sun_position,
    julian_day,
)
from sun_position.models import Coordinates, EquatorialCoordinates, SunPosition

__all__ = [
    "Coordinates",
    "EquatorialCoordinates",
    "SunCalculator",
    "SunPosition",
    "compute_sun_position",
    "julian_day",
]
