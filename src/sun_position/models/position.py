"""Sun position value types.

All angles are in radians. Azimuth follows the convention of the
closed-form formulas: measured from south, increasing towards the west,
in (-pi, pi]. Add pi and wrap to get a north-based bearing.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class EquatorialCoordinates:
    """Right ascension and declination of the Sun, in radians."""

    right_ascension: float
    declination: float


@dataclass(frozen=True)
class SunPosition:
    """Apparent position of the Sun for one instant and observer."""

    azimuth: float  # Radians from south, positive westward
    altitude: float  # Radians above horizon (negative = below)

    @classmethod
    def at(cls, instant: datetime, latitude: float, longitude: float) -> SunPosition:
        """Compute the sun position for an instant and observer (degrees)."""
        # Deferred import: the calculator builds instances of this class
        from sun_position.astronomy.calculator import compute_sun_position

        return compute_sun_position(instant, latitude, longitude)

    @property
    def altitude_deg(self) -> float:
        return math.degrees(self.altitude)

    @property
    def azimuth_deg(self) -> float:
        """Azimuth in degrees, still measured from south."""
        return math.degrees(self.azimuth)

    @property
    def is_day(self) -> bool:
        """Sun above the geometric horizon."""
        return self.altitude > 0
