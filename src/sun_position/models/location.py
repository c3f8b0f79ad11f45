"""Observer location model."""

from __future__ import annotations

import re
from typing import Self

from pydantic import BaseModel, ConfigDict, Field


_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)"

# "lat,lon" or "lat lon", signed decimal degrees
OBSERVER_PATTERN = re.compile(
    rf"^(?P<lat>{_NUMBER})\s*(?:,|\s)\s*(?P<lon>{_NUMBER})$"
)


class Coordinates(BaseModel):
    """Geographic coordinates (latitude/longitude) of an observer.

    Latitude:
        - Negative (-) = south of equator
        - Positive (+) = north of equator

    Longitude:
        - Negative (-) = west of prime meridian
        - Positive (+) = east of prime meridian

    Values are not range-checked. Anything outside [-90, 90] / [-180, 180]
    still goes through the solar formulas and yields a mathematically valid
    (if physically meaningless) result; see `is_physical`.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse an observer written as 'lat,lon' or 'lat lon'.

        This is the format of the SUN_POSITION_DEFAULT_OBSERVER setting,
        e.g. '51.5074,-0.1278' for London or '-33.8688 151.2093' for Sydney.
        """
        found = OBSERVER_PATTERN.match(value.strip())
        if found is None:
            raise ValueError(
                f"Invalid coordinate format: {value!r}, "
                "expected 'latitude,longitude' in degrees"
            )
        return cls(latitude=float(found["lat"]), longitude=float(found["lon"]))

    @property
    def is_physical(self) -> bool:
        """True when both values lie on the Earth's graticule."""
        return -90 <= self.latitude <= 90 and -180 <= self.longitude <= 180

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"

    def to_tuple(self) -> tuple[float, float]:
        """Return coordinates as (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)
