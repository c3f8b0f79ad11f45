"""Low-precision solar position calculations.

This module computes the Sun's azimuth and altitude for an observer using
the closed-form approximation found in most solar calculators:

- Julian day from an absolute instant
- Mean anomaly and ecliptic longitude (three-term equation of center)
- Ecliptic to equatorial rotation (right ascension, declination)
- Sidereal time and hour angle
- Equatorial to horizontal projection (azimuth, altitude)

Accuracy is a fraction of a degree, which is enough for lighting, shading
and calendar use. Refraction, parallax and nutation are not modelled.

Every function is pure. The angle helpers are written with numpy ufuncs, so
they accept scalars or arrays and let NaN/inf through as NaN instead of
raising like `math.sin` would.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

import numpy as np
from numpy.typing import ArrayLike

from sun_position.config import Settings, get_settings
from sun_position.models.location import Coordinates
from sun_position.models.position import EquatorialCoordinates, SunPosition

logger = logging.getLogger(__name__)

RAD = np.pi / 180.0

OBLIQUITY = RAD * 23.4397  # Obliquity of the ecliptic
PERIHELION = RAD * 102.9372  # Longitude of the Earth's perihelion

SECONDS_PER_DAY = 60 * 60 * 24
J1970 = 2440588.0  # Julian day at the Unix epoch (noon-based)
J2000 = 2451545.0

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _as_aware(instant: datetime) -> datetime:
    """Naive datetimes are taken to be UTC already; aware ones keep their zone."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant


def julian_day(instant: datetime) -> float:
    """Convert an instant to a continuous (fractional) Julian day number.

    Uses timedelta arithmetic from the Unix epoch, which keeps microsecond
    resolution and works for any date `datetime` can represent.
    """
    seconds = (_as_aware(instant) - UNIX_EPOCH) / timedelta(seconds=1)
    return seconds / SECONDS_PER_DAY - 0.5 + J1970


def mean_anomaly(jd: ArrayLike) -> ArrayLike:
    """Sun's mean anomaly in radians for a Julian day."""
    return RAD * (357.5291 + 0.98560028 * (np.asarray(jd) - J2000))


def equation_of_center(m: ArrayLike) -> ArrayLike:
    m = np.asarray(m)
    return RAD * (1.9148 * np.sin(m) + 0.02 * np.sin(2 * m) + 0.0003 * np.sin(3 * m))


def ecliptic_longitude(m: ArrayLike) -> ArrayLike:
    """Ecliptic longitude of the Sun from its mean anomaly (radians)."""
    m = np.asarray(m)
    return m + equation_of_center(m) + PERIHELION + np.pi


def right_ascension(lam: ArrayLike, b: ArrayLike) -> ArrayLike:
    return np.arctan2(
        np.sin(lam) * np.cos(OBLIQUITY) - np.tan(b) * np.sin(OBLIQUITY), np.cos(lam)
    )


def declination(lam: ArrayLike, b: ArrayLike) -> ArrayLike:
    return np.arcsin(
        np.sin(b) * np.cos(OBLIQUITY) + np.cos(b) * np.sin(OBLIQUITY) * np.sin(lam)
    )


def equatorial_coordinates(m: ArrayLike) -> EquatorialCoordinates:
    """Right ascension and declination of the Sun for a mean anomaly.

    The Sun's ecliptic latitude is taken as zero.
    """
    lam = ecliptic_longitude(m)
    b = 0.0
    return EquatorialCoordinates(
        right_ascension=right_ascension(lam, b),
        declination=declination(lam, b),
    )


def sidereal_time(jd: ArrayLike, lw: ArrayLike) -> ArrayLike:
    """Local sidereal time in radians.

    Args:
        jd: Julian day
        lw: Observer longitude in radians, negated (west positive)

    The result is not wrapped to [0, 2*pi); it is only ever fed to
    periodic functions.
    """
    return RAD * (280.16 + 360.9856235 * (np.asarray(jd) - J2000)) - lw


def hour_angle(jd: ArrayLike, lw: ArrayLike, ra: ArrayLike) -> ArrayLike:
    return sidereal_time(jd, lw) - ra


def azimuth(h: ArrayLike, phi: ArrayLike, dec: ArrayLike) -> ArrayLike:
    """Azimuth in radians, measured from south and increasing westward."""
    return np.arctan2(np.sin(h), np.cos(h) * np.sin(phi) - np.tan(dec) * np.cos(phi))


def altitude(h: ArrayLike, phi: ArrayLike, dec: ArrayLike) -> ArrayLike:
    """Altitude above the horizon in radians."""
    return np.arcsin(
        np.sin(phi) * np.sin(dec) + np.cos(phi) * np.cos(dec) * np.cos(h)
    )


def compute_sun_position(
    instant: datetime, latitude: float, longitude: float
) -> SunPosition:
    """Calculate the sun position for an instant and observer.

    Args:
        instant: Absolute time (naive values are read as UTC)
        latitude: Observer latitude in degrees, north positive
        longitude: Observer longitude in degrees, east positive

    Returns:
        SunPosition with azimuth (from south) and altitude in radians
    """
    lw = RAD * -longitude
    phi = RAD * latitude
    jd = julian_day(instant)

    # Non-finite coordinates must come out as NaN, not as a warning
    with np.errstate(invalid="ignore"):
        coords = equatorial_coordinates(mean_anomaly(jd))
        h = hour_angle(jd, lw, coords.right_ascension)

        position = SunPosition(
            azimuth=float(azimuth(h, phi, coords.declination)),
            altitude=float(altitude(h, phi, coords.declination)),
        )

    logger.debug(
        "Sun position at %s for (%s, %s): azimuth=%.6f altitude=%.6f",
        instant,
        latitude,
        longitude,
        position.azimuth,
        position.altitude,
    )
    return position


class SunCalculator:
    """Calculator for the sun's position at a fixed location.

    Example:
        ```python
        calc = SunCalculator(Coordinates(latitude=51.5074, longitude=-0.1278))

        # Sun position right now
        sun = calc.sun_position(datetime.now(timezone.utc))

        # Positions every hour of a day
        path = calc.path(start + timedelta(hours=i) for i in range(24))
        ```
    """

    def __init__(self, coordinates: Coordinates):
        """Initialize calculator for a specific location.

        Args:
            coordinates: Geographic coordinates of the observer
        """
        self.coordinates = coordinates

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> SunCalculator:
        """Build a calculator for the configured default observer.

        Raises:
            ValueError: If no default coordinates are configured
        """
        settings = settings or get_settings()
        coordinates = settings.default_coordinates
        if coordinates is None:
            raise ValueError(
                "No default observer configured; set SUN_POSITION_DEFAULT_OBSERVER "
                "or SUN_POSITION_DEFAULT_LATITUDE and SUN_POSITION_DEFAULT_LONGITUDE"
            )
        logger.info(f"Using default observer at {coordinates}")
        return cls(coordinates)

    def sun_position(self, instant: datetime) -> SunPosition:
        """Get sun position at the given instant."""
        return compute_sun_position(
            instant, self.coordinates.latitude, self.coordinates.longitude
        )

    def path(self, instants: Iterable[datetime]) -> list[SunPosition]:
        """Sun positions for a sequence of instants, in the same order."""
        return [self.sun_position(instant) for instant in instants]

    def is_day(self, instant: datetime) -> bool:
        """Check if the sun is above the horizon."""
        return self.sun_position(instant).is_day
