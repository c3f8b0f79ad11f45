"""Solar position calculations."""

from sun_position.astronomy.calculator import (
    SunCalculator,
    altitude,
    azimuth,
    compute_sun_position,
    declination,
    ecliptic_longitude,
    equation_of_center,
    equatorial_coordinates,
    hour_angle,
    julian_day,
    mean_anomaly,
    right_ascension,
    sidereal_time,
)

__all__ = [
    "SunCalculator",
    "altitude",
    "azimuth",
    "compute_sun_position",
    "declination",
    "ecliptic_longitude",
    "equation_of_center",
    "equatorial_coordinates",
    "hour_angle",
    "julian_day",
    "mean_anomaly",
    "right_ascension",
    "sidereal_time",
]
