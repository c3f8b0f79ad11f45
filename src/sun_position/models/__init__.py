"""Value types for solar position calculations."""

from sun_position.models.location import Coordinates
from sun_position.models.position import EquatorialCoordinates, SunPosition

__all__ = [
    "Coordinates",
    "EquatorialCoordinates",
    "SunPosition",
]
