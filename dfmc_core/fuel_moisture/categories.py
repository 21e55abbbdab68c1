# Core imports
from __future__ import annotations
from enum import Enum


class SolarTime(str, Enum):
    """
    Solar (sun) hours used by the correction table. Solar time is local time
    minus 2 hours in summer and minus 1 hour in winter.
    """

    H08: str = "08:00"
    H10: str = "10:00"
    H12: str = "12:00"
    H14: str = "14:00"
    H16: str = "16:00"
    H18: str = "18:00"


class Soil(str, Enum):
    """
    Shading of surface fuels.

    Attributes
    ----------
    EXPOSED : str
        Less than 50% shading of surface fuels.
    SHADED : str
        50% or more shading of surface fuels.
    """

    EXPOSED: str = "Exposed"
    SHADED: str = "Shaded"


class Aspect(str, Enum):
    """
    Enumeration for cardinal directions the slope faces.
    """

    NORTH: str = "N"
    SOUTH: str = "S"
    WEST: str = "W"
    EAST: str = "E"


class MonthGroup(str, Enum):
    """
    The three month groups of the correction table. Each value lists the
    English month names that share a correction table.
    """

    SPRING_AUTUMN: str = "February-March-April-August-September-October"
    SUMMER: str = "May-June-July"
    WINTER: str = "November-December-January"


class TimeBand(str, Enum):
    """
    Prediction time windows of the base table.
    """

    DAYTIME: str = "08:00-19:59"
    NIGHTTIME: str = "20:00-07:59"


DAYTIME_START = "08:00"
DAYTIME_END = "19:59"

TEMPERATURE_BANDS = ["0-9", "10-20", "21-31", "32-42", ">43"]
HUMIDITY_BANDS = [f"{low}-{low + 4}" for low in range(0, 100, 5)] + ["100"]
SLOPE_BANDS = ["0", "0-30", ">30"]


def enum_values(enum_cls) -> list[str]:
    """Return the string values of a ``str`` enumeration, in definition order."""
    return [member.value for member in enum_cls]
