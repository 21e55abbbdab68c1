"""
Discretization of prediction inputs into reference table bucket keys
===================================================================

The reference tables are stepwise: every continuous input is mapped onto a
categorical band and the bands are used verbatim as lookup keys. There is no
interpolation between bands.

Temperature and humidity are rounded half up to the nearest integer before
banding, so 9.5 degrees falls in the "10-20" band and 4.5% humidity in the
"5-9" band.
"""

# Core imports
from __future__ import annotations
from typing import NamedTuple

# Internal imports
from dfmc_core.fuel_moisture.categories import (
    DAYTIME_END,
    DAYTIME_START,
    TEMPERATURE_BANDS,
    MonthGroup,
    TimeBand,
)

# External imports
import numpy as np


# Lower bound of every temperature band after the first
TEMP_BREAKPOINTS = np.array([10, 21, 32, 43])

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


class BucketKey(NamedTuple):
    """
    Band strings used to index the base and correction tables.
    """

    time_band: str
    temperature_band: str
    humidity_band: str
    month_band: str
    slope_band: str


def _round_half_up(value) -> int:
    return int(np.floor(value + 0.5))


def is_daytime(prediction_time: str) -> bool:
    """
    Whether a "hh:mm" time lies in the daytime window [08:00, 19:59].

    Zero padded "hh:mm" strings sort chronologically, so the window test is
    a plain string comparison.
    """
    return DAYTIME_START <= prediction_time <= DAYTIME_END


def get_time_band(prediction_time: str) -> str:
    if is_daytime(prediction_time):
        return TimeBand.DAYTIME.value
    return TimeBand.NIGHTTIME.value


def get_temperature_band(air_temperature: float) -> str:
    """
    Map an air temperature (degrees C) to its base table band.

    Parameters
    ----------
    air_temperature : float
        Air temperature in degrees Celsius, at least 0.

    Returns
    -------
    str
        One of "0-9", "10-20", "21-31", "32-42" or ">43".
    """
    temperature = _round_half_up(air_temperature)
    index = int(np.digitize(temperature, TEMP_BREAKPOINTS))
    return TEMPERATURE_BANDS[index]


def get_humidity_band(relative_humidity: float) -> str:
    """
    Map a relative humidity (%) to its 5-wide base table band, or "100".
    """
    humidity = _round_half_up(relative_humidity)
    if humidity == 100:
        return "100"

    low = humidity // 5 * 5
    return f"{low}-{low + 4}"


def get_month_band(prediction_month: int) -> str:
    """
    Map a month number (1-12) to the correction table month group.

    Raises
    ------
    ValueError
        If the month name belongs to no month group.
    """
    month_name = MONTH_NAMES[prediction_month - 1]
    for group in MonthGroup:
        if month_name in group.value.split("-"):
            return group.value

    raise ValueError(f"Month {month_name} does not belong to any month group")


def get_slope_band(slope: float) -> str:
    if 0 < slope <= 30:
        return "0-30"
    elif slope > 30:
        return ">30"
    else:
        return "0"


def discretize(prediction) -> BucketKey:
    """
    Compute every bucket key for a validated ``PredictionInput``.
    """
    return BucketKey(
        time_band=get_time_band(prediction.prediction_time),
        temperature_band=get_temperature_band(prediction.air_temperature),
        humidity_band=get_humidity_band(prediction.relative_humidity),
        month_band=get_month_band(prediction.prediction_month),
        slope_band=get_slope_band(prediction.slope),
    )
