# Core imports
from __future__ import annotations
from numbers import Integral, Real

# Internal imports
from dfmc_core.exceptions import FieldError, InvalidInputError
from dfmc_core.fuel_moisture.categories import (
    Aspect,
    SolarTime,
    Soil,
    enum_values,
)


def _is_time_string(value) -> bool:
    if not isinstance(value, str) or len(value) != 5:
        return False
    if value[2] != ":":
        return False
    digits = value[0] + value[1] + value[3] + value[4]
    if not (digits.isascii() and digits.isdigit()):
        return False
    return int(value[:2]) <= 23 and int(value[3:]) <= 59


def _in_range(value, low, high) -> bool:
    # NaN fails both comparisons
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and low <= value <= high
    )


def _is_member(value, enum_cls) -> bool:
    try:
        enum_cls(value)
    except ValueError:
        return False
    return True


def _check_prediction_time(value):
    if not _is_time_string(value):
        return FieldError("prediction_time", value, "a correct time [hh:mm]")


def _check_prediction_month(value):
    if (
        not isinstance(value, Integral)
        or isinstance(value, bool)
        or not 1 <= value <= 12
    ):
        return FieldError("prediction_month", value, "an integer between [1, 12]")


def _check_solar_time(value):
    if not _is_member(value, SolarTime):
        return FieldError(
            "solar_time", value, f"one of {', '.join(enum_values(SolarTime))}"
        )


def _check_air_temperature(value):
    if not _in_range(value, 0, 200):
        return FieldError("air_temperature", value, "between [0, 200]")


def _check_relative_humidity(value):
    if not _in_range(value, 0, 100):
        return FieldError("relative_humidity", value, "between [0, 100]")


def _check_soil(value):
    if not _is_member(value, Soil):
        return FieldError("soil", value, f"one of {', '.join(enum_values(Soil))}")


def _check_slope(value):
    if not _in_range(value, 0, 90):
        return FieldError("slope", value, "between [0, 90]")


def _check_aspect(value):
    if not _is_member(value, Aspect):
        return FieldError(
            "aspect", value, f"one of {', '.join(enum_values(Aspect))}"
        )


def validate_inputs(
    prediction_time,
    prediction_month,
    solar_time,
    air_temperature,
    relative_humidity,
    soil,
    slope,
    aspect,
) -> bool:
    """
    Check every prediction input against its domain.

    Each field is checked independently and all checks run before anything
    is raised, so a single error reports every offending field.

    Parameters
    ----------
    prediction_time : str
        Time of prediction, "hh:mm".
    prediction_month : int
        Month of prediction [1-12].
    solar_time : str or SolarTime
        Solar hour, one of "08:00", "10:00", "12:00", "14:00", "16:00",
        "18:00".
    air_temperature : float
        Air temperature in degrees Celsius [0-200].
    relative_humidity : float
        Relative humidity in percent [0-100].
    soil : str or Soil
        "Exposed" or "Shaded".
    slope : float
        Terrain slope in degrees [0-90].
    aspect : str or Aspect
        "N", "S", "W" or "E".

    Returns
    -------
    bool
        True when every field is valid.

    Raises
    ------
    InvalidInputError
        If any field is outside its domain.
    """
    results = [
        _check_prediction_time(prediction_time),
        _check_prediction_month(prediction_month),
        _check_solar_time(solar_time),
        _check_air_temperature(air_temperature),
        _check_relative_humidity(relative_humidity),
        _check_soil(soil),
        _check_slope(slope),
        _check_aspect(aspect),
    ]
    errors = [error for error in results if error is not None]
    if errors:
        raise InvalidInputError(errors)

    return True
