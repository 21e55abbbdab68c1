"""
Dead Fuel Moisture Content estimation from reference tables
===========================================================

This module estimates the moisture content of dead fuels finer than 6 mm
from weather and terrain readings. The estimate is the sum of two table
lookups:

    - A base moisture, indexed by prediction time window, air temperature
      band and relative humidity band.
    - A daytime correction (08:00-19:59 only), indexed by month group, soil
      shading, aspect, slope band and solar hour.

The model is deliberately stepwise: inputs are discretized into the bands
of the empirical tables and no interpolation takes place between bands.

Examples
--------
>>> from dfmc_core import estimate_dfmc
>>> estimate_dfmc(
...     prediction_time="15:00",
...     prediction_month=2,
...     solar_time="12:00",
...     air_temperature=21,
...     relative_humidity=12,
...     soil="Exposed",
...     slope=13,
...     aspect="W",
... )
4.0
"""

# Core imports
from __future__ import annotations
import logging
from dataclasses import dataclass

# Internal imports
from dfmc_core import ref_data
from dfmc_core.fuel_moisture.categories import Aspect, SolarTime, Soil
from dfmc_core.fuel_moisture.discretization import discretize, is_daytime
from dfmc_core.fuel_moisture.validation import validate_inputs
from dfmc_core.tables import BaseMoistureTable, MoistureCorrectionTable

# External imports
import pandas as pd
from pandera import DataFrameSchema, Column


logger = logging.getLogger(__name__)


PREDICTION_SCHEMA = DataFrameSchema(
    columns={
        "PREDICTION_TIME": Column(str, title="Prediction time [hh:mm]"),
        # Not coerced, so fractional months reach the validator unchanged
        "PREDICTION_MONTH": Column(title="Prediction month [1-12]"),
        "SOLAR_TIME": Column(str, title="Solar hour"),
        "AIR_TEMPERATURE": Column(float, title="Air temperature (C)"),
        "RELATIVE_HUMIDITY": Column(float, title="Relative humidity (%)"),
        "SOIL": Column(str, title="Soil shading"),
        "SLOPE": Column(float, title="Terrain slope (degrees)"),
        "ASPECT": Column(str, title="Aspect"),
    },
    coerce=True,
)


@dataclass(frozen=True)
class PredictionInput:
    prediction_time: str
    prediction_month: int
    solar_time: SolarTime
    air_temperature: float
    relative_humidity: float
    soil: Soil
    slope: float
    aspect: Aspect


def estimate_dfmc(
    prediction_time: str,
    prediction_month: int,
    solar_time: SolarTime | str,
    air_temperature: float,
    relative_humidity: float,
    soil: Soil | str,
    slope: float,
    aspect: Aspect | str,
    base_table: BaseMoistureTable | None = None,
    corrector_table: MoistureCorrectionTable | None = None,
) -> float:
    """Estimate the Dead Fuel Moisture Content (< 6 mm) in percent.

    Parameters
    ----------
    prediction_time : str
        Local time of the prediction, "hh:mm".
    prediction_month : int
        Month of the prediction [1-12].
    solar_time : SolarTime or str
        Solar (sun) hour: local time minus 2 hours in summer and minus 1 hour
        in winter. One of "08:00", "10:00", "12:00", "14:00", "16:00",
        "18:00".
    air_temperature : float
        Air temperature in degrees Celsius [0-200].
    relative_humidity : float
        Relative humidity in percent [0-100].
    soil : Soil or str
        "Exposed" (less than 50% shading of surface fuels) or "Shaded" (50%
        or more shading of surface fuels).
    slope : float
        Terrain slope in degrees, from 0 (horizontal) to 90 (vertical).
    aspect : Aspect or str
        Direction the slope faces: "N", "S", "W" or "E".
    base_table : BaseMoistureTable, optional
        Base moisture table. Defaults to the packaged table.
    corrector_table : MoistureCorrectionTable, optional
        Daytime correction table. Defaults to the packaged table.

    Returns
    -------
    float
        Dead fuel moisture content in percent.

    Notes
    -----
    The correction is only added when ``prediction_time`` lies within
    08:00-19:59. At night the result is the base table value and the
    correction table is not consulted.

    Raises
    ------
    InvalidInputError
        If any input is outside its domain. Every field is checked and all
        violations are reported together.
    LookupMissError
        If a reference table has no row for the discretized inputs.
    """
    validate_inputs(
        prediction_time,
        prediction_month,
        solar_time,
        air_temperature,
        relative_humidity,
        soil,
        slope,
        aspect,
    )
    prediction = PredictionInput(
        prediction_time=prediction_time,
        prediction_month=int(prediction_month),
        solar_time=SolarTime(solar_time),
        air_temperature=air_temperature,
        relative_humidity=relative_humidity,
        soil=Soil(soil),
        slope=slope,
        aspect=Aspect(aspect),
    )

    if base_table is None:
        base_table = ref_data.BASE_TABLE
    if corrector_table is None:
        corrector_table = ref_data.CORRECTOR_TABLE

    key = discretize(prediction)
    logger.debug("Bucket key for %s: %s", prediction, key)

    dfmc = base_table.lookup(key.time_band, key.temperature_band, key.humidity_band)

    if is_daytime(prediction.prediction_time):
        dfmc += corrector_table.lookup(
            key.month_band,
            prediction.soil.value,
            prediction.aspect.value,
            key.slope_band,
            prediction.solar_time.value,
        )

    return dfmc


def estimate_dfmc_dataframe(
    predictions: pd.DataFrame,
    base_table: BaseMoistureTable | None = None,
    corrector_table: MoistureCorrectionTable | None = None,
) -> pd.Series:
    """
    Estimate the Dead Fuel Moisture Content for every row of a DataFrame.

    Parameters
    ----------
    predictions : DataFrame
        One prediction per row, with the columns PREDICTION_TIME,
        PREDICTION_MONTH, SOLAR_TIME, AIR_TEMPERATURE, RELATIVE_HUMIDITY,
        SOIL, SLOPE and ASPECT. Columns are coerced to their expected dtypes,
        except PREDICTION_MONTH which must already hold integers.
    base_table : BaseMoistureTable, optional
        Base moisture table. Defaults to the packaged table.
    corrector_table : MoistureCorrectionTable, optional
        Daytime correction table. Defaults to the packaged table.

    Returns
    -------
    Series
        Float series named "DFMC" on the index of ``predictions``.

    Raises
    ------
    pandera.errors.SchemaError
        If a column is missing or cannot be coerced to its dtype.
    InvalidInputError
        If a row holds a value outside its domain.
    """
    df = PREDICTION_SCHEMA.validate(predictions)

    results = [
        estimate_dfmc(
            row.PREDICTION_TIME,
            row.PREDICTION_MONTH,
            row.SOLAR_TIME,
            row.AIR_TEMPERATURE,
            row.RELATIVE_HUMIDITY,
            row.SOIL,
            row.SLOPE,
            row.ASPECT,
            base_table=base_table,
            corrector_table=corrector_table,
        )
        for row in df.itertuples(index=False)
    ]
    logger.debug("Estimated DFMC for %d predictions", len(results))

    return pd.Series(results, index=df.index, name="DFMC", dtype=float)
