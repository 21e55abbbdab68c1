# Core imports
from __future__ import annotations
import logging
from typing import NamedTuple

# Internal imports
from dfmc_core.base import ReferenceTable
from dfmc_core.fuel_moisture.categories import (
    HUMIDITY_BANDS,
    SLOPE_BANDS,
    TEMPERATURE_BANDS,
    Aspect,
    MonthGroup,
    SolarTime,
    TimeBand,
    enum_values,
)

# External Imports
from pandas import DataFrame, Series
from pandera import DataFrameSchema, Column, Check


logger = logging.getLogger(__name__)


RESULT_COLUMN = Column(
    float,
    nullable=False,
    title="Moisture result (%)",
    description="Tabulated dead fuel moisture content or correction",
)


class ReferenceRow(NamedTuple):
    horaPrevision: str
    temperaturaAire: str
    humedadRelativa: str
    humedadResultado: float


class CorrectorRow(NamedTuple):
    mesPrevision: str
    suelo: str
    exposicion: str
    pendienteHumedad: str
    horaSolar: str
    humedadResultado: float


class BaseMoistureTable(ReferenceTable):
    """
    Base dead fuel moisture table keyed by prediction time window, air
    temperature band and relative humidity band.
    """

    name = "base table"
    key_columns = ["horaPrevision", "temperaturaAire", "humedadRelativa"]
    schema = DataFrameSchema(
        columns={
            "horaPrevision": Column(
                str,
                checks=Check.isin(enum_values(TimeBand)),
                title="Prediction time window",
            ),
            "temperaturaAire": Column(
                str,
                checks=Check.isin(TEMPERATURE_BANDS),
                title="Air temperature band (C)",
            ),
            "humedadRelativa": Column(
                str,
                checks=Check.isin(HUMIDITY_BANDS),
                title="Relative humidity band (%)",
            ),
            "humedadResultado": RESULT_COLUMN,
        },
        coerce=True,
    )

    def _row_to_object(self, row: Series) -> ReferenceRow:
        return ReferenceRow(
            horaPrevision=row["horaPrevision"],
            temperaturaAire=row["temperaturaAire"],
            humedadRelativa=row["humedadRelativa"],
            humedadResultado=float(row["humedadResultado"]),
        )

    def lookup(
        self, time_band: str, temperature_band: str, humidity_band: str
    ) -> float:
        """
        Return the moisture of the first row matching all three bands.

        Parameters
        ----------
        time_band : str
            "08:00-19:59" or "20:00-07:59".
        temperature_band : str
            Air temperature band, e.g. "21-31".
        humidity_band : str
            Relative humidity band, e.g. "10-14" or "100".

        Returns
        -------
        float
            Dead fuel moisture content in percent.

        Raises
        ------
        LookupMissError
            If no row matches.
        """
        key = {
            "horaPrevision": time_band,
            "temperaturaAire": temperature_band,
            "humedadRelativa": humidity_band,
        }
        mask = (
            (self.data["horaPrevision"] == time_band)
            & (self.data["temperaturaAire"] == temperature_band)
            & (self.data["humedadRelativa"] == humidity_band)
        )
        value = self._first_match(mask, key)
        logger.debug("Base moisture %s for %s", value, key)
        return value


class MoistureCorrectionTable(ReferenceTable):
    """
    Daytime correction table keyed by month group, soil shading, aspect,
    slope band and solar hour.

    The soil column may list several soil values in a single row (for
    example "Exposed,Shaded") and is matched by substring.
    """

    name = "corrector table"
    key_columns = [
        "mesPrevision",
        "suelo",
        "exposicion",
        "pendienteHumedad",
        "horaSolar",
    ]
    schema = DataFrameSchema(
        columns={
            "mesPrevision": Column(
                str,
                checks=Check.isin(enum_values(MonthGroup)),
                title="Month group",
            ),
            "suelo": Column(
                str,
                checks=Check.str_matches(r"^(Exposed|Shaded)(,(Exposed|Shaded))*$"),
                title="Soil shading",
            ),
            "exposicion": Column(
                str,
                checks=Check.isin(enum_values(Aspect)),
                title="Aspect",
            ),
            "pendienteHumedad": Column(
                str,
                checks=Check.isin(SLOPE_BANDS),
                title="Slope band (degrees)",
            ),
            "horaSolar": Column(
                str,
                checks=Check.isin(enum_values(SolarTime)),
                title="Solar hour",
            ),
            "humedadResultado": RESULT_COLUMN,
        },
        coerce=True,
    )

    def _row_to_object(self, row: Series) -> CorrectorRow:
        return CorrectorRow(
            mesPrevision=row["mesPrevision"],
            suelo=row["suelo"],
            exposicion=row["exposicion"],
            pendienteHumedad=row["pendienteHumedad"],
            horaSolar=row["horaSolar"],
            humedadResultado=float(row["humedadResultado"]),
        )

    def _key_frame(self) -> DataFrame:
        # "Exposed,Shaded" keys the same lookups as an "Exposed" and a
        # "Shaded" row
        keys = self.data[self.key_columns]
        return keys.assign(suelo=keys["suelo"].str.split(",")).explode("suelo")

    def lookup(
        self,
        month_band: str,
        soil: str,
        aspect: str,
        slope_band: str,
        solar_time: str,
    ) -> float:
        """
        Return the correction of the first row matching the keys.

        Parameters
        ----------
        month_band : str
            Month group, e.g. "May-June-July".
        soil : str
            "Exposed" or "Shaded". Matched as a substring of the row's soil.
        aspect : str
            "N", "S", "W" or "E".
        slope_band : str
            "0", "0-30" or ">30".
        solar_time : str
            Solar hour, e.g. "12:00".

        Returns
        -------
        float
            Signed correction in percent.

        Raises
        ------
        LookupMissError
            If no row matches.
        """
        key = {
            "mesPrevision": month_band,
            "suelo": soil,
            "exposicion": aspect,
            "pendienteHumedad": slope_band,
            "horaSolar": solar_time,
        }
        mask = (
            (self.data["mesPrevision"] == month_band)
            & self.data["suelo"].str.contains(soil, regex=False)
            & (self.data["exposicion"] == aspect)
            & (self.data["pendienteHumedad"] == slope_band)
            & (self.data["horaSolar"] == solar_time)
        )
        value = self._first_match(mask, key)
        logger.debug("Moisture correction %s for %s", value, key)
        return value
