# Core imports
import random

# Internal imports
from dfmc_core.fuel_moisture.categories import Aspect, SolarTime, Soil, enum_values
from dfmc_core.tables import BaseMoistureTable, MoistureCorrectionTable

# External imports
import pandas as pd


def make_prediction(**overrides):
    """Keyword arguments for estimate_dfmc built from the worked example."""
    kwargs = dict(
        prediction_time="15:00",
        prediction_month=2,
        solar_time="12:00",
        air_temperature=21,
        relative_humidity=12,
        soil="Exposed",
        slope=13,
        aspect="W",
    )
    kwargs.update(overrides)
    return kwargs


def make_random_prediction(prediction_time=None):
    if prediction_time is None:
        prediction_time = f"{random.randint(0, 23):02d}:{random.randint(0, 59):02d}"

    return make_prediction(
        prediction_time=prediction_time,
        prediction_month=random.randint(1, 12),
        solar_time=random.choice(enum_values(SolarTime)),
        air_temperature=random.uniform(0, 60),
        relative_humidity=random.uniform(0, 100),
        soil=random.choice(enum_values(Soil)),
        slope=random.uniform(0, 90),
        aspect=random.choice(enum_values(Aspect)),
    )


def make_base_table(rows):
    return BaseMoistureTable(
        pd.DataFrame(
            rows,
            columns=[
                "horaPrevision",
                "temperaturaAire",
                "humedadRelativa",
                "humedadResultado",
            ],
        )
    )


def make_corrector_table(rows):
    return MoistureCorrectionTable(
        pd.DataFrame(
            rows,
            columns=[
                "mesPrevision",
                "suelo",
                "exposicion",
                "pendienteHumedad",
                "horaSolar",
                "humedadResultado",
            ],
        )
    )
