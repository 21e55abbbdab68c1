__version__ = "0.1.0"

from dfmc_core.exceptions import FieldError, InvalidInputError, LookupMissError
from dfmc_core.fuel_moisture.categories import Aspect, MonthGroup, SolarTime, Soil
from dfmc_core.fuel_moisture.dfmc import (
    PredictionInput,
    estimate_dfmc,
    estimate_dfmc_dataframe,
)
