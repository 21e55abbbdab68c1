# Core imports
from __future__ import annotations
import logging
from importlib.resources import files

# Internal imports
from dfmc_core.tables import BaseMoistureTable, MoistureCorrectionTable

# External imports
import pandas as pd


logger = logging.getLogger(__name__)

DATA_PATH = files("dfmc_core") / "data"
BASE_TABLE_FILE = "base_table.csv"
CORRECTOR_TABLE_FILE = "corrector_table.csv"


def load_base_table(path=None) -> BaseMoistureTable:
    """
    Read the base moisture table from a CSV file. Defaults to the packaged
    table.
    """
    path = path if path is not None else DATA_PATH / BASE_TABLE_FILE
    data = pd.read_csv(  # type: ignore
        path,
        dtype={
            "horaPrevision": str,
            "temperaturaAire": str,
            "humedadRelativa": str,
        },
    )
    logger.debug("Loaded %d base table rows from %s", len(data), path)
    return BaseMoistureTable(data)


def load_corrector_table(path=None) -> MoistureCorrectionTable:
    """
    Read the moisture correction table from a CSV file. Defaults to the
    packaged table.
    """
    path = path if path is not None else DATA_PATH / CORRECTOR_TABLE_FILE
    data = pd.read_csv(  # type: ignore
        path,
        dtype={
            "mesPrevision": str,
            "suelo": str,
            "exposicion": str,
            "pendienteHumedad": str,
            "horaSolar": str,
        },
    )
    logger.debug("Loaded %d corrector table rows from %s", len(data), path)
    return MoistureCorrectionTable(data)


BASE_TABLE = load_base_table()
CORRECTOR_TABLE = load_corrector_table()
