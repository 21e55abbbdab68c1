from unittest import mock

from dfmc_core import estimate_dfmc, estimate_dfmc_dataframe
from dfmc_core.exceptions import InvalidInputError, LookupMissError
from dfmc_core.fuel_moisture.categories import Aspect, SolarTime, Soil
from dfmc_core.ref_data import BASE_TABLE
from tests.utils import (
    make_base_table,
    make_corrector_table,
    make_prediction,
    make_random_prediction,
)

import pandas as pd
import pytest
from pandera.errors import SchemaError


FEB = "February-March-April-August-September-October"


class TestEstimateDFMC:

    def test_worked_example(self):
        assert estimate_dfmc("15:00", 2, "12:00", 21, 12, "Exposed", 13, "W") == 4

    def test_worked_example_with_enums(self):
        result = estimate_dfmc(
            "15:00", 2, SolarTime.H12, 21, 12, Soil.EXPOSED, 13, Aspect.WEST
        )
        assert result == 4

    def test_deterministic(self):
        for _ in range(50):
            kwargs = make_random_prediction()
            assert estimate_dfmc(**kwargs) == estimate_dfmc(**kwargs)

    @pytest.mark.parametrize("time", ["20:00", "23:59", "00:00", "02:00", "07:59"])
    def test_nighttime_is_base_value_only(self, time):
        kwargs = make_prediction(prediction_time=time)
        expected = BASE_TABLE.lookup("20:00-07:59", "21-31", "10-14")
        assert estimate_dfmc(**kwargs) == expected

    def test_nighttime_never_consults_corrector(self):
        corrector = mock.Mock()
        result = estimate_dfmc(
            **make_prediction(prediction_time="02:00"), corrector_table=corrector
        )
        corrector.lookup.assert_not_called()
        assert result == BASE_TABLE.lookup("20:00-07:59", "21-31", "10-14")

    @pytest.mark.parametrize("time", ["08:00", "12:30", "19:59"])
    def test_daytime_adds_correction(self, time):
        corrector = mock.Mock()
        corrector.lookup.return_value = 3.0
        result = estimate_dfmc(
            **make_prediction(prediction_time=time), corrector_table=corrector
        )
        corrector.lookup.assert_called_once_with(FEB, "Exposed", "W", "0-30", "12:00")
        assert result == BASE_TABLE.lookup("08:00-19:59", "21-31", "10-14") + 3.0

    def test_injected_tables(self):
        base = make_base_table([["08:00-19:59", "10-20", "50-54", 8]])
        corrector = make_corrector_table(
            [["May-June-July", "Exposed,Shaded", "N", "0", "16:00", -2]]
        )
        result = estimate_dfmc(
            "10:15",
            6,
            "16:00",
            15.2,
            52.7,
            "Shaded",
            0,
            "N",
            base_table=base,
            corrector_table=corrector,
        )
        assert result == 6

    def test_zero_inputs_are_valid(self):
        result = estimate_dfmc(
            **make_prediction(air_temperature=0, relative_humidity=0, slope=0)
        )
        assert result == BASE_TABLE.lookup("08:00-19:59", "0-9", "0-4") + 2

    def test_base_miss_raises(self):
        base = make_base_table([["08:00-19:59", "10-20", "50-54", 8]])
        with pytest.raises(LookupMissError):
            estimate_dfmc(**make_prediction(), base_table=base)

    def test_correction_miss_raises(self):
        corrector = make_corrector_table(
            [["May-June-July", "Exposed", "N", "0", "16:00", 1]]
        )
        with pytest.raises(LookupMissError):
            estimate_dfmc(**make_prediction(), corrector_table=corrector)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("prediction_month", 13),
            ("relative_humidity", 150),
            ("aspect", "X"),
            ("soil", "Wet"),
            ("prediction_time", "1X:00"),
        ],
    )
    def test_invalid_input(self, field, value):
        base = mock.Mock()
        with pytest.raises(InvalidInputError) as excinfo:
            estimate_dfmc(**make_prediction(**{field: value}), base_table=base)
        assert excinfo.value.field == field
        base.lookup.assert_not_called()


class TestEstimateDFMCDataFrame:

    def test_rows(self):
        df = pd.DataFrame(
            {
                "PREDICTION_TIME": ["15:00", "02:00"],
                "PREDICTION_MONTH": [2, 2],
                "SOLAR_TIME": ["12:00", "12:00"],
                "AIR_TEMPERATURE": [21, 21],
                "RELATIVE_HUMIDITY": [12, 12],
                "SOIL": ["Exposed", "Exposed"],
                "SLOPE": [13, 13],
                "ASPECT": ["W", "W"],
            },
            index=[10, 20],
        )
        result = estimate_dfmc_dataframe(df)
        assert result.name == "DFMC"
        assert list(result.index) == [10, 20]
        assert result.loc[10] == 4
        assert result.loc[20] == BASE_TABLE.lookup("20:00-07:59", "21-31", "10-14")

    def test_matches_scalar_estimate(self):
        records = [make_random_prediction() for _ in range(20)]
        df = pd.DataFrame(
            [{key.upper(): value for key, value in r.items()} for r in records]
        )
        result = estimate_dfmc_dataframe(df)
        expected = [estimate_dfmc(**r) for r in records]
        assert result.tolist() == expected

    def test_empty(self):
        df = pd.DataFrame(
            columns=[
                "PREDICTION_TIME",
                "PREDICTION_MONTH",
                "SOLAR_TIME",
                "AIR_TEMPERATURE",
                "RELATIVE_HUMIDITY",
                "SOIL",
                "SLOPE",
                "ASPECT",
            ]
        )
        result = estimate_dfmc_dataframe(df)
        assert result.empty

    def test_missing_column(self):
        df = pd.DataFrame({"PREDICTION_TIME": ["15:00"]})
        with pytest.raises(SchemaError):
            estimate_dfmc_dataframe(df)

    def test_invalid_row(self):
        df = pd.DataFrame([{k.upper(): v for k, v in make_prediction(aspect="X").items()}])
        with pytest.raises(InvalidInputError) as excinfo:
            estimate_dfmc_dataframe(df)
        assert excinfo.value.field == "aspect"

    @pytest.mark.parametrize("month", [2.7, 2.0])
    def test_non_integer_month_row(self, month):
        df = pd.DataFrame(
            [{k.upper(): v for k, v in make_prediction(prediction_month=month).items()}]
        )
        with pytest.raises(InvalidInputError) as excinfo:
            estimate_dfmc_dataframe(df)
        assert excinfo.value.field == "prediction_month"
