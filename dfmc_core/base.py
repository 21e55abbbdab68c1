# Core imports
from __future__ import annotations
import warnings

# Internal imports
from dfmc_core.exceptions import LookupMissError

# External Imports
from pandas import DataFrame, Series
from pandera import DataFrameSchema


class ReferenceTable:
    """
    Read-only reference table backed by a schema validated DataFrame.

    Subclasses declare a pandera ``schema``, the ``key_columns`` that
    identify a row and a ``value_column`` holding the tabulated result. Rows
    keep their file order and lookups return the first matching row.
    """

    schema: DataFrameSchema
    key_columns: list[str]
    value_column: str = "humedadResultado"
    name: str = "reference table"

    def __init__(self, data: DataFrame):
        self.data = self.schema.validate(data.reset_index(drop=True))
        self._warn_on_duplicate_keys()

    def __getattr__(self, name):
        """Delegate attribute and method access to the underlying dataframe."""
        if name == "data":
            raise AttributeError(name)
        return getattr(self.data, name)

    def __iter__(self):
        """Iterate over the rows of the table as row objects."""
        for _, row in self.data.iterrows():
            yield self._row_to_object(row)

    def __getitem__(self, item):
        """Return the column or selection at the given key."""
        return self.data[item]

    def __len__(self):
        """Return the number of rows in the table."""
        return len(self.data)

    def _row_to_object(self, row: Series):
        """
        Convert a row of the dataframe to an object.

        Raises
        ------
        NotImplementedError
            If the method is not implemented by the subclass.

        Notes
        -----
        This method must be implemented by the subclass.
        """
        raise NotImplementedError("_row_to_object() must be implemented by subclass")

    def _key_frame(self) -> DataFrame:
        """Lookup keys of every row, one row per distinct key."""
        return self.data[self.key_columns]

    def _warn_on_duplicate_keys(self):
        duplicated = self._key_frame().duplicated(keep="first")
        if duplicated.any():
            warnings.warn(
                f"{self.name} has {int(duplicated.sum())} repeated or overlapping "
                f"keys; lookups use the first matching row.",
                UserWarning,
            )

    def _first_match(self, mask: Series, key: dict) -> float:
        """
        Return the value of the first row selected by ``mask``.

        Raises
        ------
        LookupMissError
            If no row is selected.
        """
        matches = self.data.loc[mask, self.value_column]
        if matches.empty:
            raise LookupMissError(self.name, key)
        return float(matches.iloc[0])
