# Core imports
from __future__ import annotations
from typing import Any, NamedTuple


class FieldError(NamedTuple):
    """
    A single rejected input field.

    Attributes
    ----------
    field : str
        Name of the offending argument.
    value : Any
        The value that was supplied.
    allowed : str
        Human readable description of the allowed range or set.
    """

    field: str
    value: Any
    allowed: str


class InvalidInputError(ValueError):
    """
    Raised when one or more prediction inputs fall outside their domain.

    All field rules are evaluated before raising, so ``errors`` lists every
    violation in argument order. ``field`` and ``allowed`` refer to the first
    one.
    """

    def __init__(self, errors: list[FieldError]):
        if not errors:
            raise ValueError("InvalidInputError requires at least one FieldError")
        self.errors = list(errors)
        self.field = self.errors[0].field
        self.allowed = self.errors[0].allowed
        message = "; ".join(
            f"{e.field} must be {e.allowed} (got {e.value!r})" for e in self.errors
        )
        super().__init__(message)

    def __reduce__(self):
        return self.__class__, (self.errors,)


class LookupMissError(LookupError):
    """
    Raised when a discretized key has no row in a reference table.

    A tabulated value of zero is a valid moisture reading, so a missing row is
    reported explicitly instead of being folded into the arithmetic.
    """

    def __init__(self, table: str, key: dict):
        self.table = table
        self.key = dict(key)
        formatted = ", ".join(f"{k}={v!r}" for k, v in self.key.items())
        super().__init__(f"No tabulated value in {table} for {formatted}")

    def __reduce__(self):
        return self.__class__, (self.table, self.key)
