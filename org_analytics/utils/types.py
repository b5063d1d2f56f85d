"""Shared type definitions for org analytics."""

from enum import StrEnum
from pathlib import Path

import pandas as pd


type FilePath = str | Path
type EmployeeID = int
type ValidationResult = dict[str, str | bool | list[str] | list[int] | pd.DataFrame]


class OutputFormat(StrEnum):
    CSV = "csv"
    JSON = "json"
    PARQUET = "parquet"
    EXCEL = "excel"

    @property
    def suffix(self) -> str:
        return "xlsx" if self is OutputFormat.EXCEL else self.value


class ViolationKind(StrEnum):
    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"


def classify_violation(salary: float, minimum: float, maximum: float) -> ViolationKind | None:
    """Place a salary against an allowed band.

    The maximum is checked last, so with an inverted band (minimum above
    maximum) a salary outside both ends reports as above maximum.
    """
    kind = None
    if salary < minimum:
        kind = ViolationKind.BELOW_MINIMUM
    if salary > maximum:
        kind = ViolationKind.ABOVE_MAXIMUM
    return kind
