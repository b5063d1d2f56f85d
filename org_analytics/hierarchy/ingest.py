"""Ingest employee records from CSV exports.

Exports carry ``Id, firstName, lastName, salary, managerId`` columns in any
order, or no header at all, in which case the columns are taken to be in
that order. The CEO row leaves ``managerId`` empty.
"""

import logging

import pandas as pd

from org_analytics.exceptions import DuplicateEmployeeError, RecordParseError
from org_analytics.hierarchy.models import (
    INTEGER_COLUMNS,
    REQUIRED_COLUMNS,
    Employee,
    employee_record_schema,
)
from org_analytics.utils.io import read_csv_file
from org_analytics.utils.transforms import normalize_columns, strip_text_columns, to_integer_columns
from org_analytics.utils.types import FilePath
from org_analytics.utils.validators import (
    validate_dataframe,
    validate_required_columns,
    validate_unique,
)

logger = logging.getLogger(__name__)

# Cells stay text until validated; only truly empty fields count as missing,
# so names such as "NA" or "0042" survive as written.
TEXT_READ_OPTIONS = {
    "dtype": str,
    "keep_default_na": False,
    "na_values": [""],
    "skipinitialspace": True,
}


def read_employee_frame(path: FilePath, has_header: bool = True) -> pd.DataFrame:
    """Load an export into a frame with canonical column names."""
    try:
        if has_header:
            df = normalize_columns(read_csv_file(path, **TEXT_READ_OPTIONS))
            check = validate_required_columns(df, REQUIRED_COLUMNS)
            if not check["valid"]:
                raise RecordParseError("; ".join(check["errors"]), errors=check["errors"])
        else:
            # Short rows (a CEO without managerId) are padded; extra trailing fields are dropped
            df = read_csv_file(
                path,
                header=None,
                names=REQUIRED_COLUMNS,
                index_col=False,
                **TEXT_READ_OPTIONS,
            )
    except pd.errors.EmptyDataError as exc:
        raise RecordParseError(f"{path} is empty") from exc
    except pd.errors.ParserError as exc:
        raise RecordParseError(str(exc).strip()) from exc

    return strip_text_columns(df, [col for col in REQUIRED_COLUMNS if col in df.columns])


def _to_employee(row: pd.Series) -> Employee:
    manager_id = row["managerid"]
    return Employee(
        id=int(row["id"]),
        first_name=row["firstname"],
        last_name=row["lastname"],
        salary=int(row["salary"]),
        manager_id=int(manager_id) if pd.notna(manager_id) else None,
    )


def employees_from_frame(df: pd.DataFrame) -> list[Employee]:
    """Validate a canonical frame and turn each row into an ``Employee``."""
    result = validate_dataframe(df, employee_record_schema)
    if not result["valid"]:
        errors = result["errors"]
        logger.error("Employee export failed validation with %d error(s)", len(errors))
        raise RecordParseError(errors[0] if len(errors) == 1 else f"{len(errors)} invalid values", errors=errors)
    validated = to_integer_columns(result["data"], INTEGER_COLUMNS)

    unique = validate_unique(validated, ["id"])
    if not unique["valid"]:
        raise DuplicateEmployeeError(unique["duplicates"])

    return [_to_employee(row) for _, row in validated.iterrows()]


def load_employees(path: FilePath, has_header: bool = True) -> list[Employee]:
    """Read, validate and convert an employee export, preserving file order."""
    df = read_employee_frame(path, has_header=has_header)
    employees = employees_from_frame(df)
    logger.info("Ingested %d employee records", len(employees))
    return employees
