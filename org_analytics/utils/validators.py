"""Data validation utilities using pandera."""

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

from org_analytics.utils.types import ValidationResult


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationResult:
    """Validate (and coerce) a DataFrame against a pandera schema.

    On success the coerced frame is returned under ``"data"``; on failure
    every failure case is collected instead of stopping at the first one.
    """
    try:
        validated = schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": [], "data": validated}
    except pa.errors.SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val, "index": idx} if pd.notna(idx):
                    errors.append(f"Row {int(idx) + 1}: column '{col}' failed check '{check}': {val}")
                case {"column": col, "check": check, "failure_case": val}:
                    errors.append(f"Column '{col}' failed check '{check}': {val}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        return {"valid": False, "status": "error", "errors": errors}


def validate_required_columns(df: pd.DataFrame, columns: list[str]) -> ValidationResult:
    """Check that every required column is present."""
    missing = [col for col in columns if col not in df.columns]

    match missing:
        case []:
            return {"valid": True, "status": "ok", "errors": []}
        case cols:
            return {
                "valid": False,
                "status": "error",
                "errors": [f"Required header not found: {col}" for col in cols],
            }


def validate_unique(df: pd.DataFrame, columns: list[str]) -> ValidationResult:
    """Check that specified columns form a unique key."""
    duplicates = df.duplicated(subset=columns, keep=False)
    dup_count = duplicates.sum()

    match dup_count:
        case 0:
            return {"valid": True, "status": "ok", "errors": []}
        case n:
            keys = sorted(set(df.loc[duplicates, columns[0]].tolist()))
            return {
                "valid": False,
                "status": "error",
                "errors": [f"Found {n} duplicate rows on columns {columns}"],
                "duplicates": keys,
            }
