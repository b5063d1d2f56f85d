"""Common data transformation utilities."""

import pandas as pd


def normalize_column_name(name: object) -> str:
    """Lowercase a header and drop separators: ``First Name`` -> ``firstname``."""
    return str(name).strip().lower().replace(" ", "").replace("_", "").replace("-", "")


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Normalize column names to separator-free lowercase."""
    df = df.copy()
    df.columns = [normalize_column_name(col) for col in df.columns]
    return df


def strip_text_columns(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Strip surrounding whitespace from string cells, leaving other values alone."""
    result = df.copy()
    for col in columns:
        result[col] = result[col].map(lambda v: v.strip() if isinstance(v, str) else v)
    return result


def to_integer_columns(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Convert already-validated digit strings to nullable integers."""
    result = df.copy()
    for col in columns:
        result[col] = pd.to_numeric(result[col], dtype_backend="numpy_nullable").astype("Int64")
    return result
