"""File I/O utilities for reading employee exports and writing reports."""

import logging
import tomllib
from pathlib import Path

import pandas as pd
from rich.console import Console

from org_analytics.utils.types import FilePath, OutputFormat

logger = logging.getLogger(__name__)

console = Console()

ENCODINGS = ("utf-8", "latin-1", "cp1252")


def read_csv_file(path: FilePath, **read_kwargs) -> pd.DataFrame:
    """Read a CSV export, handling encoding quirks."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Employee export not found: {path}")

    for encoding in ENCODINGS:
        try:
            df = pd.read_csv(path, encoding=encoding, **read_kwargs)
        except UnicodeDecodeError:
            logger.debug("Could not decode %s as %s, trying next encoding", path.name, encoding)
            continue
        logger.info("Read %d rows from %s (%s)", len(df), path.name, encoding)
        return df
    raise ValueError(f"Could not decode {path}")


def write_output(df: pd.DataFrame, path: FilePath, fmt: str = OutputFormat.CSV) -> Path:
    """Write a DataFrame to the specified format."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    match fmt:
        case OutputFormat.CSV:
            df.to_csv(path, index=False)
        case OutputFormat.PARQUET:
            df.to_parquet(path, index=False)
        case OutputFormat.EXCEL:
            df.to_excel(path, index=False)
        case OutputFormat.JSON:
            df.to_json(path, orient="records", indent=2)
        case other:
            raise ValueError(f"Unsupported output format: {other}")

    console.print(f"  Wrote {len(df)} rows to {path}")
    return path


def load_toml_config(path: FilePath) -> dict:
    """Load a TOML configuration file."""
    with open(path, "rb") as f:
        return tomllib.load(f)
