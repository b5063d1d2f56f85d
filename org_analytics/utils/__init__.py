"""Shared utilities for org analytics."""

from org_analytics.utils.io import read_csv_file, write_output
from org_analytics.utils.transforms import normalize_columns
from org_analytics.utils.validators import validate_dataframe, validate_unique
from org_analytics.utils.types import FilePath, OutputFormat, ViolationKind
