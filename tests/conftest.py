"""Shared fixtures for org analytics tests."""

from pathlib import Path

import pytest

from org_analytics.hierarchy.builder import build_hierarchy
from org_analytics.hierarchy.models import Employee


def make_employee(emp_id, salary=50_000, manager_id=None, first="First", last=None):
    return Employee(
        id=emp_id,
        first_name=first,
        last_name=last or f"Emp{emp_id}",
        salary=salary,
        manager_id=manager_id,
    )


def write_csv(directory: Path, text: str, name: str = "employees.csv") -> Path:
    path = directory / name
    path.write_text(text)
    return path


SAMPLE_CSV = """Id,firstName,lastName,salary,managerId
123,Joe,Doe,60000,
124,Martin,Chekov,45000,123
125,Bob,Ronstad,47000,123
300,Alice,Hasacat,50000,124
305,Brett,Hardleaf,34000,300
"""


@pytest.fixture
def sample_employees() -> list[Employee]:
    """The five-person company: CEO 123, two reports, then a chain 124 -> 300 -> 305."""
    return [
        Employee(123, "Joe", "Doe", 60_000, None),
        Employee(124, "Martin", "Chekov", 45_000, 123),
        Employee(125, "Bob", "Ronstad", 47_000, 123),
        Employee(300, "Alice", "Hasacat", 50_000, 124),
        Employee(305, "Brett", "Hardleaf", 34_000, 300),
    ]


@pytest.fixture
def sample_root(sample_employees):
    return build_hierarchy(sample_employees).root


@pytest.fixture
def sample_csv(tmp_path) -> Path:
    return write_csv(tmp_path, SAMPLE_CSV)
