"""Render hierarchy reports as console tables and exportable DataFrames."""

import pandas as pd
from rich.console import Console
from rich.table import Table

from org_analytics.hierarchy.reporter import ReportingLineExcess, SalaryViolations

console = Console()

_EMPLOYEE_COLUMNS = ["id", "first_name", "last_name", "salary"]


def _employee_table(title: str, last_column: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("First name")
    table.add_column("Last name")
    table.add_column("Salary", justify="right")
    table.add_column(last_column, style="bold")
    return table


def salary_violations_table(
    violations: SalaryViolations,
    minimum_percentage: int,
    maximum_percentage: int,
) -> Table:
    table = _employee_table(
        f"Salary policy violations (allowed {minimum_percentage}% to {maximum_percentage}%)",
        "Violation",
    )
    for employee, description in violations.items():
        style = "red" if "higher" in description else "yellow"
        table.add_row(
            str(employee.id),
            employee.first_name,
            employee.last_name,
            str(employee.salary),
            f"[{style}]{description}[/{style}]",
        )
    return table


def reporting_lines_table(excess: ReportingLineExcess, threshold: int) -> Table:
    table = _employee_table(
        f"Reporting lines longer than {threshold}",
        "Excess lines",
    )
    for employee, levels in excess.items():
        table.add_row(
            str(employee.id),
            employee.first_name,
            employee.last_name,
            str(employee.salary),
            str(levels),
        )
    return table


def render_report(table: Table, empty_message: str) -> None:
    """Print a report table, or a one-line note when it has no rows."""
    if table.row_count == 0:
        console.print(f"[green]{empty_message}[/green]")
        return
    console.print(table)


def salary_violations_frame(violations: SalaryViolations) -> pd.DataFrame:
    rows = [
        {
            "id": e.id,
            "first_name": e.first_name,
            "last_name": e.last_name,
            "salary": e.salary,
            "manager_id": e.manager_id,
            "violation": description,
        }
        for e, description in violations.items()
    ]
    return pd.DataFrame(rows, columns=[*_EMPLOYEE_COLUMNS, "manager_id", "violation"])


def reporting_lines_frame(excess: ReportingLineExcess) -> pd.DataFrame:
    rows = [
        {
            "id": e.id,
            "first_name": e.first_name,
            "last_name": e.last_name,
            "salary": e.salary,
            "manager_id": e.manager_id,
            "excess_lines": levels,
        }
        for e, levels in excess.items()
    ]
    return pd.DataFrame(rows, columns=[*_EMPLOYEE_COLUMNS, "manager_id", "excess_lines"])
