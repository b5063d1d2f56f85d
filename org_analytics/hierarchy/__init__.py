"""Org hierarchy analytics.

Loads employee exports, rebuilds the reporting tree and produces the
salary-policy and reporting-line reports.
"""

import logging
from dataclasses import dataclass

from rich.console import Console

from org_analytics.config import AnalyticsConfig
from org_analytics.exceptions import OrgAnalyticsError
from org_analytics.hierarchy.builder import HierarchyBuild, build_hierarchy
from org_analytics.hierarchy.ingest import load_employees
from org_analytics.hierarchy.models import Employee, HierarchyNode
from org_analytics.hierarchy.report import (
    render_report,
    reporting_lines_frame,
    reporting_lines_table,
    salary_violations_frame,
    salary_violations_table,
)
from org_analytics.hierarchy.reporter import (
    ReportingLineExcess,
    SalaryViolations,
    excessive_reporting_lines,
    salary_policy_violations,
)
from org_analytics.utils.io import write_output

logger = logging.getLogger(__name__)

console = Console()


@dataclass(frozen=True)
class AnalyticsResult:
    build: HierarchyBuild
    salary_violations: SalaryViolations
    reporting_lines: ReportingLineExcess


def validate(config: AnalyticsConfig) -> dict[str, str | int]:
    """Check that the configured export loads and forms a hierarchy."""
    try:
        employees = load_employees(config.input.path, has_header=config.input.has_header)
        build = build_hierarchy(employees)
    except (FileNotFoundError, OrgAnalyticsError) as exc:
        return {"status": "error", "message": str(exc)}

    if build.attached != len(employees):
        return {
            "status": "warning",
            "message": f"{len(employees) - build.attached} employee(s) dropped for unknown managers",
            "rows_available": len(employees),
        }
    return {"status": "ok", "rows_available": len(employees)}


def run(config: AnalyticsConfig) -> AnalyticsResult:
    """Execute the full hierarchy analysis for one export."""
    policy = config.policy

    employees = load_employees(config.input.path, has_header=config.input.has_header)
    console.print(f"Employees loaded: {len(employees)}")

    build = build_hierarchy(employees)
    console.print(f"Employee hierarchy generated: {build.attached} employees attached")
    if build.attached != len(employees):
        console.print(
            f"[yellow]Warning: {len(employees) - build.attached} of {len(employees)} "
            f"employees were left out of the hierarchy[/yellow]"
        )

    violations = salary_policy_violations(
        build.root, policy.minimum_percentage, policy.maximum_percentage
    )
    render_report(
        salary_violations_table(violations, policy.minimum_percentage, policy.maximum_percentage),
        "No salary policy violations found",
    )

    excess = excessive_reporting_lines(build.root, policy.reporting_lines_threshold)
    render_report(
        reporting_lines_table(excess, policy.reporting_lines_threshold),
        f"No reporting lines longer than {policy.reporting_lines_threshold}",
    )

    if config.output.directory is not None:
        fmt = config.output.fmt
        write_output(salary_violations_frame(violations), config.output.directory / f"salary_violations.{fmt.suffix}", fmt)
        write_output(reporting_lines_frame(excess), config.output.directory / f"reporting_lines.{fmt.suffix}", fmt)

    return AnalyticsResult(build=build, salary_violations=violations, reporting_lines=excess)
