"""Salary-policy and reporting-line analysis over a built hierarchy.

Both reports only read the tree, so any number of them may run at once
against the same root.
"""

import logging

import numpy as np

from org_analytics.exceptions import HierarchyNotBuiltError, InvalidReportParameterError
from org_analytics.hierarchy.models import Employee, HierarchyNode
from org_analytics.utils.types import ViolationKind, classify_violation

logger = logging.getLogger(__name__)

type SalaryViolations = dict[Employee, str]
type ReportingLineExcess = dict[Employee, int]

# A manager should earn at least 20% and at most 50% more than the
# average of their direct subordinates.
DEFAULT_MINIMUM_PERCENTAGE = 20
DEFAULT_MAXIMUM_PERCENTAGE = 50

DEFAULT_REPORTING_LINES_THRESHOLD = 4


def _require_root(root: HierarchyNode | None) -> HierarchyNode:
    if root is None:
        raise HierarchyNotBuiltError()
    return root


def _require_int(name: str, value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidReportParameterError(name, value)
    return value


def subordinate_salary_averages(root: HierarchyNode) -> dict[Employee, float]:
    """Average salary of each manager's direct subordinates, in depth-first order."""
    averages: dict[Employee, float] = {}
    for node, _ in root.iter_depth_first():
        if not node.is_manager:
            continue
        salaries = [child.employee.salary for child in node.subordinates]
        averages[node.employee] = float(np.mean(salaries))
    return averages


def _describe(kind: ViolationKind, difference: float) -> str:
    match kind:
        case ViolationKind.BELOW_MINIMUM:
            return f"Salary is {difference:.2f} lesser than the minimum salary allowed"
        case ViolationKind.ABOVE_MAXIMUM:
            return f"Salary is {difference:.2f} higher than the maximum salary allowed"
        case other:
            raise ValueError(f"Unsupported violation kind: {other}")


def salary_policy_violations(
    root: HierarchyNode | None,
    minimum_percentage: int = DEFAULT_MINIMUM_PERCENTAGE,
    maximum_percentage: int = DEFAULT_MAXIMUM_PERCENTAGE,
) -> SalaryViolations:
    """Find managers paid outside the band above their direct reports' average.

    The allowed band is ``[avg * (1 + min/100), avg * (1 + max/100)]``.
    Employees without subordinates are never reported; the CEO is checked
    like any other manager. With ``minimum_percentage`` above
    ``maximum_percentage`` a salary can miss both ends, in which case the
    above-maximum description is the one kept.
    """
    root = _require_root(root)
    minimum_percentage = _require_int("minimum_percentage", minimum_percentage)
    maximum_percentage = _require_int("maximum_percentage", maximum_percentage)

    violations: SalaryViolations = {}
    for manager, average in subordinate_salary_averages(root).items():
        lower = average * (1 + minimum_percentage / 100)
        upper = average * (1 + maximum_percentage / 100)
        salary = float(manager.salary)

        match classify_violation(salary, lower, upper):
            case None:
                continue
            case ViolationKind.BELOW_MINIMUM:
                violations[manager] = _describe(ViolationKind.BELOW_MINIMUM, lower - salary)
            case ViolationKind.ABOVE_MAXIMUM:
                violations[manager] = _describe(ViolationKind.ABOVE_MAXIMUM, salary - upper)

    logger.info(
        "Salary policy [%d%%, %d%%]: %d manager(s) in violation",
        minimum_percentage,
        maximum_percentage,
        len(violations),
    )
    return violations


def excessive_reporting_lines(
    root: HierarchyNode | None,
    reporting_lines_threshold: int = DEFAULT_REPORTING_LINES_THRESHOLD,
) -> ReportingLineExcess:
    """Map employees deeper than the threshold to how many levels they exceed it by.

    The CEO sits at depth 0.
    """
    root = _require_root(root)
    threshold = _require_int("reporting_lines_threshold", reporting_lines_threshold)

    excess: ReportingLineExcess = {}
    for node, depth in root.iter_depth_first():
        if depth > threshold:
            excess[node.employee] = depth - threshold

    logger.info("Reporting lines over %d: %d employee(s)", threshold, len(excess))
    return excess
