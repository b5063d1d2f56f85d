"""Exception hierarchy for org analytics.

Validation and structural errors are also ``ValueError`` so callers that only
care about bad input can catch the builtin; using a report before a hierarchy
exists is a ``RuntimeError``.
"""


class OrgAnalyticsError(Exception):
    """Base exception for all org analytics errors."""

    def __init__(self, message: str, details: dict[str, str] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


# --- validation ---------------------------------------------------------------

class EmployeeValidationError(OrgAnalyticsError, ValueError):
    """Base class for malformed records and bad call arguments."""


class InvalidEmployeeError(EmployeeValidationError):
    """Raised when an employee record is missing or has an ill-typed field."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid employee {field}: {reason}", details={"field": field})
        self.field = field
        self.reason = reason


class DuplicateEmployeeError(EmployeeValidationError):
    """Raised when two records share the same employee id."""

    def __init__(self, duplicate_ids: list[int]):
        sample = ", ".join(str(i) for i in duplicate_ids[:5])
        super().__init__(
            f"Found {len(duplicate_ids)} duplicate employee id(s)",
            details={"sample": sample},
        )
        self.duplicate_ids = duplicate_ids


class MissingInputError(EmployeeValidationError):
    """Raised when no employee collection is supplied at all."""


class RecordParseError(EmployeeValidationError):
    """Raised when a CSV export cannot be turned into employee records."""

    def __init__(self, reason: str, errors: list[str] | None = None):
        details = {"failures": str(len(errors))} if errors else None
        super().__init__(f"Could not parse employee records: {reason}", details=details)
        self.reason = reason
        self.errors = errors or []


class InvalidReportParameterError(EmployeeValidationError):
    """Raised when a report parameter is missing or not an integer."""

    def __init__(self, name: str, value: object):
        super().__init__(
            f"Report parameter '{name}' must be an integer",
            details={"value": repr(value)},
        )
        self.name = name


# --- structural ---------------------------------------------------------------

class HierarchyStructureError(OrgAnalyticsError, ValueError):
    """Base class for inputs that cannot form a single-root tree."""


class NoRootError(HierarchyStructureError):
    """Raised when no employee is without a manager."""

    def __init__(self):
        super().__init__("Employee list has no CEO")


class MultipleRootsError(HierarchyStructureError):
    """Raised when more than one employee is without a manager."""

    def __init__(self, root_ids: list[int]):
        super().__init__(
            "Employee list has more than one CEO",
            details={"ids": ", ".join(str(i) for i in root_ids)},
        )
        self.root_ids = root_ids


class UnattachableEmployeesError(HierarchyStructureError):
    """Raised when records remain that can never reach the CEO.

    Cycles, self-management and managers that were themselves dropped all end
    up here.
    """

    def __init__(self, employee_ids: list[int]):
        sample = ", ".join(str(i) for i in employee_ids[:10])
        super().__init__(
            f"{len(employee_ids)} employee(s) could not be attached to the hierarchy",
            details={"ids": sample},
        )
        self.employee_ids = employee_ids


# --- usage --------------------------------------------------------------------

class HierarchyNotBuiltError(OrgAnalyticsError, RuntimeError):
    """Raised when a report is requested without a built hierarchy."""

    def __init__(self):
        super().__init__("Employee hierarchy not built, input employees before requesting reports")


# --- configuration ------------------------------------------------------------

class ConfigurationError(OrgAnalyticsError, ValueError):
    """Raised for unknown profiles or ill-typed configuration values."""
