"""Employee records, hierarchy nodes and the pandera schema for raw exports."""

from collections.abc import Iterator
from dataclasses import dataclass, field

import pandera as pa
from pandera import Column, Check

from org_analytics.exceptions import InvalidEmployeeError
from org_analytics.utils.types import EmployeeID

type SalaryAmount = int

REQUIRED_COLUMNS = ["id", "firstname", "lastname", "salary", "managerid"]
INTEGER_COLUMNS = ["id", "salary", "managerid"]

INTEGER_PATTERN = r"^-?\d+$"

# Every field is read as text; integer fields must match exactly, so
# values such as "1000.9" fail instead of being truncated.
employee_record_schema = pa.DataFrameSchema(
    {
        "id": Column(str, Check.str_matches(INTEGER_PATTERN), nullable=False),
        "firstname": Column(str, Check.str_length(min_value=1), nullable=False),
        "lastname": Column(str, Check.str_length(min_value=1), nullable=False),
        "salary": Column(str, Check.str_matches(r"^\d+$"), nullable=False),
        "managerid": Column(str, Check.str_matches(INTEGER_PATTERN), nullable=True),
    },
    strict="filter",
    coerce=True,
)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Employee:
    id: EmployeeID
    first_name: str
    last_name: str
    salary: SalaryAmount
    manager_id: EmployeeID | None = None

    def __post_init__(self) -> None:
        if not _is_int(self.id):
            raise InvalidEmployeeError("id", f"expected an integer, got {self.id!r}")
        for name in ("first_name", "last_name"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidEmployeeError(name, f"expected a non-empty string, got {value!r}")
        if not _is_int(self.salary):
            raise InvalidEmployeeError("salary", f"expected an integer, got {self.salary!r}")
        if self.salary < 0:
            raise InvalidEmployeeError("salary", f"must not be negative, got {self.salary}")
        if self.manager_id is not None and not _is_int(self.manager_id):
            raise InvalidEmployeeError("manager_id", f"expected an integer or None, got {self.manager_id!r}")

    @property
    def is_ceo(self) -> bool:
        return self.manager_id is None


@dataclass(eq=False)
class HierarchyNode:
    """One employee in the reporting tree, owning its direct subordinates.

    Subordinates keep the order in which they were attached. Only the
    builder attaches; once a build returns, the tree is treated as read-only.
    """

    employee: Employee
    _subordinates: list["HierarchyNode"] = field(default_factory=list, repr=False)

    @property
    def subordinates(self) -> tuple["HierarchyNode", ...]:
        return tuple(self._subordinates)

    @property
    def is_manager(self) -> bool:
        return bool(self._subordinates)

    def _attach(self, employee: Employee) -> "HierarchyNode":
        """Add ``employee`` as a direct subordinate and return its new node.

        Called by ``build_hierarchy`` only.
        """
        if employee.manager_id != self.employee.id:
            raise InvalidEmployeeError(
                "manager_id",
                f"employee {employee.id} reports to {employee.manager_id}, not {self.employee.id}",
            )
        child = HierarchyNode(employee)
        self._subordinates.append(child)
        return child

    def iter_depth_first(self) -> Iterator[tuple["HierarchyNode", int]]:
        """Yield ``(node, depth)`` pairs in pre-order, this node at depth 0."""
        stack: list[tuple[HierarchyNode, int]] = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            for child in reversed(node._subordinates):
                stack.append((child, depth + 1))

    def depth_of(self, employee_id: EmployeeID) -> int | None:
        for node, depth in self.iter_depth_first():
            if node.employee.id == employee_id:
                return depth
        return None

    def size(self) -> int:
        return sum(1 for _ in self.iter_depth_first())
