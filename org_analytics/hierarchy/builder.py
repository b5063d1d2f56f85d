"""Reporting-tree construction from an unordered collection of employees.

The builder tolerates any input order: records whose manager is not yet in
the tree are re-queued and retried on the next pass, and the build stops at
the first pass that attaches nothing.
"""

import logging
from collections import Counter, deque
from collections.abc import Iterable
from dataclasses import dataclass

from org_analytics.exceptions import (
    DuplicateEmployeeError,
    MissingInputError,
    MultipleRootsError,
    NoRootError,
    UnattachableEmployeesError,
)
from org_analytics.hierarchy.models import Employee, HierarchyNode
from org_analytics.utils.types import EmployeeID

logger = logging.getLogger(__name__)

type NodeIndex = dict[EmployeeID, HierarchyNode]


@dataclass(frozen=True)
class HierarchyBuild:
    root: HierarchyNode
    attached: int
    dropped: tuple[Employee, ...] = ()

    @property
    def received(self) -> int:
        return self.attached + len(self.dropped)


def find_ceo(employees: list[Employee]) -> Employee:
    """Return the single employee without a manager."""
    roots = [e for e in employees if e.is_ceo]
    match roots:
        case []:
            raise NoRootError()
        case [ceo]:
            return ceo
        case _:
            raise MultipleRootsError([e.id for e in roots])


def _check_unique_ids(employees: list[Employee]) -> None:
    counts = Counter(e.id for e in employees)
    duplicates = sorted(eid for eid, n in counts.items() if n > 1)
    if duplicates:
        raise DuplicateEmployeeError(duplicates)


def _split_dangling(employees: list[Employee]) -> tuple[list[Employee], list[Employee]]:
    """Separate subordinates whose manager id exists in the input from those whose doesn't."""
    known_ids = {e.id for e in employees}
    valid: list[Employee] = []
    dangling: list[Employee] = []
    for employee in employees:
        if employee.is_ceo:
            continue
        if employee.manager_id in known_ids:
            valid.append(employee)
        else:
            logger.warning(
                "Removing employee %d: manager id %d not found in the employee list",
                employee.id,
                employee.manager_id,
            )
            dangling.append(employee)
    return valid, dangling


def _attach_all(index: NodeIndex, pending: list[Employee]) -> int:
    """Attach queued employees under their managers, pass by pass.

    Each pass visits every record queued at its start once. Records whose
    manager has no node yet go to the back of the queue. A pass that attaches
    nothing while records remain means they can never reach the root.
    """
    queue = deque(pending)
    attached = 0
    passes = 0

    while queue:
        passes += 1
        progress = False
        for _ in range(len(queue)):
            employee = queue.popleft()
            manager_node = index.get(employee.manager_id)
            if manager_node is None:
                queue.append(employee)
                continue
            index[employee.id] = manager_node._attach(employee)
            attached += 1
            progress = True

        if not progress:
            stuck = sorted(e.id for e in queue)
            logger.error("No progress after %d pass(es); %d employee(s) unattached", passes, len(stuck))
            raise UnattachableEmployeesError(stuck)

    logger.debug("Attached %d employee(s) in %d pass(es)", attached, passes)
    return attached


def build_hierarchy(employees: Iterable[Employee] | None) -> HierarchyBuild:
    """Build the reporting tree rooted at the CEO.

    Employees whose manager id is unknown are dropped with a warning; callers
    spot them by comparing the input size with ``attached``. Every other
    problem (no CEO, several CEOs, duplicate ids, cycles) raises and no tree is
    returned.
    """
    if employees is None:
        raise MissingInputError("Employees list should not be None")
    records = list(employees)

    _check_unique_ids(records)
    ceo = find_ceo(records)

    root = HierarchyNode(ceo)
    index: NodeIndex = {ceo.id: root}

    valid, dangling = _split_dangling(records)
    attached = 1 + _attach_all(index, valid)

    if dangling:
        logger.warning(
            "Hierarchy covers %d of %d employees; %d dropped for unknown managers",
            attached,
            len(records),
            len(dangling),
        )
    logger.info("Built hierarchy: %d attached, %d dropped", attached, len(dangling))
    return HierarchyBuild(root=root, attached=attached, dropped=tuple(dangling))
