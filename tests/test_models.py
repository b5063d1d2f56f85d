"""Unit tests for hierarchy/models.py: Employee validation and HierarchyNode traversal."""

import pytest

from conftest import make_employee
from org_analytics.exceptions import EmployeeValidationError, InvalidEmployeeError
from org_analytics.hierarchy.models import Employee, HierarchyNode


class TestEmployee:
    def test_ceo_has_no_manager(self):
        ceo = make_employee(1)
        assert ceo.is_ceo
        assert not make_employee(2, manager_id=1).is_ceo

    def test_is_hashable_value(self):
        a = Employee(1, "Joe", "Doe", 100, None)
        b = Employee(1, "Joe", "Doe", 100, None)
        assert a == b
        assert len({a, b}) == 1

    def test_is_immutable(self):
        e = make_employee(1)
        with pytest.raises(AttributeError):
            e.salary = 1

    @pytest.mark.parametrize(
        "kwargs, field",
        [
            ({"id": None}, "id"),
            ({"id": "7"}, "id"),
            ({"id": True}, "id"),
            ({"first_name": ""}, "first_name"),
            ({"first_name": None}, "first_name"),
            ({"last_name": "   "}, "last_name"),
            ({"salary": None}, "salary"),
            ({"salary": 10.5}, "salary"),
            ({"salary": -1}, "salary"),
            ({"manager_id": "3"}, "manager_id"),
        ],
    )
    def test_rejects_malformed_fields(self, kwargs, field):
        values = {"id": 1, "first_name": "Joe", "last_name": "Doe", "salary": 1000, "manager_id": None}
        values.update(kwargs)
        with pytest.raises(InvalidEmployeeError) as exc_info:
            Employee(**values)
        assert exc_info.value.field == field

    def test_validation_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            Employee(1, "", "Doe", 1, None)
        assert issubclass(InvalidEmployeeError, EmployeeValidationError)

    def test_zero_salary_allowed(self):
        assert make_employee(1, salary=0).salary == 0


class TestHierarchyNode:
    def test_attach_appends_in_order(self):
        root = HierarchyNode(make_employee(1))
        first = root._attach(make_employee(3, manager_id=1))
        second = root._attach(make_employee(2, manager_id=1))
        assert root.subordinates == (first, second)
        assert root.is_manager
        assert not first.is_manager

    def test_attach_rejects_other_managers_report(self):
        root = HierarchyNode(make_employee(1))
        with pytest.raises(InvalidEmployeeError):
            root._attach(make_employee(2, manager_id=99))
        assert root.subordinates == ()

    def test_subordinates_view_is_read_only(self):
        root = HierarchyNode(make_employee(1))
        root._attach(make_employee(2, manager_id=1))
        view = root.subordinates
        assert isinstance(view, tuple)
        with pytest.raises(AttributeError):
            view.append(HierarchyNode(make_employee(3, manager_id=1)))

    def test_iter_depth_first_is_preorder_with_depths(self):
        root = HierarchyNode(make_employee(1))
        a = root._attach(make_employee(2, manager_id=1))
        root._attach(make_employee(3, manager_id=1))
        a._attach(make_employee(4, manager_id=2))

        visited = [(node.employee.id, depth) for node, depth in root.iter_depth_first()]
        assert visited == [(1, 0), (2, 1), (4, 2), (3, 1)]

    def test_deep_chain_does_not_hit_recursion_limit(self):
        root = HierarchyNode(make_employee(0))
        node = root
        for i in range(1, 5000):
            node = node._attach(make_employee(i, manager_id=i - 1))
        assert root.depth_of(4999) == 4999
        assert root.size() == 5000

    def test_depth_of_unknown_id(self):
        assert HierarchyNode(make_employee(1)).depth_of(42) is None

    def test_no_public_mutator(self):
        root = HierarchyNode(make_employee(1))
        assert not hasattr(root, "attach")
        assert not hasattr(root.employee, "full_name")
