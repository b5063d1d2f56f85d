"""Org analytics: rebuild a company's reporting tree and audit it."""

from org_analytics.hierarchy.builder import HierarchyBuild, build_hierarchy
from org_analytics.hierarchy.models import Employee, HierarchyNode
from org_analytics.hierarchy.reporter import excessive_reporting_lines, salary_policy_violations

__version__ = "0.1.0"
