"""
commit-gate: pre-commit quality gate runner.

Runs a configured list of verification tasks against a set of changed files
and aggregates their failures into a single pass/fail report.
"""

__version__ = "0.1.0"
