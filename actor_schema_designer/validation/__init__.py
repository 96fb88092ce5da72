"""Validation of the unified ``schemas`` config.

``validator`` holds the cross-reference checks whose result gates generation;
``structure`` is an advisory JSON Schema lint of section shapes.
"""

from .structure import lint_config
from .validator import (
    VALID_CATEGORIES,
    CategoryCheckResult,
    ValidationIssue,
    ValidationResult,
    validate,
    validate_categories,
    validate_issues,
)

__all__ = [
    "VALID_CATEGORIES",
    "CategoryCheckResult",
    "ValidationIssue",
    "ValidationResult",
    "lint_config",
    "validate",
    "validate_categories",
    "validate_issues",
]
