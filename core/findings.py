# =============================================================================
# core/findings.py - Seeded Findings Manifest
# =============================================================================
# The users controller is a review target. This module lists every problem
# planted in it, so the output of a code-review or static-analysis tool can
# be scored against a known answer key.
#
# Usage:
#   from core.findings import get_seeded_findings, FindingCategory
#
#   security = get_seeded_findings(FindingCategory.SECURITY)
# =============================================================================

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class FindingCategory(str, Enum):
    """Kind of problem a reviewer is expected to report."""
    SECURITY = "security"
    PERFORMANCE = "performance"
    MAINTAINABILITY = "maintainability"
    ERROR_HANDLING = "error_handling"
    VALIDATION = "validation"
    AUTHORIZATION = "authorization"


class FindingSeverity(str, Enum):
    """How serious a planted problem is."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SeededFinding(BaseModel):
    """
    One problem deliberately planted in the users controller.

    `function` is a method name on app.routers.users.UserController.
    """

    id: str = Field(
        ...,
        description="Stable identifier, e.g. 'sql-concatenation'"
    )

    category: FindingCategory = Field(
        ...,
        description="What kind of problem this is"
    )

    severity: FindingSeverity = Field(
        ...,
        description="How serious the problem is"
    )

    function: str = Field(
        ...,
        description="Controller method that contains the problem"
    )

    message: str = Field(
        ...,
        description="What a reviewer should say about it"
    )


SEEDED_FINDINGS: list[SeededFinding] = [
    SeededFinding(
        id="sql-concatenation",
        category=FindingCategory.SECURITY,
        severity=FindingSeverity.HIGH,
        function="get_user",
        message="SQL is built by concatenating the raw id, allowing SQL injection",
    ),
    SeededFinding(
        id="missing-id-validation",
        category=FindingCategory.VALIDATION,
        severity=FindingSeverity.MEDIUM,
        function="get_user",
        message="The id path parameter is used without any validation",
    ),
    SeededFinding(
        id="missing-query-error-handling",
        category=FindingCategory.ERROR_HANDLING,
        severity=FindingSeverity.MEDIUM,
        function="get_user",
        message="Query execution is not wrapped in any error handling",
    ),
    SeededFinding(
        id="missing-body-validation",
        category=FindingCategory.VALIDATION,
        severity=FindingSeverity.MEDIUM,
        function="create_user",
        message="The request body is accepted as free text with no schema",
    ),
    SeededFinding(
        id="missing-permission-check",
        category=FindingCategory.AUTHORIZATION,
        severity=FindingSeverity.HIGH,
        function="create_user",
        message="Users can be created without any permission check",
    ),
    SeededFinding(
        id="inefficient-loop",
        category=FindingCategory.PERFORMANCE,
        severity=FindingSeverity.MEDIUM,
        function="create_user",
        message="The request body is re-processed 1000 times in a loop",
    ),
    SeededFinding(
        id="duplicated-statements",
        category=FindingCategory.MAINTAINABILITY,
        severity=FindingSeverity.LOW,
        function="complex_method",
        message="The same print statement is repeated five times",
    ),
]


def get_seeded_findings(
    category: FindingCategory | str | None = None,
) -> list[SeededFinding]:
    """
    Return the planted findings, optionally limited to one category.

    Args:
        category: A FindingCategory or its string value. None returns all.

    Raises:
        ValueError: If category is not a known FindingCategory value
    """
    if category is None:
        return list(SEEDED_FINDINGS)

    wanted = FindingCategory(category)
    return [f for f in SEEDED_FINDINGS if f.category == wanted]
