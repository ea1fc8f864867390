"""Eligibility rule and text composition for follow-up issues."""

from __future__ import annotations

from typing import TYPE_CHECKING

from followup.workflow.models import EligibilityResult

if TYPE_CHECKING:
    from followup.github.models import IssueRecord

BODY_TEMPLATE = "A new issue has been completed, #{number}. Please test it."


def check_eligibility(issue: IssueRecord, validation_board: int) -> EligibilityResult:
    """Decide whether a closed issue qualifies for a follow-up.

    The issue must be closed and sit on the validation project.

    Args:
        issue: Issue snapshot.
        validation_board: Number of the validation project.

    Returns:
        EligibilityResult with the reason when it does not qualify.
    """
    if issue.state.lower() != "closed":
        return EligibilityResult(
            passed=False,
            reason=f"Issue {issue.number} not closed! Issue state is {issue.state}",
        )
    if validation_board not in issue.board_numbers:
        return EligibilityResult(
            passed=False,
            reason=(
                f"Issue {issue.number} is not associated with "
                f"validation project {validation_board}"
            ),
        )
    return EligibilityResult(passed=True)


def compose_title(title: str, suffix: str) -> str:
    """Append the configured suffix to the original title."""
    if not suffix:
        return title
    return f"{title} {suffix}"


def compose_body(issue_number: str | int) -> str:
    return BODY_TEMPLATE.format(number=issue_number)
