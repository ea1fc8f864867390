"""Data models for the follow-up workflow."""

from dataclasses import dataclass, field
from enum import StrEnum


class WorkflowState(StrEnum):
    """Workflow state enum."""

    START = "start"
    FILTERED_FOR_ISSUE = "filtered_for_issue"
    ISSUE_RESOLVED = "issue_resolved"
    ELIGIBILITY_PASSED = "eligibility_passed"
    IDENTIFIERS_RESOLVED = "identifiers_resolved"
    ISSUE_CREATED = "issue_created"
    DONE = "done"
    SKIPPED_NOT_ISSUE_CARD = "skipped_not_issue_card"
    SKIPPED_INELIGIBLE = "skipped_ineligible"
    FAILED = "failed"


@dataclass(frozen=True)
class EligibilityResult:
    """Outcome of the eligibility check.

    Attributes:
        passed: Whether a follow-up issue should be created.
        reason: Why the check failed; empty when it passed.
    """

    passed: bool
    reason: str = ""


@dataclass
class ResolvedIdentifiers:
    """Node IDs collected before the issue is created."""

    project_id: str | None = None
    assignee_ids: list[str] = field(default_factory=list)
    label_ids: list[str] = field(default_factory=list)
    repository_id: str | None = None


@dataclass
class WorkflowOutcome:
    """Result of a workflow run.

    Attributes:
        state: Terminal state the run ended in.
        message: Human-readable summary; the failure message when FAILED.
        history: Every state the run passed through, in order.
        created_issue_id: Node ID of the new issue, if one was created.
    """

    state: WorkflowState
    message: str
    history: list[WorkflowState] = field(default_factory=list)
    created_issue_id: str | None = None

    @property
    def failed(self) -> bool:
        return self.state == WorkflowState.FAILED
