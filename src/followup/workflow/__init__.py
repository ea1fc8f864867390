"""Follow-up workflow - eligibility check and issue creation state machine."""

from followup.workflow.eligibility import check_eligibility, compose_body, compose_title
from followup.workflow.exceptions import (
    ConfigurationError,
    FollowUpError,
    IdentifierNotFoundError,
    IssueNotFoundError,
)
from followup.workflow.models import (
    EligibilityResult,
    ResolvedIdentifiers,
    WorkflowOutcome,
    WorkflowState,
)
from followup.workflow.workflow import FollowUpWorkflow

__all__ = [
    "ConfigurationError",
    "EligibilityResult",
    "FollowUpError",
    "FollowUpWorkflow",
    "IdentifierNotFoundError",
    "IssueNotFoundError",
    "ResolvedIdentifiers",
    "WorkflowOutcome",
    "WorkflowState",
    "check_eligibility",
    "compose_body",
    "compose_title",
]
