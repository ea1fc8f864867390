"""FollowUpWorkflow - validation check and follow-up issue creation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from followup.event import EventError, get_issue_number, is_issue_card
from followup.github import NewIssueRequest, ProjectsClient
from followup.workflow.eligibility import check_eligibility, compose_body, compose_title
from followup.workflow.exceptions import (
    ConfigurationError,
    FollowUpError,
    IdentifierNotFoundError,
    IssueNotFoundError,
)
from followup.workflow.models import (
    ResolvedIdentifiers,
    WorkflowOutcome,
    WorkflowState,
)

if TYPE_CHECKING:
    from followup.config import Configuration
    from followup.event import TriggerEvent
    from followup.github import GraphQLGateway, IssueRecord

logger = logging.getLogger(__name__)


class FollowUpWorkflow:
    """Drives one run from the card event to the created follow-up issue.

    States advance strictly in order:
    START -> FILTERED_FOR_ISSUE -> ISSUE_RESOLVED -> ELIGIBILITY_PASSED
    -> IDENTIFIERS_RESOLVED -> ISSUE_CREATED -> DONE.

    A card without an issue ends in SKIPPED_NOT_ISSUE_CARD and an issue that
    is open or not on the validation project ends in SKIPPED_INELIGIBLE;
    both are successful runs. Any error ends the run in FAILED. Nothing is
    written unless every identifier has been resolved.
    """

    def __init__(self, gateway: GraphQLGateway) -> None:
        """Initialize the workflow.

        Args:
            gateway: GraphQL transport shared by every lookup.
        """
        self.gateway = gateway
        self._history: list[WorkflowState] = []

    @property
    def state(self) -> WorkflowState | None:
        return self._history[-1] if self._history else None

    def _advance(self, state: WorkflowState) -> None:
        logger.debug("Workflow state: %s -> %s", self.state, state)
        self._history.append(state)

    def _finish(
        self,
        state: WorkflowState,
        message: str,
        created_issue_id: str | None = None,
    ) -> WorkflowOutcome:
        self._advance(state)
        return WorkflowOutcome(
            state=state,
            message=message,
            history=list(self._history),
            created_issue_id=created_issue_id,
        )

    def run(self, event: TriggerEvent, config: Configuration) -> WorkflowOutcome:
        """Run the workflow for one card event.

        Args:
            event: The card event that triggered the run.
            config: Action inputs.

        Returns:
            WorkflowOutcome in a terminal state. Errors are reported through
            a FAILED outcome rather than raised.
        """
        self._history = [WorkflowState.START]
        try:
            return self._run(event, config)
        except (FollowUpError, EventError) as e:
            logger.error("%s", e)
            return self._finish(WorkflowState.FAILED, str(e))
        except Exception as e:
            logger.exception("Follow-up workflow failed: %s", e)
            return self._finish(WorkflowState.FAILED, str(e) or type(e).__name__)

    def _run(self, event: TriggerEvent, config: Configuration) -> WorkflowOutcome:
        if event.content_url is None or not is_issue_card(event.content_url):
            message = f"Not an issue card: {event.content_url}"
            logger.info("%s", message)
            return self._finish(WorkflowState.SKIPPED_NOT_ISSUE_CARD, message)
        self._advance(WorkflowState.FILTERED_FOR_ISSUE)

        self._check_configuration(config)

        issue_number = get_issue_number(event.content_url)
        client = ProjectsClient(self.gateway, config.repository_owner, config.repository_name)

        issue = client.get_issue(int(issue_number))
        if issue is None:
            raise IssueNotFoundError(issue_number)
        self._advance(WorkflowState.ISSUE_RESOLVED)

        eligibility = check_eligibility(issue, config.validation_board)
        if not eligibility.passed:
            logger.info("%s", eligibility.reason)
            return self._finish(WorkflowState.SKIPPED_INELIGIBLE, eligibility.reason)
        self._advance(WorkflowState.ELIGIBILITY_PASSED)

        identifiers = self._resolve_identifiers(client, config)
        self._advance(WorkflowState.IDENTIFIERS_RESOLVED)

        request = self._build_request(issue, issue_number, identifiers, config)
        created_issue_id = client.create_issue(request)
        self._advance(WorkflowState.ISSUE_CREATED)

        logger.info("Done!")
        return self._finish(
            WorkflowState.DONE,
            f"Created follow-up issue {request.title!r} for #{issue_number}",
            created_issue_id=created_issue_id,
        )

    def _check_configuration(self, config: Configuration) -> None:
        if not config.assignee_names:
            raise ConfigurationError("Assignees missing")
        if not config.label_names:
            raise ConfigurationError("Labels missing")

    def _require(self, kind: str, key: str, node_id: str | None) -> str:
        """Return a resolved node ID, failing on the first miss."""
        logger.debug("Resolved %s %s: %s", kind, key, node_id)
        if not node_id:
            raise IdentifierNotFoundError(kind, key)
        return node_id

    def _resolve_identifiers(
        self, client: ProjectsClient, config: Configuration
    ) -> ResolvedIdentifiers:
        """Resolve project, assignees, labels and repository, in that order."""
        identifiers = ResolvedIdentifiers()

        identifiers.project_id = self._require(
            "project", str(config.target_board), client.get_project_id(config.target_board)
        )

        for login in config.assignee_names:
            identifiers.assignee_ids.append(
                self._require("assignee", login, client.get_user_id(login))
            )

        for label in config.label_names:
            identifiers.label_ids.append(
                self._require("label", label, client.get_label_id(label))
            )

        identifiers.repository_id = self._require(
            "repository", config.repository, client.get_repository_id()
        )
        return identifiers

    def _build_request(
        self,
        issue: IssueRecord,
        issue_number: str,
        identifiers: ResolvedIdentifiers,
        config: Configuration,
    ) -> NewIssueRequest:
        if identifiers.project_id is None or identifiers.repository_id is None:
            raise FollowUpError("Identifiers not resolved")
        return NewIssueRequest(
            title=compose_title(issue.title, config.title_suffix),
            body=compose_body(issue_number),
            assignee_ids=tuple(identifiers.assignee_ids),
            label_ids=tuple(identifiers.label_ids),
            repository_id=identifiers.repository_id,
            project_id=identifiers.project_id,
        )
