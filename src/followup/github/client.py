"""ProjectsClient - repository, project, user and label lookups for one repository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from followup.github.exceptions import MutationError
from followup.github.models import IssueRecord
from followup.github.schemas import (
    CreateIssueData,
    IssueData,
    LabelIdData,
    ProjectIdData,
    RepositoryIdData,
    UserIdData,
    decode,
)

if TYPE_CHECKING:
    from followup.github.gateway import GraphQLGateway
    from followup.github.models import NewIssueRequest

logger = logging.getLogger(__name__)

ISSUE_QUERY = """
query($owner: String!, $name: String!, $number: Int!) {
    repository(owner: $owner, name: $name) {
        issue(number: $number) {
            id
            state
            title
            projectCards {
                nodes {
                    project {
                        number
                    }
                }
            }
        }
    }
}
"""

PROJECT_ID_QUERY = """
query($owner: String!, $name: String!, $number: Int!) {
    repository(owner: $owner, name: $name) {
        project(number: $number) {
            id
        }
    }
}
"""

LABEL_ID_QUERY = """
query($owner: String!, $name: String!, $labelName: String!) {
    repository(owner: $owner, name: $name) {
        label(name: $labelName) {
            id
        }
    }
}
"""

REPOSITORY_ID_QUERY = """
query($owner: String!, $name: String!) {
    repository(owner: $owner, name: $name) {
        id
    }
}
"""

USER_ID_QUERY = """
query($name: String!) {
    user(login: $name) {
        id
    }
}
"""

CREATE_ISSUE_MUTATION = """
mutation($createIssue: CreateIssueInput!) {
    createIssue(input: $createIssue) {
        issue {
            id
        }
    }
}
"""


class ProjectsClient:
    """Typed lookups against one repository and its classic project boards.

    Every lookup returns ``None`` when GitHub has no such object; deciding
    whether that is fatal is left to the caller.
    """

    def __init__(self, gateway: GraphQLGateway, owner: str, name: str) -> None:
        """Initialize the client.

        Args:
            gateway: Transport used for every request.
            owner: Repository owner.
            name: Repository name.
        """
        self.gateway = gateway
        self.owner = owner
        self.name = name

    def _repo_variables(self, **extra: Any) -> dict[str, Any]:
        return {"owner": self.owner, "name": self.name, **extra}

    def get_issue(self, number: int) -> IssueRecord | None:
        """Get an issue's ID, state, title and project boards.

        Args:
            number: Issue number

        Returns:
            IssueRecord, or None if the issue doesn't exist
        """
        data = self.gateway.execute(ISSUE_QUERY, self._repo_variables(number=number))
        repository = decode(IssueData, data, "issue").repository
        if repository is None or repository.issue is None:
            return None

        issue = repository.issue
        board_numbers = frozenset(
            node.project.number
            for node in issue.project_cards.nodes
            if node is not None and node.project is not None
        )
        logger.info(
            "Issue #%d: state=%s, title=%r, projects=%s",
            number,
            issue.state,
            issue.title,
            sorted(board_numbers),
        )
        return IssueRecord(
            id=issue.id,
            number=number,
            state=issue.state,
            title=issue.title,
            board_numbers=board_numbers,
        )

    def get_project_id(self, number: int) -> str | None:
        """Get the node ID of a repository project by its number."""
        data = self.gateway.execute(PROJECT_ID_QUERY, self._repo_variables(number=number))
        repository = decode(ProjectIdData, data, "project").repository
        if repository is None or repository.project is None:
            return None
        return repository.project.id

    def get_label_id(self, label_name: str) -> str | None:
        """Get the node ID of a repository label by its name."""
        data = self.gateway.execute(LABEL_ID_QUERY, self._repo_variables(labelName=label_name))
        repository = decode(LabelIdData, data, "label").repository
        if repository is None or repository.label is None:
            return None
        return repository.label.id

    def get_repository_id(self) -> str | None:
        """Get the node ID of the repository."""
        data = self.gateway.execute(REPOSITORY_ID_QUERY, self._repo_variables())
        repository = decode(RepositoryIdData, data, "repository").repository
        return repository.id if repository is not None else None

    def get_user_id(self, login: str) -> str | None:
        """Get the node ID of a user by login."""
        data = self.gateway.execute(USER_ID_QUERY, {"name": login})
        user = decode(UserIdData, data, "user").user
        return user.id if user is not None else None

    def create_issue(self, request: NewIssueRequest) -> str:
        """Create an issue and add it to a project.

        Args:
            request: Fully resolved title, body and node IDs

        Returns:
            Node ID of the created issue, as reported by the mutation

        Raises:
            MutationError: If GitHub created no issue
        """
        create_issue_input = {
            "assigneeIds": list(request.assignee_ids),
            "body": request.body,
            "clientMutationId": None,
            "labelIds": list(request.label_ids),
            "milestoneId": None,
            "projectIds": [request.project_id],
            "repositoryId": request.repository_id,
            "title": request.title,
        }
        logger.info("Creating issue %r in %s/%s", request.title, self.owner, self.name)
        data = self.gateway.execute(CREATE_ISSUE_MUTATION, {"createIssue": create_issue_input})
        payload = decode(CreateIssueData, data, "createIssue").create_issue
        if payload is None or payload.issue is None:
            raise MutationError(f"createIssue returned no issue for {request.title!r}")
        return payload.issue.id
