"""Data models for the GitHub layer."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IssueRecord:
    """Snapshot of an issue and the project boards it sits on."""

    id: str  # GraphQL node ID
    number: int
    state: str  # OPEN or CLOSED
    title: str
    board_numbers: frozenset[int] = field(default_factory=frozenset)


@dataclass(frozen=True)
class NewIssueRequest:
    """Everything needed to create the follow-up issue.

    Attributes:
        title: Title of the new issue.
        body: Body text of the new issue.
        assignee_ids: User node IDs, in configured order.
        label_ids: Label node IDs, in configured order.
        repository_id: Node ID of the repository the issue is created in.
        project_id: Node ID of the only project the issue is added to.
    """

    title: str
    body: str
    assignee_ids: tuple[str, ...]
    label_ids: tuple[str, ...]
    repository_id: str
    project_id: str
