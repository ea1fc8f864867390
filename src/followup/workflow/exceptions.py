"""Exceptions for the follow-up workflow."""


class FollowUpError(Exception):
    """Base exception for workflow errors."""

    pass


class ConfigurationError(FollowUpError):
    """Configured inputs can't be used to create an issue."""

    pass


class IssueNotFoundError(FollowUpError):
    """The issue referenced by the card does not exist."""

    def __init__(self, issue_number: str) -> None:
        super().__init__(f"Issue {issue_number} not found")
        self.issue_number = issue_number


class IdentifierNotFoundError(FollowUpError):
    """A name could not be resolved to a node ID."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"Invalid {kind} {key}")
        self.kind = kind
        self.key = key
