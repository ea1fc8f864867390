"""Custom exceptions for the GitHub GraphQL layer."""


class GitHubError(Exception):
    """Base exception for GitHub API errors."""


class GraphQLRequestError(GitHubError):
    """Request failed or the response is not a GraphQL data envelope."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseDecodeError(GitHubError):
    """Response data does not have the shape the query asked for."""


class MutationError(GitHubError):
    """A mutation returned no result object."""
