"""GitHub layer - GraphQL transport and typed lookups for classic projects."""

from followup.github.client import ProjectsClient
from followup.github.exceptions import (
    GitHubError,
    GraphQLRequestError,
    MutationError,
    ResponseDecodeError,
)
from followup.github.gateway import GraphQLGateway
from followup.github.models import IssueRecord, NewIssueRequest

__all__ = [
    "GitHubError",
    "GraphQLGateway",
    "GraphQLRequestError",
    "IssueRecord",
    "MutationError",
    "NewIssueRequest",
    "ProjectsClient",
    "ResponseDecodeError",
]
