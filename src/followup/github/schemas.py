"""Pydantic schemas for the GraphQL responses this action reads."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from followup.github.exceptions import ResponseDecodeError


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Node(_Schema):
    """Any object selected only for its ID."""

    id: str


class ProjectNumber(_Schema):
    number: int


class ProjectCardNode(_Schema):
    project: ProjectNumber | None = None


class ProjectCardConnection(_Schema):
    nodes: list[ProjectCardNode | None] = Field(default_factory=list)


class IssueNode(_Schema):
    id: str
    state: str
    title: str
    project_cards: ProjectCardConnection = Field(alias="projectCards")


class RepositoryWithIssue(_Schema):
    issue: IssueNode | None = None


class IssueData(_Schema):
    repository: RepositoryWithIssue | None = None


class RepositoryWithProject(_Schema):
    project: Node | None = None


class ProjectIdData(_Schema):
    repository: RepositoryWithProject | None = None


class RepositoryWithLabel(_Schema):
    label: Node | None = None


class LabelIdData(_Schema):
    repository: RepositoryWithLabel | None = None


class RepositoryIdData(_Schema):
    repository: Node | None = None


class UserIdData(_Schema):
    user: Node | None = None


class CreateIssuePayload(_Schema):
    issue: Node | None = None


class CreateIssueData(_Schema):
    create_issue: CreateIssuePayload | None = Field(default=None, alias="createIssue")


SchemaT = TypeVar("SchemaT", bound=BaseModel)


def decode(schema: type[SchemaT], data: dict, query_name: str) -> SchemaT:
    """Validate response data against a schema.

    Raises:
        ResponseDecodeError: If a field the query selects is missing or mistyped.
    """
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ResponseDecodeError(f"Unexpected {query_name} response: {e}") from e
