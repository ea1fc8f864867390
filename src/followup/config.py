"""Action input parsing."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_API_URL = "https://api.github.com/graphql"


class ConfigError(Exception):
    """Raised when an action input is missing or malformed."""


def split_list(value: str | None) -> tuple[str, ...]:
    """Split a comma-separated input, dropping blank entries.

    Order and duplicates are preserved.
    """
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _parse_board_number(inputs: Mapping[str, str | None], key: str) -> int:
    raw = (inputs.get(key) or "").strip()
    if not raw:
        raise ConfigError(f"Missing required input: {key}")
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"Input {key} must be a project number, got {raw!r}") from None


@dataclass(frozen=True)
class Configuration:
    """Operator-supplied settings, fixed for the whole run.

    Attributes:
        repository_owner: Owner of the repository holding both boards.
        repository_name: Repository name.
        github_token: Token sent as the bearer credential.
        target_board: Number of the project the follow-up issue is added to.
        validation_board: Number of the project the closed issue must be on.
        title_suffix: Text appended to the original title.
        assignee_names: Logins assigned to the follow-up issue, in order.
        label_names: Labels applied to the follow-up issue, in order.
        api_url: GraphQL endpoint.
    """

    repository_owner: str
    repository_name: str
    github_token: str
    target_board: int
    validation_board: int
    title_suffix: str = ""
    assignee_names: tuple[str, ...] = ()
    label_names: tuple[str, ...] = ()
    api_url: str = DEFAULT_API_URL

    @property
    def repository(self) -> str:
        return f"{self.repository_owner}/{self.repository_name}"

    @classmethod
    def from_inputs(cls, inputs: Mapping[str, str | None]) -> Configuration:
        """Create configuration from the action's inputs.

        Args:
            inputs: Input values keyed by their action.yml names
                (``repository``, ``github_token``, ``targetProject``,
                ``validationProject``, ``newIssueSuffix``, ``assignees``,
                ``labels``) plus an optional ``api_url``.

        Returns:
            Parsed configuration.

        Raises:
            ConfigError: If a required input is missing or malformed.
        """
        repository = (inputs.get("repository") or "").strip()
        owner, sep, name = repository.partition("/")
        if not sep or not owner or not name or "/" in name:
            raise ConfigError(
                f"Input repository must be in 'owner/name' format, got {repository!r}"
            )

        token = inputs.get("github_token") or ""
        if not token:
            raise ConfigError("Missing required input: github_token")

        return cls(
            repository_owner=owner,
            repository_name=name,
            github_token=token,
            target_board=_parse_board_number(inputs, "targetProject"),
            validation_board=_parse_board_number(inputs, "validationProject"),
            title_suffix=(inputs.get("newIssueSuffix") or "").strip(),
            assignee_names=split_list(inputs.get("assignees")),
            label_names=split_list(inputs.get("labels")),
            api_url=inputs.get("api_url") or DEFAULT_API_URL,
        )
