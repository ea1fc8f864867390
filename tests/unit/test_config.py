"""Unit tests for action input parsing."""

import pytest

from followup.config import DEFAULT_API_URL, ConfigError, Configuration, split_list


def _inputs(**overrides: str | None) -> dict[str, str | None]:
    inputs: dict[str, str | None] = {
        "repository": "owner/repo",
        "github_token": "test-token",
        "targetProject": "9",
        "validationProject": "3",
        "newIssueSuffix": "(validated)",
        "assignees": "alice,bob",
        "labels": "qa-verified",
    }
    inputs.update(overrides)
    return inputs


@pytest.mark.unit
class TestSplitList:
    """Tests for split_list."""

    def test_preserves_order_and_duplicates(self) -> None:
        assert split_list("bob,alice,bob") == ("bob", "alice", "bob")

    def test_strips_whitespace_and_blanks(self) -> None:
        assert split_list(" alice , ,bob, ") == ("alice", "bob")

    def test_empty_input(self) -> None:
        assert split_list("") == ()
        assert split_list(None) == ()


@pytest.mark.unit
class TestFromInputs:
    """Tests for Configuration.from_inputs."""

    def test_parses_all_inputs(self) -> None:
        config = Configuration.from_inputs(_inputs())

        assert config.repository_owner == "owner"
        assert config.repository_name == "repo"
        assert config.repository == "owner/repo"
        assert config.github_token == "test-token"
        assert config.target_board == 9
        assert config.validation_board == 3
        assert config.title_suffix == "(validated)"
        assert config.assignee_names == ("alice", "bob")
        assert config.label_names == ("qa-verified",)
        assert config.api_url == DEFAULT_API_URL

    def test_custom_api_url(self) -> None:
        config = Configuration.from_inputs(_inputs(api_url="https://ghe.example.com/api/graphql"))

        assert config.api_url == "https://ghe.example.com/api/graphql"

    def test_empty_lists_are_accepted(self) -> None:
        """Empty assignees/labels are rejected by the workflow, not the parser."""
        config = Configuration.from_inputs(_inputs(assignees="", labels=None))

        assert config.assignee_names == ()
        assert config.label_names == ()

    @pytest.mark.parametrize("repository", ["", "owner", "owner/", "/repo", "a/b/c"])
    def test_rejects_bad_repository(self, repository: str) -> None:
        with pytest.raises(ConfigError, match="owner/name"):
            Configuration.from_inputs(_inputs(repository=repository))

    def test_rejects_missing_token(self) -> None:
        with pytest.raises(ConfigError, match="github_token"):
            Configuration.from_inputs(_inputs(github_token=""))

    def test_rejects_missing_project(self) -> None:
        with pytest.raises(ConfigError, match="targetProject"):
            Configuration.from_inputs(_inputs(targetProject=None))

    def test_rejects_non_numeric_project(self) -> None:
        with pytest.raises(ConfigError, match="validationProject"):
            Configuration.from_inputs(_inputs(validationProject="QA"))
