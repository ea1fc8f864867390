"""CLI entry point for the follow-up issue action.

Inputs are read from the ``INPUT_*`` variables the Actions runner sets for
each ``with:`` value, so the command needs no arguments inside a workflow.
"""

from __future__ import annotations

import logging
import sys

import click

from followup import __version__
from followup.config import DEFAULT_API_URL, ConfigError, Configuration
from followup.event import EventError, is_issue_card, load_event
from followup.github import GraphQLGateway
from followup.logging import setup_logging
from followup.workflow import FollowUpWorkflow

logger = logging.getLogger("followup.cli")


def report_failure(message: str) -> None:
    """Mark the step as failed with an error annotation on the run."""
    # Newlines would end the workflow command early
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    click.echo(f"::error::{escaped}")


@click.command()
@click.version_option(__version__)
@click.option("--repository", envvar="INPUT_REPOSITORY", help="Repository as owner/name.")
@click.option("--github-token", envvar="INPUT_GITHUB_TOKEN", help="Token used for the GraphQL API.")
@click.option(
    "--target-project", envvar="INPUT_TARGETPROJECT", help="Project number for the new issue."
)
@click.option(
    "--validation-project",
    envvar="INPUT_VALIDATIONPROJECT",
    help="Project number the closed issue must be on.",
)
@click.option(
    "--new-issue-suffix",
    envvar="INPUT_NEWISSUESUFFIX",
    default="",
    help="Text appended to the title.",
)
@click.option("--assignees", envvar="INPUT_ASSIGNEES", help="Comma-separated logins to assign.")
@click.option("--labels", envvar="INPUT_LABELS", help="Comma-separated labels to apply.")
@click.option(
    "--event-path",
    envvar="GITHUB_EVENT_PATH",
    type=click.Path(dir_okay=False),
    help="Path to the project_card event payload.",
)
@click.option(
    "--api-url", envvar="GITHUB_GRAPHQL_URL", default=DEFAULT_API_URL, help="GraphQL endpoint."
)
@click.option(
    "--log-dir", envvar="FOLLOWUP_LOG_DIR", default=None, help="Also write logs to this directory."
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(
    repository: str | None,
    github_token: str | None,
    target_project: str | None,
    validation_project: str | None,
    new_issue_suffix: str,
    assignees: str | None,
    labels: str | None,
    event_path: str | None,
    api_url: str,
    log_dir: str | None,
    verbose: bool,
) -> None:
    """Create a follow-up issue when a validated issue's card is closed."""
    setup_logging(log_dir=log_dir, level="DEBUG" if verbose else None)

    try:
        if not event_path:
            raise EventError("No event payload; set GITHUB_EVENT_PATH or pass --event-path")
        event = load_event(event_path)
    except EventError as e:
        logger.error("%s", e)
        report_failure(str(e))
        sys.exit(1)

    # Cards for notes and pull requests end the run before any input is read
    if not is_issue_card(event.content_url):
        logger.info("Not an issue card: %s", event.content_url)
        return

    try:
        config = Configuration.from_inputs(
            {
                "repository": repository,
                "github_token": github_token,
                "targetProject": target_project,
                "validationProject": validation_project,
                "newIssueSuffix": new_issue_suffix,
                "assignees": assignees,
                "labels": labels,
                "api_url": api_url,
            }
        )
    except ConfigError as e:
        logger.error("%s", e)
        report_failure(str(e))
        sys.exit(1)

    with GraphQLGateway(config.github_token, base_url=config.api_url) as gateway:
        outcome = FollowUpWorkflow(gateway).run(event, config)

    if outcome.failed:
        report_failure(outcome.message)
        sys.exit(1)


if __name__ == "__main__":
    main()
