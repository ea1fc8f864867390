"""GraphQLGateway - executes queries against the GitHub GraphQL API."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from followup.config import DEFAULT_API_URL
from followup.github.exceptions import GraphQLRequestError
from followup.logging import sanitize_for_log, truncate_output

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


class GraphQLGateway:
    """Stateless transport for GraphQL queries and mutations.

    Knows nothing about the schema: callers hand it query text and variables
    and get back the ``data`` object of the response.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            token: GitHub token sent as a bearer credential.
            base_url: GraphQL endpoint (for testing/enterprise).
            client: Preconfigured HTTP client; one is created on first use if omitted.
        """
        self.token = token
        self.base_url = base_url
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                headers={
                    "Authorization": f"bearer {self.token}",
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                },
                timeout=None,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> GraphQLGateway:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a GraphQL query or mutation.

        Args:
            query: GraphQL document
            variables: Variables for the document

        Returns:
            The ``data`` object of the response

        Raises:
            GraphQLRequestError: On a non-200 status or a body without a data object
            httpx.HTTPError: On transport failures
        """
        payload: dict[str, Any] = {"query": query, "variables": variables or {}}
        logger.debug("Query body: %s", sanitize_for_log(json.dumps(payload)))

        response = self.client.post(self.base_url, json=payload)

        if response.status_code != 200:
            raise GraphQLRequestError(
                f"GraphQL request failed: {response.status_code} - "
                f"{truncate_output(response.text, 500)}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise GraphQLRequestError(f"GraphQL response is not JSON: {e}") from e

        if not isinstance(body, dict):
            raise GraphQLRequestError("GraphQL response is not a JSON object")

        logger.debug("Response: %s", truncate_output(json.dumps(body, indent=2)))

        errors = body.get("errors")
        data = body.get("data")
        if not isinstance(data, dict):
            raise GraphQLRequestError(
                f"GraphQL errors: {errors}" if errors else "GraphQL response has no data"
            )

        # Lookups of missing nodes come back as null data plus a NOT_FOUND error
        if errors:
            logger.warning("GraphQL errors: %s", errors)

        return data
