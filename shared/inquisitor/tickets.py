"""
Known tickets for a release, fetched from Jira.

A single search request for `project = P and fixVersion = 'V'`, capped at
JiraConfig.max_results issues. There is no pagination: a release with more
tickets than the cap is reported with a warning and truncated.
"""

from dataclasses import dataclass
from typing import Any

import requests

from inquisitor_config import JiraConfig
from inquisitor_logging import get_logger

from .errors import FetchError


logger = get_logger("release-inquisitor", component="tickets")

UNRESOLVED = "Unresolved"


@dataclass(frozen=True)
class TicketRecord:
    """A Jira issue targeted at the release."""

    key: str
    summary: str
    resolution: str = UNRESOLVED


def build_jql(project: str, fix_version: str) -> str:
    """JQL selecting every issue of a project with the given fixVersion."""
    return f"project = {project} and fixVersion = '{fix_version}'"


def create_session(config: JiraConfig) -> requests.Session:
    """Session carrying basic auth and JSON headers for the Jira REST API."""
    session = requests.Session()
    session.auth = (config.username, config.password)
    session.headers.update({"Accept": "application/json"})
    return session


def parse_search_response(payload: dict[str, Any]) -> dict[str, TicketRecord]:
    """Map a search response's issues to TicketRecords keyed by upper-cased key."""
    tickets: dict[str, TicketRecord] = {}

    for issue in payload.get("issues") or []:
        fields = issue.get("fields") or {}
        resolution = fields.get("resolution") or {}
        key = issue["key"].upper()
        tickets[key] = TicketRecord(
            key=key,
            summary=fields.get("summary") or "",
            resolution=resolution.get("name") or UNRESOLVED,
        )

    return tickets


def _error_messages(response: requests.Response) -> list[str]:
    """Jira's errorMessages list, or [] when the body is not a Jira error document."""
    try:
        body = response.json()
    except ValueError:
        return []
    if not isinstance(body, dict):
        return []
    return list(body.get("errorMessages") or [])


def fetch_known_tickets(
    config: JiraConfig,
    project: str,
    fix_version: str,
    session: requests.Session | None = None,
) -> dict[str, TicketRecord]:
    """Fetch the tickets Jira knows for a project's fixVersion.

    Args:
        config: Jira location and credentials
        project: Jira project key
        fix_version: fixVersion name
        session: Optional pre-built session (one is created from config otherwise)

    Returns:
        Mapping of upper-cased ticket key to TicketRecord

    Raises:
        FetchError: On transport failure or a non-2xx response. Not retried.
    """
    session = session or create_session(config)
    jql = build_jql(project, fix_version)
    params = {"jql": jql, "maxResults": config.max_results}

    logger.info("Searching JIRA issues", jql=jql, url=config.search_url)

    try:
        response = session.get(config.search_url, params=params, timeout=config.request_timeout)
    except requests.exceptions.RequestException as e:
        logger.error(
            "Error searching issues",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise FetchError(None, [str(e)], reason=type(e).__name__) from e

    if not response.ok:
        messages = _error_messages(response)
        logger.error(
            "JIRA search rejected",
            status_code=response.status_code,
            error_messages=messages,
        )
        raise FetchError(response.status_code, messages, reason=response.reason or "")

    try:
        payload = response.json()
    except ValueError as e:
        raise FetchError(response.status_code, [f"Response is not JSON: {e}"], reason=response.reason or "") from e

    tickets = parse_search_response(payload)

    total = payload.get("total")
    if isinstance(total, int) and total > len(tickets):
        logger.warning(
            "JIRA returned fewer issues than matched; report is truncated",
            total=total,
            returned=len(tickets),
            max_results=config.max_results,
        )

    logger.info("Issue search completed", total_issues=len(tickets))
    return tickets
