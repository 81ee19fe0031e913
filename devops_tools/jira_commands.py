"""Jira commands for devops-tools CLI."""

import dataclasses
from pathlib import Path
from typing import Annotated

import structlog
from cyclopts import App, Parameter

from devops_tools import content
from devops_tools.command_utils import debug_options, emit, fatal, resolve, resolve_bytes
from devops_tools.models import (
    JiraAssetsSearchOptions,
    JiraIssueAddAttachmentOptions,
    JiraIssueAddCommentOptions,
    JiraIssueCreateOptions,
    JiraIssueOptions,
    JiraIssueSearchOptions,
    JiraOptions,
)
from devops_tools.vendors import Jira

logger = structlog.get_logger()

jira_app = App(name="jira", help="Jira tools")
issue_app = App(name="issue", help="Issue methods")
assets_app = App(name="assets", help="Assets methods")

jira_app.command(issue_app)
jira_app.command(assets_app)

JiraFlags = Annotated[JiraOptions | None, Parameter(name="*")]
IssueFlags = Annotated[JiraIssueOptions | None, Parameter(name="*")]


def new_jira(options: JiraOptions) -> Jira:
    """Create the Jira client; abort if the options are unusable."""
    try:
        return Jira(options)
    except ValueError as e:
        fatal(str(e))


@issue_app.command
def create(
    *,
    jira: JiraFlags = None,
    issue: IssueFlags = None,
    details: Annotated[JiraIssueCreateOptions | None, Parameter(name="*")] = None,
) -> None:
    """Create issue."""
    jira = jira or JiraOptions()
    issue = issue or JiraIssueOptions()
    details = details or JiraIssueCreateOptions()
    logger.debug("Jira creating issue...")
    debug_options("Jira", jira, issue, details)

    issue = dataclasses.replace(issue, description=resolve(issue.description, "issue description", jira.timeout))
    client = new_jira(jira)
    emit("Jira", lambda: client.issue_create(issue, details), jira.output_options())


@issue_app.command(name="add-comment")
def add_comment(
    *,
    jira: JiraFlags = None,
    issue: IssueFlags = None,
    comment: Annotated[JiraIssueAddCommentOptions | None, Parameter(name="*")] = None,
) -> None:
    """Issue add comment."""
    jira = jira or JiraOptions()
    issue = issue or JiraIssueOptions()
    comment = comment or JiraIssueAddCommentOptions()
    logger.debug("Jira issue adding comment...")
    debug_options("Jira", jira, issue, comment)

    comment = dataclasses.replace(comment, body=resolve(comment.body, "comment body", jira.timeout))
    client = new_jira(jira)
    emit("Jira", lambda: client.issue_add_comment(issue, comment), jira.output_options())


@issue_app.command(name="add-attachment")
def add_attachment(
    *,
    jira: JiraFlags = None,
    issue: IssueFlags = None,
    attachment: Annotated[JiraIssueAddAttachmentOptions | None, Parameter(name="*")] = None,
) -> None:
    """Issue add attachment."""
    jira = jira or JiraOptions()
    issue = issue or JiraIssueOptions()
    attachment = attachment or JiraIssueAddAttachmentOptions()
    logger.debug("Jira issue adding attachment...")
    debug_options("Jira", jira, issue, attachment)

    if not attachment.name and content.is_file(attachment.file):
        attachment = dataclasses.replace(attachment, name=Path(attachment.file).name)

    data = resolve_bytes(attachment.file, "attachment file", jira.timeout)
    client = new_jira(jira)
    emit("Jira", lambda: client.issue_add_attachment(issue, attachment, data), jira.output_options())


@issue_app.command
def update(*, jira: JiraFlags = None, issue: IssueFlags = None) -> None:
    """Issue update."""
    jira = jira or JiraOptions()
    issue = issue or JiraIssueOptions()
    logger.debug("Jira issue updating...")
    debug_options("Jira", jira, issue)

    issue = dataclasses.replace(issue, description=resolve(issue.description, "issue description", jira.timeout))
    client = new_jira(jira)
    emit("Jira", lambda: client.issue_update(issue), jira.output_options())


@issue_app.command(name="change-transitions")
def change_transitions(*, jira: JiraFlags = None, issue: IssueFlags = None) -> None:
    """Transitions change."""
    jira = jira or JiraOptions()
    issue = issue or JiraIssueOptions()
    logger.debug("Jira issue changing transitions...")
    debug_options("Jira", jira, issue)

    issue = dataclasses.replace(issue, status=resolve(issue.status, "issue status", jira.timeout).strip())
    client = new_jira(jira)
    emit("Jira", lambda: client.issue_change_transitions(issue), jira.output_options())


@issue_app.command(name="search")
def search_issues(
    *,
    jira: JiraFlags = None,
    search: Annotated[JiraIssueSearchOptions | None, Parameter(name="*")] = None,
) -> None:
    """Search issue."""
    jira = jira or JiraOptions()
    search = search or JiraIssueSearchOptions()
    logger.debug("Jira issue searching...")
    debug_options("Jira", jira, search)

    search = dataclasses.replace(
        search, search_pattern=resolve(search.search_pattern, "issue search pattern", jira.timeout)
    )
    client = new_jira(jira)
    emit("Jira", lambda: client.issue_search(search), jira.output_options())


@assets_app.command(name="search")
def search_assets(
    *,
    jira: JiraFlags = None,
    search: Annotated[JiraAssetsSearchOptions | None, Parameter(name="*")] = None,
) -> None:
    """Search assets."""
    jira = jira or JiraOptions()
    search = search or JiraAssetsSearchOptions()
    logger.debug("Jira assets searching...")
    debug_options("Jira", jira, search)

    search = dataclasses.replace(
        search, search_pattern=resolve(search.search_pattern, "assets search pattern", jira.timeout)
    )
    client = new_jira(jira)
    emit("Jira", lambda: client.assets_search(search), jira.output_options())
