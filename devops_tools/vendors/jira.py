"""Jira REST API client."""

import json
from urllib.parse import quote
from collections.abc import Callable
from typing import Any

import structlog

from devops_tools import content, payload
from devops_tools.errors import UnexpectedResponseError
from devops_tools.http import HttpClient, build_url
from devops_tools.models import (
    AssetsPage,
    JiraAssetsSearchOptions,
    JiraIssueAddAttachmentOptions,
    JiraIssueAddCommentOptions,
    JiraIssueCreateOptions,
    JiraIssueOptions,
    JiraIssueSearchOptions,
    JiraOptions,
)
from devops_tools.vendor import IssueTracker, auth_header

logger = structlog.get_logger()

JSON = "application/json"


def _labels(values: list[str]) -> list[str]:
    """Split comma-separated label values and drop empty ones."""
    labels = []
    for value in values:
        labels.extend(label.strip() for label in value.split(",") if label.strip())
    return labels


def _decode(data: bytes) -> Any:
    try:
        return json.loads(data)
    except json.JSONDecodeError as e:
        raise UnexpectedResponseError(f"Response is not valid JSON: {e}") from e


def _key(issue: JiraIssueOptions) -> str:
    """Issue id or key as a single URL path segment."""
    return quote(issue.id_or_key, safe="")


class Jira(IssueTracker):
    """Jira client covering issues and Assets (Insight) objects.

    Every operation has a ``custom_*`` form taking explicit connection
    options, so one client can address a different instance per call.
    """

    def __init__(self, options: JiraOptions, loader: Callable[[str], bytes] = content.load) -> None:
        """Initialize Jira client.

        Args:
            options: Connection settings
            loader: Resolves custom-field sources (inline JSON, file or URL)
        """
        if not options.url:
            raise ValueError("Jira URL required. Set it with --jira-url or JIRA_URL")

        self.options = options
        self.loader = loader
        self.http = HttpClient(timeout=options.timeout, insecure=options.insecure)
        logger.debug("Jira client initialized", url=options.url, timeout=options.timeout)

    def _auth(self, options: JiraOptions) -> str:
        return auth_header(options.user, options.password, options.access_token)

    def _fields_payload(self, fields: dict[str, Any], custom_fields: str) -> bytes:
        issue = {"fields": payload.compact(fields)}
        issue = payload.merge_fields(issue, payload.read_custom_fields(custom_fields, self.loader))
        return payload.encode(issue)

    def custom_issue_create(
        self, options: JiraOptions, issue: JiraIssueOptions, create: JiraIssueCreateOptions
    ) -> bytes:
        logger.info("Creating Jira issue", project=create.project_key, issue_type=create.issue_type)

        fields = {
            "project": {"key": create.project_key},
            "issuetype": {"name": create.issue_type},
            "summary": issue.summary,
            "description": issue.description,
            "labels": _labels(issue.labels),
        }
        if create.priority:
            fields["priority"] = {"name": create.priority}
        if create.assignee:
            fields["assignee"] = {"name": create.assignee}
        if create.reporter:
            fields["reporter"] = {"name": create.reporter}

        data = self._fields_payload(fields, issue.custom_fields)
        url = build_url(options.url, "/rest/api/2/issue")
        return self.http.post(url, JSON, self._auth(options), data)

    def issue_create(self, issue: JiraIssueOptions, create: JiraIssueCreateOptions) -> bytes:
        return self.custom_issue_create(self.options, issue, create)

    def custom_issue_add_comment(
        self, options: JiraOptions, issue: JiraIssueOptions, comment: JiraIssueAddCommentOptions
    ) -> bytes:
        logger.info("Adding comment to Jira issue", id_or_key=issue.id_or_key)
        data = payload.encode({"body": comment.body})
        url = build_url(options.url, f"/rest/api/2/issue/{_key(issue)}/comment")
        return self.http.post(url, JSON, self._auth(options), data)

    def issue_add_comment(self, issue: JiraIssueOptions, comment: JiraIssueAddCommentOptions) -> bytes:
        return self.custom_issue_add_comment(self.options, issue, comment)

    def custom_issue_add_attachment(
        self, options: JiraOptions, issue: JiraIssueOptions, attachment: JiraIssueAddAttachmentOptions, data: bytes
    ) -> bytes:
        logger.info("Adding attachment to Jira issue", id_or_key=issue.id_or_key, name=attachment.name, size=len(data))
        url = build_url(options.url, f"/rest/api/2/issue/{_key(issue)}/attachments")

        headers = {"X-Atlassian-Token": "no-check"}
        auth = self._auth(options)
        if auth:
            headers["Authorization"] = auth
        return self.http.post_files(url, headers, {"file": (attachment.name, data)})

    def issue_add_attachment(
        self, issue: JiraIssueOptions, attachment: JiraIssueAddAttachmentOptions, data: bytes
    ) -> bytes:
        return self.custom_issue_add_attachment(self.options, issue, attachment, data)

    def custom_issue_update(self, options: JiraOptions, issue: JiraIssueOptions) -> bytes:
        logger.info("Updating Jira issue", id_or_key=issue.id_or_key)

        fields = {
            "summary": issue.summary,
            "description": issue.description,
            "labels": _labels(issue.labels),
        }

        data = self._fields_payload(fields, issue.custom_fields)
        url = build_url(options.url, f"/rest/api/2/issue/{_key(issue)}")
        return self.http.put(url, JSON, self._auth(options), data)

    def issue_update(self, issue: JiraIssueOptions) -> bytes:
        return self.custom_issue_update(self.options, issue)

    def custom_issue_change_transitions(self, options: JiraOptions, issue: JiraIssueOptions) -> bytes:
        """Apply a transition.

        The endpoint answers 204 with no body, so only the status code is
        returned, as ``{"code": <status>}``.
        """
        logger.info("Changing Jira issue transition", id_or_key=issue.id_or_key, transition=issue.status)
        data = payload.encode({"transition": {"id": issue.status}})
        url = build_url(options.url, f"/rest/api/2/issue/{_key(issue)}/transitions")

        _, code = self.http.post_with_code(url, JSON, self._auth(options), data)
        return payload.encode({"code": code})

    def issue_change_transitions(self, issue: JiraIssueOptions) -> bytes:
        return self.custom_issue_change_transitions(self.options, issue)

    def custom_issue_search(self, options: JiraOptions, search: JiraIssueSearchOptions) -> bytes:
        logger.info("Searching Jira issues", jql=search.search_pattern, max_results=search.max_results)
        params = {
            "jql": search.search_pattern,
            "maxResults": str(search.max_results),
            "validateQuery": "strict",
        }
        url = build_url(options.url, "/rest/api/2/search", params)
        return self.http.get(url, JSON, self._auth(options))

    def issue_search(self, search: JiraIssueSearchOptions) -> bytes:
        return self.custom_issue_search(self.options, search)

    def custom_assets_search(self, options: JiraOptions, search: JiraAssetsSearchOptions) -> bytes:
        """Search Assets objects with AQL, following every result page.

        Entries from all pages are concatenated in page order; attributes
        come from the first page only.
        """
        logger.info("Searching Jira assets", aql=search.search_pattern, result_per_page=search.result_per_page)
        params = {
            "qlQuery": search.search_pattern,
            "resultPerPage": str(search.result_per_page),
        }
        auth = self._auth(options)

        url = build_url(options.url, "/rest/insight/1.0/aql/objects", params)
        first = AssetsPage.from_dict(_decode(self.http.get(url, JSON, auth)))

        objects = list(first.object_entries)
        for page in range(2, first.page_count + 1):
            logger.debug("Fetching Jira assets page", page=page, pages=first.page_count)
            url = build_url(options.url, "/rest/insight/1.0/aql/objects", {**params, "page": str(page)})
            next_page = AssetsPage.from_dict(_decode(self.http.get(url, JSON, auth)))
            objects.extend(next_page.object_entries)

        logger.info("Jira assets found", count=len(objects), pages=max(first.page_count, 1))
        return payload.encode({"objects": objects, "attributes": first.object_type_attributes})

    def assets_search(self, search: JiraAssetsSearchOptions) -> bytes:
        return self.custom_assets_search(self.options, search)
