"""Option and response models for vendor clients.

Every option field is settable from the command line and from an
environment variable; a flag passed explicitly wins over the variable.
"""

from dataclasses import dataclass, field
from typing import Annotated, Any

from cyclopts import Parameter

from devops_tools.errors import UnexpectedResponseError


@dataclass
class OutputOptions:
    """Where and how a response is written."""

    output: str = ""
    query: str = ""
    format: str = "json"


@dataclass
class JiraOptions:
    """Connection settings for a Jira instance."""

    url: Annotated[str, Parameter(name="--jira-url", env_var="JIRA_URL", help="Jira URL")] = ""
    timeout: Annotated[int, Parameter(name="--jira-timeout", env_var="JIRA_TIMEOUT", help="Jira timeout")] = 30
    insecure: Annotated[bool, Parameter(name="--jira-insecure", env_var="JIRA_INSECURE", help="Jira insecure")] = False
    user: Annotated[str, Parameter(name="--jira-user", env_var="JIRA_USER", help="Jira user")] = ""
    password: Annotated[str, Parameter(name="--jira-password", env_var="JIRA_PASSWORD", help="Jira password")] = ""
    access_token: Annotated[
        str, Parameter(name="--jira-access-token", env_var="JIRA_ACCESS_TOKEN", help="Jira Personal Access Token")
    ] = ""
    output: Annotated[str, Parameter(name="--jira-output", env_var="JIRA_OUTPUT", help="Jira output file")] = ""
    output_query: Annotated[
        str, Parameter(name="--jira-output-query", env_var="JIRA_OUTPUT_QUERY", help="Jira output JMESPath query")
    ] = ""
    output_format: Annotated[
        str, Parameter(name="--jira-output-format", env_var="JIRA_OUTPUT_FORMAT", help="Jira output format (json, yaml)")
    ] = "json"

    def output_options(self) -> OutputOptions:
        return OutputOptions(output=self.output, query=self.output_query, format=self.output_format)


@dataclass
class JiraIssueOptions:
    """Fields shared by the issue operations."""

    id_or_key: Annotated[
        str, Parameter(name="--jira-issue-id-or-key", env_var="JIRA_ISSUE_ID_OR_KEY", help="Jira issue ID or key")
    ] = ""
    summary: Annotated[
        str, Parameter(name="--jira-issue-summary", env_var="JIRA_ISSUE_SUMMARY", help="Jira issue summary")
    ] = ""
    description: Annotated[
        str,
        Parameter(name="--jira-issue-description", env_var="JIRA_ISSUE_DESCRIPTION", help="Jira issue description"),
    ] = ""
    custom_fields: Annotated[
        str,
        Parameter(
            name="--jira-issue-custom-fields",
            env_var="JIRA_ISSUE_CUSTOM_FIELDS",
            help="Jira issue custom fields (JSON, file or URL)",
        ),
    ] = ""
    status: Annotated[
        str, Parameter(name="--jira-issue-status", env_var="JIRA_ISSUE_STATUS", help="Jira issue transition ID")
    ] = ""
    labels: Annotated[
        list[str], Parameter(name="--jira-issue-labels", env_var="JIRA_ISSUE_LABELS", help="Jira issue labels")
    ] = field(default_factory=list)


@dataclass
class JiraIssueCreateOptions:
    project_key: Annotated[
        str,
        Parameter(name="--jira-issue-project-key", env_var="JIRA_ISSUE_PROJECT_KEY", help="Jira issue project key"),
    ] = ""
    issue_type: Annotated[str, Parameter(name="--jira-issue-type", env_var="JIRA_ISSUE_TYPE", help="Jira issue type")] = (
        ""
    )
    priority: Annotated[
        str, Parameter(name="--jira-issue-priority", env_var="JIRA_ISSUE_PRIORITY", help="Jira issue priority")
    ] = ""
    assignee: Annotated[
        str, Parameter(name="--jira-issue-assignee", env_var="JIRA_ISSUE_ASSIGNEE", help="Jira issue assignee")
    ] = ""
    reporter: Annotated[
        str, Parameter(name="--jira-issue-reporter", env_var="JIRA_ISSUE_REPORTER", help="Jira issue reporter")
    ] = ""


@dataclass
class JiraIssueAddCommentOptions:
    body: Annotated[
        str,
        Parameter(name="--jira-issue-comment-body", env_var="JIRA_ISSUE_COMMENT_BODY", help="Jira issue comment body"),
    ] = ""


@dataclass
class JiraIssueAddAttachmentOptions:
    file: Annotated[
        str,
        Parameter(
            name="--jira-issue-attachment-file", env_var="JIRA_ISSUE_ATTACHMENT_FILE", help="Jira issue attachment file"
        ),
    ] = ""
    name: Annotated[
        str,
        Parameter(
            name="--jira-issue-attachment-name", env_var="JIRA_ISSUE_ATTACHMENT_NAME", help="Jira issue attachment name"
        ),
    ] = ""


@dataclass
class JiraIssueSearchOptions:
    search_pattern: Annotated[
        str,
        Parameter(
            name="--jira-issue-search-pattern", env_var="JIRA_ISSUE_SEARCH_PATTERN", help="Jira issue search pattern"
        ),
    ] = ""
    max_results: Annotated[
        int,
        Parameter(
            name="--jira-issue-search-max-results",
            env_var="JIRA_ISSUE_SEARCH_MAX_RESULTS",
            help="Jira issue search max results",
        ),
    ] = 50


@dataclass
class JiraAssetsSearchOptions:
    search_pattern: Annotated[
        str,
        Parameter(
            name="--jira-assets-search-pattern", env_var="JIRA_ASSETS_SEARCH_PATTERN", help="Jira assets search pattern"
        ),
    ] = ""
    result_per_page: Annotated[
        int,
        Parameter(
            name="--jira-assets-search-results-per-page",
            env_var="JIRA_ASSETS_SEARCH_RESULT_PER_PAGE",
            help="Jira assets result per page",
        ),
    ] = 50


@dataclass
class GraylogOptions:
    """Connection and query settings for a Graylog instance."""

    url: Annotated[str, Parameter(name="--graylog-url", env_var="GRAYLOG_URL", help="Graylog URL")] = ""
    timeout: Annotated[int, Parameter(name="--graylog-timeout", env_var="GRAYLOG_TIMEOUT", help="Graylog timeout")] = 30
    insecure: Annotated[
        bool, Parameter(name="--graylog-insecure", env_var="GRAYLOG_INSECURE", help="Graylog insecure")
    ] = False
    user: Annotated[str, Parameter(name="--graylog-user", env_var="GRAYLOG_USER", help="Graylog user")] = ""
    password: Annotated[
        str, Parameter(name="--graylog-password", env_var="GRAYLOG_PASSWORD", help="Graylog password")
    ] = ""
    streams: Annotated[str, Parameter(name="--graylog-streams", env_var="GRAYLOG_STREAMS", help="Graylog streams")] = ""
    query: Annotated[
        str, Parameter(name="--graylog-query", env_var="GRAYLOG_QUERY", help="Graylog query (text, file or URL)")
    ] = ""
    range_type: Annotated[
        str,
        Parameter(
            name="--graylog-range-type",
            env_var="GRAYLOG_RANGE_TYPE",
            help="Graylog range type (absolute, relative, keyword)",
        ),
    ] = "absolute"
    from_: Annotated[str, Parameter(name="--graylog-from", env_var="GRAYLOG_FROM", help="Graylog from time")] = ""
    to: Annotated[str, Parameter(name="--graylog-to", env_var="GRAYLOG_TO", help="Graylog to time")] = ""
    sort: Annotated[str, Parameter(name="--graylog-sort", env_var="GRAYLOG_SORT", help="Graylog sort")] = ""
    limit: Annotated[int, Parameter(name="--graylog-limit", env_var="GRAYLOG_LIMIT", help="Graylog limit")] = 100
    range: Annotated[
        str, Parameter(name="--graylog-range", env_var="GRAYLOG_RANGE", help="Graylog relative range or keyword")
    ] = ""
    output: Annotated[str, Parameter(name="--graylog-output", env_var="GRAYLOG_OUTPUT", help="Graylog output file")] = (
        ""
    )
    output_query: Annotated[
        str,
        Parameter(name="--graylog-output-query", env_var="GRAYLOG_OUTPUT_QUERY", help="Graylog output JMESPath query"),
    ] = ""
    output_format: Annotated[
        str,
        Parameter(
            name="--graylog-output-format", env_var="GRAYLOG_OUTPUT_FORMAT", help="Graylog output format (json, yaml)"
        ),
    ] = "json"

    def output_options(self) -> OutputOptions:
        return OutputOptions(output=self.output, query=self.output_query, format=self.output_format)


@dataclass
class AssetsPage:
    """One page of a Jira Assets AQL search response."""

    object_entries: list[Any]
    object_type_attributes: list[Any]
    page_count: int

    @classmethod
    def from_dict(cls, data: Any) -> "AssetsPage":
        """Decode a response page.

        Raises:
            UnexpectedResponseError: If a key is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise UnexpectedResponseError(f"Assets response is not an object: {type(data).__name__}")

        entries = data.get("objectEntries")
        attributes = data.get("objectTypeAttributes")
        page_count = data.get("pageSize")

        if not isinstance(entries, list):
            raise UnexpectedResponseError("Assets response has no objectEntries list")
        if not isinstance(attributes, list):
            raise UnexpectedResponseError("Assets response has no objectTypeAttributes list")
        # bool is an int subclass
        if isinstance(page_count, bool) or not isinstance(page_count, (int, float)):
            raise UnexpectedResponseError("Assets response has no numeric pageSize")

        return cls(object_entries=entries, object_type_attributes=attributes, page_count=int(page_count))
