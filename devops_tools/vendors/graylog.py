"""Graylog universal search client."""

import structlog

from devops_tools.http import HttpClient, build_url
from devops_tools.models import GraylogOptions
from devops_tools.vendor import LogManagement, auth_header

logger = structlog.get_logger()

RANGE_TYPES = ("absolute", "relative", "keyword")


class Graylog(LogManagement):
    """Graylog client fetching messages from the universal search API."""

    def __init__(self, options: GraylogOptions) -> None:
        """Initialize Graylog client.

        Args:
            options: Connection and query settings. The query must already
                be resolved to its text.
        """
        if not options.url:
            raise ValueError("Graylog URL required. Set it with --graylog-url or GRAYLOG_URL")

        self.options = options
        self.http = HttpClient(timeout=options.timeout, insecure=options.insecure)
        logger.debug("Graylog client initialized", url=options.url, timeout=options.timeout)

    def _params(self, options: GraylogOptions) -> dict[str, str]:
        range_type = options.range_type.lower()
        if range_type not in RANGE_TYPES:
            raise ValueError(f"Unknown Graylog range type: '{options.range_type}'. Use one of: {', '.join(RANGE_TYPES)}")

        params = {"query": options.query or "*"}
        if options.streams:
            params["filter"] = f"streams:{options.streams}"
        if options.sort:
            params["sort"] = options.sort
        if options.limit > 0:
            params["limit"] = str(options.limit)

        if range_type == "absolute":
            params["from"] = options.from_
            params["to"] = options.to
        elif range_type == "relative":
            params["range"] = options.range
        else:
            params["keyword"] = options.range
        return params

    def custom_logs(self, options: GraylogOptions) -> bytes:
        """Fetch log messages using explicit options."""
        params = self._params(options)
        logger.info("Fetching Graylog logs", range_type=options.range_type, query=params["query"])

        url = build_url(options.url, f"/api/search/universal/{options.range_type.lower()}", params)
        auth = auth_header(options.user, options.password)
        return self.http.get(url, auth=auth, headers={"Accept": "application/json"})

    def logs(self) -> bytes:
        return self.custom_logs(self.options)
