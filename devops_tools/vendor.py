"""Vendor client interfaces."""

import base64
from abc import ABC, abstractmethod

from devops_tools.models import (
    JiraIssueAddAttachmentOptions,
    JiraIssueAddCommentOptions,
    JiraIssueCreateOptions,
    JiraIssueOptions,
    JiraIssueSearchOptions,
)


def auth_header(user: str = "", password: str = "", token: str = "") -> str:
    """Build an Authorization header value.

    A user selects basic auth, otherwise a token selects bearer auth,
    otherwise no header is sent (empty string).
    """
    if user:
        credentials = base64.b64encode(f"{user}:{password}".encode("utf-8")).decode("ascii")
        return f"Basic {credentials}"
    if token:
        return f"Bearer {token}"
    return ""


class IssueTracker(ABC):
    """Abstract base class for issue tracker clients."""

    @abstractmethod
    def issue_create(self, issue: JiraIssueOptions, create: JiraIssueCreateOptions) -> bytes:
        """Create an issue."""
        pass

    @abstractmethod
    def issue_add_comment(self, issue: JiraIssueOptions, comment: JiraIssueAddCommentOptions) -> bytes:
        """Add a comment to an issue."""
        pass

    @abstractmethod
    def issue_add_attachment(
        self, issue: JiraIssueOptions, attachment: JiraIssueAddAttachmentOptions, data: bytes
    ) -> bytes:
        """Attach a file to an issue."""
        pass

    @abstractmethod
    def issue_update(self, issue: JiraIssueOptions) -> bytes:
        """Update an issue."""
        pass

    @abstractmethod
    def issue_change_transitions(self, issue: JiraIssueOptions) -> bytes:
        """Apply a transition to an issue."""
        pass

    @abstractmethod
    def issue_search(self, search: JiraIssueSearchOptions) -> bytes:
        """Search issues."""
        pass


class LogManagement(ABC):
    """Abstract base class for log-management clients."""

    @abstractmethod
    def logs(self) -> bytes:
        """Fetch log messages for the configured query."""
        pass
