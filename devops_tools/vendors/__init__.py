"""Vendor client implementations."""

from devops_tools.vendors.graylog import Graylog
from devops_tools.vendors.jira import Jira

__all__ = ["Jira", "Graylog"]
