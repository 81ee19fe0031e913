"""Graylog commands for devops-tools CLI."""

import dataclasses
from typing import Annotated

import structlog
from cyclopts import App, Parameter

from devops_tools.command_utils import debug_options, emit, fatal, resolve
from devops_tools.models import GraylogOptions
from devops_tools.vendor import LogManagement
from devops_tools.vendors import Graylog

logger = structlog.get_logger()

graylog_app = App(name="graylog", help="Graylog tools")


def new_graylog(options: GraylogOptions) -> LogManagement:
    """Create the Graylog client with its query resolved; abort on failure."""
    options = dataclasses.replace(options, query=resolve(options.query, "Graylog query", options.timeout))
    try:
        return Graylog(options)
    except ValueError as e:
        fatal(str(e))


@graylog_app.command
def logs(*, graylog: Annotated[GraylogOptions | None, Parameter(name="*")] = None) -> None:
    """Getting logs."""
    graylog = graylog or GraylogOptions()
    logger.debug("Graylog getting logs...")
    debug_options("Graylog", graylog)

    client = new_graylog(graylog)
    emit("Graylog", client.logs, graylog.output_options())
