"""CLI for devops-tools."""

import sys
from typing import Annotated, Literal

import structlog
from cyclopts import App, Parameter

from devops_tools.graylog_commands import graylog_app
from devops_tools.jira_commands import jira_app

app = App(
    help="DevOps tools - issue tracker and log management operations from the command line",
)

app.command(jira_app)
app.command(graylog_app)


def configure_logging(log_level: str) -> None:
    """Configure structlog with the specified log level, writing to stderr."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(min_level=log_level.lower()),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@app.meta.default
def main(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    log_level: Literal["debug", "info", "warning", "error", "critical"] = "critical",
) -> None:
    """Main entry point with global options.

    Options come from flags and environment variables only; nothing is read
    from files in the working directory.
    """
    configure_logging(log_level)
    app(tokens)


if __name__ == "__main__":
    app.meta()
