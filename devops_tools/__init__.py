"""Command-line tools for issue trackers and log-management systems."""
