"""Shared constants for the cdtest CLI."""

# Project used when no PROJECT argument is given
DEFAULT_PROJECT_NAME = "test"

# Format for --verbose debug logging
DEBUG_LOG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"
