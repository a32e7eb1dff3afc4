"""Error boundary handling for CLI commands.

This module provides a decorator to catch cdtest's expected failures at the
CLI entry point and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from cdtest.cli.output import user_output
from cdtest.core.errors import CdtestError

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that turns CdtestError into a styled message and exit code 1.

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except CdtestError as e:
            user_output(click.style("Error: ", fg="red") + e.message)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
