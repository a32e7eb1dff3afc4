import logging

import click

from cdtest.cli.constants import DEBUG_LOG_FORMAT, DEFAULT_PROJECT_NAME
from cdtest.cli.ensure import Ensure
from cdtest.cli.error_boundary import cli_error_boundary
from cdtest.cli.output import user_output
from cdtest.core.context import CdtestContext, create_context
from cdtest.core.errors import InvalidProjectDirectoryError
from cdtest.core.gc import sweep_projects
from cdtest.core.project import initialize_project, reconcile_overrides, resolve_project
from cdtest.core.registry import scan_projects
from cdtest.core.roots import initialize_roots

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _validate_project_name(ctx: click.Context, param: click.Parameter, value: str) -> str:
    """Reject names that would not be a single directory under a root."""
    if value in ("", ".", "..") or "/" in value or "\0" in value:
        raise click.BadParameter(f"'{value}' is not a valid project name")
    return value


@click.command("cdtest", context_settings=CONTEXT_SETTINGS)
@click.argument("project", default=DEFAULT_PROJECT_NAME, callback=_validate_project_name)
@click.option(
    "--override",
    "force_override",
    is_flag=True,
    help="Override project settings (if existing)",
)
@click.option("--tmp", is_flag=True, help="Exist only in memory")
@click.option(
    "--gc",
    "gc_duration",
    metavar="DURATION",
    default=None,
    help="Set garbage collection duration (e.g. 2weeks, 1h 30m)",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
@click.version_option(package_name="cdtest")
@click.pass_context
@cli_error_boundary
def cli(
    ctx: click.Context,
    project: str,
    force_override: bool,
    tmp: bool,
    gc_duration: str | None,
    verbose: bool,
) -> None:
    """Traverse and manage semi-temporary test directories.

    Opens a shell in the PROJECT directory, creating it if needed, and removes
    other projects whose garbage collection duration has elapsed.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_LOG_FORMAT)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    cdtest_ctx: CdtestContext = ctx.obj

    shell_program = Ensure.not_none(cdtest_ctx.shell_program, "$SHELL is not set")

    initialize_roots(cdtest_ctx.roots)

    current = resolve_project(
        project,
        roots=cdtest_ctx.roots,
        store=cdtest_ctx.store,
        clock=cdtest_ctx.clock,
    )
    current.force_override = force_override
    reconcile_overrides(current, volatile=True if tmp else None, retention=gc_duration)
    initialize_project(current, store=cdtest_ctx.store, clock=cdtest_ctx.clock)

    all_projects = scan_projects(cdtest_ctx.roots, cdtest_ctx.store)
    results = sweep_projects(all_projects, current_name=current.name, clock=cdtest_ctx.clock)
    for result in results:
        if not result.expired:
            continue
        if result.errors:
            # Partial collections are retried on the next invocation
            logger.debug("Could not fully collect %r: %s", result.name, result.errors)
        else:
            user_output(f"Collected expired project '{result.name}'")

    home = current.home()
    if not home.is_dir():
        raise InvalidProjectDirectoryError(home)
    exit_code = cdtest_ctx.shell.launch(shell_program, home)
    logger.debug("Shell %s exited with status %d", shell_program, exit_code)


def main() -> None:
    """CLI entry point used by the `cdtest` console script."""
    cli()
