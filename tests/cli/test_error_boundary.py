"""Tests for the CLI error boundary and Ensure helpers."""

from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from cdtest.cli.ensure import Ensure
from cdtest.cli.error_boundary import cli_error_boundary
from cdtest.core.errors import ProjectSetupError


@click.command()
@click.option("--fail", is_flag=True)
@cli_error_boundary
def _command(fail: bool) -> None:
    if fail:
        raise ProjectSetupError(Path("/tmp/cdtest/demo"))
    click.echo("ok")


def test_passes_through_on_success() -> None:
    result = CliRunner().invoke(_command, [])

    assert result.exit_code == 0
    assert "ok" in result.output


def test_cdtest_error_becomes_message_and_exit_code() -> None:
    result = CliRunner().invoke(_command, ["--fail"])

    assert result.exit_code == 1
    assert "Error: Project failed to set up at /tmp/cdtest/demo" in result.output
    assert "Traceback" not in result.output


def test_other_exceptions_propagate() -> None:
    @cli_error_boundary
    def broken() -> None:
        raise RuntimeError("unexpected")

    with pytest.raises(RuntimeError, match="unexpected"):
        broken()


class TestEnsureNotNone:
    """Tests for Ensure.not_none method."""

    def test_returns_value_when_not_none(self) -> None:
        assert Ensure.not_none("/bin/zsh", "$SHELL is not set") == "/bin/zsh"

    def test_empty_string_is_not_none(self) -> None:
        assert Ensure.not_none("", "Value is None") == ""

    def test_exits_when_none(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            Ensure.not_none(None, "$SHELL is not set")

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        # user_output routes to stderr so stdout stays with the shell
        assert "Error:" in captured.err
        assert "$SHELL is not set" in captured.err
