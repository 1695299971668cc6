"""sysmodc command line entry point."""

import sys

import click
import typer

from sysmod.cli._create_app import _create_app

_VERSION_FLAGS = ("--version", "-v")


def _version_line() -> tuple[str, bool]:
    from sysmod.api.config.cmd_version import cmd_version

    result = cmd_version()
    list(result.progress_callback(result))
    return f"sysmodc {result.output.get('version', 'unknown')}", result.success


def main(argv: list[str] | None = None) -> int:
    """Run sysmodc on ``argv`` (defaults to the process arguments).

    Commands exit through ``sys.exit`` with 0 on success and 1 otherwise;
    the return value covers the version flag and errors raised before a
    command runs.
    """
    args = sys.argv[1:] if argv is None else list(argv)

    if any(flag in args for flag in _VERSION_FLAGS):
        line, ok = _version_line()
        typer.echo(line)
        return 0 if ok else 1

    try:
        _create_app()(args)
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return 0
