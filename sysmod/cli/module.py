"""Module Typer app factory."""

import typer

from sysmod.api.module.cmd_autostart import cmd_autostart
from sysmod.api.module.cmd_list import cmd_list
from sysmod.api.module.cmd_status import cmd_status
from sysmod.api.module.cmd_toggle import cmd_toggle
from sysmod.api.module.cmd_watch import cmd_watch
from sysmod.cli._handle_stage_result import _handle_stage_result


def module() -> typer.Typer:
    """Create and configure the module Typer app."""
    app = typer.Typer(
        name="module",
        help="Discover and toggle system modules",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Module operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="list")
    def list_cmd() -> None:
        """List modules grouped as dynamic (toggle any time) and static (need reboot)."""
        _handle_stage_result(cmd_list)()

    @app.command(name="status")
    def status_cmd(
        program_id: str = typer.Argument("", help="Hex program id; omit for all modules"),
    ) -> None:
        """Show running and auto-start state."""
        _handle_stage_result(cmd_status)(program_id)

    @app.command(name="toggle")
    def toggle_cmd(
        program_id: str = typer.Argument(..., help="Hex program id"),
    ) -> None:
        """Start or stop a module."""
        _handle_stage_result(cmd_toggle)(program_id)

    @app.command(name="autostart")
    def autostart_cmd(
        program_id: str = typer.Argument(..., help="Hex program id"),
    ) -> None:
        """Toggle auto-start at boot."""
        _handle_stage_result(cmd_autostart)(program_id)

    @app.command(name="watch")
    def watch_cmd(
        ticks: int = typer.Option(60, "--ticks", "-n", help="Number of frames to run"),
    ) -> None:
        """Refresh statuses on the frame ticker."""
        _handle_stage_result(cmd_watch)(ticks)

    return app
