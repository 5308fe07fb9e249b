"""Link Typer app factory."""

import typer

from aitk.api.link.cmd_remove import cmd_remove
from aitk.api.link.cmd_run import cmd_run
from aitk.api.link.cmd_status import cmd_status
from aitk.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Agent and skill link management",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Link operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="run")
    def run_cmd(
        lang: str | None = typer.Option(None, "--lang", help="Language code (default from config, normally 'en')"),
        source: str | None = typer.Option(None, "--source", help="Toolkit checkout (default from config)"),
        target: str | None = typer.Option(None, "--target", help="Assistant directory (default ~/.claude)"),
    ) -> None:
        """Link agents and skills of a language into the assistant directory."""
        _handle_stage_result(cmd_run)(lang, source, target)

    @app.command(name="status")
    def status_cmd(
        lang: str | None = typer.Option(None, "--lang", help="Language code (default from config)"),
    ) -> None:
        """Show linked agents and skills."""
        _handle_stage_result(cmd_status)(lang)

    @app.command(name="remove")
    def remove_cmd() -> None:
        """Remove links that point into the toolkit."""
        _handle_stage_result(cmd_remove)()

    return app
