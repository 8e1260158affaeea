"""URI Typer app factory."""

import typer

from persistconf.api.uri.cmd_build import cmd_build
from persistconf.api.uri.ConnectionStringBuilder import DEFAULT_DATABASE, DEFAULT_PROTOCOL
from persistconf.cli._handle_stage_result import _handle_stage_result


def uri() -> typer.Typer:
    """Create and configure the uri Typer app."""
    app = typer.Typer(
        name="uri",
        help="Connection string operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="build")
    def build_cmd(
        ctx: typer.Context,
        host: list[str] | None = typer.Option(None, "--host", help="host or host:port (repeatable, order kept)"),
        database: str = typer.Option(DEFAULT_DATABASE, "--database", help="Database name"),
        user: str = typer.Option("", "--user", help="Username"),
        password: str = typer.Option("", "--password", help="Password"),
        option: list[str] | None = typer.Option(None, "--option", help="key=value query option (repeatable)"),
        protocol: str = typer.Option(DEFAULT_PROTOCOL, "--protocol", help="URI scheme"),
    ) -> None:
        """Build a MongoDB connection string."""
        _handle_stage_result(cmd_build, ctx)(host, database, user, password, option, protocol)

    return app
