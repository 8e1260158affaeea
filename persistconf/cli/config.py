"""Config Typer app factory."""

import typer

from persistconf.api.preset.cmd_list import cmd_list
from persistconf.api.preset.cmd_profile import cmd_profile
from persistconf.api.preset.cmd_scenario import cmd_scenario
from persistconf.api.resolve.cmd_show import cmd_show
from persistconf.api.validate.cmd_validate import cmd_validate
from persistconf.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Persistence configuration operations",
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

    @app.command(name="list")
    def list_cmd(ctx: typer.Context) -> None:
        """List environments, scenarios and SQLite profiles."""
        _handle_stage_result(cmd_list, ctx)()

    @app.command(name="show")
    def show_cmd(
        ctx: typer.Context,
        environment: str = typer.Argument("", help="Environment name (default: PERSISTCONF_ENV or development)"),
    ) -> None:
        """Show the resolved configuration for an environment."""
        _handle_stage_result(cmd_show, ctx)(environment)

    @app.command(name="scenario")
    def scenario_cmd(
        ctx: typer.Context,
        name: str = typer.Argument(..., help="Scenario name"),
        overrides: bool = typer.Option(False, "--overrides", help="Apply environment variable overrides"),
    ) -> None:
        """Show a deployment scenario preset."""
        _handle_stage_result(cmd_scenario, ctx)(name, overrides)

    @app.command(name="profile")
    def profile_cmd(
        ctx: typer.Context,
        name: str = typer.Argument("", help="Profile name (default: detected from PERSISTCONF_ENV and PERFORMANCE_MODE)"),
        overrides: bool = typer.Option(False, "--overrides", help="Apply environment variable overrides"),
    ) -> None:
        """Show a SQLite tuning profile."""
        _handle_stage_result(cmd_profile, ctx)(name, overrides)

    @app.command(name="validate")
    def validate_cmd(
        ctx: typer.Context,
        environment: str = typer.Argument("", help="Environment name (default: PERSISTCONF_ENV or development)"),
    ) -> None:
        """Validate the resolved configuration for an environment."""
        _handle_stage_result(cmd_validate, ctx)(environment)

    return app
