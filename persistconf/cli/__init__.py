"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns the process exit status: 0 on success, 1 when a command fails,
    2 on a usage error (reported by typer on stderr).
    """
    from persistconf import __version__
    from persistconf.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        print(f"persistconf {__version__}")
        return 0

    app = _create_app()
    try:
        app(argv, prog_name="persistconf")
    except SystemExit as e:
        # typer exits after usage errors and typer.Exit; commands exit after printing their output
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
