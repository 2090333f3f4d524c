"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from linkstrip.api.config.LinkstripConfig import LinkstripConfig
    from linkstrip.cli._create_app import _create_app
    from linkstrip.utils.get_package_version import get_package_version
    from linkstrip.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"linkstrip {get_package_version()}")
        return 0

    try:
        level = LinkstripConfig.load().log.level
    except ValueError:
        # Commands report the broken config themselves
        level = "WARNING"
    configure_logging(level=level)

    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except click.exceptions.Abort:
        typer.echo("Aborted", err=True)
        return 1
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
