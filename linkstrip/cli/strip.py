"""Strip Typer app factory."""

import sys
from pathlib import Path
from typing import Annotated

import typer

from linkstrip.api.config.LinkstripConfig import LinkstripConfig
from linkstrip.api.strip.apply_overrides import apply_overrides
from linkstrip.api.strip.cmd_file import cmd_file
from linkstrip.api.strip.strip_text import strip_text
from linkstrip.cli._handle_stage_result import _handle_stage_result

HyperlinksOption = Annotated[
    bool | None,
    typer.Option("--hyperlinks/--no-hyperlinks", help="Run (or skip) the [text](url) pass"),
]
WikilinksOption = Annotated[
    bool | None,
    typer.Option("--wikilinks/--no-wikilinks", help="Run (or skip) the [[wikilink]] pass"),
]


def strip() -> typer.Typer:
    """Create and configure the strip Typer app."""
    app = typer.Typer(
        name="strip",
        help="Remove links from Markdown",
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

    @app.command(name="file")
    def file_cmd(
        path: Annotated[Path, typer.Argument(help="Markdown file to rewrite")],
        output: Annotated[Path | None, typer.Option("--output", "-o", help="Write here instead of in place")] = None,
        dry_run: Annotated[bool, typer.Option("--dry-run", help="Report without writing")] = False,
        hyperlinks: HyperlinksOption = None,
        wikilinks: WikilinksOption = None,
    ) -> None:
        """Remove links from a file (in place unless --output is given)."""
        _handle_stage_result(cmd_file)(
            str(path),
            output=str(output) if output else None,
            dry_run=dry_run,
            hyperlinks=hyperlinks,
            wikilinks=wikilinks,
        )

    @app.command(name="text")
    def text_cmd(
        hyperlinks: HyperlinksOption = None,
        wikilinks: WikilinksOption = None,
    ) -> None:
        """Read Markdown on stdin and write it to stdout without links."""
        try:
            config = apply_overrides(LinkstripConfig.load(), hyperlinks, wikilinks)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from None

        report = strip_text(sys.stdin.read(), config)
        typer.echo(report.text, nl=False)

    return app
