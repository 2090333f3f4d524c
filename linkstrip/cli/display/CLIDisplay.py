"""Terminal display built on rich, PyYAML and pygments."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer, YamlLexer
from rich.console import Console

from .Display import Display


class CLIDisplay(Display):
    """Messages go to stderr so stdout carries only the command output."""

    def __init__(self):
        self.stderr_console = Console(file=sys.stderr)

    def _log(self, marker: str, message: str) -> None:
        stamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{stamp}[/dim] {marker} {message}")

    def announce(self, message: str) -> None:
        self._log("[blue]i[/blue]", message)

    def progress(self, fraction: float, message: str) -> None:
        self._log("[dim]…[/dim]", f"{message} ({fraction:.0%})")

    def success(self, message: str) -> None:
        self._log("[green]✓[/green]", message)

    def error(self, message: str, details: str = "") -> None:
        self._log("[red]✗[/red]", message)
        if details:
            self.stderr_console.print(f"  [dim]{details}[/dim]")

    def warning(self, message: str) -> None:
        self._log("[yellow]⚠[/yellow]", message)

    def output(self, data: dict[str, Any], display_format: str) -> None:
        if display_format == "json":
            text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
            lexer = JsonLexer()
        else:
            text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer = YamlLexer()

        stream = sys.stdout
        if stream.isatty():
            text = highlight(text, lexer, Terminal256Formatter(style="monokai"))
        stream.write(text)
        stream.flush()
