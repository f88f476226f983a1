"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console


class CLIDisplay:
    """Status lines on stderr, structured output on stdout."""

    def __init__(self):
        self.stderr_console = Console(file=sys.stderr)

    def _timestamp(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def status(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [blue]i[/blue] {message}")

    def success(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [green]✓[/green] {message}")

    def error(self, message: str, details: str = "") -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [red]✗[/red] {message}")
        if details:
            self.stderr_console.print(f"  [dim]{details}[/dim]")

    def info(self, message: str) -> None:
        self.stderr_console.print(message)

    def json_output(self, data: Any, format: str = "yaml", indent: int = 2) -> None:  # noqa: A002
        """Print ``data`` to stdout as YAML or JSON."""
        if format == "yaml":
            print(yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True), end="")
        else:
            print(json.dumps(data, indent=indent, ensure_ascii=False))
