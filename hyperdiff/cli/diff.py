"""Diff Typer app factory."""

from pathlib import Path
from typing import Annotated

import typer

from hyperdiff.api.diff.cmd_complete import cmd_complete
from hyperdiff.api.diff.cmd_file import cmd_file
from hyperdiff.cli._handle_stage_result import _handle_stage_result


def _user_path(path: str, repo: str | None) -> str:
    # Without --repo, relative paths are taken from the current directory like git does.
    if repo is None and not Path(path).is_absolute():
        return str(Path.cwd() / path)
    return path


def diff(app: typer.Typer) -> typer.Typer:
    """Register the diff commands on ``app``."""

    @app.command(name="file")
    def file_command(
        ctx: typer.Context,
        path: Annotated[str, typer.Argument(help="File to diff")],
        old: Annotated[str | None, typer.Option("--old", "-o", help="Old ref (default: HEAD)")] = None,
        new: Annotated[str | None, typer.Option("--new", "-n", help="New ref (default: working tree)")] = None,
        context_lines: Annotated[
            int | None, typer.Option("--context-lines", "-U", min=0, help="Context lines around each change")
        ] = None,
        repo: Annotated[
            str | None, typer.Option("--repo", "-r", help="Repository directory; PATH is then repo-relative")
        ] = None,
    ) -> None:
        """Unified hunks of PATH between two versions."""
        _handle_stage_result(cmd_file, ctx)(_user_path(path, repo), old, new, context_lines, repo)

    @app.command(name="complete")
    def complete_command(
        ctx: typer.Context,
        path: Annotated[str, typer.Argument(help="File to render")],
        old: Annotated[str, typer.Option("--old", "-o", help="Old ref")],
        new: Annotated[str, typer.Option("--new", "-n", help="New ref")],
        repo: Annotated[
            str | None, typer.Option("--repo", "-r", help="Repository directory; PATH is then repo-relative")
        ] = None,
    ) -> None:
        """The whole of PATH at the new ref with removed lines inlined."""
        _handle_stage_result(cmd_complete, ctx)(_user_path(path, repo), old, new, repo)

    return app
