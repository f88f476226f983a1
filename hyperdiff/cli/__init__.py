"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click

    from hyperdiff import __version__
    from hyperdiff.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-V" in argv:
        print(f"hdiff {__version__}")
        return 0

    app = _create_app()
    try:
        rv = app(argv, standalone_mode=False)
    except SystemExit as e:
        # Commands exit through _run_single_execution.
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except click.exceptions.Abort:
        return 1
    except click.exceptions.ClickException as e:
        e.show()
        return e.exit_code
    return rv if isinstance(rv, int) else 0
