#!/usr/bin/env python3
"""
Stellar ID CLI - Deterministic star-themed identifiers

Main entrypoint for the stellar-id command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import catalog, generate, inspect
from stellar_id.logging_config import setup_logging

# Initialize Typer app
app = typer.Typer(
    name="stellar-id",
    help="Deterministic star-themed identifier generator",
    add_completion=False,
)

# Console for rich output
console = Console()


@app.callback()
def _configure():
    """Deterministic star-themed identifier generator."""
    setup_logging()


# Add standalone commands
app.command("generate")(generate.generate_command)
app.command("batch")(generate.batch_command)
app.command("validate")(inspect.validate_command)
app.command("parse")(inspect.parse_command)
app.command("stars")(catalog.stars_command)
app.command("star")(catalog.star_command)
app.command("algorithms")(catalog.algorithms_command)


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from stellar_id import __version__ as lib_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Stellar ID CLI[/bold]", f"v{__version__}")
    table.add_row("Library", f"v{lib_version}")
    table.add_row("Hash width", "signed 32-bit")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
