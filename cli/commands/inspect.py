"""
Inspect commands: validate, parse
"""

import json
import typer
from rich.console import Console

from stellar_id import extract_parts, validate_format

console = Console()


def validate_command(
    stellar_id: str = typer.Argument(..., help="ID to check"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Check that an ID has the default PREFIX-HHHH-STAR shape.

    Only upper-case, default-format IDs pass.
    """
    valid = validate_format(stellar_id)
    if json_output:
        print(json.dumps({"id": stellar_id, "valid": valid}))
    elif valid:
        console.print(f"[green]✓ Valid:[/green] {stellar_id}")
    else:
        console.print(f"[red]✗ Invalid:[/red] {stellar_id}")
    raise typer.Exit(0 if valid else 1)


def parse_command(
    stellar_id: str = typer.Argument(..., help="ID to split"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Split a default-format ID into prefix, hash and star name.
    """
    parts = extract_parts(stellar_id)
    if parts is None:
        if json_output:
            print(json.dumps({"error": "Not a default-format stellar ID", "id": stellar_id}))
        else:
            console.print(f"[red]Error:[/red] not a default-format stellar ID: {stellar_id}")
        raise typer.Exit(1)

    if json_output:
        print(json.dumps(parts.to_dict()))
    else:
        console.print(f"  Prefix: [cyan]{parts.prefix}[/cyan]")
        console.print(f"  Hash: [yellow]{parts.hash}[/yellow]")
        console.print(f"  Star: [green]{parts.star_name}[/green]")
