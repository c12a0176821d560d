"""
Catalog commands: stars, star, algorithms
"""

import json
import typer
from rich.console import Console
from rich.table import Table

from stellar_id import (
    get_real_star_data,
    get_star_info,
    list_default_star_names,
    list_hash_algorithms,
)

console = Console()


def stars_command(
    real: bool = typer.Option(False, "--real", "-r", help="Show the full real-star catalog"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    List star names in selection order.

    Examples:
        stellar-id stars
        stellar-id stars --real
    """
    if not real:
        names = list_default_star_names()
        if json_output:
            print(json.dumps({"stars": names}))
            return
        table = Table(title="Default Star Names")
        table.add_column("Index", style="cyan", justify="right")
        table.add_column("Name", style="green")
        for idx, name in enumerate(names):
            table.add_row(str(idx), name)
        console.print(table)
        return

    records = get_real_star_data()
    if json_output:
        print(json.dumps({"stars": [r.to_dict() for r in records]}, ensure_ascii=False))
        return
    table = Table(title="Real Star Catalog")
    table.add_column("Index", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Distance (ly)", justify="right")
    table.add_column("Magnitude", justify="right")
    table.add_column("Spectral")
    table.add_column("Constellation")
    for idx, r in enumerate(records):
        table.add_row(str(idx), r.name, str(r.distance), str(r.magnitude), r.spectral_type, r.constellation)
    console.print(table)


def star_command(
    name: str = typer.Argument(..., help="Star name (case-insensitive)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show catalog metadata for a star."""
    record = get_star_info(name)
    if record is None:
        if json_output:
            print(json.dumps({"error": "Star not found", "name": name}))
        else:
            console.print(f"[red]Star not found:[/red] {name}")
        raise typer.Exit(1)

    if json_output:
        print(json.dumps(record.to_dict(), ensure_ascii=False))
        return
    console.print(f"[bold]{record.name}[/bold]")
    console.print(f"  Distance: [cyan]{record.distance}[/cyan] ly")
    console.print(f"  Magnitude: [cyan]{record.magnitude}[/cyan]")
    console.print(f"  Spectral type: [yellow]{record.spectral_type}[/yellow]")
    console.print(f"  Constellation: [green]{record.constellation}[/green]")


def algorithms_command(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List available hash algorithms."""
    algorithms = list_hash_algorithms()
    if json_output:
        print(json.dumps({"algorithms": algorithms}))
        return
    for name in algorithms:
        console.print(name)
