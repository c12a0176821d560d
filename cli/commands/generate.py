"""
Generate commands: generate, batch
"""

import json
import typer
from pathlib import Path
from typing import List, NoReturn, Optional
from rich.console import Console
from rich.table import Table

from stellar_id import generate as generate_id, generate_batch
from stellar_id.core import GenerationOptions, StellarIDError
from stellar_id.logging_config import get_logger

console = Console()


def _build_options(
    prefix: str,
    length: Optional[int],
    special: bool,
    case: str,
    algorithm: str,
    stars: Optional[List[str]],
    template: Optional[str],
    salt: Optional[str],
    catalog: str,
) -> GenerationOptions:
    return GenerationOptions(
        prefix=prefix,
        length=length,
        use_special_chars=special,
        case=case,
        hash_algorithm=algorithm,
        custom_star_names=tuple(stars) if stars else None,
        format=template,
        salt=salt,
        star_catalog=catalog,
    )


def _fail(message: str, json_output: bool) -> NoReturn:
    if json_output:
        print(json.dumps({"error": message}))
    else:
        console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(2)


def generate_command(
    text: str = typer.Argument(..., help="Input string to derive the ID from"),
    prefix: str = typer.Option("STAR", "--prefix", "-p", help="ID prefix"),
    length: Optional[int] = typer.Option(None, "--length", "-n", help="Exact ID length (1-100)"),
    special: bool = typer.Option(False, "--special", help="Use special characters"),
    case: str = typer.Option("upper", "--case", "-c", help="upper, lower or mixed"),
    algorithm: str = typer.Option("simple", "--algorithm", "-a", help="simple, djb2 or fnv1a"),
    stars: Optional[List[str]] = typer.Option(None, "--star", "-s", help="Custom star name (repeatable)"),
    template: Optional[str] = typer.Option(None, "--format", "-f", help="Template with {prefix} {hash} {star} {input}"),
    salt: Optional[str] = typer.Option(None, "--salt", help="Salt appended before hashing"),
    catalog: str = typer.Option("default", "--catalog", help="default or real"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Generate a deterministic stellar ID.

    Examples:
        stellar-id generate hello
        stellar-id generate hello --prefix COSMIC
        stellar-id generate hello --length 16 --special --case mixed
        stellar-id generate hello --format "{star}_{hash}"
    """
    try:
        options = _build_options(prefix, length, special, case, algorithm, stars, template, salt, catalog)
        stellar_id = generate_id(text, options)
    except StellarIDError as e:
        _fail(str(e), json_output)

    if json_output:
        print(json.dumps({"input": text, "id": stellar_id}))
    else:
        print(stellar_id)


def batch_command(
    input_file: Path = typer.Argument(..., help="File with one input per line"),
    prefix: str = typer.Option("STAR", "--prefix", "-p", help="ID prefix"),
    length: Optional[int] = typer.Option(None, "--length", "-n", help="Exact ID length (1-100)"),
    special: bool = typer.Option(False, "--special", help="Use special characters"),
    case: str = typer.Option("upper", "--case", "-c", help="upper, lower or mixed"),
    algorithm: str = typer.Option("simple", "--algorithm", "-a", help="simple, djb2 or fnv1a"),
    salt: Optional[str] = typer.Option(None, "--salt", help="Salt appended before hashing"),
    catalog: str = typer.Option("default", "--catalog", help="default or real"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Generate IDs for every non-blank line of a file.

    Examples:
        stellar-id batch inputs.txt
        stellar-id batch inputs.txt --algorithm fnv1a --json
    """
    logger = get_logger(__name__, trace_id=str(input_file))
    try:
        with open(input_file, "r", encoding="utf-8") as f:
            inputs = [line.rstrip("\r\n") for line in f if line.strip()]
    except FileNotFoundError:
        _fail(f"Input file not found: {input_file}", json_output)
    except UnicodeDecodeError:
        _fail(f"Input file is not valid UTF-8: {input_file}", json_output)
    except OSError as e:
        _fail(f"Cannot read input file {input_file}: {e.strerror or e}", json_output)

    try:
        options = _build_options(prefix, length, special, case, algorithm, None, None, salt, catalog)
        result = generate_batch(inputs, options)
    except StellarIDError as e:
        _fail(str(e), json_output)

    logger.info(
        "Batch generated: %d ok, %d failed", len(result.successes), len(result.failures)
    )

    if json_output:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        table = Table(title="Generated IDs")
        table.add_column("Input", style="green")
        table.add_column("ID", style="cyan")
        for text, stellar_id in result.successes:
            table.add_row(text, stellar_id)
        console.print(table)

        for text, error in result.failures:
            console.print(f"[yellow]Skipped[/yellow] {text!r}: {error}")

    if result.failures:
        raise typer.Exit(1)
