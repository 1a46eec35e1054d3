"""jvmsig CLI - JVM generic signature inspection tool.

This module provides the command-line interface for jvmsig, enabling
parsing of single signatures, class name extraction and batch parsing.
"""

from __future__ import annotations

import json
import logging
import traceback
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

from jvmsig.core.config import get_config
from jvmsig.core.errors import GrammarError

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="jvmsig",
    help="Parse and inspect JVM generic type signatures",
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()
err_console = Console(stderr=True)

# Global verbose flag
_verbose: bool = False


def set_verbose(verbose: bool) -> None:
    """Set global verbose mode."""
    global _verbose
    _verbose = verbose


def print_exception(e: Exception) -> None:
    """Print exception details in verbose mode."""
    if _verbose:
        err_console.print("\n[dim]--- Traceback (verbose mode) ---[/dim]")
        err_console.print(f"[dim]{traceback.format_exc()}[/dim]")


def report_grammar_error(e: GrammarError) -> None:
    """Print a grammar error and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {e.message} at position {e.position}")
    err_console.print(f"  {e.text}", markup=False, highlight=False)
    err_console.print(f"  {' ' * e.position}^", markup=False, highlight=False)
    print_exception(e)
    raise typer.Exit(1)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with full tracebacks"),
    ] = False,
) -> None:
    """jvmsig CLI - JVM generic signature parser."""
    set_verbose(verbose)
    level = logging.DEBUG if verbose else get_config().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def parse(
    signature: Annotated[str, typer.Argument(help="Method signature to parse")],
    class_signature: Annotated[
        Optional[str],
        typer.Option("--class-signature", "-c", help="Signature of the enclosing class"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output machine-readable JSON"),
    ] = False,
) -> None:
    """Parse a method signature and show its structure.

    Example:
        jvmsig parse '<T:Ljava/lang/Object;>(TT;I)V^Ljava/io/IOException;'
    """
    from jvmsig.cli._tables import build_signature_table
    from jvmsig.core.serializer import serialize
    from jvmsig.signatures.class_signature import ClassInfo
    from jvmsig.signatures.method import MethodTypeSignature

    class_info = ClassInfo("<cli>", class_signature) if class_signature else None
    try:
        result = MethodTypeSignature.parse(signature, class_info)
    except GrammarError as e:
        report_grammar_error(e)

    if json_output:
        typer.echo(serialize(result))
        return

    console.print(f"[blue]Signature:[/blue] {result}", highlight=False)
    console.print(build_signature_table(result))
    if class_info is not None and class_info.type_signature is not None:
        console.print(f"[blue]Class:[/blue] {class_info.type_signature}", highlight=False)


@app.command()
def classes(
    signature: Annotated[str, typer.Argument(help="Method signature to inspect")],
) -> None:
    """List every class referenced by a method signature, one per line.

    Example:
        jvmsig classes '(Ljava/util/List<Ljava/lang/String;>;)V'
    """
    from jvmsig.signatures.method import MethodTypeSignature

    try:
        result = MethodTypeSignature.parse(signature)
    except GrammarError as e:
        report_grammar_error(e)

    for class_name in sorted(result.referenced_class_names()):
        typer.echo(class_name)


@app.command()
def batch(
    file: Annotated[
        Path,
        typer.Argument(
            help="File with one method signature per line",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    fail_fast: Annotated[
        Optional[bool],
        typer.Option("--fail-fast/--keep-going", help="Stop at the first malformed signature"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output machine-readable JSON"),
    ] = False,
) -> None:
    """Parse a file of method signatures, skipping malformed ones.

    Exits with status 1 if any signature failed to parse.

    Example:
        jvmsig batch signatures.txt --json
    """
    from jvmsig.cli._tables import build_batch_table
    from jvmsig.core.serializer import serialize_to_dict
    from jvmsig.services.batch_service import BatchParseService

    service = BatchParseService(fail_fast=fail_fast)
    try:
        result = service.parse_file(file)
    except GrammarError as e:
        report_grammar_error(e)

    if json_output:
        payload = {
            "parsed": [
                {"line": entry.line, "signature": serialize_to_dict(entry.signature)}
                for entry in result.parsed
            ],
            "failures": [
                {
                    "line": failure.line,
                    "text": failure.text,
                    "message": failure.message,
                    "position": failure.position,
                }
                for failure in result.failures
            ],
        }
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        console.print(build_batch_table(result))
        console.print(f"Parsed {len(result.parsed)} of {result.total} signature(s)")

    if not result.success:
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
