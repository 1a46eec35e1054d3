"""Rich table builders used by the CLI.

Kept separate to reduce duplication and keep the command module smaller.
"""

from __future__ import annotations

from rich.table import Table

from jvmsig.services.batch_service import BatchResult
from jvmsig.signatures.method import MethodTypeSignature


def build_signature_table(signature: MethodTypeSignature) -> Table:
    """Build a (Part, Index, Type) table describing one method signature."""
    table = Table(show_header=True)
    table.add_column("Part")
    table.add_column("Index")
    table.add_column("Type")
    for i, type_parameter in enumerate(signature.type_parameters):
        table.add_row("type parameter", str(i), str(type_parameter))
    for i, param in enumerate(signature.parameter_type_signatures):
        table.add_row("parameter", str(i), str(param))
    table.add_row("result", "", str(signature.result_type))
    for i, throws in enumerate(signature.throws_signatures):
        table.add_row("throws", str(i), str(throws))
    return table


def build_batch_table(result: BatchResult) -> Table:
    """Build a (Line, Status, Signature) table for `batch`."""
    table = Table(show_header=True)
    table.add_column("Line")
    table.add_column("Status")
    table.add_column("Signature")
    rows = [(entry.line, "[green]ok[/green]", str(entry.signature)) for entry in result.parsed]
    rows.extend(
        (failure.line, "[red]error[/red]", f"{failure.text}: {failure.message}")
        for failure in result.failures
    )
    for line, status, rendered in sorted(rows, key=lambda row: row[0]):
        table.add_row(str(line), status, rendered)
    return table
