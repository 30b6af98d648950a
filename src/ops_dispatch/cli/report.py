"""``ops-dispatch demo`` and ``ops-dispatch methods`` renderers.

``demo`` applies operators across every shipped tag pair and tabulates
the outcome next to any diagnostic the dispatcher emitted.  ``methods``
lists the registry so that shared handler identities are visible.

Both render a Rich table when Rich is installed and plain text on stderr
otherwise.
"""

from __future__ import annotations

import sys
import warnings
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass

from ops_dispatch.cli import exit_codes
from ops_dispatch.cli.console import console
from ops_dispatch.core.dispatch import apply
from ops_dispatch.core.models import Tagged
from ops_dispatch.core.operators import is_group
from ops_dispatch.core.registry import HandlerRegistry, default_registry
from ops_dispatch.exceptions import (
    ConflictingHandlersError,
    ConflictingHandlersWarning,
    OpsDispatchError,
)
from ops_dispatch.methods import DEMO_PAIRS

GROUP_DEMO_OPERATORS: tuple[str, ...] = ("+", "-", "*", "==")
"""Operators exercised for pairs registered under a group."""


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DemoRow:
    """Outcome of one ``left op right`` evaluation."""

    expression: str
    outcome: str
    diagnostic: str
    status: str
    """``"OK"``, ``"CONFLICT"`` or ``"FAIL"``."""


def evaluate(
    symbol: str,
    left: object,
    right: object,
    registry: HandlerRegistry | None = None,
) -> DemoRow:
    """Apply *symbol* and capture the result, error and warnings."""
    expression = f"{_describe(left)} {symbol} {_describe(right)}"
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", ConflictingHandlersWarning)
        try:
            outcome = apply(symbol, left, right, registry=registry)
            status = "OK"
        except ConflictingHandlersError as exc:
            outcome = f"{type(exc).__name__}: {exc}"
            status = "CONFLICT"
        except OpsDispatchError as exc:
            outcome = f"{type(exc).__name__}: {exc}"
            status = "FAIL"

    diagnostic = "; ".join(
        str(w.message) for w in caught if issubclass(w.category, ConflictingHandlersWarning)
    )
    return DemoRow(expression, outcome, diagnostic, status)


def _describe(operand: object) -> str:
    if isinstance(operand, Tagged):
        return operand.tag
    return repr(operand)


def demo_rows(registry: HandlerRegistry | None = None) -> list[DemoRow]:
    """Evaluate every shipped pair in both operand orders."""
    rows: list[DemoRow] = []
    for left_tag, right_tag, generic in DEMO_PAIRS:
        symbols = GROUP_DEMO_OPERATORS if is_group(generic) else (generic,)
        left, right = Tagged(left_tag), Tagged(right_tag)
        for symbol in symbols:
            rows.append(evaluate(symbol, left, right, registry))
            rows.append(evaluate(symbol, right, left, registry))
    return rows


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

_STATUS_MARKUP = {
    "OK": "[green]OK[/green]",
    "CONFLICT": "[yellow]CONFLICT[/yellow]",
    "FAIL": "[red]FAIL[/red]",
}


def _rich_table_class() -> type | None:
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        return None
    return Table


def _print_plain(title: str, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    widths = [
        max([len(header), *(len(row[i]) for row in rows)])
        for i, header in enumerate(headers)
    ]
    print(f"\n{title}", file=sys.stderr)
    print("=" * (sum(widths) + len(widths) - 1), file=sys.stderr)
    print(" ".join(h.ljust(w) for h, w in zip(headers, widths)), file=sys.stderr)
    print("-" * (sum(widths) + len(widths) - 1), file=sys.stderr)
    for row in rows:
        print(" ".join(cell.ljust(w) for cell, w in zip(row, widths)), file=sys.stderr)
    print(file=sys.stderr)


def run_demo(registry: HandlerRegistry | None = None) -> int:
    """Render the demo table.

    Conflicts are expected outcomes for the manifest pairs.  Returns
    :data:`exit_codes.GENERAL_ERROR` only if some evaluation failed for
    another reason.
    """
    rows = demo_rows(registry)
    has_failure = any(row.status == "FAIL" for row in rows)
    headers = ("Expression", "Outcome", "Diagnostic", "Status")

    table_class = _rich_table_class()
    if table_class is not None:
        table = table_class(
            title="ops-dispatch demo",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column(headers[0], style="bold", no_wrap=True)
        table.add_column(headers[1])
        table.add_column(headers[2], style="dim")
        table.add_column(headers[3], justify="center")
        for row in rows:
            table.add_row(
                row.expression,
                row.outcome,
                row.diagnostic,
                _STATUS_MARKUP.get(row.status, row.status),
            )
        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain(
            "ops-dispatch demo",
            headers,
            [(r.expression, r.outcome, r.diagnostic, r.status) for r in rows],
        )

    if has_failure:
        console.print("Some evaluations failed.")
        return exit_codes.GENERAL_ERROR
    return exit_codes.SUCCESS


def run_methods(registry: HandlerRegistry | None = None) -> int:
    """Render every registry entry with its handler identity."""
    if registry is None:
        registry = default_registry

    entries = registry.entries()
    tags_by_handler: dict[int, list[str]] = defaultdict(list)
    for entry in entries:
        tags_by_handler[id(entry.handler)].append(entry.tag)

    rows = [
        (
            entry.generic,
            entry.tag,
            entry.handler_name,
            entry.source,
            f"{id(entry.handler):#x}",
            ", ".join(t for t in tags_by_handler[id(entry.handler)] if t != entry.tag) or "-",
        )
        for entry in entries
    ]
    headers = ("Generic", "Tag", "Handler", "Source", "Identity", "Shared with")

    table_class = _rich_table_class()
    if table_class is not None:
        table = table_class(
            title="registered methods",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*row)
        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain("registered methods", headers, rows)

    return exit_codes.SUCCESS
