"""CLI application entry point and command routing for ops-dispatch.

This module is the **sole error boundary** for the command line.  It
catches :class:`~ops_dispatch.exceptions.OpsDispatchError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a short
message and returns a well-defined exit code.

Commands
--------
* ``ops-dispatch demo``: evaluate every shipped tag pair
* ``ops-dispatch methods``: list the handler registry
* ``ops-dispatch eval L OP R``: evaluate one expression
"""

from __future__ import annotations

import argparse
import sys

from ops_dispatch.cli import exit_codes
from ops_dispatch.cli.console import configure_logging, console, stdout
from ops_dispatch.exceptions import OpsDispatchError
from ops_dispatch.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ops-dispatch",
        description="Identity-checked binary operator dispatch on type tags.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log registrations and dispatch diagnostics at DEBUG level.",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("demo", help="Apply operators across every shipped tag pair.")
    subparsers.add_parser("methods", help="List registered handlers and their identities.")
    eval_parser = subparsers.add_parser(
        "eval",
        help="Evaluate one expression, e.g. 'eval C + D' or 'eval G - 2'.",
    )
    eval_parser.add_argument("left", help="Type tag, or a number for an untagged operand.")
    eval_parser.add_argument("operator", help="Binary operator symbol.")
    eval_parser.add_argument("right", help="Type tag, or a number for an untagged operand.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def parse_operand(text: str) -> object:
    """Numbers become untagged operands; anything else is a type tag."""
    from ops_dispatch.core.models import Tagged

    for number_type in (int, float):
        try:
            return number_type(text)
        except ValueError:
            continue
    return Tagged(text)


def _handle_eval(left: str, symbol: str, right: str) -> int:
    from ops_dispatch.core.dispatch import apply

    result = apply(symbol, parse_operand(left), parse_operand(right))
    stdout.print(result, markup=False, highlight=False, soft_wrap=True)
    return exit_codes.SUCCESS


def _handle_demo() -> int:
    from ops_dispatch.cli.report import run_demo

    return run_demo()


def _handle_methods() -> int:
    from ops_dispatch.cli.report import run_methods

    return run_methods()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ops-dispatch CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(verbose=args.verbose)

    if args.command == "demo":
        return _handle_demo()
    if args.command == "methods":
        return _handle_methods()
    return _handle_eval(args.left, args.operator, args.right)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except OpsDispatchError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
