"""Protocols (calling conventions) for registered handlers.

Handlers are plain callables; these protocols only document the two
shapes the registry knows how to call.  Any function with a matching
signature satisfies them structurally.
"""

from __future__ import annotations

from typing import Protocol


class Handler(Protocol):
    """Handler registered for a single operator symbol."""

    def __call__(self, left: object, right: object) -> str:
        """Return a description of ``left <op> right``.

        Operands arrive in source order; either may be untagged.
        """
        ...  # pragma: no cover


class GroupHandler(Protocol):
    """Handler registered for an operator group (``Arith``, ``Ops``, ...).

    The registry passes the symbol of the triggering operator as
    *generic*, e.g. ``"-"`` for ``G - H``.
    """

    def __call__(self, left: object, right: object, *, generic: str) -> str:
        ...  # pragma: no cover
