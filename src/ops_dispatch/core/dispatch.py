"""Explicit operator invocation surface.

:func:`apply` is what every :class:`~ops_dispatch.core.models.Tagged`
operator method calls.  It can also be used directly when the exact
operand order matters (Python reflects ``1 < x`` into ``x > 1``).
"""

from __future__ import annotations

from ops_dispatch.core.registry import HandlerRegistry, default_registry


def apply(
    symbol: str,
    left: object,
    right: object,
    *,
    registry: HandlerRegistry | None = None,
) -> str:
    """Evaluate ``left <symbol> right`` through the handler registry.

    When *registry* is ``None`` the process-wide registry is used and the
    package's load-time registrations are guaranteed to have run first.

    Raises
    ------
    UnknownOperatorError
        If *symbol* is not a supported binary operator.
    ConflictingHandlersError
        If the two operands resolve to non-identical handlers.
    NoApplicableHandlerError
        If neither operand has a handler for *symbol*.
    """
    if registry is None:
        registry = default_registry
    return registry.invoke(symbol, left, right)
