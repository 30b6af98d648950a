"""Handler registry: the ``(generic, tag) -> handler`` dispatch table.

Resolution rules for ``left <op> right``
----------------------------------------
1. For each operand, look up a handler by its type tag: the operator
   itself first (``+.A``), then its family (``Arith.A``), then the
   umbrella group (``Ops.A``).  Untagged operands have no handler.
2. Only one side has a handler: use it.
3. Both sides have a handler and both are **the same object**: use it.
4. Both sides have handlers that are different objects: warn, then
   raise :class:`~ops_dispatch.exceptions.ConflictingHandlersError`.
   Handlers with identical behaviour still conflict.

The selected handler is called once, with the operands in source order.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable

from ops_dispatch.core.models import HandlerEntry, HandlerSource, tag_of
from ops_dispatch.core.operators import Operator, operator_for
from ops_dispatch.core.protocols import GroupHandler, Handler
from ops_dispatch.exceptions import (
    ConflictingHandlersError,
    ConflictingHandlersWarning,
    NoApplicableHandlerError,
    shared_handler_hint,
)

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """Mutable dispatch table consulted on every operator invocation.

    *on_first_use*, when set, runs before every lookup so that a lazily
    populated table is filled before anyone reads it.  It must be cheap
    and idempotent, and it must not read the table itself.
    """

    def __init__(self, on_first_use: Callable[[], None] | None = None) -> None:
        self._entries: dict[tuple[str, str], HandlerEntry] = {}
        self.on_first_use = on_first_use

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    # ------------------------------------------------------------------
    # Table writes
    # ------------------------------------------------------------------

    def register(
        self,
        generic: str,
        tag: str,
        handler: Handler | GroupHandler,
        *,
        source: HandlerSource = "runtime",
    ) -> None:
        """Bind *handler* to ``(generic, tag)``.  Last write wins."""
        entry = HandlerEntry(generic=generic, tag=tag, handler=handler, source=source)
        self._entries[(generic, tag)] = entry
        logger.debug(
            "Registered %s -> %s (%s, id=%#x)",
            entry.label,
            entry.handler_name,
            source,
            id(handler),
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _before_read(self) -> None:
        if self.on_first_use is not None:
            self.on_first_use()

    def entries(self) -> tuple[HandlerEntry, ...]:
        """All entries in registration order."""
        self._before_read()
        return tuple(self._entries.values())

    def lookup(self, operator: Operator | str, tag: str | None) -> HandlerEntry | None:
        """Find the handler entry for one operand's *tag*, or ``None``."""
        self._before_read()
        if tag is None:
            return None
        if isinstance(operator, str):
            operator = operator_for(operator)
        for generic in operator.generics():
            entry = self._entries.get((generic, tag))
            if entry is not None:
                return entry
        return None

    def resolve(
        self,
        operator: Operator | str,
        left: object,
        right: object,
    ) -> HandlerEntry:
        """Pick the single handler entry applicable to ``left <op> right``.

        Raises
        ------
        ConflictingHandlersError
            If both operands resolve to non-identical handlers.
        NoApplicableHandlerError
            If neither operand has a handler.
        """
        if isinstance(operator, str):
            operator = operator_for(operator)

        left_tag = tag_of(left)
        right_tag = tag_of(right)
        left_entry = self.lookup(operator, left_tag)
        right_entry = self.lookup(operator, right_tag)

        if left_entry is None and right_entry is None:
            raise NoApplicableHandlerError(operator.symbol, left_tag, right_tag)
        if right_entry is None:
            return left_entry  # type: ignore[return-value]
        if left_entry is None:
            return right_entry
        if left_entry.handler is right_entry.handler:
            # A group entry decides the calling convention for both orders.
            if right_entry.is_group and not left_entry.is_group:
                return right_entry
            return left_entry

        message = (
            f"Incompatible methods ({left_entry.label!r}, "
            f"{right_entry.label!r}) for {operator.symbol!r}"
        )
        logger.warning("%s", message)
        warnings.warn(message, ConflictingHandlersWarning, stacklevel=2)
        raise ConflictingHandlersError(
            operator.symbol,
            left_tag,
            right_tag,
            hint=shared_handler_hint(left_entry.label, right_entry.label),
        )

    # ------------------------------------------------------------------
    # Invocation
    # ------------------------------------------------------------------

    def invoke(self, operator: Operator | str, left: object, right: object) -> str:
        """Resolve and call the handler for ``left <op> right``."""
        if isinstance(operator, str):
            operator = operator_for(operator)
        entry = self.resolve(operator, left, right)
        if entry.is_group:
            return entry.handler(left, right, generic=operator.symbol)
        return entry.handler(left, right)


default_registry = HandlerRegistry()
"""Process-wide registry.  :mod:`ops_dispatch.loader` installs
:func:`~ops_dispatch.loader.ensure_initialized` as its first-use hook."""
