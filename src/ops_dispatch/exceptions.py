"""Custom exception hierarchy for ops-dispatch.

Every error raised by the dispatch machinery inherits from
:class:`OpsDispatchError`, so callers (and the CLI error boundary) can
catch the whole family in one place.

Hierarchy
---------
OpsDispatchError
├── ConflictingHandlersError
├── NoApplicableHandlerError
├── UnknownOperatorError
└── MissingDependencyError

ConflictingHandlersWarning (UserWarning)
"""

from __future__ import annotations


class OpsDispatchError(Exception):
    """Base exception for all ops-dispatch errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Dispatch --------------------------------------------------------------

class ConflictingHandlersError(OpsDispatchError):
    """Raised when both operands resolve to non-identical handlers.

    The dispatcher never guesses which side should win.  Two handlers
    with the same behaviour but distinct identities still conflict.
    """

    def __init__(
        self,
        operator: str,
        left_tag: str | None,
        right_tag: str | None,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            f"Conflicting handlers for {operator!r}: "
            f"<{left_tag}> {operator} <{right_tag}>",
            hint=hint,
        )
        self.operator: str = operator
        self.left_tag: str | None = left_tag
        self.right_tag: str | None = right_tag


class NoApplicableHandlerError(OpsDispatchError):
    """Raised when neither operand has a handler for the operator."""

    def __init__(
        self,
        operator: str,
        left_tag: str | None,
        right_tag: str | None,
    ) -> None:
        super().__init__(
            f"No handler for {operator!r} between "
            f"<{left_tag or 'untagged'}> and <{right_tag or 'untagged'}>",
            hint="At least one operand must carry a registered type tag.",
        )
        self.operator: str = operator
        self.left_tag: str | None = left_tag
        self.right_tag: str | None = right_tag


class UnknownOperatorError(OpsDispatchError):
    """Raised when an operator symbol is not part of the operator table."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unknown operator: {symbol!r}")
        self.symbol: str = symbol


# --- Diagnostics -----------------------------------------------------------

class ConflictingHandlersWarning(UserWarning):
    """Diagnostic emitted alongside :class:`ConflictingHandlersError`.

    The message names both competing handler entries (``+.A`` and
    ``+.B``, for instance).  It carries no control-flow weight.
    """


def shared_handler_hint(left_label: str, right_label: str) -> str:
    """Return guidance for fixing a handler conflict."""
    return "\n".join(
        (
            f"{left_label} and {right_label} are distinct handler objects.",
            "Register both tags with the same callable, e.g.:",
            "    for tag in (\"A\", \"B\"):",
            "        registry.register(\"+\", tag, handler)",
        )
    )


# --- Environment -----------------------------------------------------------

class MissingDependencyError(OpsDispatchError):
    """Raised when an optional runtime dependency (e.g. rich) is absent."""
