"""Process exit codes returned by ``ops-dispatch`` commands."""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed; for ``eval`` the expression dispatched cleanly."""

GENERAL_ERROR: int = 1
"""An OpsDispatchError (e.g. conflicting handlers) reached the boundary."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
