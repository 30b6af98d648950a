"""Operator table and operator groups.

A handler may be registered for a single operator symbol (``"+"``), a
family (``"Arith"``, ``"Compare"``, ``"Logic"``), or the umbrella group
``"Ops"`` that covers every family.  Group handlers receive the symbol
of the triggering operator as the ``generic`` keyword argument.
"""

from __future__ import annotations

from dataclasses import dataclass

from ops_dispatch.exceptions import UnknownOperatorError


OPS_GROUP: str = "Ops"
"""Umbrella group covering every binary operator."""


@dataclass(frozen=True, slots=True)
class Operator:
    """A binary operator and the family it belongs to."""

    symbol: str
    """Python spelling of the operator (e.g. ``"+"``, ``"<="``)."""

    group: str
    """Family name: ``"Arith"``, ``"Compare"`` or ``"Logic"``."""

    def generics(self) -> tuple[str, str, str]:
        """Registration keys to try, most specific first."""
        return (self.symbol, self.group, OPS_GROUP)


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------

GROUPS: dict[str, tuple[str, ...]] = {
    "Arith": ("+", "-", "*", "/", "//", "%", "**"),
    "Compare": ("==", "!=", "<", "<=", ">", ">="),
    "Logic": ("&", "|"),
}

OPERATORS: dict[str, Operator] = {
    symbol: Operator(symbol=symbol, group=group)
    for group, symbols in GROUPS.items()
    for symbol in symbols
}


def is_group(generic: str) -> bool:
    """Return ``True`` when *generic* names a group rather than an operator."""
    return generic == OPS_GROUP or generic in GROUPS


def operator_for(symbol: str) -> Operator:
    """Look up *symbol* in the operator table.

    Raises
    ------
    UnknownOperatorError
        If *symbol* is not a supported binary operator.
    """
    try:
        return OPERATORS[symbol]
    except KeyError:
        raise UnknownOperatorError(symbol) from None


def group_members(generic: str) -> tuple[str, ...]:
    """Return every operator symbol serviced by *generic*."""
    if generic == OPS_GROUP:
        return tuple(OPERATORS)
    if generic in GROUPS:
        return GROUPS[generic]
    return (operator_for(generic).symbol,)
