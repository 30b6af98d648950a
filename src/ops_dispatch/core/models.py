"""Domain models for ops-dispatch.

* :class:`Tagged`: a value carrying an immutable type tag.  Applying a
  binary operator to it routes through the handler registry.
* :class:`HandlerEntry`: one ``(generic, tag) -> handler`` association.

Both are frozen dataclasses.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from ops_dispatch.core.operators import is_group


# ---------------------------------------------------------------------------
# Operator routing
# ---------------------------------------------------------------------------

def _apply(symbol: str, left: object, right: object) -> str:
    from ops_dispatch.core.dispatch import apply

    return apply(symbol, left, right)


def _defers_to(symbol: str, this: Tagged, other: object) -> bool:
    """True when a foreign *other* should get its own operator method."""
    if isinstance(other, Tagged):
        return False
    from ops_dispatch.core.registry import default_registry

    return default_registry.lookup(symbol, this.tag) is None


def _binary(symbol: str) -> Callable[[Tagged, object], Any]:
    def method(self: Tagged, other: object) -> Any:
        if _defers_to(symbol, self, other):
            return NotImplemented
        return _apply(symbol, self, other)

    method.__name__ = f"operator {symbol}"
    return method


def _reflected(symbol: str) -> Callable[[Tagged, object], Any]:
    # Python calls __radd__ and friends on the right operand; keep
    # source order when handing the operands to the dispatcher.
    def method(self: Tagged, other: object) -> Any:
        if _defers_to(symbol, self, other):
            return NotImplemented
        return _apply(symbol, other, self)

    method.__name__ = f"reflected operator {symbol}"
    return method


# ---------------------------------------------------------------------------
# Tagged values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, eq=False)
class Tagged:
    """A value labelled with a type tag.

    The tag selects which handlers apply to the value.  It is assigned at
    construction and never changes.  Comparison operators also dispatch,
    so instances are unhashable and ``==`` returns a string.
    """

    tag: str
    """Type tag (e.g. ``"C"``)."""

    value: Any = None
    """Optional payload.  Dispatch never inspects it."""

    __add__ = _binary("+")
    __sub__ = _binary("-")
    __mul__ = _binary("*")
    __truediv__ = _binary("/")
    __floordiv__ = _binary("//")
    __mod__ = _binary("%")
    __pow__ = _binary("**")
    __and__ = _binary("&")
    __or__ = _binary("|")

    __radd__ = _reflected("+")
    __rsub__ = _reflected("-")
    __rmul__ = _reflected("*")
    __rtruediv__ = _reflected("/")
    __rfloordiv__ = _reflected("//")
    __rmod__ = _reflected("%")
    __rpow__ = _reflected("**")
    __rand__ = _reflected("&")
    __ror__ = _reflected("|")

    __eq__ = _binary("==")  # type: ignore[assignment]
    __ne__ = _binary("!=")  # type: ignore[assignment]
    __lt__ = _binary("<")
    __le__ = _binary("<=")
    __gt__ = _binary(">")
    __ge__ = _binary(">=")

    __hash__ = None  # type: ignore[assignment]


def tag_of(operand: object) -> str | None:
    """Return the type tag of *operand*, or ``None`` when untagged."""
    if isinstance(operand, Tagged):
        return operand.tag
    return None


def type_label(operand: object) -> str:
    """Label used in handler output: the tag, else the Python type name."""
    tag = tag_of(operand)
    if tag is not None:
        return tag
    return type(operand).__name__


# ---------------------------------------------------------------------------
# Registry entries
# ---------------------------------------------------------------------------

HandlerSource = Literal["runtime", "manifest"]


@dataclass(frozen=True, slots=True)
class HandlerEntry:
    """A ``(generic, tag) -> handler`` association held by the registry."""

    generic: str
    """Operator symbol (``"+"``) or group name (``"Ops"``)."""

    tag: str
    """Type tag the handler is bound to."""

    handler: Callable[..., str]
    """The registered callable.  Compared by identity at resolve time."""

    source: HandlerSource = "runtime"
    """``"runtime"`` for imperative registration, ``"manifest"`` otherwise."""

    @property
    def is_group(self) -> bool:
        return is_group(self.generic)

    @property
    def label(self) -> str:
        """Diagnostic name such as ``+.A`` or ``Ops.G``."""
        return f"{self.generic}.{self.tag}"

    @property
    def handler_name(self) -> str:
        return getattr(self.handler, "__qualname__", None) or repr(self.handler)
