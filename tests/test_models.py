"""Tests for domain models (core/models.py).

``Tagged`` operators route through the process-wide registry, which is
initialized lazily on first use.
"""

from __future__ import annotations

import pytest

from ops_dispatch.core.dispatch import apply
from ops_dispatch.core.models import HandlerEntry, Tagged, tag_of, type_label
from ops_dispatch.exceptions import ConflictingHandlersError, NoApplicableHandlerError


def _describe(left: object, right: object) -> str:
    return f"{type_label(left)}|{type_label(right)}"


class _Foreign:
    """Operand type that implements its own arithmetic with tagged values."""

    def __radd__(self, other: object) -> str:
        return f"foreign + {type_label(other)}"


# ---------------------------------------------------------------------------
# Tagged
# ---------------------------------------------------------------------------

class TestTagged:
    def test_fields_accessible(self) -> None:
        t = Tagged("C", value=42)
        assert t.tag == "C"
        assert t.value == 42

    def test_value_defaults_to_none(self) -> None:
        assert Tagged("C").value is None

    def test_frozen(self) -> None:
        t = Tagged("C")
        with pytest.raises(AttributeError):
            t.tag = "D"  # type: ignore[misc]

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(Tagged("C"))


class TestLabels:
    def test_tag_of_tagged(self) -> None:
        assert tag_of(Tagged("G")) == "G"

    def test_tag_of_plain_value(self) -> None:
        assert tag_of(3) is None

    @pytest.mark.parametrize(
        ("operand", "label"),
        [(Tagged("H"), "H"), (1, "int"), (2.5, "float"), ("x", "str")],
    )
    def test_type_label(self, operand: object, label: str) -> None:
        assert type_label(operand) == label


# ---------------------------------------------------------------------------
# Operator methods
# ---------------------------------------------------------------------------

class TestTaggedOperators:
    def test_shared_handler_pair(self) -> None:
        assert Tagged("C") + Tagged("D") == "Called <C> + <D>"
        assert Tagged("D") + Tagged("C") == "Called <D> + <C>"

    @pytest.mark.parametrize("symbol", ["+", "-", "*", "/", "//", "%", "**", "&", "|"])
    def test_group_pair_arithmetic_and_logic(self, symbol: str) -> None:
        g, h = Tagged("G"), Tagged("H")
        result = {
            "+": lambda: g + h,
            "-": lambda: g - h,
            "*": lambda: g * h,
            "/": lambda: g / h,
            "//": lambda: g // h,
            "%": lambda: g % h,
            "**": lambda: g ** h,
            "&": lambda: g & h,
            "|": lambda: g | h,
        }[symbol]()
        assert result == f"Called <G> {symbol} <H>"

    def test_group_pair_comparisons(self) -> None:
        g, h = Tagged("G"), Tagged("H")
        eq = g == h
        ne = g != h
        lt = g < h
        ge = g >= h
        assert eq == "Called <G> == <H>"
        assert ne == "Called <G> != <H>"
        assert lt == "Called <G> < <H>"
        assert ge == "Called <G> >= <H>"

    def test_reflected_arithmetic_keeps_source_order(self) -> None:
        assert 1 + Tagged("C") == "Called <int> + <C>"
        assert 2 - Tagged("G") == "Called <int> - <G>"

    def test_tagged_with_untagged_right(self) -> None:
        assert Tagged("C") + 1 == "Called <C> + <int>"
        assert Tagged("H") * 2.0 == "Called <H> * <float>"

    def test_reflected_comparison_follows_python_rules(self) -> None:
        # 1 < x is evaluated by Python as x > 1
        result = 1 < Tagged("G")
        assert result == "Called <G> > <int>"

    def test_manifest_pair_conflicts(self) -> None:
        with pytest.raises(ConflictingHandlersError):
            Tagged("A") + Tagged("B")

    def test_unregistered_tag_with_number(self) -> None:
        with pytest.raises(TypeError):
            Tagged("Z") + 1

    def test_apply_still_reports_missing_handler(self) -> None:
        with pytest.raises(NoApplicableHandlerError):
            apply("+", Tagged("Z"), 1)

    def test_foreign_operand_gets_its_reflected_method(self) -> None:
        assert Tagged("Z") + _Foreign() == "foreign + Z"

    def test_registered_handler_beats_foreign_operand(self) -> None:
        assert Tagged("C") + _Foreign() == "Called <C> + <_Foreign>"


# ---------------------------------------------------------------------------
# HandlerEntry
# ---------------------------------------------------------------------------

class TestHandlerEntry:
    def test_label(self) -> None:
        entry = HandlerEntry(generic="+", tag="A", handler=_describe)
        assert entry.label == "+.A"

    def test_source_defaults_to_runtime(self) -> None:
        entry = HandlerEntry(generic="+", tag="A", handler=_describe)
        assert entry.source == "runtime"

    def test_is_group(self) -> None:
        assert HandlerEntry(generic="Ops", tag="G", handler=_describe).is_group
        assert HandlerEntry(generic="Compare", tag="G", handler=_describe).is_group
        assert not HandlerEntry(generic="+", tag="G", handler=_describe).is_group

    def test_handler_name(self) -> None:
        entry = HandlerEntry(generic="+", tag="A", handler=_describe)
        assert entry.handler_name == "_describe"

    def test_frozen(self) -> None:
        entry = HandlerEntry(generic="+", tag="A", handler=_describe)
        with pytest.raises(AttributeError):
            entry.tag = "B"  # type: ignore[misc]
