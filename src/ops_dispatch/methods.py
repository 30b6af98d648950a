"""Operator handlers shipped with ops-dispatch.

Four pairs of type tags, one per way of binding a handler:

=====  =======  ==========  ============================================
Tags   Generic  Path        Result of ``L op R``
=====  =======  ==========  ============================================
A, B   ``+``    manifest    conflict: each declaration is exported apart
C, D   ``+``    runtime     ``plus`` is shared, dispatch succeeds
E, F   ``Ops``  manifest    conflict for every operator
G, H   ``Ops``  runtime     ``operators`` is shared, dispatch succeeds
=====  =======  ==========  ============================================

The manifest pairs alias the same function (``plus_b = plus_a``) and
still conflict once exported.  The runtime pairs are bound in
:func:`ops_dispatch.loader.initialize`.
"""

from __future__ import annotations

from ops_dispatch.core.manifest import MethodManifest
from ops_dispatch.core.models import type_label
from ops_dispatch.core.protocols import GroupHandler, Handler

MANIFEST = MethodManifest()
"""Static declarations for tags A, B, E and F."""


# ---------------------------------------------------------------------------
# A and B: ``+`` declared through the manifest
# ---------------------------------------------------------------------------

@MANIFEST.declare("+", "A")
def plus_a(left: object, right: object) -> str:
    return f"Called <{type_label(left)}> + <{type_label(right)}>"


plus_b = plus_a
MANIFEST.add("+", "B", plus_b)


# ---------------------------------------------------------------------------
# C and D: ``+`` registered at load time with one shared callable
# ---------------------------------------------------------------------------

def plus(left: object, right: object) -> str:
    return f"Called <{type_label(left)}> + <{type_label(right)}>"


# ---------------------------------------------------------------------------
# E and F: every operator, declared through the manifest
# ---------------------------------------------------------------------------

@MANIFEST.declare("Ops", "E")
def ops_e(left: object, right: object, *, generic: str) -> str:
    return f"Called <{type_label(left)}> {generic} <{type_label(right)}>"


ops_f = ops_e
MANIFEST.add("Ops", "F", ops_f)


# ---------------------------------------------------------------------------
# G and H: every operator, registered at load time with one shared callable
# ---------------------------------------------------------------------------

def operators(left: object, right: object, *, generic: str) -> str:
    return f"Called <{type_label(left)}> {generic} <{type_label(right)}>"


RUNTIME_REGISTRATIONS: tuple[tuple[str, tuple[str, ...], Handler | GroupHandler], ...] = (
    ("+", ("C", "D"), plus),
    ("Ops", ("G", "H"), operators),
)
"""``(generic, tags, handler)`` bound imperatively by the loader."""

DEMO_PAIRS: tuple[tuple[str, str, str], ...] = (
    ("A", "B", "+"),
    ("C", "D", "+"),
    ("E", "F", "Ops"),
    ("G", "H", "Ops"),
)
"""``(left tag, right tag, generic)`` for every shipped pair."""
