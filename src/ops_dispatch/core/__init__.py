"""Core layer — operator table, handler registry and dispatch.

Rules
-----
* No ``print()`` calls and no I/O.
* No imports from ``cli``.
* Diagnostics go through :mod:`logging` and :mod:`warnings` only.
"""

from ops_dispatch.core.dispatch import apply
from ops_dispatch.core.manifest import ExportedMethod, MethodManifest
from ops_dispatch.core.models import HandlerEntry, Tagged, tag_of, type_label
from ops_dispatch.core.operators import GROUPS, OPERATORS, OPS_GROUP, Operator, operator_for
from ops_dispatch.core.protocols import GroupHandler, Handler
from ops_dispatch.core.registry import HandlerRegistry, default_registry

__all__: list[str] = [
    "GROUPS",
    "OPERATORS",
    "OPS_GROUP",
    "ExportedMethod",
    "GroupHandler",
    "Handler",
    "HandlerEntry",
    "HandlerRegistry",
    "MethodManifest",
    "Operator",
    "Tagged",
    "apply",
    "default_registry",
    "operator_for",
    "tag_of",
    "type_label",
]
