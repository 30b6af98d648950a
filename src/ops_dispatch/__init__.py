"""ops-dispatch — identity-checked binary operator dispatch on type tags.

Handlers are bound to ``(operator, tag)`` pairs.  When both operands of
an operator carry tags with handlers, the two handlers must be the same
object or the call fails with :class:`ConflictingHandlersError`.
"""

from ops_dispatch.core.dispatch import apply
from ops_dispatch.core.models import Tagged
from ops_dispatch.core.registry import HandlerRegistry, default_registry
from ops_dispatch.exceptions import (
    ConflictingHandlersError,
    ConflictingHandlersWarning,
    NoApplicableHandlerError,
    OpsDispatchError,
    UnknownOperatorError,
)
from ops_dispatch.loader import ensure_initialized, initialize
from ops_dispatch.version import __version__

__all__: list[str] = [
    "ConflictingHandlersError",
    "ConflictingHandlersWarning",
    "HandlerRegistry",
    "NoApplicableHandlerError",
    "OpsDispatchError",
    "Tagged",
    "UnknownOperatorError",
    "__version__",
    "apply",
    "default_registry",
    "ensure_initialized",
    "initialize",
]
