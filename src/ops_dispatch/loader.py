"""Load-time initializer for the package's handler registrations.

Nothing is registered as a side effect of importing ops-dispatch.
:func:`ensure_initialized` runs :func:`initialize` exactly once against
the process-wide registry.  It is installed as the
first-use hook of :data:`~ops_dispatch.core.registry.default_registry`, so
any read of that table (including a direct ``default_registry.invoke``)
fills it first.

:func:`initialize` itself is idempotent: re-running it only overwrites
entries with equivalent ones.
"""

from __future__ import annotations

import logging
import threading

from ops_dispatch.core.registry import HandlerRegistry, default_registry
from ops_dispatch.methods import MANIFEST, RUNTIME_REGISTRATIONS

logger = logging.getLogger(__name__)

_init_lock = threading.Lock()
_initialized: bool = False


def initialize(registry: HandlerRegistry | None = None) -> None:
    """Install the manifest and bind the shared runtime handlers.

    Each runtime handler is a single callable bound to every one of its
    tags, so cooperating tags always resolve to the same object.
    """
    if registry is None:
        registry = default_registry

    MANIFEST.install(registry)
    for generic, tags, handler in RUNTIME_REGISTRATIONS:
        for tag in tags:
            registry.register(generic, tag, handler)

    logger.debug("Handler registry initialized with %d entries", len(registry))


def ensure_initialized() -> None:
    """Initialize the process-wide registry on first use."""
    global _initialized
    if _initialized:
        return
    with _init_lock:
        if not _initialized:
            initialize()
            _initialized = True


def is_initialized() -> bool:
    return _initialized


def reset() -> None:
    """Forget that initialization ran (the registry itself is untouched)."""
    global _initialized
    with _init_lock:
        _initialized = False


default_registry.on_first_use = ensure_initialized
