"""Static method declarations, installed into a registry at load time.

A :class:`MethodManifest` is the declarative path for binding handlers:
methods are listed up front and :meth:`MethodManifest.install` exports
each one into a registry.  Every declaration is exported as its own
:class:`ExportedMethod` object.  Two declarations built from one
function therefore resolve to two different handlers, and an operator
applied across their tags is a conflict.

Tags that must interoperate should be registered imperatively with one
shared callable instead (see :mod:`ops_dispatch.loader`).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ops_dispatch.core.registry import HandlerRegistry

logger = logging.getLogger(__name__)


class ExportedMethod:
    """Callable wrapper produced for one manifest declaration."""

    def __init__(self, function: Callable[..., str], label: str) -> None:
        self.__wrapped__ = function
        self.__qualname__ = getattr(function, "__qualname__", label)
        self.label = label

    def __call__(self, *args: Any, **kwargs: Any) -> str:
        return self.__wrapped__(*args, **kwargs)

    def __repr__(self) -> str:
        return f"<exported method {self.label} at {id(self):#x}>"


@dataclass(frozen=True, slots=True)
class Declaration:
    """One ``generic.tag`` entry of a manifest."""

    generic: str
    tag: str
    function: Callable[..., str]

    @property
    def label(self) -> str:
        return f"{self.generic}.{self.tag}"


class MethodManifest:
    """Ordered list of method declarations."""

    def __init__(self) -> None:
        self._declarations: list[Declaration] = []

    def __len__(self) -> int:
        return len(self._declarations)

    @property
    def declarations(self) -> tuple[Declaration, ...]:
        return tuple(self._declarations)

    def add(self, generic: str, tag: str, function: Callable[..., str]) -> None:
        """Declare *function* as the ``generic`` method for *tag*."""
        self._declarations.append(Declaration(generic=generic, tag=tag, function=function))

    def declare(
        self, generic: str, tag: str
    ) -> Callable[[Callable[..., str]], Callable[..., str]]:
        """Decorator form of :meth:`add`; returns the function unchanged."""

        def decorate(function: Callable[..., str]) -> Callable[..., str]:
            self.add(generic, tag, function)
            return function

        return decorate

    def install(self, registry: HandlerRegistry) -> None:
        """Export every declaration into *registry*."""
        for declaration in self._declarations:
            exported = ExportedMethod(declaration.function, declaration.label)
            registry.register(
                declaration.generic,
                declaration.tag,
                exported,
                source="manifest",
            )
        logger.debug("Installed %d manifest declarations", len(self._declarations))
