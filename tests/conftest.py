"""Shared pytest fixtures for the ops-dispatch test suite.

Guidelines
----------
* Prefer a fresh :class:`HandlerRegistry` per test over the process-wide one.
* Tests that go through ``Tagged`` operators use the process-wide registry,
  which only ever receives the package's own (idempotent) registrations.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from ops_dispatch.core.registry import HandlerRegistry
from ops_dispatch.loader import initialize


@pytest.fixture
def registry() -> HandlerRegistry:
    """An empty registry."""
    return HandlerRegistry()


@pytest.fixture
def loaded_registry() -> HandlerRegistry:
    """A registry holding the package's load-time registrations."""
    reg = HandlerRegistry()
    initialize(reg)
    return reg


@pytest.fixture(autouse=True)
def _detach_cli_log_handlers() -> Iterator[None]:
    """Drop handlers installed by ``configure_logging`` after each test."""
    yield
    logger = logging.getLogger("ops_dispatch")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
