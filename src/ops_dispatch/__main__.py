"""Allow ``python -m ops_dispatch`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m ops_dispatch`` behaves like the ``ops-dispatch`` script.
"""

from __future__ import annotations

from ops_dispatch.cli.app import cli

if __name__ == "__main__":
    cli()
