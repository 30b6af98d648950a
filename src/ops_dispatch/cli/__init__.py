"""CLI layer — argument parsing, rendering, and the error boundary.

This package is the outermost layer.  It may import from ``core`` and
the top-level modules, but nothing imports from ``cli``.
"""
