"""Public package surface for labeljump.

Exports ``main`` for programmatic CLI invocation.
The matching and session core lives in ``labeljump.jump``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
