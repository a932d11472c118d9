"""Public package surface for guildtree.

Exports ``main`` for programmatic CLI invocation.
The tree engine lives in ``node_model``, ``tree_build``, and ``selection``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
