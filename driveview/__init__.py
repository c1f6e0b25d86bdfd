"""Public package surface for driveview.

Exports ``main`` for programmatic CLI invocation.
The listing and preview decision engine lives in submodules under ``driveview``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
