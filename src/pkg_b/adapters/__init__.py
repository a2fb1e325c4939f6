"""Adapters layer: stdout, lib_log_rich and the Click CLI.

Contents:
    * :mod:`.console` - stdout line writer
    * :mod:`.logging` - lib_log_rich runtime start-up
    * :mod:`.cli` - rich-click command tree and exit-code boundary
"""

from __future__ import annotations

__all__: list[str] = []
