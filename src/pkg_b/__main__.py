"""``python -m pkg_b`` runs the same command as the ``pkg-b`` script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
