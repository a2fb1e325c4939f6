"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from pkg_a import Lazy, greet

APP_NAME: Lazy[str] = Lazy(lambda: "pkg-b")

DEFAULT_NAME = "Nix"


def format_banner(app_name: str, greeting: str) -> str:
    """Prefix ``greeting`` with the bracketed application name.

    Example:
        >>> format_banner("pkg-b", "Hello, Nix!")
        '[pkg-b] Hello, Nix!'
    """
    return f"[{app_name}] {greeting}"


def build_banner(name: str = DEFAULT_NAME) -> str:
    r"""Return the line the application prints on startup.

    Reads :data:`APP_NAME`, greets ``name`` through the greeting library and
    joins both into a single line.

    Args:
        name: Name to greet. Defaults to :data:`DEFAULT_NAME`.

    Returns:
        ``"[{APP_NAME}] {greet(name)}"``.

    Example:
        >>> build_banner()
        '[pkg-b] Hello, Nix!'
        >>> build_banner("world")
        '[pkg-b] Hello, world!'
    """
    return format_banner(APP_NAME.get(), greet(name))


__all__ = [
    "APP_NAME",
    "DEFAULT_NAME",
    "build_banner",
    "format_banner",
]
