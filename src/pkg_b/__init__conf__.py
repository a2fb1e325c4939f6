"""Static package metadata surfaced to CLI commands and documentation.

Keep the values in sync with ``pyproject.toml`` when bumping the version.

Contents:
    * Metadata constants (``name``, ``title``, ``version`` ...).
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name declared in pyproject.toml.
name = "pkg-b"
#: Human-readable summary shown in CLI help output.
title = "Prints a greeting produced by the pkg_a greeting library"
#: Current release version pulled from pyproject.toml.
version = "0.1.0"
#: Repository homepage.
homepage = "https://github.com/example/pkg-b"
#: Author attribution.
author = "pkg-b maintainers"
#: Contact email.
author_email = "maintainers@example.com"
#: Console-script name published by the package.
shell_command = "pkg-b"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for pkg-b:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
