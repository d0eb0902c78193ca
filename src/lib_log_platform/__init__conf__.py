"""Static package metadata surfaced by the CLI banner.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Callable

name = "lib_log_platform"
title = "Forward Python logging into a host platform's error log"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_platform"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_platform"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner line by line.

    Examples
    --------
    >>> print_info()  # doctest: +ELLIPSIS
    Info for lib_log_platform:
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
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    emit(f"Info for {name}:\n\n")
    for label, value in fields:
        emit(f"    {label:<{pad}} = {value}\n")
