"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

from importlib import metadata
from typing import Callable

name = "lib_enum_wire"
title = "String-only enum codec for JSON Web API payloads"
shell_command = "lib_enum_wire"


def _resolve_version() -> str:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return "0.0.0.dev0"


version = _resolve_version()


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner one line at a time through ``writer``.

    ``writer`` receives lines including their trailing newline; it defaults to
    writing to stdout.
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)

    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in lines:
        emit(line)


__all__ = ["print_info", "version", "shell_command", "name", "title"]
