"""Command-line help text with word wrapping to the console width."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from dataclasses import dataclass
from typing import Any, Sequence, TextIO

# An arbitrarily large width that is never expected in practice.
DEFAULT_WIDTH = 10000

# Never wrap narrower than this.
MINIMUM_WIDTH = 30

_HEADER = "remotecache - A remote build cache for Bazel and other REAPI clients"

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Option:
    """A command-line option as shown in the help text."""

    name: str
    usage: str = ""
    value: Any = None
    env_vars: tuple[str, ...] = ()
    aliases: tuple[str, ...] = ()
    takes_value: bool = True
    default_text: str = ""

    def _default(self) -> str:
        if self.default_text:
            return self.default_text
        if self.value is None or self.value is False or self.value == "":
            return ""
        if isinstance(self.value, str):
            return f'"{self.value}"'
        return str(self.value)

    def __str__(self) -> str:
        names = ", ".join(
            ("-" if len(n) == 1 else "--") + n for n in (self.name, *self.aliases)
        )
        placeholder = " value" if self.takes_value else ""
        text = f"{names}{placeholder}\t{self.usage}"
        default = self._default()
        if default:
            text += f" (default: {default})"
        if self.env_vars:
            text += " [" + ", ".join("$" + e for e in self.env_vars) + "]"
        return text


_HELP_OPTION = Option("help", "show help", aliases=("h",), takes_value=False)


def wrap_line(text: str, wrap_at: int, padding: str) -> str:
    """Wrap one line at word boundaries once it reaches ``wrap_at``.

    Wrapped lines start with ``padding``. Whitespace is not preserved.
    """
    offset = len(padding)
    if wrap_at <= offset:
        return text
    if len(text) <= wrap_at - offset:
        return text

    target_width = wrap_at - offset
    words = text.split()
    if not words:
        return text

    wrapped = words[0]
    space_left = target_width - len(wrapped)
    for word in words[1:]:
        if len(word) + 1 > space_left:
            wrapped += "\n" + padding + word
            space_left = target_width - len(word)
        else:
            wrapped += " " + word
            space_left -= 1 + len(word)
    return wrapped


def wrap(text: str, offset: int, wrap_at: int) -> str:
    """Wrap possibly multi-line ``text``, indenting later lines by ``offset``."""
    prefix = " " * offset
    lines = text.split("\n")
    return "\n".join(
        (prefix if i else "") + wrap_line(line, wrap_at, prefix)
        for i, line in enumerate(lines)
    )


def _parse_width(text: str) -> int | None:
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return None
    return max(int(text), MINIMUM_WIDTH)


def console_width() -> int:
    """Return the console width from $COLUMNS or ``tput cols``."""
    columns = os.environ.get("COLUMNS", "")
    if columns:
        width = _parse_width(columns)
        if width is not None:
            return width

    try:
        completed = subprocess.run(
            ["tput", "cols"],
            stdin=sys.stdin,
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, ValueError, subprocess.SubprocessError):
        return DEFAULT_WIDTH

    width = _parse_width(completed.stdout)
    return DEFAULT_WIDTH if width is None else width


def _align_tabs(text: str, padding: int = 2, min_width: int = 1) -> str:
    """Align tab-separated cells of consecutive lines into columns."""
    out: list[str] = []
    block: list[list[str]] = []

    def flush() -> None:
        if not block:
            return
        columns = max(len(cells) - 1 for cells in block)
        widths = [
            max(
                min_width,
                max(len(cells[i]) for cells in block if len(cells) - 1 > i) + padding,
            )
            for i in range(columns)
        ]
        for cells in block:
            out.append(
                "".join(cell.ljust(widths[i]) for i, cell in enumerate(cells[:-1]))
                + cells[-1]
            )
        block.clear()

    for line in text.split("\n"):
        if "\t" in line:
            block.append(line.split("\t"))
        else:
            flush()
            out.append(line)
    flush()
    return "\n".join(out)


def print_help(program: str, options: Sequence[Option], out: TextIO) -> None:
    """Write the help text for ``program`` and its ``options`` to ``out``.

    A ``--help, -h`` option is listed after the given ones.
    """
    width = console_width()
    rendered = [wrap(str(option), 6, width) for option in (*options, _HELP_OPTION)]
    body = "\n   ".join(entry + "\n" for entry in rendered)
    text = f"{_HEADER}\n\nUSAGE:\n   {program} [options]\n\nOPTIONS:\n   {body}"
    out.write(_align_tabs(text))