"""Helpers for CSV lines, string splitting and the console."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from typing import Optional, TextIO

MAX_LINE_LENGTH = 4096
MAX_FIELDS = 128


def _quoted_field(line: str, pos: int) -> tuple[str, int]:
    """Read a quoted field starting after its opening quote."""
    chars: list[str] = []
    while pos < len(line):
        if line[pos] == '"':
            if line.startswith('""', pos):
                chars.append('"')
                pos += 2
                continue
            pos += 1
            break
        chars.append(line[pos])
        pos += 1
    return "".join(chars), pos


def read_csv_line(stream: TextIO, separator: str) -> Optional[list[str]]:
    """Read one line from ``stream`` and split it into CSV fields.

    Fields may be quoted; a doubled quote inside quotes stands for one quote.
    Returns None at end of input. At most ``MAX_FIELDS - 1`` fields are kept.
    """
    raw = stream.readline(MAX_LINE_LENGTH - 1)
    if raw == "":
        return None
    line = re.split(r"[\r\n]", raw, maxsplit=1)[0]

    fields: list[str] = []
    pos = 0
    while pos < len(line) and len(fields) < MAX_FIELDS - 1:
        if line[pos] == '"':
            field, pos = _quoted_field(line, pos + 1)
            if line.startswith(separator, pos):
                pos += 1
        else:
            end = line.find(separator, pos)
            if end == -1:
                field, pos = line[pos:], len(line)
            else:
                field, pos = line[pos:end], end + 1
        fields.append(field)
    return fields


def split_string(text: str, delimiters: str) -> list[str]:
    """Split ``text`` on any character of ``delimiters``, trimming spaces.

    Runs of delimiters produce no empty tokens.
    """
    if not delimiters:
        tokens = [text] if text else []
    else:
        pattern = "[" + re.escape(delimiters) + "]+"
        tokens = [token for token in re.split(pattern, text) if token]
    return [token.strip(" ") for token in tokens]


def clear_screen() -> None:
    """Clear the terminal."""
    if os.name == "nt":
        subprocess.run("cls", shell=True, check=False)
    else:
        subprocess.run(["clear"], check=False)


def press_enter_to_continue() -> None:
    """Prompt and wait until the user presses enter."""
    print("Presione enter para continuar...")
    sys.stdout.flush()
    sys.stdin.readline()