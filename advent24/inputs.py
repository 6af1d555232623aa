"""Reading puzzle input files."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_INPUT = "input.txt"


def read_input(path: str | os.PathLike[str]) -> str:
    """Return the whole content of the UTF-8 text file at ``path``.

    Raises ``FileNotFoundError`` when the file is missing and
    ``UnicodeDecodeError`` when it is not valid UTF-8.
    """
    return Path(path).read_text(encoding="utf-8")