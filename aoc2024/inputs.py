"""Access to puzzle input files."""

from __future__ import annotations

import os
from pathlib import Path

INPUTS_ENV = "AOC2024_INPUTS"


def _default_root() -> Path:
    return Path(os.environ.get(INPUTS_ENV, "inputs"))


def get_input_file(path: str, root: str | os.PathLike[str] | None = None) -> str:
    """Return the contents of an input file, relative to the inputs root.

    The root defaults to the directory named by ``AOC2024_INPUTS``, or
    ``inputs`` in the working directory. Line endings are kept as stored.
    """
    base = Path(root) if root is not None else _default_root()
    return (base / path).read_bytes().decode("utf-8")