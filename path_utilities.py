from __future__ import annotations

"""Filesystem helpers that report failures as Result values."""

from pathlib import Path
from typing import Union

from result import Err, Ok, Result

PathLike = Union[str, Path]
ReadError = Union[OSError, UnicodeDecodeError]


def read_file(path: PathLike, encoding: str = "utf-8") -> Result[str, ReadError]:
    """Read a text file.

    Args:
        path: Path to the file to read.
        encoding: Text encoding used to decode the file.

    Returns:
        Ok(text) with the exact file contents. Err(OSError) if the file
        cannot be opened or read, Err(UnicodeDecodeError) if its bytes are
        not valid in ``encoding``.
    """
    try:
        with open(path, "r", encoding=encoding, newline="") as file_obj:
            return Ok(file_obj.read())
    except (OSError, UnicodeDecodeError) as exc:
        return Err(exc)
