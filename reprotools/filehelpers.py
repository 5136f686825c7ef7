"""Content hashing and write-if-changed helpers for generated files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

_HASH_MULTIPLIER = 65599
_BUFFER_SIZE = 4096
_UINT64_MASK = (1 << 64) - 1


def _to_int64(value: int) -> int:
    value &= _UINT64_MASK
    return value - (1 << 64) if value >= 1 << 63 else value


def _update_hash(current: int, data: bytes) -> int:
    for byte in data:
        current = (current * _HASH_MULTIPLIER + byte) & _UINT64_MASK
    return current


def calculate_memory_hash_code(data: bytes | bytearray | memoryview) -> int:
    """Return the signed 64-bit content hash of ``data``."""
    return _to_int64(_update_hash(0, bytes(data)))


def calculate_stream_hash_code(stream: BinaryIO) -> int:
    """Return the content hash of everything left to read in a binary stream."""
    current = 0
    while chunk := stream.read(_BUFFER_SIZE):
        current = _update_hash(current, chunk)
    return _to_int64(current)


def calculate_file_hash_code(path: str | os.PathLike[str]) -> int:
    """Return the content hash of a file, or 0 if it cannot be opened."""
    try:
        with open(path, "rb") as stream:
            return calculate_stream_hash_code(stream)
    except OSError:
        return 0


def _file_size(path: Path) -> int:
    try:
        return path.stat().st_size if path.is_file() else 0
    except OSError:
        return 0


def overwrite_file_with_new_data_if_different(
    path: str | os.PathLike[str], data: bytes | bytearray | memoryview
) -> bool:
    """Write ``data`` to ``path`` unless the file already holds the same content.

    Missing parent directories are created. Returns True if the file was
    written and False if it was left untouched; raises OSError on failure.
    """
    target = Path(path)
    data = bytes(data)

    if _file_size(target) == len(data) and calculate_memory_hash_code(
        data
    ) == calculate_file_hash_code(target):
        return False

    if not target.exists():
        target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)
    return True