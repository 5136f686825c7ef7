"""Locations of the BinaryData files generated for a project."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Project:
    """A project's BinaryData output directory and unique identifier."""

    output_dir: Path
    project_uid: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "output_dir", Path(self.output_dir))

    def binary_data_cpp_file(self, index: int) -> Path:
        """Return the path of the ``index``-th BinaryData source file (0-based)."""
        if index > 0:
            return self.output_dir / f"BinaryData{index + 1}.cpp"
        return self.output_dir / "BinaryData.cpp"

    def binary_data_header_file(self) -> Path:
        """Return the path of the BinaryData header."""
        return self.output_dir / "BinaryData.h"