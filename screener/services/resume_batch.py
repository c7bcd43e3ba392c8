"""Ordered, capacity-limited collection of resumes awaiting analysis."""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Generic, Iterable, TypeVar

from screener.services.file_encoder import ResumeFile

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10
DEFAULT_EXTENSIONS = frozenset({".pdf", ".doc", ".docx", ".txt"})

F = TypeVar("F", bound=ResumeFile)


def format_bytes(size: int, decimals: int = 2) -> str:
    """Human-readable size, e.g. ``1536 -> '1.5 KB'``."""
    if size <= 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size)
    exponent = 0
    while value >= 1024 and exponent < len(units) - 1:
        value /= 1024
        exponent += 1
    return f"{round(value, max(decimals, 0)):g} {units[exponent]}"


class ResumeBatch(Generic[F]):
    """Resumes in selection order, capped at ``capacity`` entries.

    Extensions are a hint only; file contents are never inspected.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        allowed_extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self.allowed_extensions = frozenset(ext.lower() for ext in allowed_extensions)
        self._files: list[F] = []

    def __len__(self) -> int:
        return len(self._files)

    @property
    def files(self) -> list[F]:
        return list(self._files)

    @property
    def names(self) -> list[str]:
        return [f.filename or "" for f in self._files]

    @property
    def is_full(self) -> bool:
        return len(self._files) >= self.capacity

    def accepts(self, file_name: str | None) -> bool:
        if not file_name:
            return False
        return PurePath(file_name).suffix.lower() in self.allowed_extensions

    def add(self, files: Iterable[F]) -> list[str]:
        """Append files in order until the batch is full.

        Returns:
            Warnings for every file that was skipped.
        """
        warnings: list[str] = []
        for file in files:
            name = file.filename or "<unnamed>"
            size = getattr(file, "size", None)
            if size is not None:
                name = f"{name} ({format_bytes(size)})"
            if not self.accepts(file.filename):
                warnings.append(
                    f"Skipped {name}: unsupported file type "
                    f"(allowed: {', '.join(sorted(self.allowed_extensions))})."
                )
                continue
            if self.is_full:
                warnings.append(
                    f"Skipped {name}: a maximum of {self.capacity} resumes can be analyzed at once."
                )
                continue
            self._files.append(file)

        if warnings:
            logger.info(
                "batch.files_skipped",
                extra={"skipped": len(warnings), "kept": len(self._files)},
            )
        return warnings

    def remove(self, index: int) -> F:
        """Remove and return the file at ``index``.

        Raises:
            IndexError: If no file is held at that index.
        """
        if not 0 <= index < len(self._files):
            raise IndexError(f"no resume at index {index}")
        return self._files.pop(index)
