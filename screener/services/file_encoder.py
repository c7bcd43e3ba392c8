"""Conversion of uploaded resume files into inline base64 parts."""

from __future__ import annotations

import asyncio
import base64
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import PurePath
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)

GENERIC_MIME_TYPE = "application/octet-stream"

# Not every platform registers the Office types with mimetypes.
_EXTENSION_MIME_TYPES = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".txt": "text/plain",
}


class ResumeFile(Protocol):
    """Anything that looks like an upload: a name, a media type, async read()."""

    filename: str | None
    content_type: str | None

    async def read(self) -> bytes: ...


@dataclass(frozen=True)
class EncodedFile:
    """A resume ready to be embedded in a model request."""

    data: str
    mime_type: str
    file_name: str

    @property
    def raw_bytes(self) -> bytes:
        return base64.b64decode(self.data)


def resolve_mime_type(file_name: str | None, declared: str | None) -> str:
    """Return the declared media type, or guess one from the extension."""
    if declared and declared != GENERIC_MIME_TYPE:
        return declared

    if file_name:
        suffix = PurePath(file_name).suffix.lower()
        if suffix in _EXTENSION_MIME_TYPES:
            return _EXTENSION_MIME_TYPES[suffix]
        guessed, _ = mimetypes.guess_type(file_name)
        if guessed:
            return guessed

    return GENERIC_MIME_TYPE


async def encode_file(file: ResumeFile) -> EncodedFile:
    """Read a file completely and encode its bytes as base64.

    Read errors propagate to the caller untouched.
    """
    raw = await file.read()
    file_name = file.filename or "resume"
    encoded = EncodedFile(
        data=base64.b64encode(raw).decode("ascii"),
        mime_type=resolve_mime_type(file.filename, file.content_type),
        file_name=file_name,
    )
    logger.debug(
        "encoder.file_encoded",
        extra={"file_name": file_name, "mime_type": encoded.mime_type, "size": len(raw)},
    )
    return encoded


async def encode_files(files: Sequence[ResumeFile]) -> list[EncodedFile]:
    """Encode all files concurrently, returning results in input order."""
    return list(await asyncio.gather(*(encode_file(f) for f in files)))
