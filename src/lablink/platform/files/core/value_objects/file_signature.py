"""File signature (magic byte) table.

ONLY signature matching - known leading byte sequences per MIME type and
helpers to match them against a buffer.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class SignaturePart:
    """Byte sequence expected at a fixed offset."""

    offset: int
    magic: bytes

    def matches(self, content: bytes) -> bool:
        return content[self.offset:self.offset + len(self.magic)] == self.magic


@dataclass(frozen=True)
class FileSignature:
    """A signature is satisfied when all of its parts match."""

    mime_type: str
    parts: Tuple[SignaturePart, ...]

    def matches(self, content: bytes) -> bool:
        return all(part.matches(content) for part in self.parts)


FILE_SIGNATURES: Dict[str, Tuple[FileSignature, ...]] = {
    "image/jpeg": (
        FileSignature("image/jpeg", (SignaturePart(0, b"\xff\xd8\xff"),)),
    ),
    "image/png": (
        FileSignature("image/png", (SignaturePart(0, b"\x89PNG\r\n\x1a\n"),)),
    ),
    "image/webp": (
        FileSignature(
            "image/webp",
            (SignaturePart(0, b"RIFF"), SignaturePart(8, b"WEBP")),
        ),
    ),
    "application/pdf": (
        FileSignature("application/pdf", (SignaturePart(0, b"%PDF"),)),
    ),
}

WINDOWS_EXECUTABLE_MAGIC = b"MZ"
ELF_EXECUTABLE_MAGIC = b"\x7fELF"


def matches_declared_type(content: bytes, mime_type: str) -> bool:
    """Check the buffer against the signatures known for ``mime_type``.

    Types without a table entry never match.
    """
    signatures = FILE_SIGNATURES.get(mime_type)
    if not signatures:
        return False
    return any(signature.matches(content) for signature in signatures)


def detect_mime_type(content: bytes) -> Optional[str]:
    """Return the first MIME type whose signature matches the buffer."""
    for mime_type, signatures in FILE_SIGNATURES.items():
        if any(signature.matches(content) for signature in signatures):
            return mime_type
    return None
