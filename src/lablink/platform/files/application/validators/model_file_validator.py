"""3D model file validator.

ONLY model structure validation - checks STL (binary and ASCII) and OBJ
files for structural integrity before they are accepted as design files.
"""

import math
import re
import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ModelFileType(str, Enum):
    """Detected model encoding."""
    STL_ASCII = "stl-ascii"
    STL_BINARY = "stl-binary"
    OBJ = "obj"
    UNKNOWN = "unknown"


@dataclass
class ModelMetadata:
    """Geometry facts gathered while validating a model."""

    file_size: int
    vertex_count: Optional[int] = None
    face_count: Optional[int] = None
    has_normals: Optional[bool] = None
    has_textures: Optional[bool] = None


@dataclass
class ModelValidationResult:
    """Outcome of model structure validation."""

    file_type: ModelFileType
    metadata: ModelMetadata
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        """Human-readable description such as ``STL BINARY • 36 vertices • 12 faces``."""
        parts = []
        if self.file_type != ModelFileType.UNKNOWN:
            parts.append(self.file_type.value.upper().replace("-", " "))
        if self.metadata.vertex_count:
            parts.append(f"{self.metadata.vertex_count:,} vertices")
        if self.metadata.face_count:
            parts.append(f"{self.metadata.face_count:,} faces")
        return " • ".join(parts)


# Binary STL layout: 80 byte header, uint32 triangle count, 50 bytes per triangle
STL_HEADER_SIZE = 84
STL_TRIANGLE_SIZE = 50
MAX_BINARY_TRIANGLES = 10_000_000
MAX_ASCII_FACETS = 5_000_000
MAX_OBJ_VERTICES = 10_000_000
OBJ_SCAN_LINES = 10_000

_NUMBER = r"[-+]?\d*\.?\d+(?:[eE][-+]?\d+)?"
_FACET_PATTERN = re.compile(
    rf"facet\s+normal\s+{_NUMBER}\s+{_NUMBER}\s+{_NUMBER}\s+outer\s+loop\s+vertex",
    re.IGNORECASE,
)


class ModelFileValidator:
    """Structural validator for STL and OBJ design files."""

    def validate(self, filename: str, content: bytes) -> ModelValidationResult:
        """Validate a model file by extension and content.

        Args:
            filename: Original filename, used to pick the format
            content: Raw file bytes

        Returns:
            ModelValidationResult with errors, warnings and geometry metadata
        """
        extension = filename.lower().rsplit(".", 1)[-1] if "." in filename else ""

        if extension not in ("stl", "obj"):
            return ModelValidationResult(
                file_type=ModelFileType.UNKNOWN,
                metadata=ModelMetadata(file_size=len(content)),
                errors=["File must have .stl or .obj extension"],
            )

        if extension == "stl":
            header = content[:100].decode("utf-8", errors="replace")
            if "solid" in header.lower():
                return self._validate_ascii_stl(
                    content.decode("utf-8", errors="replace"), len(content)
                )
            return self._validate_binary_stl(content)

        return self._validate_obj(content.decode("utf-8", errors="replace"), len(content))

    def _validate_binary_stl(self, content: bytes) -> ModelValidationResult:
        errors: List[str] = []
        warnings: List[str] = []

        if len(content) < STL_HEADER_SIZE:
            return ModelValidationResult(
                file_type=ModelFileType.STL_BINARY,
                metadata=ModelMetadata(file_size=len(content)),
                errors=["File too small to be a valid STL file"],
            )

        (triangle_count,) = struct.unpack_from("<I", content, 80)
        expected_size = STL_HEADER_SIZE + triangle_count * STL_TRIANGLE_SIZE

        if len(content) != expected_size:
            errors.append(
                f"File size mismatch: expected {expected_size} bytes for "
                f"{triangle_count} triangles, got {len(content)} bytes"
            )

        if triangle_count == 0:
            errors.append("STL file contains zero triangles")
        elif triangle_count > MAX_BINARY_TRIANGLES:
            warnings.append(
                f"Very large model with {triangle_count:,} triangles - may impact performance"
            )

        # Normal plus three vertices of the first triangle
        if triangle_count > 0 and len(content) >= STL_HEADER_SIZE + STL_TRIANGLE_SIZE:
            values = struct.unpack_from("<12f", content, STL_HEADER_SIZE)
            if not all(math.isfinite(value) for value in values):
                errors.append("Invalid geometry data detected - file may be corrupted")

        return ModelValidationResult(
            file_type=ModelFileType.STL_BINARY,
            metadata=ModelMetadata(
                file_size=len(content),
                vertex_count=triangle_count * 3,
                face_count=triangle_count,
                has_normals=True,
            ),
            errors=errors,
            warnings=warnings,
        )

    def _validate_ascii_stl(self, text: str, file_size: int) -> ModelValidationResult:
        errors: List[str] = []
        warnings: List[str] = []

        if not re.match(r"^solid\s+(\S+)?", text, re.IGNORECASE):
            errors.append('Missing "solid" keyword at start of file')

        if not re.search(r"endsolid", text, re.IGNORECASE):
            errors.append('Missing "endsolid" keyword at end of file')

        facet_count = len(re.findall(r"facet\s+normal", text, re.IGNORECASE))

        if facet_count == 0:
            errors.append("No facets found in STL file")
        elif facet_count > MAX_ASCII_FACETS:
            warnings.append(
                f"Very large ASCII STL with {facet_count:,} facets - "
                "consider using binary STL for better performance"
            )

        if facet_count > 0 and not _FACET_PATTERN.search(text):
            errors.append("Invalid facet structure detected")

        loop_count = len(re.findall(r"outer\s+loop", text, re.IGNORECASE))
        endloop_count = len(re.findall(r"endloop", text, re.IGNORECASE))
        if loop_count != endloop_count:
            errors.append("Unbalanced loop/endloop statements")

        return ModelValidationResult(
            file_type=ModelFileType.STL_ASCII,
            metadata=ModelMetadata(
                file_size=file_size,
                vertex_count=facet_count * 3,
                face_count=facet_count,
                has_normals=facet_count > 0,
            ),
            errors=errors,
            warnings=warnings,
        )

    def _validate_obj(self, text: str, file_size: int) -> ModelValidationResult:
        errors: List[str] = []
        warnings: List[str] = []

        lines = [line for line in text.split("\n") if line.strip()]

        vertex_count = 0
        face_count = 0
        normal_count = 0
        texture_count = 0

        for line in lines[:OBJ_SCAN_LINES]:
            stripped = line.strip()
            if stripped.startswith("#"):
                continue

            if stripped.startswith("v "):
                vertex_count += 1
                parts = stripped.split()
                if len(parts) < 4:
                    errors.append("Invalid vertex format detected")
                    break
                if not all(_is_number(part) for part in parts[1:4]):
                    errors.append("Invalid vertex coordinates")
                    break
            elif stripped.startswith("vn "):
                normal_count += 1
            elif stripped.startswith("vt "):
                texture_count += 1
            elif stripped.startswith("f "):
                face_count += 1
                if len(stripped.split()[1:]) < 3:
                    errors.append("Invalid face format - faces must have at least 3 vertices")
                    break

        if vertex_count == 0:
            errors.append("No vertices found in OBJ file")

        if face_count == 0:
            warnings.append("No faces defined - file contains only vertices")

        if vertex_count > MAX_OBJ_VERTICES:
            warnings.append(
                f"Very large OBJ model with {vertex_count:,} vertices - may impact performance"
            )

        return ModelValidationResult(
            file_type=ModelFileType.OBJ,
            metadata=ModelMetadata(
                file_size=file_size,
                vertex_count=vertex_count,
                face_count=face_count,
                has_normals=normal_count > 0,
                has_textures=texture_count > 0,
            ),
            errors=errors,
            warnings=warnings,
        )


def _is_number(value: str) -> bool:
    try:
        float(value)
    except ValueError:
        return False
    return True
