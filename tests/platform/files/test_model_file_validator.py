"""Tests for STL and OBJ structure validation."""

import struct

import pytest

from lablink.platform.files.application.validators import ModelFileType, ModelFileValidator


def binary_stl(triangles: int, first=(0.0,) * 12, declared=None) -> bytes:
    header = b"binary stl export".ljust(80, b"\x00")
    body = b""
    for index in range(triangles):
        values = first if index == 0 else (0.0,) * 12
        body += struct.pack("<12fH", *values, 0)
    count = triangles if declared is None else declared
    return header + struct.pack("<I", count) + body


ASCII_STL = b"""solid crown
facet normal 0 0 1
  outer loop
    vertex 0 0 0
    vertex 1 0 0
    vertex 0 1 0
  endloop
endfacet
endsolid crown
"""


@pytest.fixture
def validator():
    return ModelFileValidator()


class TestBinaryStl:
    def test_valid_binary(self, validator):
        result = validator.validate("crown.stl", binary_stl(12))

        assert result.valid
        assert result.file_type == ModelFileType.STL_BINARY
        assert result.metadata.face_count == 12
        assert result.metadata.vertex_count == 36
        assert result.summary() == "STL BINARY • 36 vertices • 12 faces"

    def test_too_small(self, validator):
        result = validator.validate("crown.stl", b"\x00" * 50)
        assert result.errors == ["File too small to be a valid STL file"]

    def test_size_mismatch(self, validator):
        result = validator.validate("crown.stl", binary_stl(2, declared=3))

        assert not result.valid
        assert result.errors[0].startswith("File size mismatch: expected 234 bytes for 3 triangles")

    def test_zero_triangles(self, validator):
        result = validator.validate("crown.stl", binary_stl(0))
        assert "STL file contains zero triangles" in result.errors

    def test_non_finite_geometry(self, validator):
        values = (float("nan"),) + (0.0,) * 11
        result = validator.validate("crown.stl", binary_stl(1, first=values))
        assert "Invalid geometry data detected - file may be corrupted" in result.errors


class TestAsciiStl:
    def test_valid_ascii(self, validator):
        result = validator.validate("crown.STL", ASCII_STL)

        assert result.valid
        assert result.file_type == ModelFileType.STL_ASCII
        assert result.metadata.face_count == 1

    def test_missing_endsolid_and_unbalanced_loops(self, validator):
        content = ASCII_STL.replace(b"endsolid crown", b"").replace(b"endloop", b"")
        result = validator.validate("crown.stl", content)

        assert 'Missing "endsolid" keyword at end of file' in result.errors
        assert "Unbalanced loop/endloop statements" in result.errors

    def test_no_facets(self, validator):
        result = validator.validate("crown.stl", b"solid empty\nendsolid empty\n")
        assert result.errors == ["No facets found in STL file"]


class TestObj:
    def test_valid_obj(self, validator):
        content = b"v 0 0 0\nv 1 0 0\nv 0 1 0\nvn 0 0 1\nvt 0 0\nf 1 2 3\n"
        result = validator.validate("arch.obj", content)

        assert result.valid
        assert result.metadata.vertex_count == 3
        assert result.metadata.face_count == 1
        assert result.metadata.has_normals
        assert result.metadata.has_textures

    def test_vertices_only_warns(self, validator):
        result = validator.validate("cloud.obj", b"v 0 0 0\nv 1 1 1\n")

        assert result.valid
        assert result.warnings == ["No faces defined - file contains only vertices"]

    @pytest.mark.parametrize(
        "content, message",
        [
            (b"v 0 0\n", "Invalid vertex format detected"),
            (b"v 0 x 0\n", "Invalid vertex coordinates"),
            (b"v 0 0 0\nf 1 2\n", "Invalid face format - faces must have at least 3 vertices"),
            (b"# comment only\n", "No vertices found in OBJ file"),
        ],
    )
    def test_invalid_obj(self, validator, content, message):
        result = validator.validate("bad.obj", content)
        assert message in result.errors


def test_unsupported_extension(validator):
    result = validator.validate("model.ply", b"ply\n")

    assert result.file_type == ModelFileType.UNKNOWN
    assert result.errors == ["File must have .stl or .obj extension"]
