"""Tests for OBJ export."""

import pytest

from mesh_primitives.generators import generate_cuboid, generate_sphere
from mesh_primitives.io.obj_exporter import export_obj, validate_obj_file
from mesh_primitives.models.geometry import Vector3
from mesh_primitives.models.mesh import SolidMesh, WireframeMesh


def _records(path, tag):
    with open(path, encoding='utf-8') as f:
        return [line.split() for line in f if line.split()[:1] == [tag]]


def test_export_solid(tmp_path):
    mesh = SolidMesh()
    generate_sphere(mesh, 1.0, depth=1)
    path = tmp_path / "sphere.obj"

    stats = export_obj(mesh, str(path), comment="unit sphere")

    assert stats.total_vertices == 96
    assert stats.total_normals == 96
    assert stats.total_faces == 32
    assert stats.total_lines == 0
    assert stats.file_size_bytes == path.stat().st_size
    assert len(_records(path, 'v')) == 96
    assert len(_records(path, 'vn')) == 96
    assert _records(path, 'f')[0] == ['f', '1//1', '2//2', '3//3']
    assert "# unit sphere" in path.read_text(encoding='utf-8')
    assert validate_obj_file(str(path)) == []


def test_export_wireframe(tmp_path):
    mesh = WireframeMesh()
    generate_cuboid(mesh, Vector3(2.0, 2.0, 2.0))
    path = tmp_path / "box.obj"

    stats = export_obj(mesh, str(path))

    assert stats.total_lines == 12
    assert stats.total_faces == 0
    lines = _records(path, 'l')
    assert len(lines) == 12
    assert lines[0] == ['l', '2', '3']
    assert _records(path, 'vn') == []
    assert _records(path, 'v')[0] == ['v', '-1.000000', '-1.000000', '-1.000000']
    assert validate_obj_file(str(path)) == []


def test_export_precision(tmp_path):
    mesh = SolidMesh()
    generate_cuboid(mesh, Vector3(1.0, 1.0, 1.0))
    path = tmp_path / "cube.obj"

    export_obj(mesh, str(path), vertex_precision=2, normal_precision=1)

    assert _records(path, 'v')[0] == ['v', '0.50', '-0.50', '0.50']
    assert _records(path, 'vn')[0] == ['vn', '1.0', '0.0', '0.0']


def test_export_creates_directories(tmp_path):
    mesh = SolidMesh()
    generate_cuboid(mesh, Vector3(1.0, 1.0, 1.0))
    path = tmp_path / "nested" / "dir" / "cube.obj"

    export_obj(mesh, str(path))

    assert path.exists()


def test_export_rejects_invalid_mesh(tmp_path):
    mesh = SolidMesh()
    generate_cuboid(mesh, Vector3(1.0, 1.0, 1.0))
    mesh.normals.pop()
    path = tmp_path / "broken.obj"

    with pytest.raises(ValueError):
        export_obj(mesh, str(path))
    assert not path.exists()


def test_validate_missing_file(tmp_path):
    errors = validate_obj_file(str(tmp_path / "missing.obj"))

    assert len(errors) == 1
    assert "does not exist" in errors[0]


def test_validate_detects_dangling_references(tmp_path):
    path = tmp_path / "bad.obj"
    path.write_text(
        "v 0 0 0\nv 1 0 0\nvn 0 0 1\nf 1//1 2//1 3//2\n",
        encoding='utf-8',
    )

    errors = validate_obj_file(str(path))

    assert any("vertex 3" in e for e in errors)
    assert any("normal 2" in e for e in errors)


@pytest.mark.parametrize("element,message", [
    ("f 0//1 1//1 2//1", "Invalid vertex reference 0"),
    ("f 1//0 2//1 3//1", "Invalid normal reference 0"),
    ("l -1 1", "Invalid vertex reference -1"),
])
def test_validate_rejects_references_below_one(tmp_path, element, message):
    path = tmp_path / "zero.obj"
    path.write_text(
        f"v 0 0 0\nv 1 0 0\nv 0 1 0\nvn 0 0 1\n{element}\n",
        encoding='utf-8',
    )

    errors = validate_obj_file(str(path))

    assert any(message in e for e in errors)


def test_validate_empty_file(tmp_path):
    path = tmp_path / "empty.obj"
    path.write_text("# nothing\n", encoding='utf-8')

    errors = validate_obj_file(str(path))

    assert "File contains no vertices" in errors
    assert "File contains no faces or lines" in errors
