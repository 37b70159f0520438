import numpy as np
import pytest

from orrery.sphere import SphereMesh, generate_sphere


@pytest.fixture
def mesh() -> SphereMesh:
    return generate_sphere(1.0, 36, 18)


def test_vertex_arrays_agree_in_length(mesh):
    assert mesh.vertices.shape[1] == 3
    assert mesh.normals.shape == mesh.vertices.shape
    assert mesh.tex_coords.shape == (mesh.vertices.shape[0], 2)
    assert mesh.vertices.shape[0] == (36 + 1) * (18 + 1)


@pytest.mark.parametrize("radius", [1.0, 3.0, 0.3])
def test_vertices_lie_on_sphere(radius):
    sphere = generate_sphere(radius, 12, 6)
    lengths = np.linalg.norm(sphere.vertices, axis=1)
    np.testing.assert_allclose(lengths, radius)


def test_normals_are_unit_and_point_outward():
    sphere = generate_sphere(2.5, 10, 8)
    np.testing.assert_allclose(np.linalg.norm(sphere.normals, axis=1), 1.0)
    np.testing.assert_allclose(sphere.normals * 2.5, sphere.vertices)


def test_poles_are_first_and_last_rows(mesh):
    np.testing.assert_allclose(mesh.vertices[0], [0, 0, 1], atol=1e-12)
    np.testing.assert_allclose(mesh.vertices[-1], [0, 0, -1], atol=1e-12)


def test_tex_coords_span_unit_square(mesh):
    assert mesh.tex_coords.min() == 0.0
    assert mesh.tex_coords.max() == 1.0
    np.testing.assert_allclose(mesh.tex_coords[0], [0, 0])
    np.testing.assert_allclose(mesh.tex_coords[-1], [1, 1])


def test_indices_reference_existing_vertices(mesh):
    assert mesh.indices.shape[1] == 3
    assert mesh.indices.max() < mesh.vertices.shape[0]
    assert mesh.indices.min() == 0


def test_index_count_matches_indices(mesh):
    assert mesh.index_count == mesh.indices.shape[0] * 3


def test_pole_stacks_have_one_triangle_per_sector():
    sectors, stacks = 8, 4
    sphere = generate_sphere(1.0, sectors, stacks)
    first_row_end = sectors + 1
    top = [tri for tri in sphere.indices if tri.min() < first_row_end]
    assert len(top) == sectors


def test_triangles_are_not_degenerate(mesh):
    a, b, c = (mesh.vertices[mesh.indices[:, k]] for k in range(3))
    areas = np.linalg.norm(np.cross(b - a, c - a), axis=1)
    assert (areas > 0).all()


def test_single_stack_has_no_triangles():
    sphere = generate_sphere(1.0, 4, 1)
    assert sphere.indices.shape == (0, 3)


@pytest.mark.parametrize(
    "radius, sectors, stacks",
    [(0.0, 4, 4), (-1.0, 4, 4), (1.0, 0, 4), (1.0, 4, 0)],
)
def test_invalid_parameters_raise(radius, sectors, stacks):
    with pytest.raises(ValueError):
        generate_sphere(radius, sectors, stacks)