"""Tests for hypercube.core.geometry.Hypercube

Construction is checked against the bit-indexing rule, rotation against the
orthogonality and ordering of the per-plane rotations.
"""

import math

import numpy as np
import pytest
from hypercube.core.geometry import Hypercube, rotation_planes


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 7])
def test_vertex_and_edge_counts(n):
    cube = Hypercube(n)
    assert cube.num_vertices == 2 ** n
    assert cube.num_edges == n * 2 ** (n - 1)
    assert cube.vertices.shape == (2 ** n, n)
    assert cube.edges.shape == (n * 2 ** (n - 1), 2)


@pytest.mark.parametrize("requested", [0, -1, -10])
def test_dimensions_below_one_are_clamped(requested):
    cube = Hypercube(requested)
    assert cube.dimensions == 1
    assert cube.num_vertices == 2
    assert cube.num_edges == 1
    assert len(cube.rotation_angles) == 0


def test_vertex_coordinates_follow_index_bits():
    n = 4
    cube = Hypercube(n)
    for i in range(2 ** n):
        for d in range(n):
            expected = 1.0 if (i >> d) & 1 else -1.0
            assert cube.vertices[i, d] == expected


def test_edges_are_unique_and_differ_in_one_bit():
    cube = Hypercube(5)
    pairs = [tuple(e) for e in cube.edges.tolist()]
    assert len(pairs) == len(set(pairs))
    for i, j in pairs:
        assert j > i
        diff = i ^ j
        assert diff != 0 and diff & (diff - 1) == 0


def test_edge_order_for_square():
    # i ascending, then axis ascending
    cube = Hypercube(2)
    assert cube.edges.tolist() == [[0, 1], [0, 2], [1, 3], [2, 3]]


def test_rotation_planes_row_major():
    assert rotation_planes(4) == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
    assert rotation_planes(1) == []
    assert Hypercube(3).planes == [(0, 1), (0, 2), (1, 2)]


def test_rotation_angles_start_at_zero():
    cube = Hypercube(5)
    assert cube.rotation_angles.shape == (10,)
    assert (cube.rotation_angles == 0.0).all()


def test_rotate_records_scaled_plane_angles():
    cube = Hypercube(3)
    t = 0.9
    cube.rotate(t)
    expected = [t * 1 / 3, t * 2 / 3, t * 3 / 3]
    assert cube.rotation_angles.tolist() == pytest.approx(expected)

    # Overwritten, not accumulated
    cube.rotate(0.3)
    assert cube.rotation_angles.tolist() == pytest.approx([0.1, 0.2, 0.3])


def test_rotate_at_zero_is_identity():
    cube = Hypercube(5)
    before = cube.vertices.copy()
    cube.rotate(0.0)
    assert np.allclose(cube.vertices, before, atol=1e-9)


def test_rotate_mutates_vertices_in_place():
    cube = Hypercube(4)
    vertices = cube.vertices
    edges_before = cube.edges.copy()
    cube.rotate(1.0)
    assert cube.vertices is vertices
    assert not np.allclose(vertices, Hypercube(4).vertices)
    assert np.array_equal(cube.edges, edges_before)


def test_single_plane_rotation_of_square():
    # n=2 has one plane turning by t/2; t=pi is a quarter turn
    cube = Hypercube(2)
    cube.rotate(math.pi)
    assert cube.vertices[0].tolist() == pytest.approx([1.0, -1.0], abs=1e-12)
    assert cube.vertices[3].tolist() == pytest.approx([-1.0, 1.0], abs=1e-12)


@pytest.mark.parametrize("n", [2, 3, 5])
def test_rotation_preserves_norms(n):
    cube = Hypercube(n)
    for t in (0.2, 1.3, 4.7):
        cube.rotate(t)
        norms = np.linalg.norm(cube.vertices, axis=1)
        assert np.allclose(norms, math.sqrt(n), atol=1e-9)


def test_rotations_do_not_compose_additively():
    composed = Hypercube(3)
    composed.rotate(0.6)
    composed.rotate(1.1)

    direct = Hypercube(3)
    direct.rotate(1.7)

    assert not np.allclose(composed.vertices, direct.vertices, atol=1e-6)


def test_one_dimensional_rotate_is_noop():
    cube = Hypercube(1)
    cube.rotate(2.5)
    assert cube.vertices.tolist() == [[-1.0], [1.0]]


def _reference_rotation(vertices, t, reverse=False):
    """Plane-by-plane Givens updates, each plane acting on the previous result."""
    out = vertices.copy()
    n = out.shape[1]
    numbered = list(enumerate(rotation_planes(n)))
    if reverse:
        numbered.reverse()
    for k, (i, j) in numbered:
        angle = t * (k + 1) / n
        c, s = math.cos(angle), math.sin(angle)
        vi = out[:, i].copy()
        vj = out[:, j].copy()
        out[:, i] = vi * c - vj * s
        out[:, j] = vi * s + vj * c
    return out


@pytest.mark.parametrize("n", [3, 4])
def test_rotate_applies_planes_in_row_major_order(n):
    cube = Hypercube(n)
    t = 1.3
    expected = _reference_rotation(cube.vertices, t)
    cube.rotate(t)
    assert np.allclose(cube.vertices, expected, atol=1e-12)

    # Reversed plane order gives a different result
    reversed_order = _reference_rotation(Hypercube(n).vertices, t, reverse=True)
    assert not np.allclose(cube.vertices, reversed_order, atol=1e-6)


def test_second_rotate_starts_from_current_state():
    cube = Hypercube(3)
    cube.rotate(0.6)
    after_first = cube.vertices.copy()
    cube.rotate(1.1)
    assert np.allclose(cube.vertices, _reference_rotation(after_first, 1.1), atol=1e-12)
