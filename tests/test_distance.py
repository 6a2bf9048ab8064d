import numpy as np
import pytest

from rbf_approx import DimensionMismatch, InvalidParameter, cross_distance, distance, distance_matrix


class TestDistance:
    def test_known_value(self):
        assert distance([0.0, 0.0], [3.0, 4.0]) == pytest.approx(5.0)

    def test_symmetric_and_zero_on_self(self):
        rng = np.random.default_rng(7)
        for _ in range(10):
            p, q = rng.normal(size=4), rng.normal(size=4)
            assert distance(p, q) == distance(q, p)
            assert distance(p, p) == 0.0

    def test_scalars_are_1d_points(self):
        assert distance(1.0, 3.5) == pytest.approx(2.5)

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatch):
            distance([0.0, 1.0], [0.0, 1.0, 2.0])


class TestDistanceMatrix:
    def test_invariants(self):
        rng = np.random.default_rng(0)
        D = distance_matrix(rng.normal(size=(12, 3)))
        assert D.shape == (12, 12)
        np.testing.assert_array_equal(D, D.T)
        np.testing.assert_array_equal(np.diag(D), 0.0)
        assert np.all(D >= 0)

    def test_matches_pairwise_distance(self):
        points = [[0.0, 0.0], [1.0, 1.0], [2.0, -1.0]]
        D = distance_matrix(points)
        for i, p in enumerate(points):
            for j, q in enumerate(points):
                assert D[i, j] == pytest.approx(distance(p, q))

    def test_single_point(self):
        np.testing.assert_array_equal(distance_matrix([[1.0, 2.0]]), [[0.0]])

    def test_empty(self):
        with pytest.raises(InvalidParameter):
            distance_matrix([])

    def test_ragged(self):
        with pytest.raises(DimensionMismatch):
            distance_matrix([[0.0, 1.0], [0.0, 1.0, 2.0]])

    def test_cross_distance(self):
        D = cross_distance([[0.0], [2.0]], [[1.0], [4.0], [0.0]])
        np.testing.assert_allclose(D, [[1.0, 4.0, 0.0], [1.0, 2.0, 2.0]])

    def test_cross_distance_dimension_mismatch(self):
        with pytest.raises(DimensionMismatch):
            cross_distance([[0.0, 1.0]], [[1.0]])
