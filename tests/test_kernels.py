import numpy as np
import pytest

from rbf_approx import InvalidParameter, Kernel, apply_kernel, check_epsilon, distance_matrix


class TestKernelBasic:
    @pytest.mark.parametrize("kernel", list(Kernel))
    def test_finite_at_zero(self, kernel):
        assert np.isfinite(kernel(0.0, 0.5))

    @pytest.mark.parametrize("kernel", list(Kernel))
    @pytest.mark.parametrize("epsilon", [0.0, -1.0, float("nan")])
    def test_rejects_bad_epsilon(self, kernel, epsilon):
        with pytest.raises(InvalidParameter):
            kernel(1.0, epsilon)

    def test_elementwise_over_arrays(self):
        r = np.array([[0.0, 1.0], [2.0, 3.0]])
        out = Kernel.GAUSSIAN(r, 1.0)
        assert out.shape == r.shape


class TestKernelCorrectness:
    def test_values(self):
        r, eps = 2.0, 0.5
        assert Kernel.GAUSSIAN(r, eps) == pytest.approx(np.exp(-1.0))
        assert Kernel.MULTIQUADRIC(r, eps) == pytest.approx(np.sqrt(2.0))
        assert Kernel.INVERSE_QUADRATIC(r, eps) == pytest.approx(0.5)
        assert Kernel.INVERSE_MULTIQUADRIC(r, eps) == pytest.approx(1.0 / np.sqrt(2.0))

    @pytest.mark.parametrize(
        "kernel",
        [Kernel.GAUSSIAN, Kernel.INVERSE_QUADRATIC, Kernel.INVERSE_MULTIQUADRIC],
    )
    def test_decaying_kernels_non_increasing(self, kernel):
        values = kernel(np.linspace(0.0, 20.0, 101), 0.3)
        assert np.all(np.diff(values) <= 0)

    def test_multiquadric_non_decreasing(self):
        values = Kernel.MULTIQUADRIC(np.linspace(0.0, 20.0, 101), 0.3)
        assert np.all(np.diff(values) >= 0)

    def test_apply_kernel_keeps_shape_and_symmetry(self):
        D = distance_matrix([[0.0, 0.0], [1.0, 2.0], [3.0, -1.0]])
        K = apply_kernel(D, "inverse-quadratic", 0.7)
        assert K.shape == D.shape
        np.testing.assert_array_equal(K, K.T)
        np.testing.assert_allclose(np.diag(K), 1.0)


class TestKernelNames:
    @pytest.mark.parametrize("kernel", list(Kernel))
    def test_from_value(self, kernel):
        assert Kernel.from_name(kernel.value) is kernel

    def test_tolerates_underscores_and_case(self):
        assert Kernel.from_name("Inverse_MultiQuadric") is Kernel.INVERSE_MULTIQUADRIC

    def test_member_passes_through(self):
        assert Kernel.from_name(Kernel.GAUSSIAN) is Kernel.GAUSSIAN

    @pytest.mark.parametrize("name", ["thin-plate", "", None, 3])
    def test_unknown(self, name):
        with pytest.raises(InvalidParameter):
            Kernel.from_name(name)


class TestCheckEpsilon:
    @pytest.mark.parametrize("epsilon", [None, "0.5", float("inf")])
    def test_non_numeric_or_infinite(self, epsilon):
        with pytest.raises(InvalidParameter):
            check_epsilon(epsilon)

    def test_kernel_call_with_none(self):
        with pytest.raises(InvalidParameter):
            Kernel.MULTIQUADRIC(1.0, None)

    def test_accepts_positive(self):
        check_epsilon(0.01)
        check_epsilon(np.float32(2.0))
