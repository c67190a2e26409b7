import math
import unittest
import gpreg.num as gnp
import gpreg as gp
from gpreg.core.errors import DimensionMismatchError, InvalidArgumentError


class TestGaussianKernel(unittest.TestCase):
    def setUp(self):
        self.x = gnp.array([[0.0], [1.0], [2.5]])

    def test_values(self):
        k = gp.kernel.GaussianKernel(sigma=1.0)
        self.assertAlmostEqual(k.evaluate(0.0, 1.0), math.exp(-0.5))
        self.assertAlmostEqual(k.evaluate(1.0, 1.0), 1.0)

        k = gp.kernel.GaussianKernel(sigma=0.5, scale=2.0)
        self.assertAlmostEqual(k.evaluate([0.0, 0.0], [0.3, 0.4]), 2.0 * math.exp(-0.5))

    def test_matrix_is_symmetric_with_prior_variance_diagonal(self):
        k = gp.kernel.GaussianKernel(sigma=0.7, scale=3.0)
        K = k(self.x)
        self.assertEqual(K.shape, (3, 3))
        self.assertTrue(gnp.allclose(K, K.T))
        self.assertTrue(gnp.allclose(gnp.diag(K), 3.0))
        self.assertTrue(gnp.allclose(k(self.x, None, pairwise=True), 3.0))

    def test_cross_covariance(self):
        k = gp.kernel.GaussianKernel(sigma=1.0)
        y = gnp.array([[0.5], [1.0]])
        K = k(self.x, y)
        self.assertEqual(K.shape, (3, 2))
        self.assertAlmostEqual(K[1, 1], 1.0)
        self.assertAlmostEqual(K[0, 0], math.exp(-0.125))

    def test_pairwise(self):
        k = gp.kernel.GaussianKernel(sigma=1.0)
        y = gnp.array([[0.0], [0.0], [0.0]])
        v = k(self.x, y, pairwise=True)
        self.assertEqual(v.shape, (3,))
        self.assertTrue(gnp.allclose(v, gnp.diag(k(self.x, y))))

    def test_column_mismatch(self):
        k = gp.kernel.GaussianKernel(sigma=1.0)
        with self.assertRaises(DimensionMismatchError):
            k(self.x, gnp.array([[0.0, 1.0]]))

    def test_invalid_parameters(self):
        with self.assertRaises(InvalidArgumentError):
            gp.kernel.GaussianKernel(sigma=0.0)
        with self.assertRaises(InvalidArgumentError):
            gp.kernel.GaussianKernel(sigma=1.0, scale=-1.0)
        with self.assertRaises(InvalidArgumentError):
            gp.kernel.GaussianKernel(sigma="a")


class TestOtherKernels(unittest.TestCase):
    def test_exponential(self):
        k = gp.kernel.ExponentialKernel(rho=2.0, scale=1.5)
        self.assertAlmostEqual(k.evaluate(0.0, 3.0), 1.5 * math.exp(-1.5))

    def test_matern_half_integer_profiles(self):
        # nu = 1/2: exp(-sqrt(2) h), nu = 3/2: (1 + sqrt(6) h) exp(-sqrt(6) h)
        h = 0.37
        k0 = gp.kernel.MaternKernel(p=0, rho=1.0)
        self.assertAlmostEqual(k0.evaluate(0.0, h), math.exp(-math.sqrt(2.0) * h))
        k1 = gp.kernel.MaternKernel(p=1, rho=1.0)
        c = math.sqrt(6.0)
        self.assertAlmostEqual(k1.evaluate(0.0, h), (1.0 + c * h) * math.exp(-c * h))

    def test_matern_p0_is_exponential(self):
        x = gnp.array([[0.0], [0.4], [1.3]])
        km = gp.kernel.MaternKernel(p=0, rho=math.sqrt(2.0))
        ke = gp.kernel.ExponentialKernel(rho=1.0)
        self.assertTrue(gnp.allclose(km(x), ke(x)))

    def test_matern_invalid_order(self):
        with self.assertRaises(InvalidArgumentError):
            gp.kernel.MaternKernel(p=1.5, rho=1.0)
        with self.assertRaises(InvalidArgumentError):
            gp.kernel.MaternKernel(p=-1, rho=1.0)

    def test_rational_quadratic_large_alpha(self):
        x = gnp.array([[0.0], [0.3], [1.1]])
        krq = gp.kernel.RationalQuadraticKernel(sigma=0.8, alpha=1e8)
        kg = gp.kernel.GaussianKernel(sigma=0.8)
        self.assertTrue(gnp.allclose(krq(x), kg(x), rtol=1e-6))

    def test_periodic(self):
        k = gp.kernel.PeriodicKernel(period=2.0, sigma=0.5, scale=1.7)
        self.assertAlmostEqual(k.evaluate(0.3, 2.3), 1.7)
        self.assertAlmostEqual(
            k.evaluate(0.0, 0.5), 1.7 * math.exp(-2.0 * math.sin(math.pi / 4) ** 2 / 0.25)
        )

    def test_white(self):
        x = gnp.array([[0.0], [1.0], [1.0]])
        K = gp.kernel.WhiteKernel(scale=0.1)(x)
        expected = 0.1 * gnp.array([[1.0, 0.0, 0.0], [0.0, 1.0, 1.0], [0.0, 1.0, 1.0]])
        self.assertTrue(gnp.allclose(K, expected))


class TestKernelAlgebraAndParameters(unittest.TestCase):
    def test_sum_and_product(self):
        x = gnp.array([[0.0], [0.5], [2.0]])
        k1 = gp.kernel.GaussianKernel(sigma=1.0)
        k2 = gp.kernel.ExponentialKernel(rho=0.5, scale=0.3)
        self.assertTrue(gnp.allclose((k1 + k2)(x), k1(x) + k2(x)))
        self.assertTrue(gnp.allclose((k1 * k2)(x), k1(x) * k2(x)))
        self.assertTrue(
            gnp.allclose((k1 + k2)(x, None, pairwise=True), gnp.diag(k1(x) + k2(x)))
        )

    def test_log_parameters(self):
        k = gp.kernel.GaussianKernel(sigma=2.0, scale=3.0)
        self.assertEqual(k.n_params, 2)
        self.assertTrue(gnp.allclose(k.get_param(), [math.log(2.0), math.log(3.0)]))
        k.set_param([0.0, math.log(5.0)])
        self.assertAlmostEqual(k.sigma, 1.0)
        self.assertAlmostEqual(k.scale, 5.0)
        with self.assertRaises(DimensionMismatchError):
            k.set_param([0.0])

    def test_composite_parameters(self):
        k1 = gp.kernel.GaussianKernel(sigma=1.0)
        k2 = gp.kernel.WhiteKernel(scale=0.5)
        k = k1 + k2
        self.assertEqual(k.n_params, 3)
        k.set_param([math.log(2.0), 0.0, math.log(0.25)])
        self.assertAlmostEqual(k1.sigma, 2.0)
        self.assertAlmostEqual(k2.scale, 0.25)
        self.assertTrue(gnp.allclose(k.get_param(), [math.log(2.0), 0.0, math.log(0.25)]))

    def test_composite_rejection_leaves_children_unchanged(self):
        k1 = gp.kernel.GaussianKernel(sigma=1.0)
        k2 = gp.kernel.WhiteKernel(scale=0.5)
        k = k1 + k2
        # exp(-inf) = 0 is not a valid scale for the second child
        with self.assertRaises(InvalidArgumentError):
            k.set_param([math.log(2.0), 0.0, float("-inf")])
        self.assertEqual(k1.sigma, 1.0)
        self.assertEqual(k2.scale, 0.5)
        with self.assertRaises(InvalidArgumentError):
            (k1 * k2).set_param([math.log(3.0), float("nan"), 0.0])
        self.assertEqual(k1.sigma, 1.0)

    def test_repr(self):
        k = gp.kernel.GaussianKernel(sigma=2.0) * gp.kernel.WhiteKernel()
        self.assertEqual(repr(k), "(GaussianKernel(sigma=2, scale=1) * WhiteKernel(scale=1))")


if __name__ == "__main__":
    unittest.main()
