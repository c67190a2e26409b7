import math
import pickle
import unittest
import warnings
import gpreg.num as gnp
import gpreg as gp
from gpreg.core.errors import (
    DimensionMismatchError,
    InvalidArgumentError,
    NotInitializedError,
    SingularMatrixError,
)


def four_point_model(sigma=0.0, factorization="cholesky"):
    model = gp.Model(
        gp.kernel.GaussianKernel(sigma=1.0), sigma=sigma, factorization=factorization
    )
    for x, y in [(1.0, 0.0), (2.0, 1.0), (3.0, 0.5), (4.0, 1.0)]:
        model.add_sample(x, y)
    return model


class TestModelConstruction(unittest.TestCase):
    def test_invalid_arguments(self):
        k = gp.kernel.GaussianKernel(sigma=1.0)
        with self.assertRaises(InvalidArgumentError):
            gp.Model(k, sigma=-1.0)
        with self.assertRaises(InvalidArgumentError):
            gp.Model(k, sigma=float("nan"))
        with self.assertRaises(InvalidArgumentError):
            gp.Model(k, factorization="qr")
        with self.assertRaises(InvalidArgumentError):
            gp.Model("not a kernel")

    def test_set_sigma(self):
        model = four_point_model()
        model.set_sigma(0.1)
        self.assertEqual(model.sigma, 0.1)
        model.sigma = 0.2
        self.assertEqual(model.sigma, 0.2)
        with self.assertRaises(InvalidArgumentError):
            model.set_sigma(-1e-3)
        self.assertEqual(model.sigma, 0.2)

    def test_str(self):
        s = str(four_point_model())
        self.assertIn("GaussianKernel", s)
        self.assertIn("Samples: 4", s)


class TestModelInitialization(unittest.TestCase):
    def test_empty_model(self):
        model = gp.Model(gp.kernel.GaussianKernel(sigma=1.0))
        with self.assertRaises(NotInitializedError):
            model.initialize()
        with self.assertRaises(NotInitializedError):
            model.predict(0.0)

    def test_query_before_initialize(self):
        model = four_point_model()
        self.assertFalse(model.is_initialized)
        with self.assertRaises(NotInitializedError):
            model.predict(1.5)
        with self.assertRaises(NotInitializedError):
            model.credible_interval(1.5)
        with self.assertRaises(NotInitializedError):
            model.log_likelihood()

    def test_initialize_returns_model(self):
        model = four_point_model()
        self.assertIs(model.initialize(), model)
        self.assertTrue(model.is_initialized)

    def test_mutations_make_model_stale(self):
        model = four_point_model().initialize()
        model.add_sample(5.0, 0.0)
        self.assertFalse(model.is_initialized)
        with self.assertRaises(NotInitializedError):
            model.predict(1.5)
        model.initialize()
        model.predict(1.5)

        model.set_sigma(1e-3)
        with self.assertRaises(NotInitializedError):
            model.variance(1.5)
        model.initialize()

        model.kernel.set_param([math.log(0.5), 0.0])
        with self.assertRaises(NotInitializedError):
            model.covariance(1.5, 2.5)
        model.initialize()
        self.assertTrue(model.is_initialized)

    def test_shared_kernel(self):
        k = gp.kernel.GaussianKernel(sigma=1.0)
        m1 = gp.Model(k)
        m2 = gp.Model(k, sigma=0.1)
        for m in (m1, m2):
            m.add_samples([0.0, 1.0], [0.0, 1.0])
            m.initialize()
        k.sigma = 2.0
        self.assertFalse(m1.is_initialized)
        self.assertFalse(m2.is_initialized)

    def test_duplicate_inputs_without_noise(self):
        model = gp.Model(gp.kernel.GaussianKernel(sigma=1.0))
        model.add_sample(1.0, 0.0)
        model.add_sample(1.0, 0.0)
        with self.assertRaises(SingularMatrixError):
            model.initialize()
        self.assertFalse(model.is_initialized)
        model.set_sigma(1e-2)
        model.initialize()

    def test_lu_and_cholesky_agree(self):
        xt = gp.misc.designs.halfopen_grid(20, 0.0, 5.0)
        m_chol = four_point_model(sigma=1e-3).initialize()
        m_lu = four_point_model(sigma=1e-3, factorization="lu").initialize()
        self.assertTrue(gnp.allclose(m_chol.predict(xt), m_lu.predict(xt)))
        self.assertTrue(gnp.allclose(m_chol.variance(xt), m_lu.variance(xt)))
        self.assertTrue(gnp.allclose(m_chol.log_likelihood(), m_lu.log_likelihood()))


class TestModelPrediction(unittest.TestCase):
    def setUp(self):
        self.model = four_point_model().initialize()

    def test_noiseless_model_reproduces_samples(self):
        X = self.model.samples.inputs
        Y = self.model.samples.labels
        self.assertTrue(gnp.allclose(self.model.predict(X), Y, atol=1e-8))
        self.assertTrue(gnp.allclose(self.model.variance(X), 0.0, atol=1e-8))

    def test_single_point_and_batch_shapes(self):
        m, v = self.model.predict(1.5, return_variance=True)
        self.assertEqual(m.shape, (1,))
        self.assertIsInstance(v, float)
        self.assertIsInstance(self.model.variance(1.5), float)
        self.assertIsInstance(self.model.covariance(1.5, 2.5), float)
        self.assertIsInstance(self.model.credible_interval(1.5), float)

        xt = [[0.5], [1.5], [2.5]]
        m, v = self.model.predict(xt, return_variance=True)
        self.assertEqual(m.shape, (3, 1))
        self.assertEqual(v.shape, (3,))
        self.assertEqual(self.model.predict([0.5, 1.5, 2.5]).shape, (3, 1))
        self.assertEqual(self.model.covariance(xt).shape, (3, 3))
        self.assertEqual(self.model.covariance(xt, [[0.0], [1.0]]).shape, (3, 2))

    def test_credible_interval_identity(self):
        xt = gp.misc.designs.halfopen_grid(50, 0.0, 5.0)
        ci = self.model.credible_interval(xt)
        for i, x in enumerate(xt):
            w = self.model.credible_interval(x)
            self.assertEqual(2.0 * math.sqrt(self.model(x, x)) - w, 0.0)
            # batched and single evaluations differ by round-off only
            self.assertAlmostEqual(w, ci[i], delta=1e-6)

    def test_covariance_consistency(self):
        xt = gp.misc.designs.halfopen_grid(10, 0.0, 5.0)
        K = self.model.covariance(xt)
        self.assertTrue(gnp.allclose(K, K.T))
        self.assertTrue(gnp.allclose(gnp.diag(K), self.model.variance(xt)))
        self.assertTrue(gnp.allclose(self.model.covariance(xt, xt), K))
        self.assertAlmostEqual(self.model(xt[2], xt[5]), K[2, 5])
        self.assertAlmostEqual(self.model(xt[5], xt[2]), K[2, 5])

    def test_variance_is_bounded_by_prior(self):
        xt = gp.misc.designs.halfopen_grid(50, -2.0, 7.0)
        v = self.model.variance(xt)
        self.assertTrue(gnp.all(v >= 0.0))
        self.assertTrue(gnp.all(v <= 1.0 + 1e-12))

    def test_query_dimension_mismatch(self):
        with self.assertRaises(DimensionMismatchError):
            self.model.predict([[0.0, 1.0]])

    def test_multi_output(self):
        model = gp.Model(gp.kernel.GaussianKernel(sigma=1.0), sigma=1e-6)
        x = [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [1.0, 1.0]]
        y = [[0.0, 1.0], [1.0, 2.0], [1.0, 0.0], [2.0, 1.0]]
        model.add_samples(x, y)
        model.initialize()
        zpm = model.predict([[0.5, 0.5], [0.0, 0.0]])
        self.assertEqual(zpm.shape, (2, 2))
        self.assertTrue(gnp.allclose(zpm[1], [0.0, 1.0], atol=1e-4))
        self.assertEqual(model.predict([0.5, 0.5]).shape, (2,))
        self.assertEqual(model.log_likelihood().shape, (2,))


class TestNegativeVariances(unittest.TestCase):
    def test_clamped_with_warning(self):
        v = gnp.array([1.0, -1e-14, -1e-3])
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            out = gp.core.kriging.clamp_variances(v)
        self.assertTrue(gnp.array_equal(out, [1.0, 0.0, 0.0]))
        self.assertEqual(len(w), 1)
        self.assertTrue(issubclass(w[0].category, RuntimeWarning))

    def test_round_off_clamped_silently(self):
        v = gnp.array([1.0, -1e-14])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            out = gp.core.kriging.clamp_variances(v)
        self.assertTrue(gnp.array_equal(out, [1.0, 0.0]))


class TestModelPickling(unittest.TestCase):
    def test_round_trip(self):
        model = four_point_model(sigma=1e-4).initialize()
        xt = gp.misc.designs.halfopen_grid(10, 0.0, 5.0)
        zpm = model.predict(xt)

        other = pickle.loads(pickle.dumps(model))
        self.assertFalse(other.is_initialized)
        self.assertEqual(other.n_samples, 4)
        self.assertEqual(other.sigma, 1e-4)
        other.initialize()
        self.assertTrue(gnp.allclose(other.predict(xt), zpm))


if __name__ == "__main__":
    unittest.main()
