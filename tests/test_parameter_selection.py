import math
import unittest
import gpreg.num as gnp
import gpreg as gp
from gpreg.kernel.parameter_selection import (
    get_model_param,
    set_model_param,
    make_selection_criterion,
    select_parameters_with_ml,
)


def noisy_sinus_model(sigma=1e-1, rho=2.0):
    gnp.set_seed(11)
    xi = gp.misc.designs.regulargrid(1, 30, [[0.0], [6.0]])
    zi = gnp.sin(xi) + 0.05 * gnp.randn(30, 1)
    model = gp.Model(gp.kernel.MaternKernel(p=2, rho=rho), sigma=sigma)
    model.add_samples(xi, zi)
    return model.initialize()


class TestParameterVector(unittest.TestCase):
    def test_get_set(self):
        model = noisy_sinus_model(sigma=0.1, rho=2.0)
        p = get_model_param(model)
        self.assertTrue(gnp.allclose(p, [math.log(2.0), 0.0, math.log(0.1)]))
        self.assertEqual(get_model_param(model, optimize_sigma=False).shape, (2,))

        set_model_param(model, [0.0, math.log(2.0), math.log(0.01)])
        self.assertAlmostEqual(model.kernel.rho, 1.0)
        self.assertAlmostEqual(model.kernel.scale, 2.0)
        self.assertAlmostEqual(model.sigma, 0.01)
        self.assertTrue(model.is_initialized)

    def test_zero_noise_uses_floor(self):
        model = noisy_sinus_model(sigma=0.0)
        p = get_model_param(model)
        self.assertAlmostEqual(p[-1], math.log(gp.config.get_config().sigma_floor))


class TestSelectionCriterion(unittest.TestCase):
    def test_criterion_is_negative_log_likelihood(self):
        model = noisy_sinus_model()
        criterion, gradient = make_selection_criterion(model)
        p = get_model_param(model)
        J = criterion(p)
        self.assertAlmostEqual(J, -float(gnp.sum(model.log_likelihood())))
        g = gradient(p)
        self.assertEqual(g.shape, p.shape)
        self.assertTrue(gnp.all(gnp.isfinite(g)))

    def test_linalg_failures_map_to_inf(self):
        model = gp.Model(gp.kernel.GaussianKernel(sigma=1.0))
        model.add_samples([0.0, 0.0], [1.0, 1.0])
        criterion, _ = make_selection_criterion(model, optimize_sigma=False)
        self.assertEqual(criterion(gnp.array([0.0, 0.0])), math.inf)


class TestSelectParametersWithML(unittest.TestCase):
    def test_improves_likelihood(self):
        model = noisy_sinus_model(sigma=1.0, rho=0.1)
        J0 = -float(gnp.sum(model.log_likelihood()))
        p0 = get_model_param(model)
        model, info = select_parameters_with_ml(model, info=True)
        self.assertTrue(model.is_initialized)
        J1 = -float(gnp.sum(model.log_likelihood()))
        self.assertLess(J1, J0)
        self.assertAlmostEqual(J1, info.fun, places=6)
        self.assertEqual(len(info.history_params), len(info.history_criterion))
        self.assertTrue(gnp.allclose(info.initial_params, p0))
        self.assertTrue(gnp.allclose(get_model_param(model), info.x))

    def test_fixed_noise(self):
        model = noisy_sinus_model(sigma=0.05**2)
        model = select_parameters_with_ml(model, optimize_sigma=False)
        self.assertEqual(model.sigma, 0.05**2)
        self.assertTrue(model.is_initialized)

    def test_unknown_method(self):
        model = noisy_sinus_model()
        with self.assertRaises(ValueError):
            select_parameters_with_ml(model, method="nelder-mead")


if __name__ == "__main__":
    unittest.main()
