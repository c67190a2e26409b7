import unittest
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from examples import (
    gpreg_example01_sinus_regression,
    gpreg_example02_posterior_sampling,
    gpreg_example03_param_select,
)


class TestExamples(unittest.TestCase):
    def tearDown(self):
        plt.close("all")

    def test_01(self):
        gpreg_example01_sinus_regression.main()

    def test_02(self):
        gpreg_example02_posterior_sampling.main()

    def test_03(self):
        gpreg_example03_param_select.main()


if __name__ == "__main__":
    unittest.main()
