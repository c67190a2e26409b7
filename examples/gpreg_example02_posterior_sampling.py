"""
Posterior sample paths of a noiseless model.

Four observations, a Gaussian kernel and sigma = 0. Draws pass through
the observations: at the grid points 1, 2, 3 and 4 every draw equals
the posterior mean.

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gpreg.num as gnp
import gpreg as gp
import gpreg.misc.plotutils


def main():
    gnp.set_seed(1234)

    kernel = gp.kernel.GaussianKernel(sigma=1.0)
    model = gp.Model(kernel, sigma=0.0)
    for x, z in [(1.0, 0.0), (2.0, 1.0), (3.0, 0.5), (4.0, 1.0)]:
        model.add_sample(x, z)
    model.initialize()

    # x_i = 5 i / 50, so that x_10, x_20, x_30, x_40 are the observations
    xt = gp.misc.designs.halfopen_grid(50, 0.0, 5.0)
    nb_samples = 10
    ztsim = model.sample_posterior(xt, nb_samples)
    zpm = model.predict(xt)

    landmarks = [10, 20, 30, 40]
    gap = gnp.max(gnp.abs(ztsim[landmarks, :] - zpm[landmarks, :]))
    print(f"max |draw - mean| at the observations = {gap:.3g}")

    factor, mean, cov = model.posterior_sqrt_factor(xt)
    print(f"kept {factor.shape[1]} of {xt.shape[0]} eigenpairs")
    print(f"||factor factor^T - cov||_F = "
          f"{gnp.norm(gnp.matmul(factor, factor.T) - cov):.3g}")

    fig = gp.misc.plotutils.plot_posterior(model, xt, ztsim=ztsim, show=False)
    fig.title(f"{nb_samples} posterior draws")
    fig.show(grid=True, legend=True, legend_fontsize=9)

    return ztsim


if __name__ == "__main__":
    main()
