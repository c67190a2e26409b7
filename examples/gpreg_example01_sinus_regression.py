"""
Regression of a sine function with a Gaussian kernel.

Trains a model on 20 samples of sin(x) over [0, 2 pi), with a tiny noise level,
predicts on a grid extending beyond the training range and checks that
the credible interval matches 2 sqrt(posterior variance).

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import math
import gpreg.num as gnp
import gpreg as gp
import gpreg.misc.plotutils


def generate_data():
    """
    Data generation.

    Returns
    -------
    tuple
        (xt, zt): target data
        (xi, zi): input dataset
    """
    ni = 20
    xi = gp.misc.designs.halfopen_grid(ni, 0.0, 2.0 * math.pi)
    zi = gnp.sin(xi)

    nt = 50
    xt = gp.misc.designs.halfopen_grid(nt, 0.0, 2.6 * math.pi)
    zt = gnp.sin(xt)

    return xt, zt, xi, zi


def main():
    xt, zt, xi, zi = generate_data()

    kernel = gp.kernel.GaussianKernel(sigma=0.5)
    model = gp.Model(kernel, sigma=1e-5)
    for x, z in zip(xi, zi):
        model.add_sample(x, z)
    model.initialize()
    print(model)

    zpm, zpv = model.predict(xt, return_variance=True)
    ci = model.credible_interval(xt)

    max_gap = max(
        abs(2.0 * math.sqrt(model(x, x)) - model.credible_interval(x)) for x in xt
    )
    print(f"max |2 sqrt(k(x, x)) - ci(x)| = {max_gap:.3g}")
    assert max_gap == 0.0
    print(f"max |zpm - zt| on the training range = "
          f"{gnp.max(gnp.abs(zpm[:38] - zt[:38])):.3g}")
    print(f"log-likelihood = {model.log_likelihood()}")

    fig = gp.misc.plotutils.Figure(isinteractive=True)
    fig.plot(xt, zt, "k", linewidth=1, linestyle=(0, (5, 5)))
    fig.plotgp(xt, zpm, ci)
    fig.plotdata(xi, zi)
    fig.xylabels("$x$", "$z$")
    fig.title("Posterior mean and credible interval")
    fig.show(grid=True, legend=True, legend_fontsize=9)

    return model, zpm, zpv


if __name__ == "__main__":
    main()
