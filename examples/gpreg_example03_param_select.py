"""
Maximum likelihood selection of kernel parameters and noise level.

Noisy observations of a damped oscillation are fitted with a Matérn
3/2 kernel; the length scale, prior variance and noise level are
selected by minimizing the negative log-likelihood.

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gpreg.num as gnp
import gpreg as gp
import gpreg.misc.plotutils


def damped_oscillation(x):
    return gnp.exp(-0.3 * x) * gnp.sin(3.0 * x)


def generate_data():
    """
    Data generation.

    Returns
    -------
    tuple
        (xt, zt): target data
        (xi, zi): noisy input dataset
    """
    dim = 1
    box = [[0.0], [5.0]]
    xt = gp.misc.designs.regulargrid(dim, 200, box)
    zt = damped_oscillation(xt)

    gnp.set_seed(42)
    ni = 25
    xi = gp.misc.designs.regulargrid(dim, ni, box)
    noise_std = 0.05
    zi = damped_oscillation(xi) + noise_std * gnp.randn(ni, 1)

    return xt, zt, xi, zi


def main():
    xt, zt, xi, zi = generate_data()

    kernel = gp.kernel.MaternKernel(p=1, rho=1.0, scale=1.0)
    model = gp.Model(kernel, sigma=1e-2)
    model.add_samples(xi, zi)
    model.initialize()
    print(f"Initial log-likelihood: {model.log_likelihood()}")

    model, info = gp.kernel.select_parameters_with_ml(model, info=True)

    print("\nParameter selection")
    print("-------------------")
    print(model)
    print(f"negative log-likelihood: {info.fun:.6g}")
    print(f"evaluations: {len(info.history_criterion)}")
    print(f"time: {info.total_time:.2f}s")

    zpm = model.predict(xt)
    fig = gp.misc.plotutils.Figure(isinteractive=True)
    fig.plot(xt, zt, "k", linewidth=1, linestyle=(0, (5, 5)))
    fig.plotgp(xt, zpm, model.credible_interval(xt))
    fig.plotdata(xi, zi)
    fig.xylabels("$x$", "$z$")
    fig.title("Posterior GP with parameters selected by ML")
    fig.show(grid=True, legend=True, legend_fontsize=9)

    return model, info


if __name__ == "__main__":
    main()
