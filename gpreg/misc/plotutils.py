## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import sys
import numpy as np
import matplotlib.pyplot as plt
from matplotlib import interactive


class Figure:
    """Figures manager class.

    A thin wrapper around a matplotlib figure with helpers to draw
    data points, posterior means with credible bands and posterior
    draws of 1D models.
    """

    def __init__(self, nrows=1, ncols=1, isinteractive=True, boxoff=True, **kargs):
        # Check if we run in interpreter mode
        self.interpreter = False
        try:
            if sys.ps1:
                self.interpreter = True
        except AttributeError:
            self.interpreter = False
            if sys.flags.interactive:
                self.interpreter = True

        if isinteractive & self.interpreter:
            interactive(True)

        self.boxoff = boxoff

        self.fig = plt.figure(**kargs)

        self.nrows = nrows
        self.ncols = ncols
        self.axes = []
        for i in range(nrows * ncols):
            self.axes.append(self.fig.add_subplot(nrows, ncols, i + 1))
        self.ax = self.axes[0]
        if self.boxoff:
            self.set_boxoff()

    def set_boxoff(self):
        self.ax.spines["right"].set_visible(False)
        self.ax.spines["top"].set_visible(False)
        self.ax.tick_params(direction="in")

    def subplot(self, i):
        self.ax = self.axes[i - 1]
        if self.boxoff:
            self.set_boxoff()

    def show(self, grid=None, legend=None, legend_fontsize=None, xlim=None):
        if grid:
            self.grid()
        if legend and legend_fontsize is not None:
            self.legend(fontsize=legend_fontsize)
        elif legend:
            self.legend()
        if xlim is not None:
            self.ax.set_xlim(xlim)
        plt.show()

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def plotdata(self, x, z, label="data"):
        self.ax.plot(x, z, "rs", markerfacecolor="none", markersize=6, label=label)

    def xylabels(self, sx="", sy=""):
        self.ax.set_xlabel(sx)
        self.ax.set_ylabel(sy)

    def title(self, s):
        self.ax.set_title(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(
        self,
        visible=True,
        which="major",
        linestyle=(0, (1, 5)),
        linewidth=0.5,
        **kwargs
    ):
        self.ax.grid(visible, which, linestyle=linestyle, linewidth=linewidth, **kwargs)

    def plotgp(
        self,
        x,
        mean,
        ci_width,
        mean_label="posterior mean",
        ci_label="credible interval",
        mean_color="#F2404C",
        fill_color="#BFBFBF",
        alpha=0.8,
    ):
        """Posterior mean with a credible band mean +/- ci_width.

        Parameters
        ----------
        x : array_like, shape (m,) or (m, 1)
        mean : array_like, shape (m,) or (m, 1)
        ci_width : array_like, shape (m,)
            Half-width of the band, e.g. ``model.credible_interval(x)``
            (two posterior standard deviations, about 95%).
        """
        x = np.asarray(x).flatten()
        mean = np.asarray(mean).flatten()
        ci_width = np.asarray(ci_width).flatten()

        self.ax.plot(x, mean, mean_color, linewidth=2.0, label=mean_label)

        lower = mean - ci_width
        upper = mean + ci_width
        self.ax.fill(
            np.hstack((x, x[::-1])),
            np.hstack((upper, lower[::-1])),
            color=fill_color,
            alpha=alpha,
            linewidth=0.5,
            label=ci_label,
        )

    def plotsamples(self, x, ztsim, color="C0", label="posterior draws"):
        """Posterior draws, one line per column of ztsim."""
        x = np.asarray(x).flatten()
        ztsim = np.asarray(ztsim)
        self.ax.plot(x, ztsim[:, 0], color, linewidth=0.7, label=label)
        if ztsim.shape[1] > 1:
            self.ax.plot(x, ztsim[:, 1:], color, linewidth=0.7)


def plot_posterior(model, xt, nb_samples=0, rng=None, output=0, ztsim=None, show=True):
    """Plot the posterior of a trained 1D model on the grid xt.

    Parameters
    ----------
    model : gpreg.core.Model
        Trained model with scalar inputs.
    xt : array_like, shape (m, 1)
        Evaluation grid.
    nb_samples : int, optional
        Number of posterior draws to overlay (default 0).
    rng : optional
        Source of standard normal variates, see `Model.sample_posterior`.
    ztsim : array_like, shape (m, n), optional
        Draws already computed on xt; overrides nb_samples and rng.
    output : int, optional
        Output column to plot.
    show : bool, optional
        Whether to call ``plt.show()``.

    Returns
    -------
    fig : Figure
    """
    xt = np.asarray(xt).reshape(-1, 1)
    zpm = model.predict(xt)[:, output]
    ci = model.credible_interval(xt)

    fig = Figure(isinteractive=True)
    fig.plotgp(xt, zpm, ci)
    if ztsim is None and nb_samples > 0:
        ztsim = model.sample_posterior(xt, nb_samples, rng=rng, output=output)
    if ztsim is not None:
        fig.plotsamples(xt, ztsim)
    fig.plotdata(model.samples.inputs[:, 0], model.samples.labels[:, output])
    fig.xylabels("$x$", "$z$")
    if show:
        fig.show(grid=True, legend=True, legend_fontsize=9)
    return fig
