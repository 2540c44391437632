# -*- coding: utf-8 -*-


import numpy as np

from dftvis.kernels import phase_sign


def reference_dft(sources, visibilities, convention="fourier"):
    """ numpy Direct Fourier Transform of (l, m, I) onto (u, v, w) """
    l = sources[:, 0]  # noqa: E741
    m = sources[:, 1]
    intensity = sources[:, 2]
    n = np.sqrt(1.0 - l**2 - m**2) - 1.0

    uvw = visibilities[:, :3]
    phase = np.outer(uvw[:, 0], l) + np.outer(uvw[:, 1], m)
    phase += np.outer(uvw[:, 2], n)

    sign = phase_sign(convention)
    return np.sum(intensity * np.exp(sign * 2j * np.pi * phase), axis=1)


def random_inputs(rs, nsrc, nvis):
    """ Random sources within the unit circle and baselines in wavelengths """
    sources = np.empty((nsrc, 3), dtype=np.float64)
    sources[:, :2] = rs.uniform(-0.05, 0.05, size=(nsrc, 2))
    sources[:, 2] = rs.uniform(0.1, 2.0, size=nsrc)

    visibilities = rs.uniform(-500.0, 500.0, size=(nvis, 3))

    return sources, visibilities
