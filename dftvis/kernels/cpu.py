# -*- coding: utf-8 -*-


import numpy as np
from numba import prange


def make_dft_kernel(constant):
    """
    Create the python source of the CPU summation kernel,
    with the phase ``constant`` baked in.

    The returned function has the fixed kernel signature
    ``(visibilities, output, visibility_count, sources, source_count)``
    and must be compiled with :func:`numba.njit`.
    """
    def direct_fourier_transform(visibilities, output, visibility_count,
                                 sources, source_count):
        # For each visibility
        for vis in prange(visibility_count):
            u = visibilities[vis, 0]
            v = visibilities[vis, 1]
            w = visibilities[vis, 2]

            real = 0.0
            imag = 0.0

            # Sum over each source
            for src in range(source_count):
                l = sources[src, 0]  # noqa: E741
                m = sources[src, 1]
                intensity = sources[src, 2]
                n = np.sqrt(1.0 - l**2 - m**2) - 1.0

                # e^(constant*i*(u*l + v*m + w*(sqrt(1 - l^2 - m^2) - 1)))
                phase = constant * (u * l + v * m + w * n)
                real += intensity * np.cos(phase)
                imag += intensity * np.sin(phase)

            output[vis] = complex(real, imag)

    return direct_fourier_transform
