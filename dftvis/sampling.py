# -*- coding: utf-8 -*-


import numpy as np

# Exclusive upper bound of the raw uniform stream
RANGE = 1.0


class RandomSampler(object):
    """
    Pseudo-random scalar generators for synthetic data.

    Each sampler owns its own :class:`numpy.random.Generator`,
    so that runs and tests can be seeded independently.

    Parameters
    ----------
    seed : int or None, optional
        Generator seed. If ``None``, the generator is seeded
        once from fresh operating system entropy.
    """

    def __init__(self, seed=None):
        self._rng = np.random.default_rng(seed)

    def uniform(self, min, max, size=None):
        """
        Draw values uniformly distributed in ``[min, max)``.

        Values are derived from a raw uniform draw on ``[0, RANGE)``
        according to ``min + raw / (RANGE / (max - min))``.

        Parameters
        ----------
        min : float
            Lower bound
        max : float
            Upper bound
        size : int or tuple of ints, optional
            Output shape. A single float is returned if ``None``.

        Returns
        -------
        float or :class:`numpy.ndarray`
        """
        raw = self._rng.random(size)

        if max == min:
            return min if size is None else np.full(size, float(min))

        div = RANGE / (max - min)
        return min + raw / div

    def gaussian(self, size=None):
        """
        Draw normally distributed values using polar rejection.

        Pairs ``(u, v)`` are drawn uniformly on ``[-1, 1)``.
        With ``r = u**2 + v**2`` and ``c = sqrt(-2 ln(r) / r)``,
        a pair is rejected if ``r == 0``, ``r > 1`` or
        ``|u * v * c| > 1``. Otherwise ``u * v * c`` is returned.

        Notes
        -----
        The rejection of ``|u * v * c| > 1`` is not part of the standard
        Marsaglia method and bounds every sample to ``[-1, 1]``.

        Parameters
        ----------
        size : int or tuple of ints, optional
            Output shape. A single float is returned if ``None``.

        Returns
        -------
        float or :class:`numpy.ndarray`
        """
        nsamples = 1 if size is None else int(np.prod(size))
        samples = np.empty(nsamples, dtype=np.float64)
        filled = 0

        while filled < nsamples:
            wanted = nsamples - filled
            u = self._rng.random(wanted) * 2.0 - 1.0
            v = self._rng.random(wanted) * 2.0 - 1.0
            r = u * u + v * v

            inside = (r > 0.0) & (r <= 1.0)
            u, v, r = u[inside], v[inside], r[inside]

            candidates = u * v * np.sqrt(-2.0 * np.log(r) / r)
            accepted = candidates[np.abs(candidates) <= 1.0][:wanted]

            samples[filled:filled + accepted.size] = accepted
            filled += accepted.size

        if size is None:
            return float(samples[0])

        return samples.reshape(size)
