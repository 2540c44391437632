# -*- coding: utf-8 -*-


import numpy as np

from dftvis.data.types import (COORD_DTYPE, SOURCE_COLUMNS,
                               VISIBILITY_COLUMNS, L, M, INTENSITY, U, V, W)


def synthetic_sources(config, sampler):
    """
    Scatter ``config.num_sources`` unit intensity sources
    uniformly over the grid.

    Returns
    -------
    :class:`numpy.ndarray`
        Sources of shape :code:`(num_sources, 3)`
    """
    nsrc = config.num_sources
    sources = np.empty((nsrc, len(SOURCE_COLUMNS)), dtype=COORD_DTYPE)

    for s in range(nsrc):
        sources[s, L] = (sampler.uniform(config.min_u, config.max_u) *
                         config.cell_size)
        sources[s, M] = (sampler.uniform(config.min_v, config.max_v) *
                         config.cell_size)
        sources[s, INTENSITY] = 1.0

    return sources


def synthetic_visibilities(config, sampler):
    """
    Randomly place ``config.num_visibilities`` visibilities on the grid.

    If ``config.gaussian_distribution_sources`` is set,
    u is scaled by one gaussian factor and both v and w
    are scaled by a second factor, concentrating visibilities
    towards the grid centre.
    Coordinates are normalised by ``config.uv_scale``.

    Returns
    -------
    :class:`numpy.ndarray`
        Visibilities of shape :code:`(num_visibilities, 3)`
    """
    nvis = config.num_visibilities
    uv_scale = config.uv_scale
    visibilities = np.empty((nvis, len(VISIBILITY_COLUMNS)),
                            dtype=COORD_DTYPE)

    gu = 1.0
    gv = 1.0

    for r in range(nvis):
        if config.gaussian_distribution_sources:
            gv = sampler.gaussian()
            gu = sampler.gaussian()

        u = sampler.uniform(config.min_u, config.max_u) * gu
        v = sampler.uniform(config.min_v, config.max_v) * gv
        # w shares the v factor
        w = sampler.uniform(config.min_v / 10.0, config.max_v / 10.0) * gv

        visibilities[r, U] = u / uv_scale
        visibilities[r, V] = v / uv_scale
        visibilities[r, W] = w / uv_scale

    return visibilities
