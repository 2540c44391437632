# -*- coding: utf-8 -*-


import logging
import sys

import numpy as np

from dftvis.data.files import read_visibility_file
from dftvis.data.loader import load_sources
from dftvis.data.types import zero_samples
from dftvis.dispatch import compute

log = logging.getLogger(__name__)

# Returned when the reference data can't be loaded
INVALID_DIFFERENCE = sys.float_info.max


def max_difference(config, device=None):
    """
    Measure the agreement of the compute pipeline
    with a reference dataset.

    Sources are read from ``config.source_file``.
    Visibilities and their expected complex samples are read from
    the ``u v w real imag`` columns of ``config.vis_src_file``.
    Each visibility is computed individually and compared
    against its expected sample.

    Parameters
    ----------
    config : :class:`dftvis.config.RunConfig`
        Configuration naming the reference files,
        usually :meth:`RunConfig.unit_test`.
    device : :class:`dftvis.dispatch.device.Device`, optional
        Device to validate.

    Returns
    -------
    float
        Maximum distance in the complex plane between computed
        and expected samples. ``0.0`` if there are no reference
        visibilities and :data:`INVALID_DIFFERENCE` if the
        reference data could not be loaded.
    """
    sources = load_sources(config)

    if sources is None:
        return INVALID_DIFFERENCE

    try:
        count, rows = read_visibility_file(config.vis_src_file)
    except (OSError, ValueError) as e:
        log.error("Unable to read reference visibilities: %s", e)
        return INVALID_DIFFERENCE

    config.num_visibilities = count

    uvw = rows[:, :3] * config.wavelength_to_meters
    expected = rows[:, 3] + 1j * rows[:, 4]

    difference = 0.0

    # One visibility at a time
    for r in range(count):
        sample = zero_samples(1)
        compute(config, sources, uvw[r:r + 1], sample, 1, device=device)
        difference = max(difference, float(np.abs(sample[0] - expected[r])))

    if config.enable_messages:
        log.info("Measured maximum difference of evaluated "
                 "visibilities is %f", difference)

    return difference
