# -*- coding: utf-8 -*-


import logging

from dftvis.data.files import read_source_file, read_visibility_file
from dftvis.data.synthetic import synthetic_sources, synthetic_visibilities
from dftvis.data.types import freeze, zero_samples, L, M, W
from dftvis.sampling import RandomSampler

log = logging.getLogger(__name__)


def load_sources(config, sampler=None):
    """
    Load sources, either synthetically or from ``config.source_file``.

    When reading from file, ``config.num_sources`` is overwritten
    by the count on the first line of the file and
    the l and m coordinates are scaled by ``config.cell_size``.

    Parameters
    ----------
    config : :class:`dftvis.config.RunConfig`
        Run configuration
    sampler : :class:`dftvis.sampling.RandomSampler`, optional
        Random sampler for synthetic sources

    Returns
    -------
    :class:`numpy.ndarray` or None
        Read-only sources of shape :code:`(source, 3)`,
        or None if they could not be loaded.
    """
    if config.synthetic_sources:
        if config.enable_messages:
            log.info("Using synthetic sources")

        try:
            sources = synthetic_sources(config, sampler or RandomSampler())
        except MemoryError:
            log.error("Unable to allocate memory for %d sources",
                      config.num_sources)
            return None

        if config.enable_messages:
            log.info("Successfully loaded %d synthetic sources",
                     config.num_sources)

        return freeze(sources)

    if config.enable_messages:
        log.info("Using sources from file '%s'", config.source_file)

    try:
        count, rows = read_source_file(config.source_file)
    except OSError as e:
        log.error("Unable to load sources from file: %s", e)
        return None
    except (ValueError, MemoryError) as e:
        log.error("Unable to read sources from '%s': %s",
                  config.source_file, e)
        return None

    config.num_sources = count

    # Intensities are unscaled
    sources = rows.copy()
    sources[:, L] *= config.cell_size
    sources[:, M] *= config.cell_size

    if config.enable_messages:
        log.info("Successfully loaded %d sources from file", count)

    return freeze(sources)


def load_visibilities(config, sampler=None):
    """
    Load visibilities, either synthetically or from ``config.vis_src_file``,
    and allocate their zeroed complex samples.

    When reading from file, ``config.num_visibilities`` is overwritten
    by the count on the first line of the file, coordinates are
    scaled from wavelengths by ``config.wavelength_to_meters``,
    and w is zeroed if ``config.force_zero_w_term`` is set.
    The real, imaginary and intensity columns of the file are
    not used to initialise the complex samples.

    Parameters
    ----------
    config : :class:`dftvis.config.RunConfig`
        Run configuration
    sampler : :class:`dftvis.sampling.RandomSampler`, optional
        Random sampler for synthetic visibilities

    Returns
    -------
    visibilities : :class:`numpy.ndarray` or None
        Read-only visibilities of shape :code:`(row, 3)`
    samples : :class:`numpy.ndarray` or None
        Zeroed complex samples of shape :code:`(row,)`
    """
    if config.synthetic_visibilities:
        if config.enable_messages:
            log.info("Using synthetic visibilities")

        try:
            visibilities = synthetic_visibilities(config,
                                                  sampler or RandomSampler())
            samples = zero_samples(config.num_visibilities)
        except MemoryError:
            log.error("Unable to allocate memory for %d visibilities",
                      config.num_visibilities)
            return None, None

        if config.enable_messages:
            log.info("Total visibilities: %d", config.num_visibilities)

        return freeze(visibilities), samples

    if config.enable_messages:
        log.info("Using visibilities from file '%s'", config.vis_src_file)

    try:
        count, rows = read_visibility_file(config.vis_src_file)
    except OSError as e:
        log.error("Unable to locate visibilities file: %s", e)
        return None, None
    except (ValueError, MemoryError) as e:
        log.error("Unable to read visibilities from '%s': %s",
                  config.vis_src_file, e)
        return None, None

    config.num_visibilities = count

    try:
        visibilities = rows[:, :3] * config.wavelength_to_meters
        samples = zero_samples(count)
    except MemoryError:
        log.error("Unable to allocate memory for %d visibilities", count)
        return None, None

    if config.force_zero_w_term:
        visibilities[:, W] = 0.0

    if config.enable_messages:
        log.info("Successfully loaded %d visibilities from file", count)

    return freeze(visibilities), samples
