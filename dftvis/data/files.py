# -*- coding: utf-8 -*-


import logging

import numpy as np

from dftvis.data.types import (COORD_DTYPE, SOURCE_COLUMNS,
                               VISIBILITY_FILE_COLUMNS, U, V, W)

log = logging.getLogger(__name__)

# Placeholder intensity written for every output visibility
OUTPUT_INTENSITY = 1.0

# Coordinates and samples are written with full double precision
OUTPUT_FORMAT = ["%.17g"] * 5 + ["%.1f"]


def _read_count(fh, filename):
    line = fh.readline()

    try:
        count = int(line.split()[0])
    except (IndexError, ValueError):
        raise ValueError("'%s' does not start with a row count. "
                         "Found '%s'" % (filename, line.strip()))

    if count < 0:
        raise ValueError("'%s' has a negative row count %d"
                         % (filename, count))

    return count


def _read_rows(filename, ncolumns):
    with open(filename, "r") as fh:
        count = _read_count(fh, filename)

        if count == 0:
            return count, np.empty((0, ncolumns), dtype=COORD_DTYPE)

        rows = np.loadtxt(fh, dtype=COORD_DTYPE, max_rows=count,
                          usecols=range(ncolumns), ndmin=2)

    if rows.shape[0] != count:
        raise ValueError("'%s' declares %d rows but only %d were read"
                         % (filename, count, rows.shape[0]))

    return count, rows


def read_source_file(filename):
    """
    Read a source file.

    The first line holds the number of sources,
    followed by that many ``l m intensity`` rows.

    Returns
    -------
    count : int
        Number of sources declared by the file
    rows : :class:`numpy.ndarray`
        Raw source rows of shape :code:`(count, 3)`
    """
    return _read_rows(filename, len(SOURCE_COLUMNS))


def read_visibility_file(filename):
    """
    Read a visibility file.

    The first line holds the number of visibilities,
    followed by that many ``u v w real imag intensity`` rows.

    Returns
    -------
    count : int
        Number of visibilities declared by the file
    rows : :class:`numpy.ndarray`
        Raw visibility rows of shape :code:`(count, 6)`
    """
    return _read_rows(filename, len(VISIBILITY_FILE_COLUMNS))


def save_visibilities(config, visibilities, samples):
    """
    Write visibilities and their complex samples to ``config.vis_file``.

    Coordinates are converted back to wavelengths
    and every row ends with a placeholder intensity of 1.0.
    Values are written with 17 significant digits so that
    reading the file back reproduces them.

    Returns
    -------
    bool
        True if the file was written.
    """
    if len(visibilities) != len(samples):
        raise ValueError("%d visibilities but %d samples"
                         % (len(visibilities), len(samples)))

    wavelength_scalar = config.wavelength_to_meters
    nvis = len(visibilities)

    rows = np.empty((nvis, len(VISIBILITY_FILE_COLUMNS)), dtype=COORD_DTYPE)
    rows[:, 0] = visibilities[:, U] / wavelength_scalar
    rows[:, 1] = visibilities[:, V] / wavelength_scalar
    rows[:, 2] = visibilities[:, W] / wavelength_scalar
    rows[:, 3] = samples.real
    rows[:, 4] = samples.imag
    rows[:, 5] = OUTPUT_INTENSITY

    try:
        with open(config.vis_file, "w") as fh:
            if config.enable_messages:
                log.info("Writing visibilities to file '%s'",
                         config.vis_file)

            fh.write("%d\n" % nvis)
            np.savetxt(fh, rows, fmt=OUTPUT_FORMAT, delimiter=" ")
    except OSError as e:
        log.error("Unable to save visibilities to file '%s': %s",
                  config.vis_file, e)
        return False

    if config.enable_messages:
        log.info("Completed writing of %d visibilities to file", nvis)

    return True
