# -*- coding: utf-8 -*-


import numpy as np

# Source rows
L, M, INTENSITY = 0, 1, 2
SOURCE_COLUMNS = ("l", "m", "intensity")

# Visibility rows
U, V, W = 0, 1, 2
VISIBILITY_COLUMNS = ("u", "v", "w")

# Columns of a visibility file row
VISIBILITY_FILE_COLUMNS = ("u", "v", "w", "real", "imag", "intensity")

COORD_DTYPE = np.float64
SAMPLE_DTYPE = np.complex128


def freeze(array):
    """ Mark ``array`` read-only and return it """
    array.flags.writeable = False
    return array


def zero_samples(nvis):
    """ Allocate the complex samples for ``nvis`` visibilities """
    return np.zeros(nvis, dtype=SAMPLE_DTYPE)
