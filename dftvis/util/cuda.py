# -*- coding: utf-8 -*-


import numpy as np


cuda_fns = {
    np.dtype(np.float32): {
        'cos': 'cosf',
        'make2': 'make_float2',
        'sin': 'sinf',
        'sincos': 'sincosf',
        'sqrt': 'sqrtf',
    },
    np.dtype(np.float64): {
        'cos': 'cos',
        'make2': 'make_double2',
        'sin': 'sin',
        'sincos': 'sincos',
        'sqrt': 'sqrt',
    },
}


numpy_to_cuda_type_map = {
    np.dtype('int32'): "int",
    np.dtype('uint32'): "unsigned int",
    np.dtype('float32'): "float",
    np.dtype('float64'): "double",
    np.dtype('complex64'): "float2",
    np.dtype('complex128'): "double2"
}

# Vector types holding one row of a (n, 3) array
numpy_to_cuda_vec3_map = {
    np.dtype('float32'): "float3",
    np.dtype('float64'): "double3",
}


def grids(dims, blocks):
    """
    Determine the grid size, given space dimensions sizes and blocks

    Parameters
    ----------
    dims : tuple of ints
        `(x, y, z)` tuple

    Returns
    -------
    tuple
        `(x, y, z)` grid size tuple
    """
    if not len(dims) == 3:
        raise ValueError("dims must be an (x, y, z) tuple. "
                         "CUDA dimension ordering is inverted compared "
                         "to NumPy")

    if not len(blocks) == 3:
        raise ValueError("blocks must be an (x, y, z) tuple. "
                         "CUDA dimension ordering is inverted compared "
                         "to NumPy")

    return tuple((d + b - 1) // b for d, b in zip(dims, blocks))


def cuda_function(function_name, dtype):
    try:
        type_map = cuda_fns[np.dtype(dtype)]
    except KeyError:
        raise ValueError("No registered functions for type %s" % dtype)

    try:
        return type_map[function_name]
    except KeyError:
        raise ValueError("Unknown CUDA function %s" % function_name)


def cuda_type(dtype):
    try:
        return numpy_to_cuda_type_map[np.dtype(dtype)]
    except KeyError:
        raise ValueError("No registered map for type %s" % dtype)


def cuda_vec3_type(dtype):
    try:
        return numpy_to_cuda_vec3_map[np.dtype(dtype)]
    except KeyError:
        raise ValueError("No registered vector type for %s" % dtype)
