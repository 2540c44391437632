# -*- coding: utf-8 -*-


from collections import namedtuple

import numpy as np


KernelParameter = namedtuple("KernelParameter", ["name", "kind"])

# Binding order of the summation kernel parameters.
# Both kernel implementations declare their arguments in this order.
KERNEL_PARAMETERS = (
    KernelParameter("visibilities", "buffer"),
    KernelParameter("output", "buffer"),
    KernelParameter("visibility_count", "uint32"),
    KernelParameter("sources", "buffer"),
    KernelParameter("source_count", "uint32"),
)

_MAX_UINT32 = np.iinfo(np.uint32).max


def _bind(parameter, value):
    if parameter.kind == "buffer":
        return value
    elif parameter.kind == "uint32":
        if not 0 <= value <= _MAX_UINT32:
            raise ValueError("%s=%s does not fit in an unsigned int"
                             % (parameter.name, value))

        return np.uint32(value)
    else:
        raise ValueError("Unknown parameter kind %s" % parameter.kind)


def bind_arguments(**kwargs):
    """
    Order and convert kernel arguments according to
    :data:`KERNEL_PARAMETERS`.

    Returns
    -------
    tuple
        Kernel arguments in binding order
    """
    names = [p.name for p in KERNEL_PARAMETERS]
    missing = [n for n in names if n not in kwargs]
    unknown = sorted(set(kwargs).difference(names))

    if missing or unknown:
        raise TypeError("Kernel arguments don't match parameters %s. "
                        "Missing %s, unknown %s" % (names, missing, unknown))

    return tuple(_bind(p, kwargs[p.name]) for p in KERNEL_PARAMETERS)
