# -*- coding: utf-8 -*-


from os.path import join as pjoin

from dftvis.constants import two_pi

# Name of the summation kernel entry point
KERNEL_NAME = "direct_fourier_transform"

CUDA_TEMPLATE_PATH = pjoin("kernels", "dft.cu.j2")


def phase_sign(convention):
    """ Sign of the DFT exponent for ``convention`` """
    if convention == 'fourier':
        return -1.0
    elif convention == 'casa':
        return 1.0
    else:
        raise ValueError("convention not in ('fourier', 'casa')")


def phase_constant(convention):
    """ Multiplier of ``u*l + v*m + w*(n - 1)`` in the phase """
    return phase_sign(convention) * two_pi
