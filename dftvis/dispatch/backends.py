# -*- coding: utf-8 -*-


import logging

from dftvis.config import DEVICES
from dftvis.dispatch.cpu import NumbaBackend
from dftvis.dispatch.cuda import CudaBackend
from dftvis.dispatch.device import DeviceNotFound

log = logging.getLogger(__name__)

BACKENDS = {
    CudaBackend.name: CudaBackend,
    NumbaBackend.name: NumbaBackend,
}

# Backends providing each class of device, in order of preference
GPU_BACKENDS = (CudaBackend.name,)
CPU_BACKENDS = (NumbaBackend.name,)


def _first_device(backend_names):
    for name in backend_names:
        devices = BACKENDS[name].devices()

        if len(devices) > 0:
            return devices[0]

    return None


def select_device(preference="auto"):
    """
    Select a compute device.

    Parameters
    ----------
    preference : {'auto', 'gpu', 'cpu'}
        ``auto`` prefers a GPU and falls back to the CPU,
        ``gpu`` requires a GPU and ``cpu`` selects the CPU.

    Returns
    -------
    :class:`dftvis.dispatch.device.Device`

    Raises
    ------
    DeviceNotFound
        If no device satisfying ``preference`` is available.
    """
    if preference not in DEVICES:
        raise ValueError("preference %s not in %s" % (preference, DEVICES))

    if preference in ("auto", "gpu"):
        device = _first_device(GPU_BACKENDS)

        if device is not None:
            return device
        elif preference == "gpu":
            raise DeviceNotFound("Couldn't access any GPU devices")

        log.debug("No GPU devices found, falling back to the CPU")

    device = _first_device(CPU_BACKENDS)

    if device is None:
        raise DeviceNotFound("Couldn't access any devices")

    return device


def get_backend(device):
    """ Create the backend driving ``device`` """
    try:
        backend_cls = BACKENDS[device.backend]
    except KeyError:
        raise DeviceNotFound("Unknown backend '%s' for device %s"
                             % (device.backend, device))

    return backend_cls()
