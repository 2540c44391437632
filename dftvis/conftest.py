# -*- coding: utf-8 -*-

import pytest

from dftvis.util.testing import mark_in_pytest


@pytest.fixture
def cpu_device():
    from dftvis.dispatch.cpu import NumbaBackend

    return NumbaBackend.devices()[0]


@pytest.fixture
def gpu_device():
    pytest.importorskip('cupy')
    from dftvis.dispatch.cuda import CudaBackend

    devices = CudaBackend.devices()

    if len(devices) == 0:
        pytest.skip("No CUDA devices available")

    return devices[0]


def pytest_configure(config):
    mark_in_pytest(True)


def pytest_unconfigure(config):
    mark_in_pytest(False)
