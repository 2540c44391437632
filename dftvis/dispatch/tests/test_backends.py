# -*- coding: utf-8 -*-


import numpy as np
import pytest

from dftvis.config import RunConfig
from dftvis.data.types import zero_samples
from dftvis.dispatch import compute
from dftvis.dispatch.backends import BACKENDS, get_backend, select_device
from dftvis.dispatch.cpu import NumbaBackend
from dftvis.dispatch.cuda import CudaBackend
from dftvis.dispatch.device import (Device, DeviceError, DeviceNotFound,
                                    ProgramBuildError)

FAKE_GPU = Device("gpu", "cuda", 0, "Fake GPU")
FAKE_DEVICE = Device("cpu", "fake", 0, "Fake device")


class FakeDeviceFault(Exception):
    pass


class FakeBackend(object):
    """ Records the lifetime of every resource it hands out """
    name = "fake"
    kind = "cpu"
    errors = (FakeDeviceFault,)
    fail_on = None

    def __init__(self):
        self.events = []
        FakeBackend.instance = self

    @classmethod
    def devices(cls):
        return [FAKE_DEVICE]

    def _create(self, kind):
        if self.fail_on == kind:
            raise FakeDeviceFault("%s failed" % kind)

        self.events.append(("create", kind))
        return kind

    def _release(self, kind):
        self.events.append(("release", kind))

    def create_context(self, device):
        return self._create("context")

    def release_context(self, context):
        self._release("context")

    def build_program(self, context, convention):
        if self.fail_on == "program":
            raise ProgramBuildError("bad program", build_log="line 1")

        return self._create("program")

    def release_program(self, program):
        self._release("program")

    def create_queue(self, context):
        return self._create("queue")

    def release_queue(self, queue):
        self._release("queue")

    def input_buffer(self, queue, host):
        return self._create("buffer")

    def output_buffer(self, queue, host):
        return self._create("buffer")

    def release_buffer(self, buffer):
        self._release("buffer")

    def create_kernel(self, program, name):
        return self._create("kernel")

    def release_kernel(self, kernel):
        self._release("kernel")

    def launch(self, queue, kernel, args, global_size):
        self.launch_args = args
        self._create("launch")

    def finish(self, queue):
        self.events.append(("finish", queue))

    def read_buffer(self, queue, buffer, host):
        self._create("read")
        host[:] = 1 + 2j


@pytest.fixture
def fake_backend(monkeypatch):
    monkeypatch.setitem(BACKENDS, FakeBackend.name, FakeBackend)
    monkeypatch.setattr(FakeBackend, "fail_on", None)
    return FakeBackend


def _compute(nvis=2):
    config = RunConfig(enable_messages=False)
    samples = zero_samples(nvis)

    compute(config, np.zeros((3, 3)), np.zeros((nvis, 3)),
            samples, nvis, device=FAKE_DEVICE)

    return samples


def _released(events):
    return [kind for event, kind in events if event == "release"]


def test_resources_released_in_reverse_order(fake_backend):
    samples = _compute()

    np.testing.assert_array_equal(samples, [1 + 2j, 1 + 2j])
    events = fake_backend.instance.events

    assert _released(events) == ["kernel", "buffer", "buffer", "buffer",
                                 "queue", "program", "context"]

    # The launch completes before the output is read back
    assert events.index(("create", "launch")) < events.index(
        ("finish", "queue")) < events.index(("create", "read"))

    args = fake_backend.instance.launch_args
    assert args[2] == 2 and isinstance(args[2], np.uint32)
    assert args[4] == 3 and isinstance(args[4], np.uint32)


def test_no_launch_without_visibilities(fake_backend):
    _compute(nvis=0)

    assert ("create", "launch") not in fake_backend.instance.events
    assert ("finish", "queue") in fake_backend.instance.events


@pytest.mark.parametrize("fail_on, message, released", [
    ("context", "Couldn't create a context", []),
    ("queue", "Couldn't create a command queue", ["program", "context"]),
    ("kernel", "Couldn't create a kernel",
     ["buffer", "buffer", "buffer", "queue", "program", "context"]),
    ("launch", "Couldn't enqueue the kernel",
     ["kernel", "buffer", "buffer", "buffer", "queue", "program", "context"]),
    ("read", "Couldn't read the buffer",
     ["kernel", "buffer", "buffer", "buffer", "queue", "program", "context"]),
])
def test_resources_released_on_failure(fake_backend, monkeypatch,
                                       fail_on, message, released):
    monkeypatch.setattr(FakeBackend, "fail_on", fail_on)

    with pytest.raises(DeviceError, match=message) as e:
        _compute()

    assert isinstance(e.value.__cause__, FakeDeviceFault)
    assert _released(fake_backend.instance.events) == released


def test_program_build_failure(fake_backend, monkeypatch):
    monkeypatch.setattr(FakeBackend, "fail_on", "program")

    with pytest.raises(ProgramBuildError) as e:
        _compute()

    assert e.value.build_log == "line 1"
    assert _released(fake_backend.instance.events) == ["context"]


def test_select_cpu_device():
    device = select_device("cpu")

    assert device.kind == "cpu"
    assert device.backend == NumbaBackend.name
    assert isinstance(get_backend(device), NumbaBackend)


def test_select_prefers_gpu(monkeypatch):
    monkeypatch.setattr(CudaBackend, "devices",
                        classmethod(lambda cls: [FAKE_GPU]))

    assert select_device("auto") == FAKE_GPU
    assert select_device("gpu") == FAKE_GPU
    assert select_device("cpu").kind == "cpu"


def test_select_falls_back_to_cpu(monkeypatch):
    monkeypatch.setattr(CudaBackend, "devices", classmethod(lambda cls: []))

    assert select_device("auto").kind == "cpu"

    with pytest.raises(DeviceNotFound, match="Couldn't access any GPU"):
        select_device("gpu")


def test_select_no_devices(monkeypatch):
    monkeypatch.setattr(CudaBackend, "devices", classmethod(lambda cls: []))
    monkeypatch.setattr(NumbaBackend, "devices", classmethod(lambda cls: []))

    with pytest.raises(DeviceNotFound, match="Couldn't access any devices"):
        select_device("auto")


def test_select_invalid_preference():
    with pytest.raises(ValueError):
        select_device("tpu")


def test_unknown_backend():
    with pytest.raises(DeviceNotFound, match="Unknown backend"):
        get_backend(Device("gpu", "opencl", 0, "Some GPU"))


def test_cpu_program_cached(cpu_device):
    backend = get_backend(cpu_device)
    context = backend.create_context(cpu_device)

    program = backend.build_program(context, "fourier")

    assert backend.build_program(context, "fourier") is program
    assert backend.build_program(context, "casa") is not program

    with pytest.raises(ProgramBuildError, match="not found"):
        backend.create_kernel(program, "grid_visibilities")


def test_cpu_launch_width_mismatch(cpu_device):
    backend = get_backend(cpu_device)
    queue = backend.create_queue(backend.create_context(cpu_device))
    args = (None, None, np.uint32(4), None, np.uint32(1))

    with pytest.raises(ValueError, match="doesn't match"):
        backend.launch(queue, None, args, 5)

    assert len(queue) == 0
