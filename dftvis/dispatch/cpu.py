# -*- coding: utf-8 -*-


from collections import deque, namedtuple
import logging
import platform

import numpy as np
from numba import njit, types
from numba.core.errors import NumbaError

from dftvis.config import settings
from dftvis.data.types import freeze
from dftvis.dispatch.device import Device, ProgramBuildError
from dftvis.kernels import phase_constant
from dftvis.kernels.cpu import make_dft_kernel
from dftvis.util.code import memoize_on_key

log = logging.getLogger(__name__)


CpuContext = namedtuple("CpuContext", ["device", "jit_options"])

_COORDS = types.Array(types.float64, 2, 'C', readonly=True)
_SAMPLES = types.Array(types.complex128, 1, 'C')

# Signature matching the kernel parameter binding order
KERNEL_SIGNATURE = types.void(_COORDS, _SAMPLES, types.uint32,
                              _COORDS, types.uint32)


def _key_fn(convention, jit_options):
    return (convention, tuple(sorted(jit_options.items())))


@memoize_on_key(_key_fn)
def _compile_kernel(convention, jit_options):
    kernel = make_dft_kernel(phase_constant(convention))

    try:
        return njit(KERNEL_SIGNATURE, nogil=True, **jit_options)(kernel)
    except NumbaError as e:
        log.error("Compilation of the DFT kernel failed\n%s", e)
        raise ProgramBuildError("Couldn't build the program",
                                build_log=str(e)) from e


class HostQueue(object):
    """ In-order queue of work executed on the host """

    def __init__(self):
        self._pending = deque()

    def __len__(self):
        return len(self._pending)

    def enqueue(self, fn, *args):
        self._pending.append((fn, args))

    def finish(self):
        while self._pending:
            fn, args = self._pending.popleft()
            fn(*args)


class NumbaBackend(object):
    """
    Executes the summation kernel on the host CPU.

    The kernel is compiled with numba. Input buffers are
    read-only host copies, while the output buffer is the
    caller's array itself.
    """
    name = "numba"
    kind = "cpu"
    errors = (NumbaError,)

    @classmethod
    def devices(cls):
        name = platform.processor() or platform.machine() or "cpu"
        return [Device(cls.kind, cls.name, 0, name)]

    def create_context(self, device):
        jit_options = settings.numba_parallel("dft.cpu.parallel")
        return CpuContext(device, jit_options)

    def release_context(self, context):
        pass

    def build_program(self, context, convention):
        return _compile_kernel(convention, context.jit_options)

    def release_program(self, program):
        pass

    def create_queue(self, context):
        return HostQueue()

    def release_queue(self, queue):
        if len(queue) > 0:
            log.warning("Discarding %d unfinished kernel launches",
                        len(queue))

    def input_buffer(self, queue, host):
        return freeze(np.array(host, dtype=np.float64, order='C', copy=True))

    def output_buffer(self, queue, host):
        return host

    def release_buffer(self, buffer):
        pass

    def create_kernel(self, program, name):
        if program.py_func.__name__ != name:
            raise ProgramBuildError("Kernel '%s' not found in program. "
                                    "Found '%s'"
                                    % (name, program.py_func.__name__))

        return program

    def release_kernel(self, kernel):
        pass

    def launch(self, queue, kernel, args, global_size):
        # The kernel iterates over visibility_count itself
        if args[2] != global_size:
            raise ValueError("Launch width %d doesn't match "
                             "visibility_count %d" % (global_size, args[2]))

        queue.enqueue(kernel, *args)

    def finish(self, queue):
        queue.finish()

    def read_buffer(self, queue, buffer, host):
        if buffer is not host:
            np.copyto(host, buffer)
