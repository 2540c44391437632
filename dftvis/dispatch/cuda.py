# -*- coding: utf-8 -*-


import logging

import numpy as np

from dftvis.config import settings
from dftvis.dispatch.device import Device, ProgramBuildError
from dftvis.kernels import CUDA_TEMPLATE_PATH, KERNEL_NAME, phase_constant
from dftvis.util.code import format_code, memoize_on_key
from dftvis.util.cuda import (cuda_function, cuda_type,
                              cuda_vec3_type, grids)
from dftvis.util.jinja2 import jinja_env
from dftvis.util.requirements import requires_optional

try:
    import cupy as cp
    from cupy.cuda.compiler import CompileException
except ImportError as e:
    opt_import_error = e
else:
    opt_import_error = None

log = logging.getLogger(__name__)


_COORD_DTYPE = np.dtype(np.float64)
_OUT_DTYPE = np.dtype(np.complex128)


def render_kernel(convention):
    """ Render the CUDA source of the summation kernel """
    render = jinja_env.get_template(CUDA_TEMPLATE_PATH).render

    return render(kernel_name=KERNEL_NAME,
                  vis_type=cuda_vec3_type(_COORD_DTYPE),
                  src_type=cuda_vec3_type(_COORD_DTYPE),
                  out_type=cuda_type(_OUT_DTYPE),
                  float_type=cuda_type(_COORD_DTYPE),
                  make2_fn=cuda_function('make2', _COORD_DTYPE),
                  sqrt_fn=cuda_function('sqrt', _COORD_DTYPE),
                  sincos_fn=cuda_function('sincos', _COORD_DTYPE),
                  phase_constant=repr(phase_constant(convention)))


def _key_fn(ordinal, convention):
    return (ordinal, convention)


@memoize_on_key(_key_fn)
def _build_module(ordinal, convention):
    code = render_kernel(convention)
    module = cp.RawModule(code=code)

    try:
        module.compile()
    except CompileException as e:
        log.error("Compilation of the DFT kernel failed\n%s\n%s",
                  format_code(code), e)
        raise ProgramBuildError("Couldn't build the program",
                                build_log=str(e)) from e

    return module


class CudaBackend(object):
    """
    Drives a CUDA device through cupy.

    The summation kernel is rendered from a jinja2 template and
    compiled at run time with NVRTC.
    """
    name = "cuda"
    kind = "gpu"

    @classmethod
    def devices(cls):
        """ List the CUDA devices visible to cupy """
        if opt_import_error is not None:
            return []

        try:
            count = cp.cuda.runtime.getDeviceCount()
        except cp.cuda.runtime.CUDARuntimeError:
            return []

        devices = []

        for ordinal in range(count):
            props = cp.cuda.runtime.getDeviceProperties(ordinal)
            name = props["name"]

            if isinstance(name, bytes):
                name = name.decode("utf-8")

            devices.append(Device(cls.kind, cls.name, ordinal, name))

        return devices

    @requires_optional('cupy', opt_import_error)
    def __init__(self):
        self.block_size = int(settings.get("dft.cuda.block_size", 256))
        self.errors = (cp.cuda.runtime.CUDARuntimeError,
                       cp.cuda.driver.CUDADriverError,
                       cp.cuda.memory.OutOfMemoryError,
                       CompileException)

    def create_context(self, device):
        context = cp.cuda.Device(device.ordinal)
        context.__enter__()
        return context

    def release_context(self, context):
        try:
            cp.get_default_memory_pool().free_all_blocks()
        finally:
            context.__exit__(None, None, None)

    def build_program(self, context, convention):
        return _build_module(context.id, convention)

    def release_program(self, program):
        pass

    def create_queue(self, context):
        return cp.cuda.Stream(non_blocking=False)

    def release_queue(self, queue):
        queue.synchronize()

    def input_buffer(self, queue, host):
        with queue:
            return cp.array(host, dtype=_COORD_DTYPE, order='C', copy=True)

    def output_buffer(self, queue, host):
        buffer = cp.empty(host.shape, dtype=_OUT_DTYPE)
        buffer.set(host, stream=queue)
        return buffer

    def release_buffer(self, buffer):
        # cupy returns device memory to its pool
        # once the last reference is dropped
        pass

    def create_kernel(self, program, name):
        return program.get_function(name)

    def release_kernel(self, kernel):
        pass

    def launch(self, queue, kernel, args, global_size):
        block = (self.block_size, 1, 1)
        grid = grids((global_size, 1, 1), block)

        with queue:
            kernel(grid, block, args)

    def finish(self, queue):
        queue.synchronize()

    def read_buffer(self, queue, buffer, host):
        buffer.get(stream=queue, out=host)
