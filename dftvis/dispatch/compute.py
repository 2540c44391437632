# -*- coding: utf-8 -*-


from contextlib import contextmanager
import logging

import numpy as np

from dftvis.dispatch.arguments import bind_arguments
from dftvis.dispatch.backends import get_backend, select_device
from dftvis.dispatch.device import DeviceError
from dftvis.dispatch.session import DeviceSession
from dftvis.kernels import KERNEL_NAME

log = logging.getLogger(__name__)


@contextmanager
def _device_step(backend, failure):
    """ Convert backend library exceptions into :class:`DeviceError` """
    try:
        yield
    except DeviceError:
        raise
    except backend.errors as e:
        log.error("%s: %s", failure, e)
        raise DeviceError("%s: %s" % (failure, e)) from e


def _check_inputs(sources, visibilities, samples, num_visibilities):
    if num_visibilities < 0:
        raise ValueError("num_visibilities %d is negative"
                         % num_visibilities)

    if sources.ndim != 2 or sources.shape[1] != 3:
        raise ValueError("sources must have shape (source, 3). "
                         "Got %s" % (sources.shape,))

    if visibilities.ndim != 2 or visibilities.shape[1] != 3:
        raise ValueError("visibilities must have shape (row, 3). "
                         "Got %s" % (visibilities.shape,))

    if visibilities.shape[0] < num_visibilities:
        raise ValueError("%d visibilities requested but only %d supplied"
                         % (num_visibilities, visibilities.shape[0]))

    if samples.ndim != 1 or samples.shape[0] < num_visibilities:
        raise ValueError("samples must have shape (row,) with at least "
                         "%d rows. Got %s"
                         % (num_visibilities, samples.shape))

    if samples.dtype != np.complex128:
        raise ValueError("samples.dtype %s != complex128" % samples.dtype)

    if not (samples.flags.c_contiguous and samples.flags.writeable):
        raise ValueError("samples must be a writeable contiguous array")


def compute(config, sources, visibilities, samples, num_visibilities,
            device=None):
    """
    Computes the Direct Fourier Transform of ``sources``
    onto the first ``num_visibilities`` visibilities, on a compute device.

    .. math::

        {\\Large \\sum_s I_s e^{-2 \\pi i (u l_s + v m_s + w (n_s - 1))} }

    Resources acquired on the device are released before returning,
    whether the computation succeeds or not.

    Parameters
    ----------
    config : :class:`dftvis.config.RunConfig`
        Run configuration. ``config.device`` selects the device
        and ``config.convention`` the sign of the exponent.
    sources : :class:`numpy.ndarray`
        Sources of shape :code:`(source, 3)` with
        l, m and intensity in the last dimension.
    visibilities : :class:`numpy.ndarray`
        Visibilities of shape :code:`(row, 3)` with
        u, v and w in the last dimension.
    samples : :class:`numpy.ndarray`
        complex128 output of shape :code:`(row,)`,
        updated in place.
    num_visibilities : int
        Number of visibilities to compute.
    device : :class:`dftvis.dispatch.device.Device`, optional
        Device to use. Selected according to ``config.device``
        if ``None``.

    Raises
    ------
    DeviceError
        If any device operation fails.
    """
    _check_inputs(sources, visibilities, samples, num_visibilities)
    messages = config.enable_messages

    if device is None:
        device = select_device(config.device)

    backend = get_backend(device)

    if messages:
        log.info("Using %s device '%s'", device.kind, device.name)

    visibilities = visibilities[:num_visibilities]
    output = samples[:num_visibilities]

    with DeviceSession(backend) as session:
        with _device_step(backend, "Couldn't create a context"):
            context = session.acquire("context",
                                      backend.create_context(device))

        with _device_step(backend, "Couldn't create the program"):
            program = session.acquire("program",
                                      backend.build_program(
                                          context, config.convention))

        with _device_step(backend, "Couldn't create a command queue"):
            queue = session.acquire("queue", backend.create_queue(context))

        if messages:
            log.info("Allocating device memory")

        with _device_step(backend, "Couldn't create a buffer"):
            vis_buffer = session.acquire(
                "buffer", backend.input_buffer(queue, visibilities))
            src_buffer = session.acquire(
                "buffer", backend.input_buffer(queue, sources))
            out_buffer = session.acquire(
                "buffer", backend.output_buffer(queue, output))

        with _device_step(backend, "Couldn't create a kernel"):
            kernel = session.acquire("kernel",
                                     backend.create_kernel(program,
                                                           KERNEL_NAME))

        args = bind_arguments(visibilities=vis_buffer,
                              output=out_buffer,
                              visibility_count=num_visibilities,
                              sources=src_buffer,
                              source_count=sources.shape[0])

        if messages:
            log.info("Calling DFT kernel")

        with _device_step(backend, "Couldn't enqueue the kernel"):
            if num_visibilities > 0:
                backend.launch(queue, kernel, args, num_visibilities)

            backend.finish(queue)

        if messages:
            log.info("DFT kernel completed")

        with _device_step(backend, "Couldn't read the buffer"):
            backend.read_buffer(queue, out_buffer, output)

        if messages:
            log.info("Copied visibility data back to host")

    return samples
