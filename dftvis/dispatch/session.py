# -*- coding: utf-8 -*-


from contextlib import ExitStack
import logging

log = logging.getLogger(__name__)


class DeviceSession(object):
    """
    Owns the device resources acquired during a single compute call.

    Each acquired resource is released by the backend's
    ``release_<kind>`` method when the session exits,
    in the reverse order of acquisition and regardless of
    whether the session exits normally or with an exception.

    .. code-block:: python

        with DeviceSession(backend) as session:
            context = session.acquire("context",
                                      backend.create_context(device))
            queue = session.acquire("queue",
                                    backend.create_queue(context))
            ...
    """

    def __init__(self, backend):
        self.backend = backend
        self._stack = ExitStack()

    def __enter__(self):
        self._stack.__enter__()
        return self

    def __exit__(self, etype, evalue, etraceback):
        return self._stack.__exit__(etype, evalue, etraceback)

    def acquire(self, kind, resource):
        try:
            release = getattr(self.backend, "release_%s" % kind)
        except AttributeError:
            raise ValueError("%s can't release '%s' resources"
                             % (type(self.backend).__name__, kind))

        self._stack.callback(self._release, kind, release, resource)
        return resource

    @staticmethod
    def _release(kind, release, resource):
        log.debug("Releasing %s", kind)
        release(resource)
