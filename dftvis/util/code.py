# -*- coding: utf-8 -*-


from functools import wraps
from threading import Lock


def format_code(code):
    """
    Formats some code with line numbers

    Parameters
    ----------
    code : str
        Code

    Returns
    -------
    str
        Code prefixed with line numbers
    """
    lines = ['']
    lines.extend(["%-5d %s" % (i, line) for i, line
                  in enumerate(code.split('\n'), 1)])
    return '\n'.join(lines)


class memoize_on_key(object):
    """
    Memoize based on a key function supplied by the user.
    The key function receives the arguments of the decorated function
    and returns a hashable key identifying the result.

    Kernel programs are expensive to build and depend only
    on the backend, the sign convention and the compile options,
    so they are cached on exactly those:

    .. code-block:: python

        def _key_fn(convention, block_size):
            return (convention, block_size)

        @memoize_on_key(_key_fn)
        def _build_module(convention, block_size):
            code = render_kernel(convention, block_size)
            return cp.RawModule(code=code)
    """

    def __init__(self, key_fn):
        self._key_fn = key_fn
        self._lock = Lock()
        self._cache = {}

    def __call__(self, fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            key = self._key_fn(*args, **kwargs)

            with self._lock:
                try:
                    return self._cache[key]
                except KeyError:
                    self._cache[key] = entry = fn(*args, **kwargs)
                    return entry

        wrapper.cache_clear = self._cache.clear
        return wrapper
