# -*- coding: utf-8 -*-


from threading import Lock


__run_marker = {'in_pytest': False}
__run_marker_lock = Lock()


# Tag forcing missing packages to raise, even inside a pytest run.
# Used when testing the exception itself
force_missing_pkg_exception = object()


def in_pytest():
    """ Return True if we're marked as executing inside pytest """
    with __run_marker_lock:
        return __run_marker['in_pytest']


def mark_in_pytest(in_pytest=True):
    """ Mark if we're in a pytest run """
    if type(in_pytest) is not bool:
        raise TypeError('in_pytest %s is not a boolean' % in_pytest)

    with __run_marker_lock:
        __run_marker['in_pytest'] = in_pytest
