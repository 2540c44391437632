# -*- coding: utf-8 -*-


import importlib

from decorator import decorate

from dftvis.util.testing import in_pytest, force_missing_pkg_exception


def _missing_packages(fn, packages, import_errors):
    msg = ("%s requires installation of the following packages: %s."
           % (fn, tuple(packages)))

    if len(import_errors) > 0:
        msg += "\n" + "\n".join(str(e) for e in import_errors)

    return msg


class MissingPackageException(Exception):
    pass


def requires_optional(*requirements):
    """
    Decorator returning either the original function,
    or a replacement raising a :class:`MissingPackageException`
    when called, depending on whether the supplied
    ``requirements`` can be imported.

    Inside a pytest run the replacement calls :func:`pytest.skip`
    instead, so that GPU tests are skipped on hosts without cupy.

    .. code-block:: python

        try:
            import cupy as cp
        except ImportError as e:
            opt_import_error = e
        else:
            opt_import_error = None

        @requires_optional('cupy', opt_import_error)
        def create_context(self, device):
            return cp.cuda.Device(device.ordinal)

    Parameters
    ----------
    requirements : iterable of string, None or ImportError
        Package names required by the decorated function.
        ImportErrors (or None, indicating their absence)
        captured by the caller's own imports may also be supplied.
        They are reported if the named packages import successfully,
        as that points at a problem in the caller's import logic.

    Returns
    -------
    callable
        Either the original function, or a wrapper that raises
        :class:`MissingPackageException` or skips the current test.
    """
    have_requirements = True
    missing_requirements = []
    honour_pytest_marker = True
    actual_imports = []
    import_errors = []

    for requirement in requirements:
        if requirement is None:
            continue
        elif isinstance(requirement, ImportError):
            import_errors.append(requirement)
        elif isinstance(requirement, str):
            try:
                importlib.import_module(requirement)
            except ImportError:
                missing_requirements.append(requirement)
                have_requirements = False
            else:
                actual_imports.append(requirement)
        elif requirement is force_missing_pkg_exception:
            honour_pytest_marker = False
        else:
            raise TypeError("requirements must be "
                            "None, strings or ImportErrors. "
                            "Received %s" % requirement)

    if have_requirements and len(import_errors) > 0:
        raise ImportError("Successfully imported %s "
                          "but the following user-supplied "
                          "ImportErrors ocurred: \n%s" %
                          (actual_imports,
                           '\n'.join(str(e) for e in import_errors)))

    def _function_decorator(fn):
        if have_requirements:
            return fn

        def _wrapper(*args, **kwargs):
            msg = _missing_packages(fn.__name__, missing_requirements,
                                    import_errors)

            if honour_pytest_marker and in_pytest():
                import pytest
                pytest.skip(msg)

            raise MissingPackageException(msg)

        return decorate(fn, _wrapper)

    return _function_decorator
