#!/usr/bin/env python
# -*- coding: utf-8 -*-


import sys

import pytest

from dftvis.util.requirements import (requires_optional,
                                      MissingPackageException)
from dftvis.util.testing import force_missing_pkg_exception as force_tag


def test_requires_optional_present():
    @requires_optional('numpy', None)
    def f(a, b=2):
        return a + b

    assert f(1) == 3


def test_requires_optional_missing_import():
    @requires_optional('sys', 'clearly_missing_gpu_library', force_tag)
    def create_context(*args, **kwargs):
        pass

    with pytest.raises(MissingPackageException) as e:
        create_context(1, ordinal=2)

    assert ("create_context requires installation of the following "
            "packages: ('clearly_missing_gpu_library',)." in str(e.value))


def test_requires_optional_skips_in_pytest():
    @requires_optional('clearly_missing_gpu_library')
    def f():
        pass

    with pytest.raises(pytest.skip.Exception):
        f()


def test_requires_optional_pass_import_error():
    assert 'clearly_missing_and_nonexistent_package' not in sys.modules

    try:
        import clearly_missing_and_nonexistent_package  # noqa
    except ImportError as e:
        me = e
    else:
        me = None

    with pytest.raises(ImportError) as e:
        @requires_optional('sys', 'os', me, force_tag)
        def f(*args, **kwargs):
            pass

    msg = str(e.value)
    assert "Successfully imported ['sys', 'os']" in msg
    assert "clearly_missing_and_nonexistent_package" in msg


def test_requires_optional_bad_requirement():
    with pytest.raises(TypeError, match="requirements must be"):
        requires_optional(1)
