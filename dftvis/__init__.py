# -*- coding: utf-8 -*-

"""Top-level package for dftvis."""


# Imports at this level should be avoided so that
# importing dftvis never requires the optional GPU stack

__author__ = """The dftvis Developers"""
__email__ = 'dftvis@example.org'
__version__ = '0.1.0'
