# -*- coding: utf-8 -*-


from collections import namedtuple


Device = namedtuple("Device", ["kind", "backend", "ordinal", "name"])
Device.__doc__ = """
A compute device able to execute the summation kernel.

Parameters
----------
kind : {'gpu', 'cpu'}
    Device class
backend : str
    Name of the backend driving the device
ordinal : int
    Index of the device within its backend
name : str
    Human readable device name
"""


class DeviceError(Exception):
    """ Unrecoverable failure of a device operation """
    pass


class DeviceNotFound(DeviceError):
    pass


class ProgramBuildError(DeviceError):
    def __init__(self, msg, build_log=""):
        super(ProgramBuildError, self).__init__(msg)
        self.build_log = build_log
