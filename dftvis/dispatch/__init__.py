# flake8: noqa

from dftvis.dispatch.arguments import KERNEL_PARAMETERS, bind_arguments
from dftvis.dispatch.backends import select_device, get_backend
from dftvis.dispatch.compute import compute
from dftvis.dispatch.device import (Device, DeviceError, DeviceNotFound,
                                    ProgramBuildError)
from dftvis.dispatch.session import DeviceSession
