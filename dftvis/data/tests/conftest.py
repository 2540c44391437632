# -*- coding: utf-8 -*-

from os.path import join as pjoin

import pytest

from dftvis.config import RunConfig
from dftvis.data.tests.helpers import write_lines


@pytest.fixture
def config(tmpdir):
    return RunConfig.unit_test(pjoin(str(tmpdir), "sources.txt"),
                               pjoin(str(tmpdir), "visibilities.txt"),
                               pjoin(str(tmpdir), "output.txt"))


@pytest.fixture
def source_file(config):
    return write_lines(config.source_file, [
        "3",
        "0.0 0.0 1.0",
        "10.0 -20.0 2.5",
        "-256.0 511.5 -0.75",
    ])


@pytest.fixture
def visibility_file(config):
    return write_lines(config.vis_src_file, [
        "4",
        "0.0 0.0 0.0 1.0 0.0 1.0",
        "123.456789 -987.654321 12.5 0.25 -0.5 1.0",
        "-1500.0 250.125 -33.75 3.0 4.0 1.0",
        "2.0 3.0 4.0 5.0 6.0 7.0",
    ])
