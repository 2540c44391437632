# -*- coding: utf-8 -*-


import pytest

from dftvis.util.cmdline import parse_python_assigns


def test_parse_python_assigns():
    assigns = parse_python_assigns("grid_size=2048.0; "
                                   "synthetic_sources=True; "
                                   "vis_file='out.txt'; "
                                   "num_sources = num_visibilities = 10")

    assert assigns == {
        'grid_size': 2048.0,
        'synthetic_sources': True,
        'vis_file': 'out.txt',
        'num_sources': 10,
        'num_visibilities': 10,
    }


def test_parse_empty_assigns():
    assert parse_python_assigns("") == {}
    assert parse_python_assigns(None) == {}


@pytest.mark.parametrize("assign_str", [
    "grid_size",
    "grid_size = open('file')",
    "grid_size = ",
])
def test_parse_invalid_assigns(assign_str):
    with pytest.raises(ValueError):
        parse_python_assigns(assign_str)


def test_parse_invalid_target():
    with pytest.raises(TypeError):
        parse_python_assigns("config.grid_size = 1.0")
