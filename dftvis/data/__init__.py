# flake8: noqa

from dftvis.data.loader import load_sources, load_visibilities
from dftvis.data.files import save_visibilities
