# -*- coding: utf-8 -*-


from donfig import Config

from dftvis.constants import c as lightspeed


class DFTVisConfig(Config):
    def numba_parallel(self, key):
        value = self.get(key, False)

        if value is False:
            return {'parallel': False}
        elif value is True:
            return {'parallel': True}
        elif isinstance(value, dict):
            value['parallel'] = True
            return value
        else:
            raise TypeError("key %s (%s) is not a bool or a dict"
                            % (key, value))


_DEFAULTS = {
    "dft": {
        "num_sources": 1,
        "num_visibilities": 1,
        "synthetic_sources": False,
        "synthetic_visibilities": False,
        "gaussian_distribution_sources": False,
        "force_zero_w_term": False,
        "source_file": "500_synthetic_sources.csv",
        "vis_src_file": "sample_10k_vis_input.csv",
        "vis_file": "DFT_visibilities.txt",
        "grid_size": 1024.0,
        "cell_size": 4.848136811095360e-06,
        "frequency_hz": 300000000.0,
        "enable_messages": True,
        "device": "auto",
        "convention": "fourier",
        "cuda": {"block_size": 256},
        "cpu": {"parallel": False},
    }
}

settings = DFTVisConfig("dftvis", defaults=[_DEFAULTS])


DEVICES = ("auto", "gpu", "cpu")
CONVENTIONS = ("fourier", "casa")


class RunConfig(object):
    """
    Parameters of a single Direct Fourier Transform run.

    Each run builds its own instance. The grid derived quantities
    (``uv_scale`` and the u/v bounds) are properties of
    ``grid_size`` and ``cell_size`` and can't be set directly.

    Parameters
    ----------
    num_sources : int
        Number of sources to generate. Overwritten by the
        count in ``source_file`` when sources are loaded from file.
    num_visibilities : int
        Number of visibilities to generate. Overwritten by the
        count in ``vis_src_file`` when visibilities are loaded from file.
    synthetic_sources : bool
        Generate random sources rather than reading ``source_file``.
    synthetic_visibilities : bool
        Generate random visibilities rather than reading ``vis_src_file``.
    gaussian_distribution_sources : bool
        Scale synthetic visibility coordinates by gaussian factors,
        concentrating them towards the centre of the grid.
    force_zero_w_term : bool
        Zero the w coordinate of visibilities read from file.
    source_file : str
        Source input file.
    vis_src_file : str
        Visibility input file.
    vis_file : str
        Visibility output file.
    grid_size : float
        Dimension of the Fourier domain grid.
    cell_size : float
        Fourier domain grid cell size in radians.
    frequency_hz : float
        Observing frequency of the visibility uvw coordinates.
    enable_messages : bool
        Log progress messages.
    device : {'auto', 'gpu', 'cpu'}
        Compute device preference.
    convention : {'fourier', 'casa'}
        Uses the :math:`e^{-2 \\pi \\mathit{i}}` sign convention
        if ``fourier`` and :math:`e^{2 \\pi \\mathit{i}}` if ``casa``.
    """

    __slots__ = ("num_sources", "num_visibilities",
                 "synthetic_sources", "synthetic_visibilities",
                 "gaussian_distribution_sources", "force_zero_w_term",
                 "source_file", "vis_src_file", "vis_file",
                 "grid_size", "cell_size", "frequency_hz",
                 "enable_messages", "device", "convention")

    def __init__(self, num_sources=1, num_visibilities=1,
                 synthetic_sources=False, synthetic_visibilities=False,
                 gaussian_distribution_sources=False,
                 force_zero_w_term=False,
                 source_file="500_synthetic_sources.csv",
                 vis_src_file="sample_10k_vis_input.csv",
                 vis_file="DFT_visibilities.txt",
                 grid_size=1024.0,
                 cell_size=4.848136811095360e-06,
                 frequency_hz=300000000.0,
                 enable_messages=True,
                 device="auto",
                 convention="fourier"):

        if device not in DEVICES:
            raise ValueError("device %s not in %s" % (device, DEVICES))

        if convention not in CONVENTIONS:
            raise ValueError("convention %s not in %s"
                             % (convention, CONVENTIONS))

        for field, count in (("num_sources", num_sources),
                             ("num_visibilities", num_visibilities)):
            if int(count) < 0:
                raise ValueError("%s %d is negative" % (field, int(count)))

        self.num_sources = int(num_sources)
        self.num_visibilities = int(num_visibilities)
        self.synthetic_sources = bool(synthetic_sources)
        self.synthetic_visibilities = bool(synthetic_visibilities)
        self.gaussian_distribution_sources = bool(
            gaussian_distribution_sources)
        self.force_zero_w_term = bool(force_zero_w_term)
        self.source_file = source_file
        self.vis_src_file = vis_src_file
        self.vis_file = vis_file
        self.grid_size = float(grid_size)
        self.cell_size = float(cell_size)
        self.frequency_hz = float(frequency_hz)
        self.enable_messages = bool(enable_messages)
        self.device = device
        self.convention = convention

    @property
    def uv_scale(self):
        """ Scalar for visibility coordinates """
        return self.grid_size * self.cell_size

    @property
    def min_u(self):
        return -(self.grid_size / 2.0)

    @property
    def max_u(self):
        return self.grid_size / 2.0

    @property
    def min_v(self):
        return -(self.grid_size / 2.0)

    @property
    def max_v(self):
        return self.grid_size / 2.0

    @property
    def wavelength_to_meters(self):
        """ Scales visibility coordinates from wavelengths to meters """
        return self.frequency_hz / lightspeed

    @classmethod
    def from_settings(cls, **overrides):
        """
        Create a configuration from the ``dft`` section of
        :data:`settings`, updated with ``overrides``.
        """
        fields = {k: settings.get("dft.%s" % k) for k in cls.__slots__}
        unknown = set(overrides).difference(fields)

        if unknown:
            raise ValueError("Unknown configuration fields %s. "
                             "Valid fields are %s"
                             % (sorted(unknown), list(cls.__slots__)))

        fields.update(overrides)
        return cls(**fields)

    @classmethod
    def unit_test(cls, source_file, vis_src_file, vis_file):
        """ Fixed configuration for reproducible comparisons """
        return cls(num_sources=1,
                   num_visibilities=1,
                   synthetic_sources=False,
                   synthetic_visibilities=False,
                   gaussian_distribution_sources=False,
                   force_zero_w_term=False,
                   source_file=source_file,
                   vis_src_file=vis_src_file,
                   vis_file=vis_file,
                   grid_size=1024.0,
                   cell_size=4.848136811095360e-06,
                   frequency_hz=300000000.0,
                   enable_messages=False)

    def asdict(self):
        return {k: getattr(self, k) for k in self.__slots__}

    def replace(self, **fields):
        """ Return a copy of this configuration with ``fields`` changed """
        values = self.asdict()
        unknown = set(fields).difference(values)

        if unknown:
            raise ValueError("Unknown configuration fields %s"
                             % sorted(unknown))

        values.update(fields)
        return type(self)(**values)

    def __eq__(self, other):
        if not isinstance(other, RunConfig):
            return NotImplemented

        return self.asdict() == other.asdict()

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__,
                           ", ".join("%s=%r" % kv
                                     for kv in self.asdict().items()))
