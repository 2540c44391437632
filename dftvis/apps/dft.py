#!/usr/bin/env python
# -*- coding: utf-8 -*-


import argparse
import logging
import sys

from dftvis.config import CONVENTIONS, DEVICES, RunConfig
from dftvis.data import load_sources, load_visibilities, save_visibilities
from dftvis.dispatch import DeviceError, compute
from dftvis.sampling import RandomSampler
from dftvis.util.cmdline import parse_python_assigns

log = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def create_parser():
    p = argparse.ArgumentParser(
        prog="dftvis",
        description="Direct Fourier Transform of point sources "
                    "onto interferometric visibilities")
    p.add_argument("-s", "--sources", dest="source_file",
                   help="Source input file")
    p.add_argument("-v", "--visibilities", dest="vis_src_file",
                   help="Visibility input file")
    p.add_argument("-o", "--output", dest="vis_file",
                   help="Visibility output file")
    p.add_argument("--synthetic-sources", type=int, metavar="N",
                   help="Generate N random sources "
                        "instead of reading them from file")
    p.add_argument("--synthetic-visibilities", type=int, metavar="N",
                   help="Generate N random visibilities "
                        "instead of reading them from file")
    p.add_argument("--gaussian", action="store_true", default=None,
                   help="Gaussian distribute synthetic visibilities")
    p.add_argument("--force-zero-w", action="store_true", default=None,
                   help="Zero the w coordinate of visibilities "
                        "read from file")
    p.add_argument("-d", "--device", choices=DEVICES)
    p.add_argument("--convention", choices=CONVENTIONS)
    p.add_argument("--seed", type=int,
                   help="Seed for synthetic data generation")
    p.add_argument("-c", "--config", default="",
                   help="Further configuration assignments, "
                        "e.g. \"grid_size=2048.0; cell_size=2e-6\"")
    p.add_argument("-q", "--quiet", action="store_true")
    return p


def run_config(args):
    """ Build the run configuration from parsed arguments """
    overrides = parse_python_assigns(args.config)

    for field in ("source_file", "vis_src_file", "vis_file",
                  "device", "convention"):
        value = getattr(args, field)

        if value is not None:
            overrides[field] = value

    if args.synthetic_sources is not None:
        overrides["synthetic_sources"] = True
        overrides["num_sources"] = args.synthetic_sources

    if args.synthetic_visibilities is not None:
        overrides["synthetic_visibilities"] = True
        overrides["num_visibilities"] = args.synthetic_visibilities

    if args.gaussian is not None:
        overrides["gaussian_distribution_sources"] = True

    if args.force_zero_w is not None:
        overrides["force_zero_w_term"] = True

    if args.quiet:
        overrides["enable_messages"] = False

    return RunConfig.from_settings(**overrides)


def main(argv=None):
    args = create_parser().parse_args(argv)

    logging.basicConfig(level=logging.WARNING if args.quiet
                        else logging.INFO,
                        format="%(asctime)s %(levelname)s "
                               "%(name)s: %(message)s")

    try:
        config = run_config(args)
    except (TypeError, ValueError) as e:
        log.error("Invalid configuration: %s", e)
        return EXIT_FAILURE

    sampler = RandomSampler(args.seed)

    sources = load_sources(config, sampler)

    if sources is None:
        log.error("Source memory was unable to be allocated")
        return EXIT_FAILURE

    visibilities, samples = load_visibilities(config, sampler)

    if visibilities is None or samples is None:
        log.error("Visibility memory was unable to be allocated")
        return EXIT_FAILURE

    try:
        compute(config, sources, visibilities, samples,
                config.num_visibilities)
    except DeviceError as e:
        log.critical("Direct Fourier Transform failed on the device: %s", e)
        return EXIT_FAILURE

    save_visibilities(config, visibilities, samples)

    if config.enable_messages:
        log.info("Direct Fourier Transform operations complete, exiting")

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
