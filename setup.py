#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

requirements = [
    "decorator",
    "donfig >= 0.7.0",
    "jinja2 >= 2.10",
    "numpy >= 1.22.0",
    "numba >= 0.57.0",
    "setuptools",
]

extras_require = {
    "cuda": ["cupy >= 9.0.0"],
    "testing": ["pytest", "flaky"],
}

extras_require["complete"] = sorted(set(sum(extras_require.values(), [])))

setup_requirements = ["setuptools"]
test_requirements = extras_require["testing"]


with open("README.rst") as readme_file:
    readme = readme_file.read()

setup(
    author="The dftvis Developers",
    author_email="dftvis@example.org",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Astronomy",
    ],
    description="Direct Fourier Transform of point sources "
                "onto radio interferometric visibilities",
    entry_points={
        "console_scripts": ["dftvis = dftvis.apps.dft:main"],
    },
    extras_require=extras_require,
    install_requires=requirements,
    license="BSD-3-Clause",
    long_description=readme,
    long_description_content_type="text/x-rst",
    include_package_data=True,
    package_data={"dftvis": ["kernels/*.cu.j2"]},
    keywords="dftvis",
    name="dftvis",
    packages=find_packages(include=["dftvis", "dftvis.*"]),
    python_requires=">=3.10",
    setup_requires=setup_requirements,
    tests_require=test_requirements,
    version="0.1.0",
    zip_safe=False,
)
