#!/usr/bin/env python

"""Distutils setup file"""

from setuptools import setup, find_packages

# Metadata
PACKAGE_NAME = "TagDispatch"
PACKAGE_VERSION = "0.1.0"

setup(
    name=PACKAGE_NAME,
    version=PACKAGE_VERSION,

    description="Tag-based Single Dispatch Generic Functions for Python",
    license="PSF or ZPL",

    python_requires=">=3.8",
    package_dir = {'':'src'},
    packages    = find_packages('src'),
    extras_require = {'test': ['pytest']},
)
