#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

import re

from setuptools import find_packages, setup  # type: ignore

with open("requirements.txt") as req_file:
    requirements = req_file.read().splitlines()

with open("requirements-develop.txt") as req_file:
    develop_requirements = [
        line for line in req_file.read().splitlines() if line and not line.startswith("-r")
    ]

with open("README.md", "r") as f:
    long_description = f.read()

with open("flashstub/__version__.py", "r") as f:
    version = re.search(r'__version__ = "(.+)"', f.read()).group(1)  # type: ignore

setup(
    name="flashstub",
    version=version,
    description="Catalog of flasher stubs uploaded into chip RAM before fast flashing",
    author="NXP",
    license="BSD-3-Clause",
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms="Windows, Linux, Mac OSX",
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={"test": develop_requirements},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS :: MacOS X",
        "License :: OSI Approved :: BSD License",
        "Topic :: Software Development :: Embedded Systems",
        "Topic :: System :: Hardware",
    ],
    packages=find_packages(exclude=["tests.*", "tests"]),
    package_data={"flashstub": ["data/stubs/*.json"]},
)
