#!/usr/bin/python3
# Setup file for gitobjects
# Copyright (C) 2026 The gitobjects contributors
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later

from setuptools import setup

gitobjects_version_string = "0.1.0"

setup(
    name="gitobjects",
    version=gitobjects_version_string,
    description="Decoding of git commits, trees, blobs and tags",
    license="Apache-2.0 OR GPL-2.0-or-later",
    python_requires=">=3.10",
    packages=["gitobjects"],
    package_data={"": ["py.typed"]},
    install_requires=[],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Version Control :: Git",
    ],
)
