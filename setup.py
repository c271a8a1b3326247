#!/usr/bin/env python

"""
 * Copyright(c) 2022 ZettaScale Technology and others
 *
 * This program and the accompanying materials are made available under the
 * terms of the Eclipse Public License v. 2.0 which is available at
 * http://www.eclipse.org/legal/epl-2.0, or the Eclipse Distribution License
 * v. 1.0 which is available at
 * http://www.eclipse.org/org/documents/edl-v10.php.
 *
 * SPDX-License-Identifier: EPL-2.0 OR BSD-3-Clause
"""

from pathlib import Path
from setuptools import setup, find_packages

this_directory = Path(__file__).resolve().parent

readme = this_directory / 'README.md'
long_description = readme.read_text(encoding='utf-8') if readme.exists() else ""


setup(
    name='enumkit',
    version='0.9.0',
    description='Runtime registry of enumerated integer types with name and bit flag string codecs',
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="EPL-2.0, BSD-3-Clause",
    platforms=["Windows", "Linux", "Mac OS-X", "Unix"],
    keywords=[
        "enum", "enumeration", "bitflag", "bitmask",
        "registry", "json", "serialization"
    ],
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Eclipse Public License 2.0 (EPL-2.0)",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Operating System :: OS Independent"
    ],
    packages=find_packages(".", include=("enumkit", "enumkit.*")),
    package_data={
        "enumkit": ["py.typed"]
    },
    entry_points={
        "console_scripts": [
            "enumkit=enumkit.tools.cli.main:cli"
        ],
    },
    python_requires='>=3.7',
    install_requires=[
        "typing-extensions>=3.7;python_version<'3.8'",
        "rich-click>=1.5",
        "rich>=12.0"
    ],
    extras_require={
        "dev": [
            "pytest>=6.2",
            "pytest-cov",
            "pytest-mock",
            "flake8",
            "flake8-bugbear",
            "twine"
        ],
        "docs": [
            "Sphinx>=4.0.0",
            "sphinx-rtd-theme>=0.5.2"
        ]
    },
    zip_safe=False
)
