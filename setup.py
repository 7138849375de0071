#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

setup(
    name="base_conversion",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "loguru>=0.6.0",
        "typer>=0.9.0",
        "rich>=13.0.0",
    ],
    extras_require={
        'yaml': ['PyYAML>=6.0'],
        'test': ['pytest>=7.0', 'PyYAML>=6.0'],
    },
    entry_points={
        'console_scripts': [
            'base-conversion=base_conversion.cli:main',
        ],
    },
    description="Convert digit strings between binary, octal, decimal and hexadecimal",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Utilities",
    ],
    python_requires='>=3.10',
)
