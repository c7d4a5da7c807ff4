"""
Setup script for exactint.

To install:
    pip install .

To install in development mode (with test tooling):
    pip install -e ".[dev]"

To build wheel:
    pip wheel . --no-deps
"""

import os

from setuptools import setup, find_packages

setup(
    name="exactint",
    version="0.3.0",
    author="VesterlundCoder",
    author_email="",
    description="exactint: immutable arbitrary-precision integers with exact number theory",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["exactint", "exactint.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20",
        "sympy>=1.9",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-benchmark",
        ],
    },
    entry_points={
        "console_scripts": [
            "exactint-validate=exactint.validate:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    keywords="bigint arbitrary-precision modular-arithmetic primality miller-rabin",
)
