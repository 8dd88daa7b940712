#!/usr/bin/env python3
"""Setup script for fuzzyspan package.
"""

from setuptools import find_packages, setup

setup(
    name="fuzzyspan",
    version="0.1.0",
    description="Approximate substring search and minimal-diff detection under edit distance",
    author="fuzzyspan Team",
    packages=find_packages(include=["fuzzyspan*"]),
    python_requires=">=3.10",
    install_requires=[
        "pandas>=1.5.0",
        "rapidfuzz>=3.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "pandas-stubs>=2.0.0",
            "types-PyYAML>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "fuzzyspan=fuzzyspan.cli:main",
        ],
    },
)
