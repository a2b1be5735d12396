#!/usr/bin/env python3
# =============================================================================
#  sdfv-graphlib setup.py
#
#  Graph containers and control-flow style analyses (reachability, cycle
#  enumeration, back-edge / natural-loop detection) for the data-centric
#  IR visualizer.
#
#  Usage:
#      pip install -e ".[dev]"
#      python -m build
#      python -m pytest
# =============================================================================

from __future__ import annotations

import re
from pathlib import Path

from setuptools import setup, find_packages

# ---------------------------------------------------------------------------
#  Read version from the package so we have a single source of truth.
# ---------------------------------------------------------------------------
_HERE = Path(__file__).resolve().parent


def _read_version() -> str:
    """Extract ``__version__`` from sdfv_graphlib/__init__.py."""
    init = _HERE / "sdfv_graphlib" / "__init__.py"
    text = init.read_text(encoding="utf-8")
    match = re.search(r'^__version__\s*=\s*"([^"]+)"', text, re.MULTILINE)
    if match:
        return match.group(1)
    return "0.0.0"


def _read_long_description() -> str:
    """Read README.md for the long description."""
    readme = _HERE / "README.md"
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


_TEST_REQUIRES = [
    "pytest>=7.0",
    "pytest-cov>=4.0",
]

setup(
    name="sdfv-graphlib",
    version=_read_version(),
    description=(
        "Graph containers, reachability, elementary-cycle enumeration "
        "and back-edge/natural-loop detection for IR visualization."
    ),
    long_description=_read_long_description(),
    long_description_content_type="text/markdown",
    license="MIT",
    author="sdfv-graphlib contributors",
    python_requires=">=3.10",
    packages=find_packages(
        include=[
            "sdfv_graphlib",
            "sdfv_graphlib.*",
        ],
        exclude=[
            "tests",
            "tests.*",
        ],
    ),
    package_data={
        "sdfv_graphlib": ["py.typed"],
    },
    install_requires=[],
    extras_require={
        "test": list(_TEST_REQUIRES),
        "dev": _TEST_REQUIRES + [
            "ruff>=0.4",
            "mypy>=1.10",
            "black>=24.0",
            "isort>=5.13",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Compilers",
        "Topic :: Scientific/Engineering :: Visualization",
        "Typing :: Typed",
    ],
    keywords=[
        "graph",
        "control-flow",
        "cycles",
        "back-edges",
        "natural-loops",
        "dominators",
        "visualization",
    ],
    zip_safe=False,
)
