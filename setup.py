#!/usr/bin/env python3
"""
Setup script for Grounding Simulator application.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the contents of README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text() if (this_directory / "README.md").exists() else ""

# Read requirements
requirements = []
if (this_directory / "requirements.txt").exists():
    with open(this_directory / "requirements.txt", 'r') as f:
        requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

dev_requirements = []
if (this_directory / "requirements-dev.txt").exists():
    with open(this_directory / "requirements-dev.txt", 'r') as f:
        dev_requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

setup(
    name="grounding-simulator",
    version="0.1.0",
    author="Antenna Grounding Engineering",
    description="Grounding resistance estimation for antenna installations with driven rods and radials",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    py_modules=["main"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "dev": dev_requirements,
        "test": [
            "pytest>=7.4.0",
            "pytest-qt>=4.2.0",
            "coverage>=7.2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "grounding-simulator=main:main",
        ],
    },
    include_package_data=True,
    package_data={
        "": ["resources/**/*", "*.json"],
    },
    zip_safe=False,
)
