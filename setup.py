#!/usr/bin/env python
import os
import re

from setuptools import find_packages, setup


def get_version():
    path = os.path.join(os.path.dirname(__file__), "src", "packbits_rle", "version.py")
    with open(path) as f:
        return re.search(r'__version__ = "([^"]+)"', f.read()).group(1)


setup(
    name="packbits-rle",
    version=get_version(),
    description="PackBits run-length encoding with fixed-buffer and windowed decoding",
    long_description=(
        "Pure Python PackBits (MacPaint/TIFF) codec with bounded destination "
        "buffers, chunked unpacking and windowed extraction."
    ),
    license="MIT",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "attrs>=23.1.0",
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
            "ipython",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Topic :: System :: Archiving :: Compression",
    ],
)
