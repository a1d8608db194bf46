#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Setup script for m6APred package
"""

from setuptools import setup, find_packages

setup(
    name="m6APred",
    version="0.1.0",
    description="m6APred: m6A RNA methylation site prediction from site features and DNA 5-mers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "numpy>=1.19.0",
        "pandas>=1.1.0",
        "scikit-learn>=0.23.0",
        "datatable>=0.11.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'm6APred=m6APred.__main__:main',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
    python_requires=">=3.7",
)
