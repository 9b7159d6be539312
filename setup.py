"""Setup script for ASCE reference ET package."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="asce-et",
    version="1.0.0",
    author="ASCE ET Developers",
    description="ASCE-EWRI Standardized daily reference evapotranspiration",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["asce_et.tests", "asce_et.tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Atmospheric Science",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "pandas>=1.3.0,<3",
        "click>=8.0.0",
        "pyyaml>=6.0",
        "loguru>=0.6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=21.0",
            "flake8>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "asce-et=asce_et.cli.interface:cli",
        ],
    },
    include_package_data=True,
)
