"""
Setup script for pysatl-continuous.
"""

from setuptools import find_packages, setup

setup(
    name="pysatl-continuous",
    version="0.1.0",
    description="Closed-form PDF and CDF functions of continuous probability distributions.",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        "numpy>=1.26",
        "scipy>=1.11",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
)
