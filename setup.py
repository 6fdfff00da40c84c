"""Setup script for numround."""
from setuptools import find_packages, setup


setup(
    name="numround",
    version="0.1.0",
    description=(
        "Rounding by decimal places, zeros, and significant figures across "
        "numpy's fixed-width numeric kinds."
    ),
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
