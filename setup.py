"""Build script for newtonloss.

Usage:
    pip install -e .          # editable install
    pip install -e .[test]    # with test dependencies
"""

from setuptools import setup, find_packages

setup(
    name="newtonloss",
    version="0.1.0",
    description=(
        "Regularized second-order loss objectives for gradient-boosted "
        "decision trees"
    ),
    python_requires=">=3.8",
    packages=find_packages(include=["newtonloss", "newtonloss.*"]),
    install_requires=[
        "numpy>=1.20",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "scikit-learn>=1.0",
        ],
    },
)
