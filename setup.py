"""Setup configuration for propbridge."""

from setuptools import setup, find_packages

setup(
    name="propbridge",
    version="0.1.0",
    description="Run Hypothesis property collections from a test-runner host",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "hypothesis>=6.100.0",
        "pyyaml>=6.0",
        "click>=8.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "propbridge=propbridge.cli:main",
        ],
    },
)
