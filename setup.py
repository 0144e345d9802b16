"""Package setup for aiseg2."""

from setuptools import setup, find_packages

setup(
    name="aiseg2",
    version="1.0.0",
    description="Client for the Panasonic AiSEG2 gateway control panel",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "aiseg2=aiseg2.cli:main",
        ],
    },
)
