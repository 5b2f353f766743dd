# setup.py
from setuptools import setup, find_packages

setup(
    name="gleam_finder",
    version="0.1.0",
    description="Find gleam.io giveaway links published in the last hour",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "gleam-finder=gleam_finder.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
