# setup.py
from setuptools import setup, find_packages

setup(
    name="page_scout",
    version="0.1.0",
    description="PageScout: DOM snapshot and Markdown extraction engine for browser automation",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "beautifulsoup4>=4.12",
        "lxml>=4.9",
        "click>=8.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.4"],
    },
    entry_points={
        "console_scripts": ["page_scout=page_scout.cli:cli"],
    },
    python_requires=">=3.11",
)
