#!/usr/bin/env python3
"""
HexPrintFile - hex and text dump of a file, or a portion of a file
"""
from setuptools import setup, find_namespace_packages
from pathlib import Path

# Read README for long description
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

setup(
    name="hexprintfile",
    version="1.0.0",
    author="HexPrintFile Contributors",
    author_email="",
    description="Print the hex representation of a file, or portion of a file",
    long_description=long_description,
    long_description_content_type="text/markdown",
    # hexprint and tools carry no __init__.py
    packages=find_namespace_packages(include=["hexprint", "hexprint.*", "tools", "tools.*"]),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "hexprintfile=tools.hex_print_file:cli",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Debuggers",
        "Topic :: Utilities",
    ],
    keywords="hexdump, hex, binary, file, viewer",
)
