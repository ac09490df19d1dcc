"""
lazyseq: Lazy, Composable Sequences for Python

A pull-based pipeline library over finite and infinite ordered data:
1. Single-pass iterator state machines for every combinator
2. A three-valued size lattice (fixed, available, infinite)
3. Read/write list views over lists of lists
4. Primitive sequences materialising into numpy arrays
"""

from setuptools import setup, find_packages

setup(
    name="lazyseq",
    version="1.0.0",
    description="Lazy, composable sequences over finite and infinite ordered data",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="lazyseq developers",
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.24.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
