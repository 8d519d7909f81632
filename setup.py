import os

from setuptools import find_packages, setup

with open(
    os.path.join(os.path.abspath(os.path.dirname(__file__)), "README.md"),
    encoding="utf-8",
) as f:
    long_description = f.read()

setup(
    name="tabulated",
    version="1.0.0",
    description="Real functions known only at a finite set of sample points",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords="interpolation,tabulated functions,numerical differentiation,threading",
    license="Apache",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
        "dev": ["pytest", "flake8", "isort", "black", "mypy"],
    },
    packages=find_packages(exclude=["tests", "tests.*"]),
    test_suite="tests",
)
