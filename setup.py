#!/usr/bin/env python

# Support setuptools only, distutils has a divergent and more annoying API and
# few folks will lack setuptools.
from setuptools import setup, find_packages

# Version info -- read without importing
_locals = {}
with open("clargs/_version.py") as fp:
    exec(fp.read(), None, _locals)
version = _locals["__version__"]

exclude = ["tests", "tests.*"]

with open("README.rst") as fp:
    long_description = fp.read()


setup(
    name="clargs",
    version=version,
    description="Schema-less command-line argument parsing",
    license="BSD",
    long_description=long_description,
    python_requires=">=3.7",
    install_requires=["lexicon>=2.0", "PyYAML>=5.1"],
    extras_require={"test": ["pytest>=7", "pytest-relaxed>=2"]},
    packages=find_packages(exclude=exclude),
    include_package_data=True,
    entry_points={"console_scripts": ["clargs = clargs.main:program.run"]},
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Software Development :: User Interfaces",
    ],
)
