#!/usr/bin/env python
"""
Setup script for PyLineSearch

This uses setuptools, the standard Python mechanism for installing packages.
For the easiest installation just type::

    pip install .

In addition, there is another command::

python setup.py clean - Clean all trash (*.pyc, emacs backups, etc.)

The test suite runs with pytest, after installing the test extra::

    pip install .[test]
    pytest tests

"""

import os

from setuptools import setup, find_packages
from setuptools import Command

MAJOR = 0
MINOR = 1
MICRO = 0
__version__ = '%d.%d.%d' % (MAJOR, MINOR, MICRO)


def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()


class clean(Command):
    description = 'Remove build and trash files'
    user_options = [("all", "a", "the same")]

    def initialize_options(self):
        self.all = None

    def finalize_options(self):
        pass

    def run(self):
        os.system(
            "rm -fr ./*.pyc ./*~ ./*/*.pyc ./*/*~ ./*/*/*.pyc ./*/*/*~ "
            "./.pytest_cache")
        os.system("rm -fr build")
        os.system("rm -fr dist")


setup(
    name="PyLineSearch",
    version=__version__,
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires=">=3.7",
    install_requires=[
        "numpy>=1.6"
    ],
    extras_require={
        'test': ['pytest', 'pytest-mock', 'scipy>=1.0'],
    },
    cmdclass={
        'clean': clean
    },
    description="More-Thuente line search for the strong Wolfe conditions",
    long_description=read('README.rst'),
    license="BSD",
    keywords="optimization, line search, Wolfe conditions, quasi-Newton",
    include_package_data=True,
    platforms=["any"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Topic :: Scientific/Engineering",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
