# coding=utf-8

import re
import sys
from os.path import join, dirname
from setuptools import setup, find_packages

with open(join(dirname(__file__), 'README.rst'), 'r', encoding='utf-8') as fd:
    long_description = fd.read()


def read_version():
    p = join(dirname(__file__), 'ipqueue', '__init__.py')
    with open(p, 'r', encoding='utf-8') as f:
        return re.search(r"__version__ = '([^']+)'", f.read()).group(1)


install_requires = []

with open(join(dirname(__file__), 'requirements/test.txt'), 'r', encoding='utf-8') as f:
    tests_require = [l.strip() for l in f if l.strip()]


def main():
    if sys.version_info < (3, 6):
        raise RuntimeError("The minimal supported Python version is 3.6")

    setup(
        name="ipqueue",
        version=read_version(),
        description="Fixed-capacity indexed priority queue",
        long_description=long_description,
        license="Apache 2",
        zip_safe=False,
        packages=find_packages(exclude=("tests", "tests.*", "benchmarks")),
        python_requires='>=3.6',
        install_requires=install_requires,
        extras_require={"test": tests_require},
        classifiers=[
            "License :: OSI Approved :: Apache Software License",
            "Intended Audience :: Developers",
            "Programming Language :: Python",
            "Programming Language :: Python :: 3",
            "Topic :: Software Development :: Libraries :: Python Modules"
        ]
    )


if __name__ == "__main__":
    main()
