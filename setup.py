#!/usr/bin/env python
"""
Brake
=====

Brake is a Python client for Airbrake-compatible error services. It turns
exceptions into notices and posts them in the background, so that reporting
an error never blocks or breaks the application that hit it.
"""

from setuptools import setup, find_packages
import re
import ast


_version_re = re.compile(r'VERSION\s+=\s+(.*)')

with open('brake/__init__.py', 'rb') as f:
    version = str(ast.literal_eval(_version_re.search(
        f.read().decode('utf-8')).group(1)))


install_requires = [
    'blinker>=1.4',
    'defusedxml>=0.6',
    'requests>=2.0',
]

tests_require = [
    'mock',
    'pytest>=6.0',
    'responses',
]


setup(
    name='brake',
    version=version,
    author='Brake Team',
    url='https://pypi.org/project/brake/',
    description='Brake is an exception notifier for Airbrake-compatible services',
    long_description=__doc__,
    packages=find_packages(exclude=("tests", "tests.*",)),
    zip_safe=False,
    python_requires='>=3.7',
    extras_require={
        'tests': tests_require,
    },
    license='BSD',
    install_requires=install_requires,
    include_package_data=True,
    classifiers=[
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python',
        'Topic :: Software Development',
    ],
)
