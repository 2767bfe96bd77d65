#!/usr/bin/env python
"""
rook
====

rook is a Python client for `Sentry <https://sentry.io/>`_. It turns
messages, exceptions and recovered failures into events, runs them through
sampling, scopes and a user supplied ``before_send`` filter, and hands them
to a pluggable transport.
"""

from setuptools import setup, find_packages
import re
import ast


_version_re = re.compile(r'VERSION\s+=\s+(.*)')

with open('rook/__init__.py', 'rb') as f:
    version = str(ast.literal_eval(_version_re.search(
        f.read().decode('utf-8')).group(1)))


install_requires = []

requests_requires = [
    'requests>=2.0',
]

tests_require = [
    'flake8',
    'mock',
    'pytest',
    'pytest-timeout',
] + requests_requires


setup(
    name='rook',
    version=version,
    author='Sentry',
    author_email='hello@getsentry.com',
    url='https://github.com/getsentry/rook',
    description='rook is a client for Sentry (https://sentry.io)',
    long_description=__doc__,
    packages=find_packages(exclude=("tests", "tests.*",)),
    zip_safe=False,
    python_requires='>=3.7',
    extras_require={
        'requests': requests_requires,
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
