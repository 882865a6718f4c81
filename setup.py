#!/usr/bin/env python
"""
sentry-client
=============

An asyncio client for `Sentry <https://sentry.io/>`_. It parses a DSN,
serializes events (messages, exceptions and stack traces) and submits each
one to the store endpoint with a single awaited HTTP request, reporting the
ID assigned by the server or the reason the event was rejected.
"""

from setuptools import setup, find_packages
import re
import ast


_version_re = re.compile(r'VERSION\s+=\s+(.*)')

with open('sentry_client/__init__.py', 'rb') as f:
    version = str(ast.literal_eval(_version_re.search(
        f.read().decode('utf-8')).group(1)))


install_requires = [
    'aiohttp>=3.9',
]

tests_require = [
    'flake8',
    'mock',
    'pytest>=7.0',
    'pytest-asyncio>=0.21',
    'pytest-mock',
]


setup(
    name='sentry-client',
    version=version,
    author='Sentry',
    author_email='hello@getsentry.com',
    url='https://github.com/getsentry/sentry-client-python',
    description='An asyncio client for Sentry (https://sentry.io)',
    long_description=__doc__,
    packages=find_packages(exclude=("tests", "tests.*",)),
    zip_safe=False,
    python_requires='>=3.8',
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
        'Framework :: AsyncIO',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python',
        'Topic :: Software Development',
    ],
)
