#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst') as history_file:
    history = history_file.read()

requirements = [ ]

test_requirements = ['pytest>=3', ]

setup(
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    description="Look up a single value in an ini file",
    entry_points={
        'console_scripts': [
            'inireader=inireader.commandline:main',
        ],
    },
    extras_require={'test': test_requirements},
    install_requires=requirements,
    license="Apache License v2.0",
    long_description=readme + '\n\n' + history,
    include_package_data=True,
    keywords='ini config lookup',
    name='pyinireader',
    packages=find_packages(include=['inireader', 'inireader.*']),
    test_suite='tests',
    tests_require=test_requirements,
    version='0.1.0',
    zip_safe=False,
)
