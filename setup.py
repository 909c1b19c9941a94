#!/usr/bin/env python3
"""
ECMA-BASIC install script for source distribution

(c) 2015--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import os
import json
from io import open

from setuptools import find_packages, setup


###############################################################################
# get descriptions and version number

# file location
HERE = os.path.abspath(os.path.dirname(__file__))

# obtain metadata without importing the package (to avoid breaking sdist install)
with open(os.path.join(HERE, 'ecmabasic', 'basic', 'data', 'meta.json'), 'r') as meta:
    _METADATA = json.load(meta)
    VERSION = _METADATA['version']
    AUTHOR = _METADATA['author']


###############################################################################
# setup parameters

SETUP_OPTIONS = dict(
    name='ecmabasic',
    version=VERSION,
    author=AUTHOR,
    description='ECMA-55 Minimal BASIC interpreter',
    license='GPLv3',
    python_requires='>=3.9',

    # contents
    # only include subpackages of ecmabasic: exclude tests etc
    packages=find_packages(include=['ecmabasic', 'ecmabasic.*']),
    package_data={
        'ecmabasic.basic.data': ['meta.json'],
        'ecmabasic.data': ['USAGE.txt'],
    },
    install_requires=['numpy'],
    extras_require={
        'test': ['pytest'],
    },
    # launchers
    entry_points=dict(
        console_scripts=['ecmabasic=ecmabasic:main'],
    ),
)

###############################################################################
# run the setup

# perform the installation
setup(**SETUP_OPTIONS)
