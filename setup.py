#!/usr/bin/env python

import codecs
import os
import re
from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))


def read(*parts):
    fname = os.path.join(os.path.join(here, *parts))
    with codecs.open(fname, 'r', encoding='utf-8') as fp:
        return fp.read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


test_deps = ['pytest']
install_deps = [
    'click',
]


setup(
    name='epc96',
    version=find_version('epc96', 'version.py'),
    description='EPC-96 (SGTIN-96, GID-96) RFID tag encoding library',
    long_description=read('README.rst'),
    license='GPLv3',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
    keywords='epc rfid sgtin gid gs1 upc',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=install_deps,
    tests_require=test_deps,
    extras_require={'test': test_deps},
    entry_points={
        'console_scripts': [
            'epc96=epc96.cli:cli',
        ],
    },
)
