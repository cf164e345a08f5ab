#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
from setuptools import setup
from setuptools import find_packages

setup(
    name='heatdbconfig',
    description='Heat Database Configuration',
    version='1.0.0',
    license='Apache-2.0',
    platforms=['any'],
    provides=['heatdbconfig'],
    packages=find_packages(include=['heatdbconfig', 'heatdbconfig.*']),
    install_requires=[
        'oslo.config>=6.0.0',
        'oslo.i18n>=3.15.3',
        'oslo.log>=3.36.0',
        'oslo.utils>=3.33.0',
        'PyYAML>=3.10',
    ],
    extras_require={
        'test': [
            'fixtures>=3.0.0',
            'mock>=2.0.0',
            'stestr>=1.0.0',
            'testtools>=2.2.0',
            'pytest',
        ],
    },
    package_data={},
    include_package_data=False,
    entry_points={
        'console_scripts': [
            'heat-db-config = heatdbconfig.cmd.manage:main',
        ],
        'oslo.config.opts': [
            'heatdbconfig = heatdbconfig.common.config:list_opts',
        ],
    }
)
