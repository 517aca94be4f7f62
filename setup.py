#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import setuptools


setuptools.setup(
    name='ufmclient',
    version='0.1.0',
    description='UFM InfiniBand Partition Client and CLI',
    classifiers=[
        'Environment :: Console',
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.7',
    install_requires=[
        'httplib2',
        'oslo.i18n',
        'oslo.utils',
        'prettytable',
        'PyYAML',
    ],
    extras_require={
        'test': [
            'fixtures',
            'mock',
            'pytest',
            'testtools',
        ],
    },
    entry_points={
        'console_scripts': [
            'ufm = ufmclient.shell:main',
        ],
    },
    include_package_data=True,
    packages=setuptools.find_packages(include=['ufmclient', 'ufmclient.*'])
)
