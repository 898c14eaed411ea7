#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# ------------------------------------------------------------
# setup.py
#
# pop3-client setuptools main file
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

from setuptools import setup

import pop3client

setup(
    name='pop3-client',
    version=pop3client.__version__,
    description='List, fetch, decode and delete mails on a POP3 server.',
    long_description='This tool logs into a POP3 server, lists the mails, fetches headers or whole '
                     'mails, decodes quoted-printable and base64 bodies and deletes mails.',
    author=pop3client.__author__,
    url=pop3client.__uri__,
    license='MIT',

    # sources
    packages=['pop3client'],
    py_modules=[],
    scripts=['bin/pop3-client'],
    python_requires='>=3.6',
    install_requires=[
        'ansicolors',
        'click'
    ],
    extras_require={
        'test': ['pytest']
    },

    # data
    include_package_data=False,
    data_files=[
        ('share/pop3-client', ['requirements.txt'])
    ]
)
