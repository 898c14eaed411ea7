#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# ------------------------------------------------------------
# pop3client/__init__.py
#
# init pop3client package file
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

"""This is the pop3client package."""

from pop3client.__about__ import (
    __author__,
    __copyright__,
    __email__,
    __license__,
    __summary__,
    __title__,
    __uri__,
    __version__
)
