#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# ------------------------------------------------------------
# pop3client/__about__.py
#
# information about the pop3client package
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

"""This is the pop3client package."""

__author__ = 'pop3client developers'
__email__ = '<pop3client@users.noreply.github.com>'
__copyright__ = 'Copyright (C) 2026, pop3client developers'
__license__ = 'MIT'
__title__ = 'pop3client'
__summary__ = """A small POP3 client to list, fetch, decode and delete mails
on a remote mailbox."""
__version__ = '0.1.0'
__uri__ = 'https://github.com/pop3client/pop3client'
