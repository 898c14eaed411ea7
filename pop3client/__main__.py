#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# ------------------------------------------------------------
# pop3client/__main__.py
#
# pop3client package start
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

"""This is the pop3client package start script."""

import sys

from . import color
from . import command_line


def main() -> None:
    """pop3client main startup."""
    try:
        command_line.cli(prog_name='pop3-client')
    except Exception as e:
        sys.stderr.write(color.error(str(e)) + '\n')
        sys.exit(1)


if __name__ == '__main__':
    main()
