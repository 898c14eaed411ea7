# ------------------------------------------------------------
# pop3client/color.py
#
# provides colorful output
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

"""This module generated colorized text outputs for the terminal."""

import sys

import colors

from .config import Config


def connection_detail(t: str) -> str:
    """Color for connection details.

    :param t:   the text
    :return:    a colorized version of the text
    """
    if not Config().no_color:
        return colors.color(t, fg='green')
    return t


def error(t: str) -> str:
    """Color for error messages.

    :param t:   the text
    :return:    a colorized version of the text
    """
    if not Config().no_color:
        return colors.color(t, fg='red')
    return t


def message(t: str) -> str:
    """Color for message numbers and subjects.

    :param t:   the text
    :return:    a colorized version of the text
    """
    if not Config().no_color:
        return colors.color(t, fg='blue')
    return t


def success(t: str) -> str:
    """Color for success messages.

    :param t:   the text
    :return:    a colorized version of the text
    """
    if not Config().no_color:
        return colors.color(t, fg='yellow')
    return t


def verbose(t: str) -> None:
    """Write a progress note to stderr if the user asked for verbose output."""
    if Config().verbose is True:
        sys.stderr.write(t)
