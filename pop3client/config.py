# ------------------------------------------------------------
# pop3client/config.py
#
# pop3client config object
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

"""This module contains the app wide configuration object."""


class _Singleton(type):

    """Singleton class instance."""
    _instances = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super(_Singleton, cls).__call__(*args, **kwargs)
        return cls._instances[cls]


class Config(metaclass=_Singleton):

    """This object holds the app wide configurations like command line options, etc."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Restore the defaults."""
        self.no_color = False
        self.ssl = False
        self.unstuff_dots = False
        self.verbose = False
