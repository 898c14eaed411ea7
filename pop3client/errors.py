# ------------------------------------------------------------
# pop3client/errors.py
#
# exceptions raised by pop3client
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

"""This module holds the exceptions raised by the POP3 client."""


class Pop3Error(Exception):

    """Base of all pop3client errors."""


class ConnectError(Pop3Error):

    """The transport failed to open a connection to the server."""


class TransportError(Pop3Error, IOError):

    """Reading from or writing to an open connection failed."""


class ProtocolError(Pop3Error):

    """The server reply was empty, malformed or carried the failure marker."""


class StateError(Pop3Error, RuntimeError):

    """The operation is not allowed in the current connection state."""


class ArgumentError(Pop3Error, ValueError):

    """A message, a sequence of messages or a connection string is invalid."""


class ParseError(Pop3Error, ValueError):

    """A LIST line or a numeric field could not be parsed."""


class DecodeError(Pop3Error, ValueError):

    """A message body could not be decoded with its transfer encoding."""
