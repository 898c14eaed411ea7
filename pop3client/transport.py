# ------------------------------------------------------------
# pop3client/transport.py
#
# line oriented byte stream to a POP3 server
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

"""This module contains the socket transport used by a POP3 session.

Any object offering the same four methods can stand in for the transport:

    open(host, port, use_tls)   raises ConnectError
    read_line() -> str          raises TransportError
    write_line(text)            raises TransportError
    close()                     idempotent
"""

import socket
import ssl
from typing import Optional

from . import color
from .errors import ConnectError, TransportError

# lines are decoded like this so every octet maps back to bytes unchanged
ENCODING = 'utf-8'
ENCODING_ERRORS = 'surrogateescape'

# longest line accepted from the server, terminator included
MAXLINE = 2048


class SocketTransport(object):

    """A plaintext or implicit TLS connection to a POP3 server."""

    def __init__(self, timeout: Optional[float] = None):
        """Constructor.

        :param timeout:     socket timeout in seconds (None blocks forever)
        """
        self._timeout = timeout
        self._socket = None
        self._file = None

    @property
    def is_open(self) -> bool:
        """Is there an open socket to the server?"""
        return self._socket is not None

    def open(self, host: str, port: int, use_tls: bool = False) -> None:
        """Connect to the server.

        :param host:        the server host
        :param port:        the server port
        :param use_tls:     wrap the connection with TLS right away
        """
        if self._socket is not None:
            return

        color.verbose(f'Connecting to {host}:{port}... ')
        try:
            sock = socket.create_connection((host, port), self._timeout)
        except OSError as e:
            raise ConnectError(f'failed to connect {host}:{port}: {e}') from e

        if use_tls:
            try:
                context = ssl.create_default_context()
                sock = context.wrap_socket(sock, server_hostname=host)
            except (OSError, ssl.SSLError) as e:
                sock.close()
                raise ConnectError(f'TLS handshake with {host}:{port} failed: {e}') from e

        self._socket = sock
        self._file = sock.makefile('rb')
        color.verbose(color.success('connected.\n'))

    def read_line(self) -> str:
        """Read the next line including its line terminator.

        :return:    the line, or the rest of the stream if it ends without a terminator
        """
        if self._file is None:
            raise TransportError('No connection to POP3 server.')
        try:
            data = self._file.readline(MAXLINE + 1)
        except OSError as e:
            raise TransportError(f'failed to read from server: {e}') from e
        if not data:
            raise TransportError('connection closed by server.')
        if len(data) > MAXLINE:
            raise TransportError(f'line from server longer than {MAXLINE} octets.')
        return data.decode(ENCODING, ENCODING_ERRORS)

    def write_line(self, text: str) -> None:
        """Send text to the server.

        :param text:    the line to send, already terminated
        """
        if self._socket is None:
            raise TransportError('No connection to POP3 server.')
        try:
            self._socket.sendall(text.encode(ENCODING, ENCODING_ERRORS))
        except OSError as e:
            raise TransportError(f'failed to write to server: {e}') from e

    def close(self) -> None:
        """Close the connection. Calling this more than once is fine."""
        if self._file is not None:
            self._file.close()
            self._file = None
        if self._socket is not None:
            try:
                self._socket.close()
            finally:
                self._socket = None
