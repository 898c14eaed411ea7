# ------------------------------------------------------------
# pop3client/framer.py
#
# reads single and multi-line POP3 replies
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

"""This module frames the replies of a POP3 server."""

from .errors import ProtocolError

TERMINATOR = '.'


class ResponseFramer(object):

    """Reads replies off a transport."""

    def __init__(self, transport: object):
        """Constructor.

        :param transport:   the transport to read lines from
        """
        self._transport = transport

    def read_simple(self) -> str:
        """Read a single status line.

        :return:    the line verbatim
        """
        return self._transport.read_line()

    def read_until_terminator(self, unstuff: bool = False) -> str:
        """Read a multi-line block up to the lone "." line.

        The terminator line is dropped. Data lines keep their leading dot
        unless unstuff is set, in which case a leading ".." becomes ".".

        :param unstuff:     undo the dot-stuffing of the server
        :return:            all data lines concatenated in order
        """
        lines = []
        while True:
            line = self._transport.read_line()
            if not line:
                raise ProtocolError('connection closed inside a multi-line response')
            if line.rstrip('\r\n') == TERMINATOR:
                return ''.join(lines)
            if unstuff and line.startswith('..'):
                line = line[1:]
            lines.append(line)
