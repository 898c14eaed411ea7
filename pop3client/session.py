# ------------------------------------------------------------
# pop3client/session.py
#
# POP3 server session object
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

"""This module contains the POP3 session: connection state, commands and replies."""

import getpass
import poplib
import re
from typing import Iterable, List, Optional, Tuple

from . import color
from .config import Config
from .errors import ArgumentError, ParseError, Pop3Error, ProtocolError, StateError
from .framer import ResponseFramer
from .message import Message
from .transport import SocketTransport

OK = '+OK'
_DIGITS = re.compile(r'[0-9]+')


class Session(object):

    """This represents a POP3 session with a server.

    Commands are strictly sequential: every command written is followed by
    reading its reply before anything else is sent.
    """

    def __init__(self, transport: object = None, unstuff_dots: Optional[bool] = None):
        """Constructor.

        :param transport:       the line transport to talk through (a SocketTransport if None)
        :param unstuff_dots:    strip the extra leading dot of data lines in multi-line
                                replies (defaults to Config().unstuff_dots)
        """
        if transport is None:
            transport = SocketTransport()
        if unstuff_dots is None:
            unstuff_dots = Config().unstuff_dots
        self._transport = transport
        self._framer = ResponseFramer(transport)
        self._unstuff_dots = unstuff_dots
        self._connected = False
        self._closed = False

    def __enter__(self) -> 'Session':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    @property
    def connected(self) -> bool:
        """Is the session logged in to the server?"""
        return self._connected

    def close(self) -> None:
        """Say goodbye if still connected and release the transport.

        Safe to call any number of times.
        """
        if self._connected:
            self.disconnect()
        if not self._closed:
            self._closed = True
            self._transport.close()

    def command(self, name: str, number: Optional[int] = None, extra: Optional[str] = None) -> str:
        """Send a command and check the status line of the reply.

        :param name:    the POP3 command, e.g. 'DELE'
        :param number:  message number argument
        :param extra:   additional argument appended last
        :return:        the status line
        """
        self._require_connected()
        return self._command(name, number, extra)

    def connect(self, server: str, user: str, password: str,
                port: Optional[int] = None, use_tls: bool = False) -> None:
        """Connect and log in to a POP3 server.

        :param server:      the POP3 server host
        :param user:        user account for login
        :param password:    user password for login
        :param port:        the port to connect to (None or 0 picks 110 or 995 for TLS)
        :param use_tls:     connect with implicit TLS
        """
        if self._connected:
            raise StateError('POP3 client already connected.')

        port = self._fix_port(port, use_tls)
        self._transport.open(server, port, use_tls)
        self._closed = False
        try:
            greeting = self._framer.read_simple()
            self._check(greeting)
            color.verbose(color.connection_detail(f'Server: {greeting.strip()}\n') + 'Logging in... ')
            self._command('USER', extra=user)
            self._command('PASS', extra=password)
        except Pop3Error:
            self._closed = True
            self._transport.close()
            raise

        self._connected = True
        color.verbose(color.success('done.\n') + color.success(f'User {user} logged in.\n'))

    def delete(self, message: Message) -> None:
        """Mark a mail for deletion. The server removes it once the session is quit.

        :param message:     the mail to delete
        """
        self._require_connected()
        self._require_message(message)
        self._command('DELE', message.number)

    def disconnect(self) -> None:
        """Quit the session.

        A failing QUIT is ignored: the session is disconnected and the
        transport closed no matter what the server replies.
        """
        self._require_connected()
        try:
            self._command('QUIT')
        except Pop3Error as e:
            color.verbose(color.error(f'QUIT failed: {e}\n'))
        finally:
            self._connected = False
            self._closed = True
            self._transport.close()
        color.verbose(color.success('Disconnected.\n'))

    def list(self) -> List[Message]:
        """Get all mails in the mailbox.

        :return:    the mails in server order, nothing retrieved yet
        """
        self._require_connected()
        self._command('LIST')
        messages = []
        for line in self._read_block().splitlines():
            messages.append(self._parse_list_line(line))
        color.verbose(color.connection_detail(f'{len(messages)} mails in mailbox.\n'))
        return messages

    def list_and_retrieve(self) -> List[Message]:
        """List all mails and fetch each of them completely."""
        self._require_connected()
        messages = self.list()
        self.retrieve_messages(messages)
        return messages

    def list_and_retrieve_header(self) -> List[Message]:
        """List all mails and fetch the header of each of them."""
        self._require_connected()
        messages = self.list()
        self.retrieve_headers(messages)
        return messages

    def retrieve(self, message: Message) -> None:
        """Fetch a whole mail (RETR).

        :param message:     the mail to fetch, updated in place
        """
        self._require_connected()
        self._require_message(message)
        self._command('RETR', message.number)
        message.update_message(self._read_block())

    def retrieve_header(self, message: Message) -> None:
        """Fetch the header of a mail only (TOP n 0).

        :param message:     the mail to fetch, updated in place
        """
        self._require_connected()
        self._require_message(message)
        self._command('TOP', message.number, '0')
        message.update_header(self._read_block())

    def retrieve_headers(self, messages: Iterable[Message]) -> None:
        """Fetch the headers of several mails, one after the other.

        The first failure stops the run, mails fetched before keep their data.

        :param messages:    the mails to fetch
        """
        self._require_connected()
        if messages is None:
            raise ArgumentError('No messages given.')
        for message in messages:
            self.retrieve_header(message)

    def retrieve_messages(self, messages: Iterable[Message]) -> None:
        """Fetch several mails completely, one after the other.

        The first failure stops the run, mails fetched before keep their data.

        :param messages:    the mails to fetch
        """
        self._require_connected()
        if messages is None:
            raise ArgumentError('No messages given.')
        for message in messages:
            self.retrieve(message)

    @staticmethod
    def parse(connect: str) -> Tuple[str, int, str, str]:
        """Parse and get connection params.

        :param connect:     some string in the form "USER[:PASSWORD]@HOST[:PORT]"
        :return:            host, port, username, password
        """
        # worst case scenario: "alice@somehost.domain:password@someotherhost.otherdomain:7892"
        port = 0
        password = None

        parts_at = connect.split('@')
        if len(parts_at) == 1:
            raise ArgumentError('Malformed connection string - type --help for help')

        host_and_port = parts_at[-1]
        user_and_password = '@'.join(parts_at[:-1])

        if ':' not in host_and_port:
            host = host_and_port
        else:
            host, port_text = host_and_port.rsplit(':', 1)
            try:
                port = int(port_text)
            except ValueError as e:
                raise ArgumentError(f'Failed to parse mailserver port: {port_text!r}') from e

        if not host:
            raise ArgumentError('Cannot deduce host.')

        if ':' not in user_and_password:
            username = user_and_password
        else:
            username, password = user_and_password.rsplit(':', 1)

        if not username:
            raise ArgumentError('Cannot deduce user.')

        if password is None:
            password = getpass.getpass(f'No user password given. Please enter password for user {username}: ')

        color.verbose(color.connection_detail(f'User: {username}\n'))
        color.verbose(color.connection_detail('Pass: ********************\n'))
        color.verbose(color.connection_detail(f'Host: {host}\n'))
        if port != 0:
            color.verbose(color.connection_detail(f'Port: {port}\n'))
        else:
            color.verbose(color.connection_detail('Port: <default>\n'))

        return host, port, username, password

    @staticmethod
    def _check(reply: str) -> None:
        """Raise ProtocolError unless the reply is a success status line."""
        if not reply or not reply.startswith(OK):
            raise ProtocolError(reply.strip() if reply and reply.strip() else 'Empty reply from POP3 server.')

    def _command(self, name: str, number: Optional[int] = None, extra: Optional[str] = None) -> str:
        request = name
        if number is not None:
            request += f' {number}'
        if extra:
            request += f' {extra}'

        if name == 'PASS':
            color.verbose(color.connection_detail('> PASS ********\n'))
        else:
            color.verbose(color.connection_detail(f'> {request}\n'))

        self._transport.write_line(request + '\r\n')
        reply = self._framer.read_simple()
        self._check(reply)
        return reply

    @staticmethod
    def _fix_port(port: Optional[int], use_tls: bool) -> int:
        """Returns the default port for the connection if not has been set.

        :param port:        the port as set by the user
        :param use_tls:     whether the connection uses implicit TLS
        :return:            the port to use for the connection
        """
        if port is not None and port != 0:
            return port
        if use_tls:
            return poplib.POP3_SSL_PORT
        return poplib.POP3_PORT

    @staticmethod
    def _parse_list_line(line: str) -> Message:
        """Turn a line like '1 1586' of a LIST reply into a Message."""
        tokens = line.split()
        if len(tokens) < 2:
            raise ParseError(f'Malformed LIST line: {line!r}')
        if not (_DIGITS.fullmatch(tokens[0]) and _DIGITS.fullmatch(tokens[1])):
            raise ParseError(f'Malformed LIST line: {line!r}')
        number, size = int(tokens[0]), int(tokens[1])
        return Message(number, size)

    def _read_block(self) -> str:
        return self._framer.read_until_terminator(unstuff=self._unstuff_dots)

    def _require_connected(self) -> None:
        if not self._connected:
            raise StateError('POP3 client is not connected to host.')

    @staticmethod
    def _require_message(message: Message) -> None:
        if message is None:
            raise ArgumentError('No message given.')
        if not isinstance(message, Message):
            raise ArgumentError(f'Not a message: {message!r}')
