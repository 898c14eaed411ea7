# ------------------------------------------------------------
# pop3client/message.py
#
# A single mail on the POP3 server
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

import re
from typing import Optional, Tuple

from .decoder import decode
from .header import HeaderMap, parse_header

_BLANK_LINE = re.compile(r'^\r?\n', re.MULTILINE)


class Message(object):

    """This is a single mail listed by the POP3 server.

    A message starts out with its number and size only. A header fetch
    (TOP) or a full fetch (RETR) of the owning session fills in the rest.
    """

    def __init__(self, number: int, size: int):
        """Constructor.

        :param number:  the 1-based position of the mail on the server
        :param size:    the size of the mail in octets as declared by the server
        """
        self._number = number
        self._size = size
        self.retrieved = False
        self.raw_header = None
        self.raw_message = None
        self.body = ''
        self._headers = HeaderMap()
        self._body_data = None

    def __repr__(self) -> str:
        return f'<Message {self._number} ({self._size} octets)>'

    @property
    def number(self) -> int:
        """Position of the mail on the server, stable for the session."""
        return self._number

    @property
    def size(self) -> int:
        """Size of the mail in octets as declared by the server."""
        return self._size

    @property
    def headers(self) -> HeaderMap:
        """All header fields seen so far."""
        return self._headers

    @property
    def from_(self) -> Optional[str]:
        return self._headers.get('From')

    @property
    def to(self) -> Optional[str]:
        return self._headers.get('To')

    @property
    def date(self) -> Optional[str]:
        return self._headers.get('Date')

    @property
    def message_id(self) -> Optional[str]:
        return self._headers.get('Message-Id')

    @property
    def subject(self) -> Optional[str]:
        return self._headers.get('Subject')

    @property
    def content_transfer_encoding(self) -> Optional[str]:
        return self._headers.get('Content-Transfer-Encoding')

    def get_header_data(self, name: str) -> Optional[str]:
        """Look up any header of the mail.

        :param name:    header name, case does not matter and a trailing ':' is ignored
        :return:        the header value (maybe empty) or None if the mail has no such header
        """
        return self._headers.get(name)

    def get_body_data(self) -> Optional[bytes]:
        """Get the body decoded by its Content-Transfer-Encoding.

        :return:    the decoded octets or None if the body has not been retrieved
        """
        if not self.retrieved:
            return None
        if self._body_data is None:
            self._body_data = decode(self.content_transfer_encoding, self.body)
        return self._body_data

    def update_header(self, raw_header: str) -> None:
        """Take the result of a header-only fetch.

        :param raw_header:  the header block as sent by the server
        """
        self.raw_header = raw_header
        self._headers = parse_header(raw_header)

    def update_message(self, raw_message: str) -> None:
        """Take the result of a full fetch.

        :param raw_message: the whole mail as sent by the server
        """
        raw_header, body = self.split(raw_message)
        self.raw_message = raw_message
        self.update_header(raw_header)
        self.body = body
        self._body_data = None
        self.retrieved = True

    @staticmethod
    def split(raw_message: str) -> Tuple[str, str]:
        """Split a mail at its first blank line.

        :param raw_message:     the whole mail
        :return:                header block (with line ends), body after the blank line
        """
        m = _BLANK_LINE.search(raw_message)
        if m is None:
            return raw_message, ''
        return raw_message[:m.start()], raw_message[m.end():]
