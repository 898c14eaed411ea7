# ------------------------------------------------------------
# tests/support.py
#
# scripted transport and sample mails for the tests
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

from typing import Iterable, List

from pop3client.errors import TransportError


def crlf(*lines: str) -> str:
    """Join lines into CRLF terminated text."""
    return ''.join(line + '\r\n' for line in lines)


def block(text: str) -> List[str]:
    """The lines of a multi-line reply carrying text, terminator included."""
    return text.splitlines(keepends=True) + ['.\r\n']


HEADER_1 = crlf(
    'Return-Path: <rodolfof@lagash.com>',
    'From: Rodolfo Finochietti <rodolfof@lagash.com>',
    'To: "rfinochi@shockbyte.net" <rfinochi@shockbyte.net>',
    'Subject: Test 1',
    'Thread-Topic: Test 1',
    'Thread-Index: Ac3Bt4nMDtM3y3FyQ1yd71JVtsSGJQ==',
    'Date: Tue, 13 Nov 2012 10:57:04 -0500',
    'Message-ID: <CCC7F420.6251%rodolfof@lagash.com>',
    'MIME-Version: 1.0',
    'Content-Type: text/plain; charset="us-ascii"',
    'Content-Transfer-Encoding: quoted-printable',
)

BODY_1 = crlf(
    'Test=20One',
    '',
    'Soft=',
    'break =3D done',
)

MAIL_1 = HEADER_1 + '\r\n' + BODY_1

HEADER_2 = crlf(
    'From: Rodolfo Finochietti <rodolfof2@lagash.com>',
    'To: "rfinochi2@shockbyte.net" <rfinochi2@shockbyte.net>',
    'Subject: Test',
    ' 2',
    'Date: Tue, 13 Nov 2012 10:57:28 -0500',
    'Message-ID: <CCC7F438.6253%rodolfof2@lagash.com>',
    'User-Agent: Microsoft-MacOutlook/14.2.4.120824',
    'X-MS-Has-Attach:',
    'MIME-Version: 1.0',
    'Content-Type: text/plain; charset="us-ascii"',
    'Content-Transfer-Encoding: base64',
)

BODY_2 = crlf('VGVzdCBU', 'd28NCg==')

MAIL_2 = HEADER_2 + '\r\n' + BODY_2

GREETING = '+OK POP3 server ready\r\n'
OK = '+OK\r\n'

LOGIN = [GREETING, OK, OK]
LISTING = ['+OK 2 messages (3170 octets)\r\n', '1 1586\r\n', '2 1584\r\n', '.\r\n']


class FakeTransport(object):

    """Transport replying with scripted lines and recording what is written."""

    def __init__(self, replies: Iterable[str] = ()):
        self.replies = list(replies)
        self.written = []
        self.opened = None
        self.close_count = 0

    def open(self, host: str, port: int, use_tls: bool = False) -> None:
        self.opened = (host, port, use_tls)

    def read_line(self) -> str:
        if not self.replies:
            raise TransportError('connection closed by server.')
        return self.replies.pop(0)

    def write_line(self, text: str) -> None:
        self.written.append(text)

    def close(self) -> None:
        self.close_count += 1

    @property
    def commands(self) -> List[str]:
        """Written lines without their line ends."""
        return [w.rstrip('\r\n') for w in self.written]


def full_messages_replies() -> List[str]:
    """A login, the listing, then RETR replies for both mails."""
    return (LOGIN + LISTING
            + [OK] + block(MAIL_1)
            + [OK] + block(MAIL_2))


def only_headers_replies() -> List[str]:
    """A login, the listing, then TOP replies for both mails."""
    return (LOGIN + LISTING
            + [OK] + block(HEADER_1)
            + [OK] + block(HEADER_2))
