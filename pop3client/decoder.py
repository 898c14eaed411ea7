# ------------------------------------------------------------
# pop3client/decoder.py
#
# content transfer decoding of mail bodies
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

"""This module decodes a mail body according to its Content-Transfer-Encoding (RFC 2045)."""

import base64
import binascii
import re
from typing import Optional

from .errors import DecodeError
from .transport import ENCODING, ENCODING_ERRORS

QUOTED_PRINTABLE = 'quoted-printable'
BASE64 = 'base64'

_WHITESPACE = re.compile(rb'\s+')
# a '=' that starts neither an escape nor a CRLF soft break stands for itself
_LONE_EQUALS = re.compile(rb'=(?![0-9A-Fa-f]{2}|\r\n)')


def to_octets(text: str) -> bytes:
    """Turn received text back into the octets read off the wire."""
    return text.encode(ENCODING, ENCODING_ERRORS)


def decode(encoding: Optional[str], raw_body: str) -> bytes:
    """Decode a mail body.

    quoted-printable: '=XX' becomes the octet XX, a '=' at the end of a line
    is a soft break (only before CRLF) and removed, any other '=' is kept.
    base64: all whitespace is dropped, then the rest must be valid base64.
    Anything else: the octets are returned as they are.

    :param encoding:    the Content-Transfer-Encoding token (None if absent)
    :param raw_body:    the body as received
    :return:            the decoded octets
    """
    data = to_octets(raw_body or '')
    token = (encoding or '').strip().lower()

    if token == QUOTED_PRINTABLE:
        return binascii.a2b_qp(_LONE_EQUALS.sub(b'=3D', data))

    if token == BASE64:
        try:
            return base64.b64decode(_WHITESPACE.sub(b'', data), validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f'invalid base64 body: {e}') from e

    return data
