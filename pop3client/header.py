# ------------------------------------------------------------
# pop3client/header.py
#
# mail header parsing
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

"""This module parses a raw mail header block into its fields."""

from typing import Dict, Iterator, Optional, Tuple


class HeaderMap(object):

    """Header fields by name, looked up case-insensitively.

    The last occurrence of a duplicate header wins. The spelling of the
    name as last seen is kept for iteration.
    """

    def __init__(self):
        self._fields = {}  # type: Dict[str, Tuple[str, str]]

    def __contains__(self, name: str) -> bool:
        return self._key(name) in self._fields

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __setitem__(self, name: str, value: str) -> None:
        self._fields[self._key(name)] = (name.strip(), value)

    def get(self, name: str) -> Optional[str]:
        """Get a header value.

        A trailing colon on the name is ignored, so 'Subject:' finds 'subject'.

        :param name:    the header name
        :return:        the value (maybe empty) or None if the header was never seen
        """
        field = self._fields.get(self._key(name))
        if field is None:
            return None
        return field[1]

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self._fields.values())

    @staticmethod
    def _key(name: str) -> str:
        name = name.strip()
        if name.endswith(':'):
            name = name[:-1]
        return name.strip().lower()


def parse_header(raw: Optional[str]) -> HeaderMap:
    """Parse a raw header block.

    Lines starting with whitespace continue the value of the previous header
    and are joined with a single space (RFC 5322 unfolding). Parsing stops at
    the first blank line. Lines with neither a colon nor leading whitespace
    are skipped.

    >>> parse_header('Subject: very\\r\\n long\\r\\n').get('subject')
    'very long'

    :param raw:     CRLF terminated header lines
    :return:        the header fields
    """
    headers = HeaderMap()
    if not raw:
        return headers

    name = None
    for line in raw.split('\n'):
        line = line.rstrip('\r')
        if line == '':
            break
        if not line.strip():
            continue
        if line[0] in ' \t':
            if name is not None:
                value = headers.get(name)
                headers[name] = (value + ' ' + line.strip()) if value else line.strip()
            continue
        if ':' not in line:
            name = None
            continue
        name, value = line.split(':', 1)
        headers[name] = value.strip()

    return headers
