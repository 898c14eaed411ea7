# ------------------------------------------------------------
# tests/conftest.py
#
# shared fixtures
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

import pytest

from pop3client.config import Config
from pop3client.session import Session

from .support import FakeTransport, full_messages_replies, only_headers_replies


@pytest.fixture(autouse=True)
def reset_config():
    """Config is a singleton: put it back to defaults around every test."""
    Config().reset()
    yield
    Config().reset()


@pytest.fixture
def full_transport() -> FakeTransport:
    return FakeTransport(full_messages_replies())


@pytest.fixture
def headers_transport() -> FakeTransport:
    return FakeTransport(only_headers_replies())


@pytest.fixture
def full_session(full_transport) -> Session:
    session = Session(full_transport)
    session.connect('SERVER', 'USERNAME', 'PASSWORD')
    return session


@pytest.fixture
def headers_session(headers_transport) -> Session:
    session = Session(headers_transport)
    session.connect('SERVER', 'USERNAME', 'PASSWORD')
    return session
