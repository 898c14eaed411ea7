# ------------------------------------------------------------
# tests/test_command_line.py
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

"""Tests for the command line front end."""

import os

import pytest
from click.testing import CliRunner

from pop3client import __version__
from pop3client import command_line
from pop3client.config import Config
from pop3client.session import Session

from .support import (
    LISTING,
    LOGIN,
    MAIL_1,
    MAIL_2,
    OK,
    FakeTransport,
    block,
    only_headers_replies
)


@pytest.fixture
def serve(monkeypatch):
    """Let the CLI talk to a FakeTransport replying with the given lines."""

    def install(replies):
        transport = FakeTransport(replies)

        class ScriptedSession(Session):

            def __init__(self):
                super().__init__(transport)

        monkeypatch.setattr(command_line, 'Session', ScriptedSession)
        return transport

    return install


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_version(runner) -> None:
    result = runner.invoke(command_line.cli, ['--version'])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_missing_command(runner) -> None:
    result = runner.invoke(command_line.cli, [])
    assert result.exit_code != 0
    assert 'Missing command' in result.output


def test_list(runner, serve) -> None:
    transport = serve(LOGIN + LISTING + [OK])
    result = runner.invoke(command_line.cli, ['--no-color', 'list', 'bob:pw@pop.example.com'])
    assert result.exit_code == 0, result.output
    assert '     1         1586' in result.output
    assert '     2         1584' in result.output
    assert transport.opened == ('pop.example.com', 110, False)
    assert transport.commands == ['USER bob', 'PASS pw', 'LIST', 'QUIT']


def test_list_with_headers(runner, serve) -> None:
    transport = serve(only_headers_replies() + [OK])
    result = runner.invoke(command_line.cli,
                           ['--no-color', 'list', '--ssl', '--headers', 'bob:pw@pop.example.com'])
    assert result.exit_code == 0, result.output
    assert 'Test 1' in result.output
    assert 'Rodolfo Finochietti <rodolfof2@lagash.com>' in result.output
    assert transport.opened == ('pop.example.com', 995, True)
    assert transport.commands[2:] == ['LIST', 'TOP 1 0', 'TOP 2 0', 'QUIT']


def test_fetch(runner, serve, tmp_path) -> None:
    replies = LOGIN + LISTING + [OK] + block(MAIL_1) + [OK] + block(MAIL_2) + [OK]
    transport = serve(replies)
    folder = tmp_path / 'mails'
    result = runner.invoke(command_line.cli, ['fetch', 'bob:pw@pop.example.com:1110', str(folder)])
    assert result.exit_code == 0, result.output
    assert sorted(os.listdir(folder)) == ['1.eml', '2.eml']
    assert (folder / '1.eml').read_bytes() == MAIL_1.encode()
    assert transport.opened == ('pop.example.com', 1110, False)
    assert transport.commands[-1] == 'QUIT'


def test_fetch_and_delete(runner, serve, tmp_path) -> None:
    replies = LOGIN + LISTING + [OK] + block(MAIL_1) + [OK, OK] + block(MAIL_2) + [OK, OK]
    transport = serve(replies)
    result = runner.invoke(command_line.cli, ['fetch', '--delete', 'bob:pw@pop.example.com', str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert transport.commands[2:] == ['LIST', 'RETR 1', 'DELE 1', 'RETR 2', 'DELE 2', 'QUIT']


def test_delete(runner, serve) -> None:
    transport = serve(LOGIN + LISTING + [OK, OK])
    result = runner.invoke(command_line.cli, ['--no-color', 'delete', 'bob:pw@pop.example.com', '2'])
    assert result.exit_code == 0, result.output
    assert transport.commands[2:] == ['LIST', 'DELE 2', 'QUIT']


def test_delete_unknown_number(runner, serve) -> None:
    transport = serve(LOGIN + LISTING + [OK])
    result = runner.invoke(command_line.cli, ['delete', 'bob:pw@pop.example.com', '9'])
    assert result.exit_code != 0
    assert 'No mail with number 9' in result.output
    assert 'DELE 9' not in transport.commands
    assert transport.commands[-1] == 'QUIT'


def test_body(runner, serve) -> None:
    serve(LOGIN + LISTING + [OK] + block(MAIL_2) + [OK])
    result = runner.invoke(command_line.cli, ['body', 'bob:pw@pop.example.com', '2'])
    assert result.exit_code == 0, result.output
    assert result.stdout_bytes == b'Test Two\r\n'


def test_options_go_to_config(runner, serve) -> None:
    serve(LOGIN + LISTING + [OK])
    result = runner.invoke(command_line.cli, ['--no-color', '-u', '-V', 'list', 'bob:pw@pop.example.com'])
    assert result.exit_code == 0, result.output
    assert Config().no_color is True
    assert Config().unstuff_dots is True
    assert Config().verbose is True


def test_login_failure(runner, serve) -> None:
    serve(['+OK ready\r\n', OK, '-ERR authentication failed\r\n'])
    result = runner.invoke(command_line.cli, ['list', 'bob:pw@pop.example.com'])
    assert result.exit_code != 0
    assert 'authentication failed' in str(result.exception)
