# ------------------------------------------------------------
# pop3client/command_line.py
#
# handle command line stuff and arguments
#
# This file is part of pop3client.
# See the LICENSE file for the software license.
# ------------------------------------------------------------

"""This module provides all command line stuff and figures."""

import os
import sys
from typing import Dict, Tuple

import click

from . import color
from .config import Config
from .message import Message
from .session import Session


@click.group(invoke_without_command=True)
@click.option('--no-color', is_flag=True, default=False, help='Turn off color output.')
@click.option('-u', '--unstuff-dots', is_flag=True, default=False,
              help='Remove the extra leading dot the server adds to lines starting with a dot.')
@click.option('-V', '--verbose', is_flag=True, default=False, help='Be verbose.')
@click.option('-v', '--version', is_flag=True, default=False, help='Show version information and exit.')
@click.pass_context
def cli(ctx: click.Context,
        no_color: bool = False,
        unstuff_dots: bool = False,
        verbose: bool = False,
        version: bool = False) -> None:
    Config().no_color = no_color
    Config().unstuff_dots = unstuff_dots
    Config().verbose = verbose
    if version:
        show_version()
        ctx.exit(0)
    if ctx.invoked_subcommand is None:
        ctx.fail('Missing command.')


def open_session(connect: str) -> Session:
    """Parse the connection string, connect and log in.

    :param connect:     the connection string USER[:PASS]@HOST[:PORT]
    :return:            a connected session
    """
    host, port, username, password = Session.parse(connect)
    session = Session()
    session.connect(host, username, password, port, Config().ssl)
    return session


def pick_messages(session: Session, numbers: Tuple[int, ...]) -> Dict[int, Message]:
    """List the mailbox and pick the mails asked for.

    :param session:     a connected session
    :param numbers:     mail numbers given by the user
    :return:            number -> mail for each number given
    """
    listed = {m.number: m for m in session.list()}
    picked = {}
    for n in numbers:
        if n not in listed:
            raise click.BadParameter(f'No mail with number {n} in mailbox.', param_hint='NUMBER')
        picked[n] = listed[n]
    return picked


@cli.command()
@click.option('--ssl', is_flag=True, default=False, help='Connect via implicit TLS (port 995).')
@click.argument('CONNECT', required=True, nargs=1)
@click.argument('NUMBER', required=True, type=int, nargs=1)
def body(ssl: bool = False, connect: str = None, number: int = None) -> None:
    """Write the decoded body of a mail to stdout.

    \b
    CONNECT holds the connection details. Syntax is USER[:PASS]@HOST[:PORT]
    like 'john@example.com' or 'bob:mysecret@mail-server.com:110'.
    If password PASS is omitted you are asked for it.

    NUMBER is the number of the mail as shown by the list command.
    """
    Config().ssl = ssl
    with open_session(connect) as session:
        message = pick_messages(session, (number,))[number]
        session.retrieve(message)
        data = message.get_body_data()

    out = click.get_binary_stream('stdout')
    out.write(data)
    out.flush()


@cli.command()
@click.option('--ssl', is_flag=True, default=False, help='Connect via implicit TLS (port 995).')
@click.argument('CONNECT', required=True, nargs=1)
@click.argument('NUMBERS', required=True, type=int, nargs=-1)
def delete(ssl: bool = False, connect: str = None, numbers: Tuple[int, ...] = ()) -> None:
    """Delete mails from the mailbox.

    \b
    CONNECT holds the connection details. Syntax is USER[:PASS]@HOST[:PORT]
    like 'john@example.com' or 'bob:mysecret@mail-server.com:110'.
    If password PASS is omitted you are asked for it.

    NUMBERS are the numbers of the mails as shown by the list command.
    """
    Config().ssl = ssl
    with open_session(connect) as session:
        for n, message in pick_messages(session, numbers).items():
            session.delete(message)
            sys.stderr.write('Deleted mail ' + color.message(str(n)) + '\n')


@cli.command()
@click.option('--ssl', is_flag=True, default=False, help='Connect via implicit TLS (port 995).')
@click.option('-d', '--delete', 'delete_after', is_flag=True, default=False,
              help='Delete each mail on the server once it has been written.')
@click.argument('CONNECT', required=True, nargs=1)
@click.argument('FOLDER', required=True, nargs=1)
def fetch(ssl: bool = False, delete_after: bool = False, connect: str = None, folder: str = None) -> None:
    """Download all mails of the mailbox.

    \b
    CONNECT holds the connection details. Syntax is USER[:PASS]@HOST[:PORT]
    like 'john@example.com' or 'bob:mysecret@mail-server.com:110'.
    If password PASS is omitted you are asked for it.

    FOLDER is the local target folder to download mails to. Each mail
    is written as <number>.eml.
    """
    try:
        os.makedirs(folder)
    except FileExistsError:
        pass

    Config().ssl = ssl
    with open_session(connect) as session:
        messages = session.list()
        sys.stderr.write(f"Downloading {len(messages)} mails to '{folder}'\n")
        for message in messages:
            session.retrieve(message)
            filename = os.path.join(folder, f'{message.number}.eml')
            color.verbose(f'Writing mail {message.number} as "{filename}"\n')
            with open(filename, 'wb') as f:
                f.write(message.raw_message.encode('utf-8', 'surrogateescape'))
            if delete_after:
                session.delete(message)


@cli.command(name='list')
@click.option('--ssl', is_flag=True, default=False, help='Connect via implicit TLS (port 995).')
@click.option('-H', '--headers', is_flag=True, default=False,
              help='Fetch the header of each mail and show date, sender and subject.')
@click.argument('CONNECT', required=True, nargs=1)
def list_(ssl: bool = False, headers: bool = False, connect: str = None) -> None:
    """List the mails in the mailbox.

    \b
    CONNECT holds the connection details. Syntax is USER[:PASS]@HOST[:PORT]
    like 'john@example.com' or 'bob:mysecret@mail-server.com:110'.
    If password PASS is omitted you are asked for it.
    """
    Config().ssl = ssl
    with open_session(connect) as session:
        if headers:
            messages = session.list_and_retrieve_header()
        else:
            messages = session.list()

    if not headers:
        print('%6s   %10s' % ('Number', 'Size'))
        print('%s' % ('-' * 19))
        for m in messages:
            print('%6d   %10d' % (m.number, m.size))
        return

    print('%6s   %10s   %-31s   %-30s   %s' % ('Number', 'Size', 'Date', 'From', 'Subject'))
    print('%s' % ('-' * 110))
    for m in messages:
        print('%6d   %10d   %-31s   %-30s   %s' %
              (m.number, m.size, m.date or '', m.from_ or '', color.message(m.subject or '')))


def show_version() -> None:
    """Shows the program version."""
    from . import __version__
    print('pop3-client V' + __version__)
