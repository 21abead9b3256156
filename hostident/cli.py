"""`hostident` command-line interface."""
from __future__ import annotations

import logging
import sys
from typing import ClassVar

import click

import hostident
from hostident.address import AddressFamily
from hostident.address import format_address
from hostident.address import host_name_to_addr
from hostident.config import ResolverConfig
from hostident.config import dumps_config
from hostident.config import load_config
from hostident.domain import dns_domain_name
from hostident.domain import nis_domain_name
from hostident.exceptions import ExternalCommandError
from hostident.host import abbreviate_hostnick
from hostident.host import host_name

logger = logging.getLogger(__name__)


class _CLIFormatter(logging.Formatter):
    """Level-prefixed log format for CLI output.

    Debug records also name the module that emitted them so the order of
    the domain name probes can be followed.
    """

    COLORS: ClassVar[dict[int, str]] = {
        logging.DEBUG: '\x1b[0;36m',
        logging.INFO: '\x1b[0;32m',
        logging.WARNING: '\x1b[0;33m',
        logging.ERROR: '\x1b[0;31m',
        logging.CRITICAL: '\x1b[1;31m',
    }
    RESET = '\x1b[0m'

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, '')
        prefix = f'{color}{record.levelname}:{self.RESET}'
        if record.levelno <= logging.DEBUG:
            prefix = f'{prefix} [{record.name}]'
        return f'{prefix} {record.getMessage()}'


def _get_config(ctx: click.Context) -> ResolverConfig:
    return ctx.obj['CONFIG']


@click.group()
@click.option(
    '--log-level',
    default='INFO',
    type=click.Choice(
        ['ERROR', 'WARNING', 'INFO', 'DEBUG'],
        case_sensitive=False,
    ),
    help='Minimum logging level.',
)
@click.option(
    '--config',
    'config_path',
    default=None,
    metavar='PATH',
    type=click.Path(dir_okay=False),
    help='Config file (defaults to $HOSTIDENT_HOME/config.toml).',
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, config_path: str | None) -> None:
    """Look up host and domain names of this host."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_CLIFormatter())
    logging.basicConfig(level=log_level.upper(), handlers=[handler])

    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.BadParameter(str(e), param_hint='--config') from e

    ctx.ensure_object(dict)
    ctx.obj['LOG_LEVEL'] = log_level
    ctx.obj['CONFIG'] = config


@cli.command(name='help')
def show_help() -> None:
    """Show available commands and options."""
    with click.Context(cli) as ctx:
        click.echo(cli.get_help(ctx))


@cli.command()
def version() -> None:
    """Show the HostIdent version."""
    click.echo(f'HostIdent v{hostident.__version__}')


@cli.command(name='show-config')
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Print the effective configuration."""
    click.echo(dumps_config(_get_config(ctx)), nl=False)


@cli.command(name='host-name')
def host_name_command() -> None:
    """Print the short name of this host."""
    click.echo(host_name())


@cli.command(name='dns-domain-name')
@click.pass_context
def dns_domain_name_command(ctx: click.Context) -> None:
    """Print the DNS domain name of this host."""
    click.echo(dns_domain_name(_get_config(ctx)))


@cli.command(name='nis-domain-name')
@click.pass_context
def nis_domain_name_command(ctx: click.Context) -> None:
    """Print the NIS domain name of this host."""
    try:
        domain = nis_domain_name(_get_config(ctx))
    except ExternalCommandError as e:
        logger.error(f'Unable to get NIS domain name: {e}')
        sys.exit(1)
    else:
        click.echo(domain)


@cli.command()
@click.argument('name', metavar='NAME', required=False)
def hostnick(name: str | None) -> None:
    """Print the abbreviated nickname of a host.

    NAME defaults to the name of this host.
    """
    if name is None:
        name = host_name()
    click.echo(abbreviate_hostnick(name))


@cli.command()
@click.argument('name', metavar='NAME', required=True)
@click.option(
    '--family',
    default=AddressFamily.IPV4.value,
    type=click.Choice([f.value for f in AddressFamily], case_sensitive=False),
    help='Address family to resolve with.',
)
@click.pass_context
def addr(ctx: click.Context, name: str, family: str) -> None:
    """Print the first network address of a host."""
    address = host_name_to_addr(name, family, _get_config(ctx))
    if address is None:
        logger.error(f'Unable to resolve {name} ({family.lower()}).')
        sys.exit(1)
    else:
        click.echo(format_address(address))
