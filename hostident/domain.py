"""Domain name helpers.

The DNS domain name is guessed with an ordered chain of providers. Each
provider returns the domain or `None` and the first non-`None` result wins.
The first provider looks at the system name, which is often only the short
host name, so the remaining providers ask the helper programs listed in
[`ResolverConfig.domain_probes`][hostident.config.ResolverConfig].

Note:
    `domainname` reports the NIS domain which may differ from the DNS domain.
"""
from __future__ import annotations

import functools
import logging
import re
from typing import Callable
from typing import Iterable
from typing import Optional

from hostident.config import DomainProbe
from hostident.config import ResolverConfig
from hostident.exceptions import ExternalCommandError
from hostident.utils.commands import find_program
from hostident.utils.commands import run_program
from hostident.utils.environment import system_name

logger = logging.getLogger(__name__)

UNKNOWN_DOMAIN = 'unknown'
"""Value returned by `dns_domain_name()` when no provider succeeds."""

NIS_DOMAIN_PROGRAM = 'domainname'

DomainProvider = Callable[[], Optional[str]]


def first_result(
    providers: Iterable[DomainProvider],
    default: str,
) -> str:
    """Return the first non-`None` result of a sequence of providers.

    Providers are called lazily in order so providers after the first
    successful one are never called.

    Args:
        providers: Callables that return a result or `None`.
        default: Value returned if every provider returns `None`.

    Returns:
        The first result or `default`.
    """
    for provider in providers:
        result = provider()
        if result is not None:
            return result
    return default


def domain_from_system_name() -> str | None:
    """Return the domain suffix of the system name if it is fully-qualified."""
    _, dot, domain = system_name().partition('.')
    return domain if dot else None


def domain_from_probe(
    probe: DomainProbe,
    timeout: float | None = None,
) -> str | None:
    """Guess the domain from the output of a helper program.

    Args:
        probe: Program to run and the pattern to search its output with.
        timeout: Optional timeout in seconds for the program.

    Returns:
        The matched domain, or `None` if the program is not on the search
        path, fails, or its output does not match.
    """
    if find_program(probe.program) is None:
        logger.debug(f'Skipping {probe.program}: not found on search path')
        return None

    try:
        output = run_program(probe.program, timeout=timeout)
    except ExternalCommandError as e:
        logger.debug(f'Skipping {probe.program}: {e}')
        return None

    match = re.search(probe.pattern, output)
    if match is None:
        logger.debug(f'No domain in output of {probe.program}: {output!r}')
        return None

    domain = match.group(1) if match.re.groups else match.group(0)
    logger.debug(f'Found domain {domain} using {probe.program}')
    return domain


def domain_providers(config: ResolverConfig) -> list[DomainProvider]:
    """Build the ordered provider chain used by `dns_domain_name()`."""
    providers: list[DomainProvider] = [domain_from_system_name]
    providers.extend(
        functools.partial(
            domain_from_probe,
            probe,
            timeout=config.command_timeout,
        )
        for probe in config.domain_probes
    )
    return providers


def dns_domain_name(config: ResolverConfig | None = None) -> str:
    """Guess the DNS domain name of this host.

    Args:
        config: Optional resolver config. Defaults to `ResolverConfig()`.

    Returns:
        The domain name or
        [`UNKNOWN_DOMAIN`][hostident.domain.UNKNOWN_DOMAIN] if it could not
        be determined.
    """
    if config is None:
        config = ResolverConfig()
    return first_result(domain_providers(config), UNKNOWN_DOMAIN)


def nis_domain_name(config: ResolverConfig | None = None) -> str:
    """Return the NIS domain name of this host.

    The output of the `domainname` program with the trailing newline removed.

    Args:
        config: Optional resolver config. Only `command_timeout` is used.

    Returns:
        NIS domain name.

    Raises:
        ExternalCommandError: If `domainname` is not on the search path,
            fails, or times out.
    """
    if config is None:
        config = ResolverConfig()
    output = run_program(NIS_DOMAIN_PROGRAM, timeout=config.command_timeout)
    if output.endswith('\n'):
        output = output[:-1]
    return output
