"""Resolver configuration.

The library functions use the defaults of
[`ResolverConfig`][hostident.config.ResolverConfig] unless a config is
passed explicitly. The `hostident` CLI reads the TOML file returned by
[`get_config_filepath()`][hostident.config.get_config_filepath] if it exists.
"""
from __future__ import annotations

import os
import re
import sys
from typing import List
from typing import Optional

import tomli_w
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

from hostident.utils.environment import home_dir

if sys.version_info >= (3, 11):  # pragma: >=3.11 cover
    import tomllib
else:  # pragma: <3.11 cover
    import tomli as tomllib

CONFIG_FILE = 'config.toml'


class DomainProbe(BaseModel):
    """External program used to guess the DNS domain name.

    Attributes:
        program: Name of the program, located via the search path and
            invoked with no arguments.
        pattern: Regular expression applied to the program's standard output.
            The first capture group is the domain, or the whole match if the
            pattern has no groups.
    """

    program: str
    pattern: str

    @field_validator('program')
    @classmethod
    def _program_validator(cls, v: str) -> str:
        if not v or v.strip() != v:
            raise ValueError(
                f'Program must be a non-empty name without surrounding '
                f'whitespace. Got "{v}".',
            )
        return v

    @field_validator('pattern')
    @classmethod
    def _pattern_validator(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f'Invalid pattern "{v}": {e}.') from None
        return v


def _default_domain_probes() -> list[DomainProbe]:
    return [
        DomainProbe(program='hostname', pattern=r'^[^.\s]*\.(\S+)'),
        DomainProbe(program='dnsdomainname', pattern=r'(\S+\.\S+)'),
        DomainProbe(program='domainname', pattern=r'(\S+\.\S+)'),
    ]


class ResolverConfig(BaseModel):
    """Host identity resolver configuration.

    Attributes:
        command_timeout: Optional number of seconds after which an external
            helper program is abandoned. `None` waits indefinitely.
        probe_port: Port of the datagram association used to force address
            resolution. No data is ever sent to it.
        domain_probes: Ordered helper programs tried by
            [`dns_domain_name()`][hostident.domain.dns_domain_name] when the
            system name is not fully-qualified.

    Raises:
        ValueError: If the timeout is not positive or the port is not in the
            range [1, 65535].
    """

    command_timeout: Optional[float] = None  # noqa: UP007
    probe_port: int = 1
    domain_probes: List[DomainProbe] = Field(  # noqa: UP006
        default_factory=_default_domain_probes,
    )

    @field_validator('command_timeout')
    @classmethod
    def _command_timeout_validator(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError(
                'Command timeout must be None or greater than zero.',
            )
        return v

    @field_validator('probe_port')
    @classmethod
    def _probe_port_validator(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError('Probe port must be in range [1, 65535].')
        return v


def get_config_filepath() -> str:
    """Return the path of the default config file."""
    return os.path.join(home_dir(), CONFIG_FILE)


def read_config(path: str) -> ResolverConfig:
    """Read a config from a TOML file.

    Args:
        path: Path to the config file.

    Returns:
        Parsed config.

    Raises:
        FileNotFoundError: If `path` does not exist.
        ValueError: If the file is not valid TOML or the values are invalid.
    """
    with open(path, 'rb') as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f'Unable to parse config {path}: {e}') from e
    return ResolverConfig.model_validate(data)


def write_config(config: ResolverConfig, path: str) -> None:
    """Write a config to a TOML file.

    Parent directories are created if needed.

    Args:
        config: Config to write.
        path: Path to write the config to.
    """
    dirname = os.path.dirname(path)
    if dirname:
        os.makedirs(dirname, exist_ok=True)
    with open(path, 'wb') as f:
        tomli_w.dump(config.model_dump(exclude_none=True), f)


def dumps_config(config: ResolverConfig) -> str:
    """Serialize a config to a TOML string."""
    return tomli_w.dumps(config.model_dump(exclude_none=True))


def load_config(path: str | None = None) -> ResolverConfig:
    """Load the config file.

    Args:
        path: Optional config file path. If `None`, the file returned by
            [`get_config_filepath()`][hostident.config.get_config_filepath]
            is read if it exists.

    Returns:
        The config read from `path`, or the default config if `path` is
        `None` and the default config file does not exist.

    Raises:
        FileNotFoundError: If an explicit `path` does not exist.
        ValueError: If the file is not valid TOML or the values are invalid.
    """
    if path is not None:
        return read_config(path)

    path = get_config_filepath()
    if not os.path.isfile(path):
        return ResolverConfig()
    return read_config(path)
