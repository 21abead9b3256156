"""HostIdent is a library of host and domain name helpers."""
from __future__ import annotations

import importlib.metadata as importlib_metadata

from hostident.address import AddressFamily
from hostident.address import host_name_to_addr
from hostident.domain import dns_domain_name
from hostident.domain import nis_domain_name
from hostident.host import abbreviate_hostnick
from hostident.host import host_name

__version__ = importlib_metadata.version('hostident')

__all__ = [
    'AddressFamily',
    'abbreviate_hostnick',
    'dns_domain_name',
    'host_name',
    'host_name_to_addr',
    'nis_domain_name',
]
