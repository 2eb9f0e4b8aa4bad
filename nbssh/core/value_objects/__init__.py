"""Core value objects"""

from .address import DEFAULT_SSH_PORT, Address, parse_addresses
from .ssh_params import DEFAULT_SSH_PARAMS, SshParams, SshTarget

__all__ = [
    'Address',
    'DEFAULT_SSH_PORT',
    'parse_addresses',
    'SshParams',
    'SshTarget',
    'DEFAULT_SSH_PARAMS'
]
