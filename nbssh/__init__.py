"""
SSH utilities.

Build the argument vector for running a command on a remote host with the
``ssh`` client::

    from nbssh import Address, SshParams

    params = SshParams(address=Address.from_host("myHost"))
    args = params.command(["echo", "hello"])
    subprocess.run(args, check=True)
"""

from .core.exceptions import AddressError, InvalidFormatError, InvalidPortError, ValidationError
from .core.result import Result
from .core.value_objects import (
    DEFAULT_SSH_PARAMS,
    DEFAULT_SSH_PORT,
    Address,
    SshParams,
    SshTarget,
    parse_addresses,
)

__version__ = "0.1.0"

__all__ = [
    'Address',
    'AddressError',
    'DEFAULT_SSH_PARAMS',
    'DEFAULT_SSH_PORT',
    'InvalidFormatError',
    'InvalidPortError',
    'Result',
    'SshParams',
    'SshTarget',
    'ValidationError',
    'parse_addresses',
]
