"""SSH command builder"""

import logging
import os
import sys
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Union

from .address import Address

logger = logging.getLogger(__name__)

PathLike = Union[str, bytes, 'os.PathLike[str]', 'os.PathLike[bytes]']

SSH_PROGRAM = "ssh"
BATCH_MODE_OPTION = "-oBatchMode=yes"
# Order matters: the known-hosts redirect follows the strict check option.
NO_HOST_KEY_CHECK_OPTIONS = (
    "-oStrictHostKeyChecking=no",
    "-oUserKnownHostsFile=/dev/null",
)


def _path_token(path: PathLike) -> str:
    token = os.fsdecode(path)
    # Raises UnicodeEncodeError for paths that only round-trip via surrogates.
    token.encode(sys.getfilesystemencoding())
    return token


@dataclass(frozen=True)
class SshParams:
    """Inputs for an SSH command, excluding the remote command itself.

    Nothing here is validated beyond the address: an empty user or a missing
    identity file is only reported by ssh itself when the command runs.

    Setting ``strict_host_key_checking`` to False skips the known-hosts check
    and keeps the target out of the known-hosts file, which suits ephemeral
    VMs. It adds ``-oStrictHostKeyChecking=no`` and
    ``-oUserKnownHostsFile=/dev/null``.
    """

    address: Address = Address("")
    identity: Optional[PathLike] = None
    user: Optional[str] = None
    strict_host_key_checking: bool = True

    @classmethod
    def target(cls, address: Address, identity: PathLike, user: str) -> 'SshParams':
        """Params for a throwaway host: fixed identity and user, no host key checks"""
        return cls(
            address=address,
            identity=identity,
            user=user,
            strict_host_key_checking=False,
        )

    def with_address(self, address: Address) -> 'SshParams':
        return replace(self, address=address)

    def with_user(self, user: Optional[str]) -> 'SshParams':
        return replace(self, user=user)

    def with_identity(self, identity: Optional[PathLike]) -> 'SshParams':
        return replace(self, identity=identity)

    def with_strict_host_key_checking(self, enabled: bool) -> 'SshParams':
        return replace(self, strict_host_key_checking=enabled)

    def target_token(self) -> str:
        """Get the ``user@host`` (or bare ``host``) argument"""
        if self.user:
            return f"{self.user}@{self.address.host}"
        return self.address.host

    def command(self, remote_args: Iterable[PathLike] = ()) -> list[str]:
        """
        Create a full SSH command.

        The result is an argument vector for direct execution, ``argv[0]``
        being the program. Nothing is quoted, so it must not be joined into a
        shell command line.

        Args:
            remote_args: Remote command and its arguments, appended unchanged;
                         bytes and path-like items are decoded to str

        Returns:
            Ordered list of arguments

        Raises:
            TypeError: If remote_args is a single string
            UnicodeEncodeError: If the identity path is not representable
                                in the filesystem encoding
        """
        if isinstance(remote_args, (str, bytes)):
            raise TypeError("remote_args must be a sequence of arguments, not a string")

        output = [SSH_PROGRAM]
        if not self.strict_host_key_checking:
            output.extend(NO_HOST_KEY_CHECK_OPTIONS)
        output.append(BATCH_MODE_OPTION)

        if self.identity is not None:
            output.extend(["-i", _path_token(self.identity)])

        if self.address.port is not None:
            output.extend(["-p", self.address.port_str()])

        output.append(self.target_token())
        output.extend(os.fsdecode(arg) for arg in remote_args)

        logger.debug("Built SSH command", extra={'target': str(self.address), 'argv': output})
        return output


# Earlier name of the builder
SshTarget = SshParams

DEFAULT_SSH_PARAMS = SshParams()
