import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .core.exceptions import TargetNotFoundError
from .core.value_objects import Address, SshParams

logger = logging.getLogger(__name__)


class SshTargetSettings(BaseModel):
    """Connection settings for one target as stored in configuration documents.

    The address is kept as a single ``host[:port]`` string when serialized.
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    address: Address
    identity: Optional[Path] = Field(default=None)
    user: Optional[str] = Field(default=None)
    strict_host_key_checking: bool = Field(default=True)

    @classmethod
    def from_params(cls, params: SshParams) -> 'SshTargetSettings':
        identity = Path(os.fsdecode(params.identity)) if params.identity is not None else None
        return cls(
            address=params.address,
            identity=identity,
            user=params.user,
            strict_host_key_checking=params.strict_host_key_checking,
        )

    def to_params(self) -> SshParams:
        return SshParams(
            address=self.address,
            identity=self.identity,
            user=self.user,
            strict_host_key_checking=self.strict_host_key_checking,
        )


class SshInventory(BaseModel):
    """Named SSH targets, usually loaded from a YAML file"""

    model_config = ConfigDict(extra='forbid')

    targets: Dict[str, SshTargetSettings] = Field(default_factory=dict)

    @classmethod
    def from_yaml(cls, text: str) -> 'SshInventory':
        """
        Load an inventory from YAML text.

        Addresses should be quoted: YAML 1.1 reads unquoted digit and colon
        scalars such as ``10:22`` as base-60 integers, which fail validation.

        Raises:
            yaml.YAMLError: If the text is not valid YAML
            pydantic.ValidationError: If a target is malformed, including
                                      invalid addresses
        """
        data = yaml.safe_load(text) or {}
        inventory = cls.model_validate(data)
        logger.debug(f"Loaded inventory with {len(inventory.targets)} targets")
        return inventory

    def to_yaml(self) -> str:
        data = self.model_dump(mode='json', exclude_none=True)
        return yaml.safe_dump(data, sort_keys=False)

    def names(self) -> Iterable[str]:
        return self.targets.keys()

    def get_params(self, name: str) -> SshParams:
        """Get the command builder for a named target"""
        if name not in self.targets:
            raise TargetNotFoundError(name)
        return self.targets[name].to_params()

    def command(self, name: str, remote_args: Iterable[str] = ()) -> list[str]:
        """Build the SSH command for a named target"""
        return self.get_params(name).command(remote_args)
