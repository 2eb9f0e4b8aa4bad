"""
nbssh Configuration Module

Loads defaults for the SSH command builder and for logging from environment
variables, optionally read from a ``.env`` file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .core.value_objects import Address, SshParams
from .infrastructure.logging import setup_logging

logger = logging.getLogger(__name__)

ENV_PREFIXES = ("", "NBSSH_")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("json", "text")
TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


@dataclass
class LoggingConfig:
    """Logging settings"""
    log_level: str = "INFO"
    log_format: str = "json"


@dataclass
class SshDefaultsConfig:
    """Default connection parameters"""
    address: str = ""
    user: str = ""
    identity: str = ""
    strict_host_key_checking: bool = True


class NbsshConfig:
    """
    nbssh configuration settings loaded from environment variables.

    Every key is looked up as-is first and then with the ``NBSSH_`` prefix,
    e.g. ``LOG_LEVEL`` or ``NBSSH_LOG_LEVEL``.
    """

    def __init__(self):
        self.logging = LoggingConfig()
        self.ssh = SshDefaultsConfig()

        self._load_environment_variables()
        self._validate_configuration()

    def _load_environment_variables(self):
        self.logging.log_level = self._get_string("LOG_LEVEL", self.logging.log_level).upper()
        self.logging.log_format = self._get_string("LOG_FORMAT", self.logging.log_format).lower()

        self.ssh.address = self._get_string("SSH_ADDRESS", self.ssh.address)
        self.ssh.user = self._get_string("SSH_USER", self.ssh.user)
        self.ssh.identity = self._get_string("SSH_IDENTITY", self.ssh.identity)
        self.ssh.strict_host_key_checking = self._get_bool(
            "SSH_STRICT_HOST_KEY_CHECKING", self.ssh.strict_host_key_checking
        )

    def _get_string(self, key: str, default: str) -> str:
        """Get string value from environment with multiple key attempts"""
        for prefix in ENV_PREFIXES:
            value = os.getenv(f"{prefix}{key}")
            if value is not None:
                return value
        return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean value from environment, keeping the default on unknown spellings"""
        value = self._get_string(key, str(default)).strip().lower()
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False
        logger.warning(f"Invalid boolean value for {key}: {value!r}, using default: {default}")
        return default

    def _validate_configuration(self):
        if self.logging.log_level not in VALID_LOG_LEVELS:
            logger.warning(f"Invalid log level: {self.logging.log_level}, using INFO")
            self.logging.log_level = "INFO"

        if self.logging.log_format not in VALID_LOG_FORMATS:
            logger.warning(f"Invalid log format: {self.logging.log_format}, using json")
            self.logging.log_format = "json"

    def default_params(self) -> SshParams:
        """
        Build command parameters from the configured defaults.

        Raises:
            AddressError: If SSH_ADDRESS is not a valid host[:port] string
        """
        address = Address.from_string(self.ssh.address) if self.ssh.address else Address("")
        return SshParams(
            address=address,
            identity=Path(self.ssh.identity) if self.ssh.identity else None,
            user=self.ssh.user or None,
            strict_host_key_checking=self.ssh.strict_host_key_checking,
        )

    def configure_logging(self) -> logging.Logger:
        return setup_logging(self.logging.log_level, self.logging.log_format)

    def get_summary(self) -> dict:
        """Get a summary of configuration"""
        return {
            "logging": {
                "log_level": self.logging.log_level,
                "log_format": self.logging.log_format,
            },
            "ssh": {
                "address": self.ssh.address,
                "user": self.ssh.user,
                "identity": self.ssh.identity,
                "strict_host_key_checking": self.ssh.strict_host_key_checking,
            },
        }


def load_dotenv_if_exists(env_file: Optional[Path] = None) -> bool:
    """Load a .env file if one exists, without overriding the environment"""
    candidates = [env_file] if env_file is not None else [Path(".env")]
    for candidate in candidates:
        if candidate.exists():
            load_dotenv(candidate)
            logger.info(f"Environment variables loaded from: {candidate}")
            return True

    logger.debug("No .env file found, using environment variables and defaults")
    return False


_config: Optional[NbsshConfig] = None


def get_config() -> NbsshConfig:
    """Get the process-wide configuration, loading it on first use"""
    global _config
    if _config is None:
        load_dotenv_if_exists()
        _config = NbsshConfig()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it"""
    global _config
    _config = None
