"""
nbssh Test Configuration and Fixtures
"""

import logging
from pathlib import Path

import pytest

from nbssh.config import reset_config
from nbssh.core.value_objects import Address, SshParams
from tests.fixtures.test_data import CONFIG_ENV_KEYS


@pytest.fixture
def sample_address():
    """Address with a non-default port."""
    return Address("localhost", 9222)


@pytest.fixture
def full_params(sample_address):
    """Params with every optional field set and host key checks disabled."""
    return SshParams(
        address=sample_address,
        identity=Path("/myIdentity"),
        user="me",
        strict_host_key_checking=False,
    )


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove nbssh variables from the environment and drop cached config."""
    for key in CONFIG_ENV_KEYS:
        for prefix in ("", "NBSSH_"):
            monkeypatch.delenv(f"{prefix}{key}", raising=False)
    # Keep a stray .env in the working directory out of the tests
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield monkeypatch
    reset_config()


@pytest.fixture
def package_logger():
    """Package logger, restored to its previous state afterwards."""
    logger = logging.getLogger("nbssh")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate

    yield logger

    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
