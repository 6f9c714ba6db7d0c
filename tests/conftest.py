"""Pytest configuration and fixtures for engine status tests."""

import pytest
from unittest.mock import MagicMock

from engine_status.models.status import ChainEntry, EngineContext, InfoResult, ProbeError

VERSION = "0.7.1-beta commit=v0.7.1-beta-rc1"
UNIMPLEMENTED = 12


# ============================================================================
# PROBE FIXTURES
# ============================================================================

@pytest.fixture
def info_result():
    """Info result for a validated bitcoin testnet engine."""
    return InfoResult(
        chains=(ChainEntry(chain="bitcoin", network="testnet"),),
        version=VERSION,
        synced_to_chain=True,
    )


@pytest.fixture
def info_probe(info_result):
    """Info probe answering with a validated engine."""
    return MagicMock(return_value=info_result)


@pytest.fixture
def seed_probe():
    """Seed probe that succeeds."""
    return MagicMock(return_value=None)


@pytest.fixture
def availability_probe():
    """Availability probe that succeeds."""
    return MagicMock(return_value=None)


@pytest.fixture
def engine(info_probe, seed_probe, availability_probe):
    """Engine context expecting bitcoin at 0.7.0-beta or newer."""
    return EngineContext(
        chain_name="bitcoin",
        min_version="0.7.0-beta",
        info_probe=info_probe,
        seed_probe=seed_probe,
        availability_probe=availability_probe,
    )


# ============================================================================
# ERROR FIXTURES
# ============================================================================

@pytest.fixture
def unimplemented_error():
    """Error returned by an RPC service that has not been started."""
    return ProbeError(UNIMPLEMENTED, "Something Happened")


@pytest.fixture
def wallet_exists_error():
    """Error returned by the seed RPC once a wallet exists."""
    return ProbeError(2, "wallet already exists")


@pytest.fixture
def generic_error():
    """Unrelated RPC error."""
    return ProbeError(2, "Something else happened")
