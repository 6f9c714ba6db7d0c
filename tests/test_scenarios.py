"""End-to-end classification scenarios against a recorded engine."""

import pytest

from engine_status.core.recording import RecordedEngineClient
from engine_status.core.status_classifier import classify
from engine_status.models.config import EngineConfig
from engine_status.models.status import EngineContext, EngineStatus

VALID_INFO = {
    "chains": [{"chain": "bitcoin", "network": "testnet"}],
    "version": "0.7.1-beta commit=v0.7.1-beta-rc1",
    "syncedToChain": True,
}

SCENARIOS = [
    pytest.param({"get_info": {"result": VALID_INFO}}, EngineStatus.VALIDATED, id="validated"),
    pytest.param(
        {"get_info": {"error": {"code": 12, "message": "Something Happened"}},
         "gen_seed": {"result": {"cipher_seed_mnemonic": []}}},
        EngineStatus.NEEDS_WALLET,
        id="needs-wallet",
    ),
    pytest.param(
        {"get_info": {"error": {"code": 12}},
         "gen_seed": {"error": {"code": 2, "message": "wallet already exists"}}},
        EngineStatus.LOCKED,
        id="locked",
    ),
    pytest.param(
        {"get_info": {"error": {"code": 2, "message": "Something Happened"}}},
        EngineStatus.UNAVAILABLE,
        id="unavailable",
    ),
    pytest.param({"get_info": {"result": {}}}, EngineStatus.UNLOCKED, id="no-chains"),
    pytest.param(
        {"get_info": {"result": dict(VALID_INFO, chains=[
            {"chain": "bitcoin", "network": "testnet"},
            {"chain": "litecoin", "network": "mainnet"},
        ])}},
        EngineStatus.UNLOCKED,
        id="two-chains",
    ),
    pytest.param(
        {"get_info": {"result": dict(VALID_INFO, version="0.6.0-beta")}},
        EngineStatus.OLD_VERSION,
        id="old-version",
    ),
    pytest.param(
        {"get_info": [
            {"error": {"code": 12}},
            {"result": VALID_INFO},
        ],
         "gen_seed": {"error": {"code": 2, "message": "wallet already exists"}}},
        EngineStatus.UNLOCKED,
        id="unlocked-between-probes",
    ),
]


@pytest.fixture
def config():
    return EngineConfig(chain_name="bitcoin", min_version="0.7.0-beta", _env_file=None)


@pytest.mark.parametrize("recording,expected", SCENARIOS)
def test_scenario(config, recording, expected):
    engine = EngineContext.from_client(config, RecordedEngineClient(recording))
    
    assert classify(engine) is expected
