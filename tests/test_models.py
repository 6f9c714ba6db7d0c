"""Unit tests for engine status models."""

import pytest
from dataclasses import FrozenInstanceError

from engine_status.core.error_classifier import ErrorClassifier
from engine_status.models.status import (
    ChainEntry,
    EngineContext,
    EngineStatus,
    InfoResult,
    ProbeError,
)


class TestEngineStatus:
    
    def test_seven_literal_tags(self):
        assert {s.value for s in EngineStatus} == {
            "VALIDATED", "NEEDS_WALLET", "LOCKED", "UNLOCKED",
            "NOT_SYNCED", "OLD_VERSION", "UNAVAILABLE",
        }


class TestInfoResult:
    
    def test_from_empty_response(self):
        info = InfoResult.from_response({})
        
        assert info.chains == ()
        assert info.version is None
        assert info.synced_to_chain is False
    
    def test_from_camel_case_response(self):
        info = InfoResult.from_response({
            "chains": [{"chain": "bitcoin", "network": "testnet"}],
            "version": "0.7.1-beta",
            "syncedToChain": True,
        })
        
        assert info.chains == (ChainEntry("bitcoin", "testnet"),)
        assert info.version == "0.7.1-beta"
        assert info.synced_to_chain is True
    
    def test_from_snake_case_response(self):
        info = InfoResult.from_response({"synced_to_chain": True})
        
        assert info.synced_to_chain is True
    
    def test_null_chains(self):
        assert InfoResult.from_response({"chains": None}).chains == ()
    
    def test_chain_without_name_raises(self):
        with pytest.raises(KeyError):
            InfoResult.from_response({"chains": [{"network": "testnet"}]})
    
    def test_non_mapping_raises(self):
        with pytest.raises(TypeError):
            InfoResult.from_response(["bitcoin"])
    
    @pytest.mark.parametrize("flag", ["false", "0", [0], 1, None])
    def test_non_bool_sync_flag_raises(self, flag):
        with pytest.raises(TypeError):
            InfoResult.from_response({
                "chains": [{"chain": "bitcoin", "network": "testnet"}],
                "version": "0.7.1-beta",
                "syncedToChain": flag,
            })
    
    def test_non_bool_snake_case_sync_flag_raises(self):
        with pytest.raises(TypeError):
            InfoResult.from_response({"synced_to_chain": "true"})
    
    @pytest.mark.parametrize("chains", ["", 0, False, "bitcoin", {"chain": "bitcoin"}])
    def test_non_list_chains_raises(self, chains):
        with pytest.raises(TypeError):
            InfoResult.from_response({"chains": chains})


class TestProbeError:
    
    def test_attributes(self):
        error = ProbeError(12, "unknown service lnrpc.Lightning")
        
        assert error.code == 12
        assert error.message == "unknown service lnrpc.Lightning"
        assert "12" in str(error)


class TestEngineContext:
    
    def test_default_error_classifier(self, engine):
        assert isinstance(engine.error_classifier, ErrorClassifier)
        assert engine.error_classifier.unimplemented_code == 12
    
    def test_immutable(self, engine):
        with pytest.raises(FrozenInstanceError):
            engine.chain_name = "litecoin"
