"""Probe adapters over an engine RPC client."""

from typing import Any, Dict, Protocol
import structlog

from engine_status.models.status import EngineContext, InfoResult, ProbeError

logger = structlog.get_logger(__name__)


class EngineClient(Protocol):
    """Protocol for engine RPC clients. Failures raise ProbeError."""
    
    def get_info(self) -> Dict[str, Any]:
        """Call the Lightning RPC info method."""
        ...
    
    def gen_seed(self) -> Any:
        """Call the WalletUnlocker seed generation method."""
        ...


class ClientProbes:
    """
    Exposes an EngineClient as the three classification probes.
    
    The availability probe is a second info call: it only matters whether
    the Lightning RPC answers.
    """
    
    def __init__(self, client: EngineClient):
        self.client = client
    
    def info(self, ctx: EngineContext) -> InfoResult:
        """Fetch and parse engine info."""
        try:
            response = self.client.get_info()
        except ProbeError as e:
            logger.debug("Info probe failed", code=e.code, error=e.message)
            raise
        
        return InfoResult.from_response(response)
    
    def seed(self, ctx: EngineContext) -> None:
        """Ask the wallet unlocker for a seed, discarding it."""
        try:
            self.client.gen_seed()
        except ProbeError as e:
            logger.debug("Seed probe failed", code=e.code, error=e.message)
            raise
    
    def availability(self, ctx: EngineContext) -> None:
        """Check that the Lightning RPC answers at all."""
        try:
            self.client.get_info()
        except ProbeError as e:
            logger.debug("Availability probe failed", code=e.code, error=e.message)
            raise
