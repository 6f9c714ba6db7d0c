"""Engine status data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Tuple

if TYPE_CHECKING:
    from engine_status.core.error_classifier import ErrorClassifier


class EngineStatus(Enum):
    """Lifecycle states of an engine node. Exactly one applies at a time."""
    VALIDATED = "VALIDATED"
    NEEDS_WALLET = "NEEDS_WALLET"
    LOCKED = "LOCKED"
    UNLOCKED = "UNLOCKED"
    NOT_SYNCED = "NOT_SYNCED"
    OLD_VERSION = "OLD_VERSION"
    UNAVAILABLE = "UNAVAILABLE"


class ProbeOutcome(Enum):
    """Result of a single probe call, as seen by the classifier."""
    SUCCESS = "success"
    NOT_IMPLEMENTED = "not_implemented"
    WALLET_EXISTS = "wallet_exists"
    OTHER = "other"


class ProbeError(Exception):
    """Failure reported by an engine RPC probe."""

    def __init__(self, code: int, message: str = ""):
        super().__init__(f"RPC Error {code}: {message}")
        self.code = code
        self.message = message


@dataclass(frozen=True)
class ChainEntry:
    """A chain/network pair reported by the engine."""
    chain: str
    network: str = ""


@dataclass(frozen=True)
class InfoResult:
    """Parsed payload of the engine's info RPC."""
    chains: Tuple[ChainEntry, ...] = ()
    version: Optional[str] = None
    synced_to_chain: bool = False

    @classmethod
    def from_response(cls, response: Dict[str, Any]) -> "InfoResult":
        """
        Build from a raw info response.

        Accepts both camelCase (REST/JS clients) and snake_case (gRPC
        python stubs) keys for the sync flag. A missing or null ``chains``
        means no chains and a missing sync flag means not synced. Entries
        without a ``chain`` key raise KeyError; a ``chains`` value that is
        not a list or a sync flag that is not a bool raises TypeError.
        """
        if not isinstance(response, dict):
            raise TypeError(f"Info response must be a mapping, got {type(response).__name__}")

        raw_chains = response.get("chains")
        if raw_chains is None:
            raw_chains = []
        if not isinstance(raw_chains, list):
            raise TypeError(f"Info chains must be a list, got {type(raw_chains).__name__}")

        chains = tuple(
            ChainEntry(chain=entry["chain"], network=entry.get("network", ""))
            for entry in raw_chains
        )

        synced = response.get("syncedToChain", response.get("synced_to_chain", False))
        if not isinstance(synced, bool):
            raise TypeError(f"Info sync flag must be a bool, got {type(synced).__name__}")

        return cls(
            chains=chains,
            version=response.get("version"),
            synced_to_chain=synced,
        )


InfoProbe = Callable[["EngineContext"], InfoResult]
StatusProbe = Callable[["EngineContext"], None]


@dataclass(frozen=True)
class EngineContext:
    """
    Everything needed to classify one engine node.

    Built once per managed node and shared across classification calls.
    ``error_classifier`` defaults to the standard gRPC code and wallet
    message when not given.
    """
    chain_name: str
    min_version: str
    info_probe: InfoProbe
    seed_probe: StatusProbe
    availability_probe: StatusProbe
    error_classifier: Optional["ErrorClassifier"] = field(default=None, compare=False)

    def __post_init__(self):
        if self.error_classifier is None:
            from engine_status.core.error_classifier import ErrorClassifier
            object.__setattr__(self, "error_classifier", ErrorClassifier())

    @classmethod
    def from_client(cls, config, client) -> "EngineContext":
        """Wire probes for an engine client using the given EngineConfig."""
        from engine_status.core.probes import ClientProbes

        probes = ClientProbes(client)
        return cls(
            chain_name=config.chain_name,
            min_version=config.min_version,
            info_probe=probes.info,
            seed_probe=probes.seed,
            availability_probe=probes.availability,
            error_classifier=config.error_classifier(),
        )
