"""Data models and configuration."""

from engine_status.models.config import EngineConfig
from engine_status.models.status import (
    ChainEntry,
    EngineContext,
    EngineStatus,
    InfoResult,
    ProbeError,
    ProbeOutcome,
)

__all__ = [
    "EngineConfig",
    "ChainEntry",
    "EngineContext",
    "EngineStatus",
    "InfoResult",
    "ProbeError",
    "ProbeOutcome",
]
