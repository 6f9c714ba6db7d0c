"""
Engine Status Classifier

Determines the lifecycle state of a remote Lightning-style node from its
privileged RPC surface: wallet missing, locked, unlocked, validated,
outdated, not synced or unavailable.
"""

__version__ = "1.0.0"
__author__ = "Bitcoin Data Engineering Team"
__description__ = "Lifecycle status classifier for Lightning-style engine nodes"

from engine_status.core.status_classifier import classify
from engine_status.core.unlock_check import is_engine_unlocked
from engine_status.models.config import EngineConfig
from engine_status.models.status import EngineContext, EngineStatus, ProbeError

__all__ = [
    "classify",
    "is_engine_unlocked",
    "EngineConfig",
    "EngineContext",
    "EngineStatus",
    "ProbeError",
]
