"""Core engine status components."""

from engine_status.core.error_classifier import ErrorClassifier, classify_error
from engine_status.core.poller import StatusPoller, StatusTimeoutError
from engine_status.core.probes import ClientProbes, EngineClient
from engine_status.core.recording import RecordedEngineClient, RecordingError
from engine_status.core.status_classifier import classify
from engine_status.core.unlock_check import is_engine_unlocked
from engine_status.core.version import at_least

__all__ = [
    "ErrorClassifier",
    "classify_error",
    "StatusPoller",
    "StatusTimeoutError",
    "ClientProbes",
    "EngineClient",
    "RecordedEngineClient",
    "RecordingError",
    "classify",
    "is_engine_unlocked",
    "at_least",
]
