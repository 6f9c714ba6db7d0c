"""Engine client that replays recorded RPC outcomes."""

import json
from pathlib import Path
from typing import Any, Dict, List, Union
import structlog

from engine_status.models.status import ProbeError

logger = structlog.get_logger(__name__)

RECORDED_METHODS = ("get_info", "gen_seed")

# Replaying these without a recorded entry is an error
REQUIRED_METHODS = ("get_info",)


class RecordingError(ValueError):
    """Recording document is malformed."""
    pass


def _validate_entry(method: str, entry: Any) -> None:
    if not isinstance(entry, dict) or not ("result" in entry or "error" in entry):
        raise RecordingError(f"Entry for {method} needs a 'result' or 'error' key")

    if "error" in entry:
        error = entry["error"]
        if not isinstance(error, dict) or not isinstance(error.get("code"), int):
            raise RecordingError(f"Error for {method} needs an integer 'code'")


class RecordedEngineClient:
    """
    Replays recorded engine responses.

    A recording maps each RPC method to either ``{"result": ...}`` or
    ``{"error": {"code": int, "message": str}}``, or to a list of those
    replayed in order (the last one repeats). ``get_info`` must be
    recorded when it is called; an unrecorded ``gen_seed`` succeeds with
    an empty result.
    """

    def __init__(self, recording: Dict[str, Any]):
        if not isinstance(recording, dict):
            raise RecordingError("Recording must be a JSON object")

        self._queues: Dict[str, List[Dict[str, Any]]] = {}
        for method, entries in recording.items():
            if method not in RECORDED_METHODS:
                raise RecordingError(f"Unknown recorded method: {method}")
            if not isinstance(entries, list):
                entries = [entries]
            if not entries:
                raise RecordingError(f"No entries recorded for {method}")
            for entry in entries:
                _validate_entry(method, entry)
            self._queues[method] = list(entries)

        self.calls: List[str] = []

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "RecordedEngineClient":
        """Load a recording from a JSON file."""
        try:
            recording = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise RecordingError(f"Invalid JSON in {path}: {e}") from e

        client = cls(recording)
        logger.info("Loaded engine recording", path=str(path), methods=sorted(recording))
        return client

    def _replay(self, method: str) -> Any:
        self.calls.append(method)
        queue = self._queues.get(method)

        if not queue:
            if method in REQUIRED_METHODS:
                raise RecordingError(f"No recorded entry for {method}")
            return {}

        entry = queue.pop(0) if len(queue) > 1 else queue[0]

        if "error" in entry:
            error = entry["error"]
            raise ProbeError(error["code"], error.get("message", ""))

        return entry["result"]

    def get_info(self) -> Dict[str, Any]:
        return self._replay("get_info")

    def gen_seed(self) -> Any:
        return self._replay("gen_seed")
