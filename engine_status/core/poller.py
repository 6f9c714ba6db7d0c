"""Repeated status classification until an engine reaches a target state."""

import time
from typing import Callable, Optional
import structlog

from engine_status.core.status_classifier import classify
from engine_status.models.status import EngineContext, EngineStatus

logger = structlog.get_logger(__name__)


class StatusTimeoutError(Exception):
    """Engine did not reach the target status in the allowed attempts."""
    
    def __init__(self, target: EngineStatus, last_status: Optional[EngineStatus], attempts: int):
        super().__init__(
            f"Engine did not reach {target.value} after {attempts} attempts "
            f"(last status: {last_status.value if last_status else 'none'})"
        )
        self.target = target
        self.last_status = last_status
        self.attempts = attempts


class StatusPoller:
    """Re-invokes classification on a fixed cadence."""
    
    def __init__(self, ctx: EngineContext, interval: float = 5,
                 max_attempts: int = 12, sleep: Callable[[float], None] = time.sleep):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        
        self.ctx = ctx
        self.interval = interval
        self.max_attempts = max_attempts
        self._sleep = sleep
    
    @classmethod
    def from_config(cls, ctx: EngineContext, config) -> "StatusPoller":
        """Create a poller using the EngineConfig polling settings."""
        return cls(ctx, interval=config.poll_interval, max_attempts=config.poll_max_attempts)
    
    def wait_for(self, target: EngineStatus = EngineStatus.VALIDATED) -> EngineStatus:
        """
        Classify until the engine reports the target status.
        
        Errors raised by classification propagate immediately.
        
        Raises:
            StatusTimeoutError: if attempts run out first
        """
        last_status = None
        
        for attempt in range(1, self.max_attempts + 1):
            last_status = classify(self.ctx)
            
            logger.info("Engine status checked",
                       status=last_status.value,
                       target=target.value,
                       attempt=attempt,
                       chain=self.ctx.chain_name)
            
            if last_status is target:
                return last_status
            
            if attempt < self.max_attempts:
                self._sleep(self.interval)
        
        logger.warning("Engine did not reach target status",
                      target=target.value,
                      last_status=last_status.value,
                      attempts=self.max_attempts)
        raise StatusTimeoutError(target, last_status, self.max_attempts)
