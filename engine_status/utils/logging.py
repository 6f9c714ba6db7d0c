"""Structured logging setup for the CLI and poller."""

import sys
import logging
import logging.handlers
from pathlib import Path
import structlog

from engine_status.models.config import EngineConfig

_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="ISO"),
    structlog.processors.format_exc_info,
]


def _renderer(log_format: str):
    if log_format.lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(config: EngineConfig) -> None:
    """Route structlog through stdlib logging at the configured level and format."""
    level = getattr(logging, config.log_level.upper())
    root_logger = logging.getLogger()
    
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)
    root_logger.setLevel(level)
    
    structlog.configure(
        processors=_SHARED_PROCESSORS + [_renderer(config.log_format)],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=config.log_max_size_mb * 1024 * 1024,
            backupCount=config.log_backup_count,
        )
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)
