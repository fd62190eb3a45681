"""Structured logging configuration for the metrics log scanner"""
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional
import structlog
from structlog.stdlib import LoggerFactory
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, StackInfoRenderer
from config import Config


def setup_structured_logging(config: Config) -> None:
    """Setup structured logging with JSON format for production and console for development"""

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        TimeStamper(fmt="iso"),
        StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.is_development:
        processors.append(ConsoleRenderer())
    else:
        processors.append(JSONRenderer())

    # Loggers are not cached so that a later reconfiguration (or capture in tests) takes effect
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    level = getattr(logging, config.log_level.upper())

    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    handlers.append(console_handler)

    if config.log_file is not None:
        file_handler = logging.FileHandler(str(config.log_file))
        file_handler.setLevel(level)
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=handlers,
        force=True
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)


def log_scan_startup(logger: structlog.stdlib.BoundLogger, config: Config, root_path: Path, write_unique: bool) -> None:
    """Log scanner startup with configuration details"""
    logger.info(
        "Scanner starting up",
        service_name=config.service_name,
        service_version=config.service_version,
        root_path=str(root_path),
        write_unique=write_unique,
        unique_metrics_file=str(config.unique_metrics_file),
        event_type="scan_startup"
    )


def log_stage_timing(logger: structlog.stdlib.BoundLogger, stage: str, elapsed: float, items: int) -> None:
    """Log completion of one pipeline stage with structured data"""
    logger.info(
        "Stage completed",
        stage=stage,
        elapsed_seconds=round(elapsed, 6),
        items=items,
        event_type="stage_complete"
    )


def log_error(logger: structlog.stdlib.BoundLogger, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
    """Log error with structured context"""
    logger.error(
        "Error occurred",
        error=str(error),
        error_type=type(error).__name__,
        context=context or {},
        event_type="error"
    )
