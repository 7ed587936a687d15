"""Logging utilities for cadfeatures."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class AnalysisStats:
    """Statistics accumulated over one or more analyses."""

    analyzed_count: int = 0
    failed_count: int = 0
    entities_seen: int = 0
    holes_seen: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    total_duration_ms: float = 0.0

    @property
    def avg_duration_ms(self) -> float:
        """Average duration of a successful analysis."""
        if self.analyzed_count == 0:
            return 0.0
        return self.total_duration_ms / self.analyzed_count


_PROCESSORS = (
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.JSONRenderer(),
)

_installed_handlers: list[logging.Handler] = []


def get_logger(name: str = "cadfeatures") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger ``name``.

    Output follows the stdlib logging setup, so nothing is printed until an
    application (or ``configure_logging``) attaches handlers.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=list(_PROCESSORS),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def reset_logging() -> None:
    """Remove the handlers installed by ``configure_logging``."""
    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    reset_logging()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=list(_PROCESSORS),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = get_logger()
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class AnalysisLogger:
    """Logger for tracking analyses and their statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._stats = AnalysisStats()

    def log_drawing_loaded(self, source: str, entity_count: int) -> None:
        """Log a drawing handed over by the parser."""
        self._logger.debug("Drawing loaded", source=source, entities=entity_count)

    def log_drawing_analyzed(
        self,
        entity_count: int,
        hole_count: int,
        layer_count: int,
        duration_ms: float,
    ) -> None:
        """Log a successful analysis."""
        self._logger.info(
            "Drawing analyzed",
            entities=entity_count,
            holes=hole_count,
            layers=layer_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.analyzed_count += 1
        self._stats.entities_seen += entity_count
        self._stats.holes_seen += hole_count
        self._stats.total_duration_ms += duration_ms

    def log_drawing_failed(self, source: str, reason: str) -> None:
        """Log a drawing the parser could not read."""
        self._logger.warning("Drawing analysis failed", source=source, reason=reason)
        self._stats.failed_count += 1
        self._stats.errors.append((source, reason))

    @property
    def stats(self) -> AnalysisStats:
        """Get current analysis statistics."""
        return self._stats
