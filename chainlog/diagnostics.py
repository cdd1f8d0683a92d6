import logging
import structlog
from .config import cfg

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}

def _configure() -> None:
    # a host application that set up structlog first keeps its own pipeline
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=cfg.LOG_UTC),
            structlog.processors.JSONRenderer(),
        ],
        # LOG_LEVEL gates chainlog's own events only
        wrapper_class=structlog.make_filtering_bound_logger(
            _LEVELS.get(cfg.LOG_LEVEL.upper(), logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(),
    )

def get_logger(name: str = "chainlog"):
    """Logger for chainlog's lifecycle events (chain changes, unclaimed records)."""
    _configure()
    return structlog.get_logger(name)

def get_record_logger(name: str = "chainlog.records"):
    """
    Sink used by StructlogHandler.

    Shares the configured processors and logger factory but never filters:
    the handler's own threshold already decided the record is wanted.
    """
    _configure()
    return structlog.wrap_logger(
        None,
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        logger_factory_args=(name,),
    )
