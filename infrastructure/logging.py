import logging
import logging.handlers
import sys

import structlog

from infrastructure.config import settings

# Third party loggers that would otherwise bypass the structlog formatter
_LIBRARY_LOGGERS = ("temporalio", "confluent_kafka", "pymongo", "httpx")


def setup_logging(component: str, *, log_to_file: bool = True) -> None:
    """Configure structlog and the standard library to render through one pipeline.

    Args:
        component: Name of the running process (e.g. ``"worker"``), bound to every record
        log_to_file: Also write a daily rotated ``<env>.log`` under ``settings.log_dir``

    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.app_env == "development"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(app=settings.app_name, component=component)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processor=renderer,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_to_file:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.TimedRotatingFileHandler(
                settings.log_dir / f"{settings.app_env}.log",
                when="midnight",
                interval=1,
                backupCount=7,
            ),
        )
    for handler in handlers:
        handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = handlers
    root_logger.setLevel(settings.log_level.upper())

    for logger_name in _LIBRARY_LOGGERS:
        library_logger = logging.getLogger(logger_name)
        library_logger.handlers = handlers
        library_logger.propagate = False
