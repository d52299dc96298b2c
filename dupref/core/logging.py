"""Structured logging configuration — structlog + stdlib logging."""

from __future__ import annotations

import logging
import logging.config

import structlog


def setup_logging(level: str = "WARNING", fmt: str = "console") -> None:
    """Route structlog events through one stderr handler.

    stdout carries the scan report, so diagnostics never mix with it.
    *fmt* selects ``console`` (human readable) or ``json`` lines.
    """
    level = level.upper()
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="%H:%M:%S"),
        structlog.processors.format_exc_info,
    ]
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if fmt.lower() == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "dupref": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "dupref",
                },
            },
            "loggers": {
                "dupref": {"handlers": ["stderr"], "level": level, "propagate": False},
            },
        }
    )
