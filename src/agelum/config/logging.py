"""structlog configuration for agelum.

stdout is reserved: it carries CLI results and, under ``agelum serve``,
the MCP stdio transport. Every log line therefore goes to stderr, either
as console output (default) or as JSON lines (``--log-json``).

``configure_logging`` may run more than once per process (each CLI
invocation builds an AppContext, and tests invoke the CLI repeatedly).
It replaces only the handler it installed itself, so handlers added by
a host application or by pytest's ``caplog`` stay attached.
"""

from __future__ import annotations

import logging
import sys

import structlog

HANDLER_NAME = "agelum-stderr"

# Chatty libraries pulled in by the mcp extra (FastMCP logs each request
# at INFO; uvicorn and httpx serve the HTTP transports).
QUIET_LOGGERS: tuple[str, ...] = ("mcp", "uvicorn.access", "httpx")


def _shared_processors() -> list[structlog.types.Processor]:
    """Processors applied to structlog and stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        # UTC, like the ``created`` stamp written into documents.
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _stderr_handler(log_json: bool, shared: list[structlog.types.Processor]) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging to stderr.

    The ``agelum`` logger tree logs at DEBUG with *verbose*, WARNING
    otherwise. Everything else stays at WARNING.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(_stderr_handler(log_json, shared))
    root.setLevel(logging.WARNING)

    logging.getLogger("agelum").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
