"""
Structured logging for modelizer.

Every decode attempt is traceable to the exchange that produced it: transport
entries carry the method and URL, decoding entries carry the target model, and
``bind_exchange`` attaches the URL and status code of the response being
decoded. A failed decode therefore shows up as, for example:

    {
        "app": "modelizer",
        "version": "0.1.0",
        "layer": "decoding",
        "component": "model-serializer",
        "model": "Listing",
        "url": "https://api.example.test/listings/1",
        "status_code": 200,
        "event": "response_decode_failed",
        "error_kind": "model",
        ...
    }

Layers:
    - infrastructure: configuration and logging itself
    - transport: aiohttp client and request handles
    - decoding: body parsing, model construction, completion adaptation
"""

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.types import EventDict, Processor

from modelizer import __version__

Layer = Literal["infrastructure", "transport", "decoding"]

APP_NAME = "modelizer"


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Stamp every entry with the package name and version."""
    event_dict["app"] = APP_NAME
    event_dict["version"] = __version__
    return event_dict


def add_severity_level(
    logger: Any, method_name: str, event_dict: EventDict
) -> EventDict:
    """Mirror the level as an upper-case ``severity`` field for log collectors."""
    level = event_dict.get("level")
    if level:
        event_dict["severity"] = str(level).upper()
    return event_dict


def _processors(include_timestamp: bool, json_logs: bool) -> list[Processor]:
    processors: list[Processor] = []
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors += [
        structlog.contextvars.merge_contextvars,
        add_app_context,
        structlog.stdlib.add_log_level,
        add_severity_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    return processors


def setup_logging(
    level: str = "INFO",
    json_logs: bool = True,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structlog on top of the standard library root logger.

    Args:
        level: Root log level name; unknown names fall back to INFO
        json_logs: JSON lines when True, coloured console output when False
        include_timestamp: Prefix entries with an ISO timestamp

    Usage:
        >>> setup_logging(level="DEBUG", json_logs=False)
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=_processors(include_timestamp, json_logs),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    name: str | None = None,
    layer: Layer | None = None,
    component: str | None = None,
    **initial_context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger bound to its place in the package.

    Args:
        name: Logger name, bound as ``module``
        layer: Architectural layer
        component: Component within the layer
        **initial_context: Extra fields bound to every entry
    """
    logger = structlog.get_logger(name)
    context = {
        key: value
        for key, value in (("layer", layer), ("component", component), ("module", name))
        if value
    }
    context.update(initial_context)
    return logger.bind(**context) if context else logger


def bind_exchange(
    logger: structlog.stdlib.BoundLogger,
    url: str,
    status_code: int | None = None,
    method: str | None = None,
) -> structlog.stdlib.BoundLogger:
    """Bind the identity of one HTTP exchange; absent fields are left out."""
    context: dict[str, Any] = {"url": url}
    if status_code is not None:
        context["status_code"] = status_code
    if method is not None:
        context["method"] = method
    return logger.bind(**context)


def get_transport_logger(
    component: str,
    method: str | None = None,
    url: str | None = None,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Logger for the transport layer.

    ``method`` and ``url`` are bound when a logger belongs to one request,
    as it does for a request handle.
    """
    logger = get_logger("transport", layer="transport", component=component, **context)
    if url is not None:
        logger = bind_exchange(logger, url, method=method)
    elif method is not None:
        logger = logger.bind(method=method)
    return logger


def get_decoding_logger(
    component: str,
    model: str | None = None,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """Logger for the decoding layer, bound to the target model when known."""
    if model:
        context = {"model": model, **context}
    return get_logger("decoding", layer="decoding", component=component, **context)
