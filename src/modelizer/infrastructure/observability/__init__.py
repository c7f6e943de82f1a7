"""
Observability for modelizer: structured logging of transport deliveries and
decode outcomes, so a failed decode can be traced back to the exchange that
produced it.
"""

from .logging import (
    bind_exchange,
    get_decoding_logger,
    get_logger,
    get_transport_logger,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "bind_exchange",
    "get_logger",
    "get_decoding_logger",
    "get_transport_logger",
]
