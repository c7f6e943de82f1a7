"""Configuration value objects for dependency injection.

Instead of injecting global settings object, inject specific configuration
dataclasses into each component. Enables:
- Easy testing with different configurations
- Clear constructor contracts
- Validation at composition root
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuration for HTTP client."""

    timeout: float = 30.0
    connect_timeout: float = 10.0
    verify_ssl: bool = True
    default_headers: dict[str, str] = field(
        default_factory=lambda: {"Accept": "application/json"}
    )


@dataclass(frozen=True)
class DecoderConfig:
    """Configuration for body decoding and model serialization."""

    allow_fragments: bool = True  # Accept top-level scalars ("1", "\"x\"")
    encoding: str = "utf-8"
    # Inclusive (low, high) status range; None disables status checks
    acceptable_status: tuple[int, int] | None = None

    def __post_init__(self):
        if self.acceptable_status is not None:
            low, high = self.acceptable_status
            if low > high:
                raise ValueError(
                    f"acceptable_status range is inverted: {self.acceptable_status}"
                )
