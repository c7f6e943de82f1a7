from .value_objects import DecoderConfig, HttpClientConfig

__all__ = ["DecoderConfig", "HttpClientConfig"]
