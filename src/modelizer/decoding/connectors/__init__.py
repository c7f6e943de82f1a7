from .aiohttp_client import AiohttpClient
from .request import ModelRequest

__all__ = ["AiohttpClient", "ModelRequest"]
