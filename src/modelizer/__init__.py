"""
Typed HTTP response decoding.
Write the decode pipeline once, supply one modelizer per model type.

Modules:
- decoding: Serializers, modelizers, completion adaptation, aiohttp transport
- shared: Models decoded from responses
- infrastructure: Logging
- config: YAML/env configuration
"""

__version__ = "0.1.0"
