"""Public façade for the mediasuite.sources package.

This module exposes the simulated source adapters and the caching proxy that
memoizes a source's load for a bounded time window.
"""

from .adapters import (
    HLSStreamAdapter,
    LocalFileAdapter,
    RemoteAPIAdapter,
    build_source,
    detect_file_format,
    extract_media_id,
)
from .caching import CachingProxy

__all__ = [
    "LocalFileAdapter",
    "RemoteAPIAdapter",
    "HLSStreamAdapter",
    "build_source",
    "detect_file_format",
    "extract_media_id",
    "CachingProxy",
]
