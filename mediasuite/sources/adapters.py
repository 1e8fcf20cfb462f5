"""Simulated source adapters.

Each adapter exposes a different kind of media (local file, remote API,
HLS stream) through the common Source interface. No real decoding or network
access happens: adapters only model the preparation and playback steps.
"""

import os
import random
from typing import Optional
from urllib.parse import parse_qs, urlparse

from mediasuite.config import HLS_MAX_SEGMENTS, HLS_MIN_SEGMENTS, SEGMENT_SEED
from mediasuite.core import SourceType, log_info, log_step
from mediasuite.media import Source

# Shared by every HLS adapter built without its own rng, so seeded runs
# still give each stream a different segment count.
_SEGMENT_RNG = random.Random(SEGMENT_SEED)

_FILE_FORMATS = {
    ".mp4": "MP4",
    ".avi": "AVI",
    ".mkv": "MKV",
    ".mov": "MOV",
}


def detect_file_format(path: str) -> str:
    _, ext = os.path.splitext(path)
    return _FILE_FORMATS.get(ext.lower(), "Unknown")


def extract_media_id(api_url: str) -> str:
    """Return the `id` query parameter of an API URL, or "unknown"."""
    qs = parse_qs(urlparse(api_url).query)
    return qs.get("id", ["unknown"])[0] or "unknown"


class LocalFileAdapter(Source):
    def __init__(self, path: str) -> None:
        self.path = path
        self.file_format = detect_file_format(path)
        self._loaded = False

    def load(self) -> None:
        log_info(f"Loading local file: {self.path}")
        log_step(f"Detected format: {self.file_format}")
        log_step(f"Initializing {self.file_format} decoder...")
        self._loaded = True

    def play(self) -> None:
        if not self._loaded:
            self.load()
        log_info(f"Playing local file: {self.path}")
        log_step(f"Using {self.file_format} playback engine")

    def info(self) -> str:
        return f"Local File: {self.path} ({self.file_format})"

    def is_ready(self) -> bool:
        return self._loaded


class RemoteAPIAdapter(Source):
    def __init__(self, api_url: str) -> None:
        self.api_url = api_url
        self.media_id = extract_media_id(api_url)
        self._loaded = False

    def load(self) -> None:
        log_info(f"Connecting to remote API: {self.api_url}")
        log_step(f"Fetching media metadata for ID: {self.media_id}")
        self._loaded = True

    def play(self) -> None:
        if not self._loaded:
            self.load()
        log_info(f"Streaming from API: {self.api_url}")
        log_step(f"Streaming media ID: {self.media_id}")

    def info(self) -> str:
        return f"Remote API: {self.api_url} (ID: {self.media_id})"

    def is_ready(self) -> bool:
        return self._loaded


class HLSStreamAdapter(Source):
    """
    HLS playlist source.

    The segment count is simulated on load from `rng`; pass a seeded
    random.Random for reproducible runs. Without one, adapters draw from a
    module-wide generator seeded by MEDIASUITE_SEGMENT_SEED.
    """

    def __init__(self, playlist_url: str, rng: Optional[random.Random] = None) -> None:
        self.playlist_url = playlist_url
        self._rng = rng if rng is not None else _SEGMENT_RNG
        self.segment_count = 0
        self._loaded = False

    def load(self) -> None:
        log_info(f"Loading HLS playlist: {self.playlist_url}")
        log_step("Parsing playlist manifest...")
        self.segment_count = self._rng.randint(HLS_MIN_SEGMENTS, HLS_MAX_SEGMENTS)
        self._loaded = True

    def play(self) -> None:
        if not self._loaded:
            self.load()
        log_info(f"Playing HLS stream: {self.playlist_url}")
        log_step(f"Streaming {self.segment_count} segments")

    def info(self) -> str:
        return f"HLS Stream: {self.playlist_url} ({self.segment_count} segments)"

    def is_ready(self) -> bool:
        return self._loaded


def build_source(
    source_type: SourceType,
    location: str,
    rng: Optional[random.Random] = None,
) -> Source:
    """
    Return the adapter for the given source type.

    Raises ValueError if the source type is unknown.
    """
    source_type = SourceType(source_type)
    if source_type == SourceType.LOCAL:
        return LocalFileAdapter(location)
    if source_type == SourceType.REMOTE:
        return RemoteAPIAdapter(location)
    if source_type == SourceType.HLS:
        return HLSStreamAdapter(location, rng=rng)

    raise ValueError(f"Unsupported source type: {source_type!r}")
