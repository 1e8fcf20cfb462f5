from dotenv import load_dotenv
import os
from typing import Optional

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return int(value)


# Caching proxy: a cached load is stale after this many milliseconds
CACHE_TTL_MS = int(os.getenv("MEDIASUITE_CACHE_TTL_MS", "300000"))

# Renderers
HARDWARE_RENDERER_AVAILABLE = _env_flag("MEDIASUITE_HARDWARE_RENDERER", True)
DEFAULT_RENDERER_ID = os.getenv("MEDIASUITE_DEFAULT_RENDERER", "software")

# Simulated HLS streams: segment counts are drawn from [MIN, MAX]
SEGMENT_SEED = _env_optional_int("MEDIASUITE_SEGMENT_SEED")
HLS_MIN_SEGMENTS = 10
HLS_MAX_SEGMENTS = 29

# Logging
LOG_LEVEL = os.getenv("MEDIASUITE_LOG_LEVEL", "INFO").upper()
