"""Public façade for the mediasuite.core package.

This module exposes logging helpers, error types, filesystem utilities, and
base models that are safe to import from other packages. Callers should
import these cross-cutting concerns from this façade instead of the internal
submodules.
"""

from .errors import CycleError, MediaError, SourceError
from .fs_utils import read_json
from .logging_config import configure_logging
from .logging_utils import (
    log_error,
    log_info,
    log_section,
    log_step,
    log_success,
    log_warning,
)
from .models import (
    MediaItemDefinition,
    PlaybackState,
    PlayerStatus,
    PlaylistDefinition,
    PluginConfig,
    SourceType,
)

__all__ = [
    "configure_logging",
    "log_section",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "read_json",
    "MediaError",
    "SourceError",
    "CycleError",
    "SourceType",
    "PlaybackState",
    "PlayerStatus",
    "MediaItemDefinition",
    "PlaylistDefinition",
    "PluginConfig",
]
