import logging

# Shared by sources, decorators, playlists and the player façade;
# level and format are set by logging_config.configure_logging.
logger = logging.getLogger("mediasuite")

_MARKERS = {
    "step": "→",
    "success": "✅",
    "warning": "⚠️",
    "error": "❌",
}


def _emit(level: int, marker: str, message: str) -> None:
    logger.log(level, "%s %s", _MARKERS[marker], message)


def log_section(title: str) -> None:
    """Header opening a playback run (one per run_playback call)."""
    logger.info("")
    logger.info("=== %s ===", title)


def log_info(message: str) -> None:
    """Now-playing lines and source load/connect notices."""
    logger.info("%s", message)


def log_step(message: str) -> None:
    """Cache hits and misses, decorator effects, renderer setup."""
    _emit(logging.INFO, "step", message)


def log_success(message: str) -> None:
    _emit(logging.INFO, "success", message)


def log_warning(message: str) -> None:
    """Rejected player requests: busy session, nothing loaded, renderer unavailable."""
    _emit(logging.WARNING, "warning", message)


def log_error(message: str) -> None:
    """A child or source failed and the playback was aborted."""
    _emit(logging.ERROR, "error", message)
