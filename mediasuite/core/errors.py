class MediaError(RuntimeError):
    """Base class for failures raised while assembling or playing media."""


class SourceError(MediaError):
    """A source failed to load or play."""

    def __init__(self, source_info: str, reason: str) -> None:
        super().__init__(f"{source_info}: {reason}")
        self.source_info = source_info
        self.reason = reason


class CycleError(MediaError):
    """Adding a node would make a tree contain itself."""
