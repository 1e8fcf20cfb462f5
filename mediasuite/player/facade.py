import threading
from typing import Optional

from mediasuite.core import (
    CycleError,
    PlaybackState,
    PlayerStatus,
    log_error,
    log_info,
    log_success,
    log_warning,
)
from mediasuite.media import MediaNode
from mediasuite.renderers import Renderer


class PlayerFacade(MediaNode):
    """
    Single orchestration point over the active renderer and the loaded tree.

    One player instance is one playback session: play() calls are serialized
    and a call made while another one is running is rejected, not queued.
    The player is itself a media node, so decorators can wrap it.
    """

    def __init__(self, renderer: Renderer) -> None:
        self._renderer = renderer
        self._tree: Optional[MediaNode] = None
        self._state = PlaybackState.IDLE
        self._message: Optional[str] = None
        self._state_lock = threading.RLock()
        self._session_lock = threading.Lock()
        log_info(f"Player initialized with: {renderer.info()}")

    @property
    def name(self) -> str:
        return "player"

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @property
    def tree(self) -> Optional[MediaNode]:
        return self._tree

    @property
    def is_playing(self) -> bool:
        return self._state == PlaybackState.PLAYING

    def describe(self) -> str:
        playlist = self._tree.name if self._tree is not None else "none"
        return f"Player: {playlist} with {self._renderer.info()}"

    def contains(self, node: MediaNode) -> bool:
        if self is node:
            return True
        return self._tree is not None and self._tree.contains(node)

    def _report(self, message: str) -> None:
        with self._state_lock:
            self._message = message

    def load(self, tree: MediaNode) -> bool:
        """Replace the loaded tree. Rejected while a session is playing."""
        if tree.contains(self):
            raise CycleError(f"Cycle rejected: {tree.describe()} contains the player")

        with self._state_lock:
            if self._state == PlaybackState.PLAYING:
                self._report("Cannot load while playing")
                log_warning(f"Cannot load {tree.name!r}: playback in progress")
                return False
            self._tree = tree
            self._state = PlaybackState.LOADED
            self._report(f"Playlist loaded: {tree.name}")

        log_info(f"Playlist loaded: {tree.describe()}")
        return True

    def set_renderer(self, renderer: Renderer) -> bool:
        """Switch renderer if the candidate is available. Returns False on rejection."""
        if not renderer.is_available():
            self._report(f"Renderer not available: {renderer.info()}")
            log_warning(f"Renderer not available: {renderer.info()}")
            return False

        with self._state_lock:
            self._renderer = renderer
            self._report(f"Renderer switched to: {renderer.info()}")
        log_info(f"Renderer switched to: {renderer.info()}")
        return True

    def play(self) -> bool:
        """
        Render once and play the loaded tree to completion.

        Returns False without changing state when nothing is loaded or when
        another session is already playing. A failure inside the tree aborts
        playback, puts the player back in the loaded state and is re-raised.
        """
        if self._tree is None:
            self._report("No playlist loaded")
            log_warning("No playlist loaded!")
            return False

        if not self._session_lock.acquire(blocking=False):
            self._report("Playback already in progress")
            log_warning("Playback already in progress, request rejected")
            return False

        try:
            with self._state_lock:
                tree = self._tree
                renderer = self._renderer
                self._state = PlaybackState.PLAYING
                self._report(f"Playing: {tree.name}")

            log_info(f"Starting playback with {renderer.info()}...")
            renderer.render("Playback started")
            try:
                tree.play()
            except Exception as exc:
                self._report(f"Playback failed: {exc}")
                log_error(f"Playback of {tree.name!r} failed: {exc}")
                raise

            self._report(f"Playback finished: {tree.name}")
            log_success(f"Playback finished: {tree.name}")
            return True
        finally:
            with self._state_lock:
                self._state = PlaybackState.LOADED
            self._session_lock.release()

    def status(self) -> PlayerStatus:
        with self._state_lock:
            return PlayerStatus(
                state=self._state,
                is_playing=self._state == PlaybackState.PLAYING,
                renderer=self._renderer.info(),
                playlist=self._tree.name if self._tree is not None else "none",
                message=self._message,
            )
