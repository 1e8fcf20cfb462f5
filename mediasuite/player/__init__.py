"""Public façade for the mediasuite.player package.

This module exposes the player facade (renderer + loaded tree + playback
state) and the helpers that build playable trees from definitions.
"""

from .builder import build_media_item, build_playlist, build_plugin_manager
from .facade import PlayerFacade
from .orchestration import (
    PlaybackOptions,
    build_player_tree,
    load_playlist_definition,
    run_playback,
)

__all__ = [
    "PlayerFacade",
    "PlaybackOptions",
    "build_media_item",
    "build_playlist",
    "build_plugin_manager",
    "build_player_tree",
    "load_playlist_definition",
    "run_playback",
]
