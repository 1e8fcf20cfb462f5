"""Public façade for the mediasuite.media package.

This module exposes the playable node capability and the composite tree
(single media items and nested playlists).
"""

from .base import MediaNode, Source
from .playlist import MediaItem, Playlist

__all__ = [
    "Source",
    "MediaNode",
    "MediaItem",
    "Playlist",
]
