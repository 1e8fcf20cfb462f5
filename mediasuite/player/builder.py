"""Build playable trees from declarative playlist definitions."""

import random
from typing import Iterable, Optional

from mediasuite.core import MediaItemDefinition, PlaylistDefinition, PluginConfig
from mediasuite.media import MediaItem, Playlist
from mediasuite.plugins import PluginManager, make_decorator_factory
from mediasuite.sources import CachingProxy, build_source


def build_media_item(
    definition: MediaItemDefinition,
    rng: Optional[random.Random] = None,
) -> MediaItem:
    source = build_source(definition.source_type, definition.location, rng=rng)
    if definition.cached:
        source = CachingProxy(source, ttl_ms=definition.cache_ttl_ms)
    return MediaItem(definition.title, source, description=definition.description)


def build_playlist(
    definition: PlaylistDefinition,
    rng: Optional[random.Random] = None,
) -> Playlist:
    playlist = Playlist(definition.name)
    for entry in definition.items:
        if isinstance(entry, PlaylistDefinition):
            playlist.add(build_playlist(entry, rng=rng))
        else:
            playlist.add(build_media_item(entry, rng=rng))
    return playlist


def build_plugin_manager(plugins: Iterable[PluginConfig]) -> PluginManager:
    """
    Register one decorator factory per plugin config, in the given order.

    Raises KeyError if a plugin id is unknown.
    """
    manager = PluginManager()
    for plugin in plugins:
        manager.register_decorator(make_decorator_factory(plugin.id, **plugin.options))
    return manager
