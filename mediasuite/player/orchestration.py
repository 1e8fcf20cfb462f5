"""Orchestration helpers wiring definitions, plugins, renderer and player.

load_playlist_definition() reads a playlist tree from a JSON file and
run_playback() builds the decorated tree, loads it into a fresh player and
plays it once, returning a small summary. The HTTP API uses the same
building blocks step by step against a long-lived player.
"""

from dataclasses import dataclass
from pathlib import Path
import random
from typing import Any, Dict, List, Optional

from mediasuite.config import DEFAULT_RENDERER_ID
from mediasuite.core import (
    PlaylistDefinition,
    PluginConfig,
    log_section,
    log_warning,
    read_json,
)
from mediasuite.media import MediaNode
from mediasuite.renderers import get_renderer

from .builder import build_playlist, build_plugin_manager
from .facade import PlayerFacade


@dataclass
class PlaybackOptions:
    renderer_id: str = DEFAULT_RENDERER_ID
    # seed:
    #   - int  => reproducible simulated values (HLS segment counts)
    #   - None => default random source
    seed: Optional[int] = None


def load_playlist_definition(path: str | Path) -> PlaylistDefinition:
    """
    Load and validate a playlist definition from a JSON file.

    Raises ValueError if the file is missing, is not valid JSON, or does not
    describe a playlist (pydantic's ValidationError is a ValueError).
    """

    def _on_error(e: Exception) -> None:
        log_warning(f"Playlist file {path} is not valid JSON: {e}")

    data = read_json(path, default=None, on_error=_on_error)
    if not isinstance(data, dict):
        raise ValueError(f"Playlist file {path} is missing or not a JSON object.")
    return PlaylistDefinition.model_validate(data)


def build_player_tree(
    definition: PlaylistDefinition,
    plugins: Optional[List[PluginConfig]] = None,
    rng: Optional[random.Random] = None,
) -> MediaNode:
    playlist = build_playlist(definition, rng=rng)
    manager = build_plugin_manager(plugins or [])
    return manager.apply_decorators(playlist)


def run_playback(
    definition: PlaylistDefinition,
    plugins: Optional[List[PluginConfig]] = None,
    opts: Optional[PlaybackOptions] = None,
) -> Dict[str, Any]:
    """
    Build, load and play a playlist once with a fresh player.

    The player starts on the requested renderer; when that backend is not
    available it falls back to the software renderer and the summary reports
    renderer_fallback=True. Raises KeyError for an unknown renderer or plugin
    id.
    """
    opts = opts or PlaybackOptions()
    log_section(f"Playback: {definition.name}")

    rng = random.Random(opts.seed) if opts.seed is not None else None
    tree = build_player_tree(definition, plugins, rng=rng)

    renderer = get_renderer(opts.renderer_id)
    fallback = not renderer.is_available()
    if fallback:
        log_warning(f"Renderer not available: {renderer.info()}, using software")
        renderer = get_renderer("software")
    player = PlayerFacade(renderer)

    player.load(tree)
    played = player.play()

    return {
        "playlist": definition.name,
        "played": played,
        "tree": tree.describe(),
        "renderer": player.renderer.info(),
        "renderer_fallback": fallback,
        "status": player.status(),
    }
