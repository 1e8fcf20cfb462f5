from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SourceType(str, Enum):
    """Kind of adapter backing a media item."""

    LOCAL = "local"
    REMOTE = "remote"
    HLS = "hls"


class PlaybackState(str, Enum):
    IDLE = "idle"
    LOADED = "loaded"
    PLAYING = "playing"


class PlayerStatus(BaseModel):
    """
    Read-only snapshot of a player session.

    - state     : idle / loaded / playing
    - renderer  : info string of the active renderer
    - playlist  : name of the loaded tree, "none" when nothing is loaded
    - message   : last status message reported by the player
    """

    model_config = ConfigDict(frozen=True)

    state: PlaybackState
    is_playing: bool
    renderer: str
    playlist: str
    message: Optional[str] = None


class MediaItemDefinition(BaseModel):
    title: str
    source_type: SourceType
    location: str
    description: Optional[str] = None
    cached: bool = False
    cache_ttl_ms: Optional[int] = Field(default=None, gt=0)


class PlaylistDefinition(BaseModel):
    """
    Declarative playlist tree.

    Items are either single media items or nested playlists, in playback order.
    """

    name: str
    items: List[Union["PlaylistDefinition", MediaItemDefinition]] = Field(
        default_factory=list
    )


class PluginConfig(BaseModel):
    id: str
    options: Dict[str, Any] = Field(default_factory=dict)


PlaylistDefinition.model_rebuild()
