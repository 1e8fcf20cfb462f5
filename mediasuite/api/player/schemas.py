from typing import List

from pydantic import BaseModel, Field

from mediasuite.core import PlayerStatus, PlaylistDefinition, PluginConfig


class RendererInfo(BaseModel):
    id: str
    info: str
    available: bool


class RendererListResponse(BaseModel):
    renderers: List[RendererInfo]


class SetRendererRequest(BaseModel):
    renderer_id: str


class PluginInfo(BaseModel):
    id: str
    description: str


class PluginListResponse(BaseModel):
    plugins: List[PluginInfo]


class LoadPlaylistRequest(BaseModel):
    playlist: PlaylistDefinition
    plugins: List[PluginConfig] = Field(default_factory=list)


class LoadPlaylistResponse(BaseModel):
    loaded: bool
    tree: str
    status: PlayerStatus


class PlayResponse(BaseModel):
    played: bool
    status: PlayerStatus
