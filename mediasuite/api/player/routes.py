from fastapi import APIRouter, HTTPException, Request

from mediasuite.core import MediaError, PlayerStatus
from mediasuite.player import PlayerFacade, build_player_tree
from mediasuite.plugins import list_decorators
from mediasuite.renderers import get_renderer, list_renderers

from .schemas import (
    LoadPlaylistRequest,
    LoadPlaylistResponse,
    PlayResponse,
    PluginInfo,
    PluginListResponse,
    RendererInfo,
    RendererListResponse,
    SetRendererRequest,
)

router = APIRouter()


def _get_player(request: Request) -> PlayerFacade:
    return request.app.state.player


@router.get("/status", response_model=PlayerStatus)
def get_status(request: Request) -> PlayerStatus:
    return _get_player(request).status()


@router.get("/renderers", response_model=RendererListResponse)
def get_renderers() -> RendererListResponse:
    return RendererListResponse(
        renderers=[RendererInfo(**entry) for entry in list_renderers()]
    )


@router.put("/renderer", response_model=PlayerStatus)
def set_renderer(body: SetRendererRequest, request: Request) -> PlayerStatus:
    """
    Switch the active renderer.

    Unknown renderer ids return 400; an unavailable renderer is rejected with
    409 and the active renderer is kept.
    """
    try:
        renderer = get_renderer(body.renderer_id)
    except KeyError:
        raise HTTPException(
            status_code=400, detail=f"Unknown renderer: {body.renderer_id!r}"
        )

    player = _get_player(request)
    if not player.set_renderer(renderer):
        raise HTTPException(
            status_code=409, detail=f"Renderer not available: {renderer.info()}"
        )
    return player.status()


@router.get("/plugins", response_model=PluginListResponse)
def get_plugins() -> PluginListResponse:
    return PluginListResponse(
        plugins=[PluginInfo(**entry) for entry in list_decorators()]
    )


@router.post("/playlist", response_model=LoadPlaylistResponse)
def load_playlist(body: LoadPlaylistRequest, request: Request) -> LoadPlaylistResponse:
    """
    Build the playlist tree, wrap it with the requested plugins (first plugin
    innermost) and load it into the player.
    """
    try:
        tree = build_player_tree(body.playlist, body.plugins)
    except KeyError as exc:
        raise HTTPException(status_code=400, detail=f"Unknown plugin: {exc}")
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=400, detail=f"Invalid plugin options: {exc}")

    player = _get_player(request)
    if not player.load(tree):
        raise HTTPException(status_code=409, detail="Playback in progress.")

    return LoadPlaylistResponse(loaded=True, tree=tree.describe(), status=player.status())


@router.post("/play", response_model=PlayResponse)
def play(request: Request) -> PlayResponse:
    """
    Play the loaded tree once.

    When nothing is loaded (or another playback is running) the response has
    played=false and the status message explains why.
    """
    player = _get_player(request)
    try:
        played = player.play()
    except MediaError as exc:
        raise HTTPException(status_code=502, detail=f"Playback failed: {exc}")
    return PlayResponse(played=played, status=player.status())
