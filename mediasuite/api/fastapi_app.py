from fastapi import FastAPI

from mediasuite.api.player.health import router as player_health_router
from mediasuite.api.player.routes import router as player_router
from mediasuite.config import DEFAULT_RENDERER_ID
from mediasuite.core import configure_logging
from mediasuite.player import PlayerFacade
from mediasuite.renderers import get_renderer

configure_logging()

app = FastAPI(
    title="Modular Media Suite API",
    version="0.1.0",
    description="Backend API driving a single media player session.",
)

# One playback session per application instance
app.state.player = PlayerFacade(get_renderer(DEFAULT_RENDERER_ID))

# Player routes
app.include_router(player_health_router, prefix="/player", tags=["player"])
app.include_router(player_router, prefix="/player", tags=["player"])
