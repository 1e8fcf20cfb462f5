from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type, Union

from mediasuite.config import HARDWARE_RENDERER_AVAILABLE
from mediasuite.core import log_info, log_step


class Renderer(ABC):
    """
    Interchangeable rendering backend.

    render() initializes the backend on first use; initialize() only sets the
    backend up once, later calls are no-ops.
    """

    id: str

    def __init__(self) -> None:
        self._initialized = False
        self.render_count = 0

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        if self._initialized:
            return
        self._setup()
        self._initialized = True

    def render(self, content: str) -> None:
        if not self._initialized:
            self.initialize()
        self._draw(content)
        self.render_count += 1

    @abstractmethod
    def info(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def is_available(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def _setup(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def _draw(self, content: str) -> None:
        raise NotImplementedError


class SoftwareRenderer(Renderer):
    """CPU rendering, always available as the fallback backend."""

    id = "software"

    def info(self) -> str:
        return "Software Renderer (CPU-based)"

    def is_available(self) -> bool:
        return True

    def _setup(self) -> None:
        log_step("Initializing software renderer...")
        log_step("Software renderer ready")

    def _draw(self, content: str) -> None:
        log_info(f"[Software Rendering] {content}")
        log_step("Using CPU-based rendering pipeline")


class HardwareRenderer(Renderer):
    """GPU rendering; availability depends on the environment."""

    id = "hardware"

    def __init__(self, available: Optional[bool] = None) -> None:
        super().__init__()
        self._available = (
            available if available is not None else HARDWARE_RENDERER_AVAILABLE
        )

    def info(self) -> str:
        return "Hardware Renderer (GPU-accelerated)"

    def is_available(self) -> bool:
        return self._available

    def _setup(self) -> None:
        log_step("Initializing hardware renderer...")
        log_step("Detecting GPU capabilities...")
        log_step("Hardware renderer ready")

    def _draw(self, content: str) -> None:
        log_info(f"[Hardware Rendering] {content}")
        log_step("Using GPU-accelerated rendering pipeline")


RENDERERS: Dict[str, Type[Renderer]] = {
    SoftwareRenderer.id: SoftwareRenderer,
    HardwareRenderer.id: HardwareRenderer,
}


def get_renderer(renderer_id: str) -> Renderer:
    """
    Return a new renderer instance for the given identifier.

    Raises KeyError if the renderer_id is unknown.
    """
    return RENDERERS[renderer_id]()


def list_renderers() -> List[Dict[str, Union[str, bool]]]:
    """
    Return a lightweight description of all registered renderers.

    Each entry is a plain dict with:
      - id        : renderer id
      - info      : renderer info string
      - available : whether the backend can currently be selected
    """
    renderers: List[Dict[str, Union[str, bool]]] = []
    for renderer_id in RENDERERS:
        renderer = get_renderer(renderer_id)
        renderers.append(
            {
                "id": renderer_id,
                "info": renderer.info(),
                "available": renderer.is_available(),
            }
        )
    return renderers
