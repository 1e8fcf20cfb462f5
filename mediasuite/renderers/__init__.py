"""Public façade for the mediasuite.renderers package."""

from .strategies import (
    RENDERERS,
    HardwareRenderer,
    Renderer,
    SoftwareRenderer,
    get_renderer,
    list_renderers,
)

__all__ = [
    "Renderer",
    "SoftwareRenderer",
    "HardwareRenderer",
    "RENDERERS",
    "get_renderer",
    "list_renderers",
]
