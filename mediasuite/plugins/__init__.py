"""Public façade for the mediasuite.plugins package.

This module exposes the decorator chain (playback effects layered on any
media node), the decorator registry, and the plugin manager that applies
registered decorator factories in order.
"""

from .decorators import (
    DECORATORS,
    EQUALIZER_PRESETS,
    DecoratorFactory,
    EqualizerDecorator,
    MediaDecorator,
    SubtitleDecorator,
    WatermarkDecorator,
    get_decorator_class,
    list_decorators,
    make_decorator_factory,
)
from .manager import PluginManager

__all__ = [
    "MediaDecorator",
    "WatermarkDecorator",
    "SubtitleDecorator",
    "EqualizerDecorator",
    "EQUALIZER_PRESETS",
    "DECORATORS",
    "DecoratorFactory",
    "get_decorator_class",
    "make_decorator_factory",
    "list_decorators",
    "PluginManager",
]
