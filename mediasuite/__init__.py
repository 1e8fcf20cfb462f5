"""Modular media suite: composable playlists, decorators, caching and renderers."""

__version__ = "0.1.0"
