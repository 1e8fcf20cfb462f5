from abc import abstractmethod
import functools
from typing import Callable, Dict, List, Type

from pydantic import BaseModel, ConfigDict

from mediasuite.core import log_step
from mediasuite.media import MediaNode

DecoratorFactory = Callable[[MediaNode], MediaNode]


class _PluginOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")


class WatermarkOptions(_PluginOptions):
    text: str
    position: str = "bottom-right"


class SubtitleOptions(_PluginOptions):
    subtitle_file: str
    language: str = "en"


class EqualizerOptions(_PluginOptions):
    preset: str


class MediaDecorator(MediaNode):
    """
    Base class for playback effects layered on top of any media node.

    play() runs the wrapped node first and then applies this decorator's
    effect, so in a chain the innermost effect fires first and the outermost
    fires last.
    """

    id: str
    description: str = ""
    options_model: Type[BaseModel]

    def __init__(self, inner: MediaNode) -> None:
        self._inner = inner
        self.applied_count = 0

    @property
    def inner(self) -> MediaNode:
        return self._inner

    @property
    def name(self) -> str:
        return self._inner.name

    def play(self) -> None:
        self._inner.play()
        self.apply_effect()
        self.applied_count += 1

    def describe(self) -> str:
        return f"{self.get_decorator_info()} on {self._inner.describe()}"

    def contains(self, node: MediaNode) -> bool:
        return self is node or self._inner.contains(node)

    @abstractmethod
    def apply_effect(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_decorator_info(self) -> str:
        raise NotImplementedError


class WatermarkDecorator(MediaDecorator):
    id = "watermark"
    description = "Text overlay drawn at a fixed position"
    options_model = WatermarkOptions

    def __init__(
        self, inner: MediaNode, text: str, position: str = "bottom-right"
    ) -> None:
        super().__init__(inner)
        self.text = text
        self.position = position

    def apply_effect(self) -> None:
        log_step(f"Applying watermark: '{self.text}' at {self.position}")

    def get_decorator_info(self) -> str:
        return f"Watermark: '{self.text}' at {self.position}"


class SubtitleDecorator(MediaDecorator):
    id = "subtitles"
    description = "Subtitle track loaded from a file"
    options_model = SubtitleOptions

    def __init__(
        self, inner: MediaNode, subtitle_file: str, language: str = "en"
    ) -> None:
        super().__init__(inner)
        self.subtitle_file = subtitle_file
        self.language = language

    def apply_effect(self) -> None:
        log_step(f"Loading subtitles from: {self.subtitle_file}")
        log_step(f"Rendering subtitles in {self.language} language")

    def get_decorator_info(self) -> str:
        return f"Subtitles: {self.subtitle_file} ({self.language})"


# Gains in dB for 10 bands, 31 Hz to 16 kHz
EQUALIZER_PRESETS: Dict[str, List[int]] = {
    "flat": [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    "bass boost": [6, 5, 4, 2, 0, 0, 0, 0, 0, 0],
    "treble boost": [0, 0, 0, 0, 0, 0, 2, 4, 5, 6],
    "vocal": [-2, -1, 0, 2, 4, 4, 2, 0, -1, -2],
}


class EqualizerDecorator(MediaDecorator):
    id = "equalizer"
    description = "10-band audio equalizer preset"
    options_model = EqualizerOptions

    def __init__(self, inner: MediaNode, preset: str) -> None:
        super().__init__(inner)
        self.preset = preset
        self.frequency_bands = list(
            EQUALIZER_PRESETS.get(preset.lower(), EQUALIZER_PRESETS["flat"])
        )

    def apply_effect(self) -> None:
        log_step(f"Applying equalizer preset: {self.preset}")
        log_step(f"Processing audio with {len(self.frequency_bands)} frequency bands")

    def get_decorator_info(self) -> str:
        return f"Equalizer: {self.preset} ({len(self.frequency_bands)} bands)"


DECORATORS: Dict[str, Type[MediaDecorator]] = {
    WatermarkDecorator.id: WatermarkDecorator,
    SubtitleDecorator.id: SubtitleDecorator,
    EqualizerDecorator.id: EqualizerDecorator,
}


def get_decorator_class(plugin_id: str) -> Type[MediaDecorator]:
    """
    Return the registered decorator class for the given identifier.

    Raises KeyError if the plugin_id is unknown.
    """
    return DECORATORS[plugin_id]


def make_decorator_factory(plugin_id: str, **options) -> DecoratorFactory:
    """
    Build a factory wrapping a node with the given decorator and options.

    Options are validated against the decorator's options model up front:
    raises KeyError for an unknown plugin_id and pydantic's ValidationError
    (a ValueError) for missing, mistyped or unexpected options.

    Example:
      factory = make_decorator_factory("subtitles", subtitle_file="movie.srt")
      decorated = factory(item)
    """
    decorator_cls = get_decorator_class(plugin_id)
    validated = decorator_cls.options_model.model_validate(options)
    return functools.partial(decorator_cls, **validated.model_dump())


def list_decorators() -> List[Dict[str, str]]:
    """
    Return a lightweight description of all registered decorators.

    Each entry is a plain dict with:
      - id          : plugin id
      - description : short description of the effect
    """
    return [
        {"id": plugin_id, "description": decorator_cls.description}
        for plugin_id, decorator_cls in DECORATORS.items()
    ]
