from typing import Callable, List, Optional

import pytest

from mediasuite.core import SourceError
from mediasuite.media import MediaNode, Source


class RecordingSource(Source):
    """Source double appending "<label>.load" / "<label>.play" to a shared log."""

    def __init__(self, label: str, log: List[str], fail_on: Optional[str] = None) -> None:
        self.label = label
        self.log = log
        self.fail_on = fail_on
        self.loaded = False

    def load(self) -> None:
        if self.fail_on == "load":
            raise SourceError(self.info(), "load failed")
        self.log.append(f"{self.label}.load")
        self.loaded = True

    def play(self) -> None:
        if self.fail_on == "play":
            raise SourceError(self.info(), "play failed")
        self.log.append(f"{self.label}.play")

    def info(self) -> str:
        return f"Recording source {self.label}"

    def is_ready(self) -> bool:
        return self.loaded


class RecordingNode(MediaNode):
    """Media node double appending "<label>.play" to a shared log."""

    def __init__(self, label: str, log: List[str]) -> None:
        self.label = label
        self.log = log

    @property
    def name(self) -> str:
        return self.label

    def play(self) -> None:
        self.log.append(f"{self.label}.play")

    def describe(self) -> str:
        return f"Node: {self.label}"


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now: int = 0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def event_log() -> List[str]:
    return []


@pytest.fixture
def make_source(event_log: List[str]) -> Callable[..., RecordingSource]:
    def _make(label: str, fail_on: Optional[str] = None) -> RecordingSource:
        return RecordingSource(label, event_log, fail_on=fail_on)

    return _make


@pytest.fixture
def make_node(event_log: List[str]) -> Callable[[str], RecordingNode]:
    def _make(label: str) -> RecordingNode:
        return RecordingNode(label, event_log)

    return _make


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
