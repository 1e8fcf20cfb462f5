from abc import ABC, abstractmethod


class Source(ABC):
    """
    Abstract playable source (local file, remote API, stream...).

    Concrete sources must implement:
      - load()     : prepare the source for playback
      - play()     : perform playback (callers load first, sources may self-guard)
      - info()     : human-readable descriptor
      - is_ready() : True once load() has completed

    Failures are reported by raising SourceError.
    """

    @abstractmethod
    def load(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def play(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def info(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def is_ready(self) -> bool:
        raise NotImplementedError


class MediaNode(ABC):
    """
    Anything playable: a single item, a playlist, or a decorator around either.

    Every node describes itself, so callers never need to inspect node types.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def play(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def describe(self) -> str:
        raise NotImplementedError

    def contains(self, node: "MediaNode") -> bool:
        """Return True if `node` is this node or is reachable from it."""
        return self is node
