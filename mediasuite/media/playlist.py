from typing import List, Optional

from mediasuite.core import CycleError, MediaError, log_error, log_info, log_step

from .base import MediaNode, Source


class MediaItem(MediaNode):
    """
    A single playable entry wrapping exactly one Source.

    The description is captured from the source when the item is built, unless
    an explicit one is supplied.
    """

    def __init__(
        self,
        title: str,
        source: Source,
        description: Optional[str] = None,
    ) -> None:
        self._title = title
        self._source = source
        self._description = description if description is not None else source.info()

    @property
    def name(self) -> str:
        return self._title

    @property
    def title(self) -> str:
        return self._title

    @property
    def source(self) -> Source:
        return self._source

    @property
    def description(self) -> str:
        return self._description

    def describe(self) -> str:
        return f"Media: {self._title}"

    def play(self) -> None:
        log_info(f"Now playing: {self._title}")
        log_step(f"Source: {self._description}")
        self._source.load()
        self._source.play()


class Playlist(MediaNode):
    """
    Ordered collection of media nodes, itself playable.

    Children play in insertion order; nested playlists are played entirely
    before moving on to the next sibling. Duplicates are allowed, but a
    playlist can never contain itself.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._items: List[MediaNode] = []

    @property
    def name(self) -> str:
        return self._name

    def add(self, node: MediaNode) -> None:
        if node.contains(self):
            raise CycleError(
                f"Cycle rejected: {node.describe()} already contains playlist {self._name!r}"
            )
        self._items.append(node)
        log_step(f"Added to playlist '{self._name}': {node.describe()}")

    def remove(self, node: MediaNode) -> bool:
        """Remove the first entry that is `node`. Returns False if absent."""
        for index, item in enumerate(self._items):
            if item is node:
                del self._items[index]
                log_step(f"Removed from playlist '{self._name}': {node.describe()}")
                return True
        return False

    def get_item_count(self) -> int:
        return len(self._items)

    def get_items(self) -> List[MediaNode]:
        return list(self._items)

    def describe(self) -> str:
        return f"Playlist: {self._name} ({len(self._items)} items)"

    def contains(self, node: MediaNode) -> bool:
        if self is node:
            return True
        return any(item.contains(node) for item in self._items)

    def play(self) -> None:
        items = list(self._items)
        total = len(items)
        log_info(f"Playing playlist: {self._name} ({total} items)")

        for position, item in enumerate(items, start=1):
            log_info(f"[{position}/{total}] {item.describe()}")
            try:
                item.play()
            except MediaError as exc:
                log_error(
                    f"Playlist '{self._name}' aborted at item {position}/{total}: {exc}"
                )
                raise

        log_info(f"Playlist '{self._name}' completed.")
