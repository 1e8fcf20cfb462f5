import pytest

from mediasuite.core import CycleError, SourceError
from mediasuite.media import MediaItem, Playlist
from mediasuite.plugins import WatermarkDecorator


def test_media_item_loads_then_plays_its_source(make_source, event_log) -> None:
    item = MediaItem("Movie", make_source("A"))

    item.play()

    assert event_log == ["A.load", "A.play"]


def test_media_item_description_defaults_to_source_info(make_source) -> None:
    source = make_source("A")

    captured = MediaItem("Movie", source)
    explicit = MediaItem("Movie", source, description="Director's cut")

    assert captured.description == "Recording source A"
    assert explicit.description == "Director's cut"
    assert captured.describe() == "Media: Movie"
    assert captured.name == "Movie"


def test_playlist_plays_children_in_insertion_order(make_source, event_log) -> None:
    root = Playlist("root")
    root.add(MediaItem("A", make_source("A")))
    root.add(MediaItem("B", make_source("B")))

    root.play()

    assert event_log == ["A.load", "A.play", "B.load", "B.play"]


def test_nested_playlist_is_played_before_next_sibling(make_source, event_log) -> None:
    nested = Playlist("nested")
    nested.add(MediaItem("B", make_source("B")))
    nested.add(MediaItem("C", make_source("C")))

    root = Playlist("root")
    root.add(MediaItem("A", make_source("A")))
    root.add(nested)
    root.add(MediaItem("D", make_source("D")))

    root.play()

    played = [entry for entry in event_log if entry.endswith(".play")]
    assert played == ["A.play", "B.play", "C.play", "D.play"]


def test_playlist_allows_duplicates(make_source, event_log) -> None:
    item = MediaItem("A", make_source("A"))
    root = Playlist("root")
    root.add(item)
    root.add(item)

    root.play()

    assert root.get_item_count() == 2
    assert event_log == ["A.load", "A.play", "A.load", "A.play"]


def test_remove_drops_first_occurrence_only(make_source) -> None:
    a = MediaItem("A", make_source("A"))
    b = MediaItem("B", make_source("B"))
    root = Playlist("root")
    for node in (a, b, a):
        root.add(node)

    assert root.remove(a) is True
    assert root.get_items() == [b, a]


def test_remove_missing_node_is_a_noop(make_source) -> None:
    root = Playlist("root")
    root.add(MediaItem("A", make_source("A")))

    assert root.remove(MediaItem("A", make_source("A"))) is False
    assert root.get_item_count() == 1


def test_get_items_returns_a_copy(make_source) -> None:
    root = Playlist("root")
    root.add(MediaItem("A", make_source("A")))

    items = root.get_items()
    items.clear()

    assert root.get_item_count() == 1


def test_adding_playlist_to_itself_is_rejected() -> None:
    root = Playlist("root")

    with pytest.raises(CycleError):
        root.add(root)

    assert root.get_item_count() == 0


def test_adding_an_ancestor_is_rejected() -> None:
    root = Playlist("root")
    child = Playlist("child")
    root.add(child)

    with pytest.raises(CycleError):
        child.add(root)


def test_cycle_through_decorator_is_rejected() -> None:
    root = Playlist("root")
    decorated = WatermarkDecorator(root, "(c)")

    with pytest.raises(CycleError):
        root.add(decorated)


def test_failing_child_aborts_remaining_traversal(make_source, event_log) -> None:
    root = Playlist("root")
    root.add(MediaItem("A", make_source("A")))
    root.add(MediaItem("B", make_source("B", fail_on="play")))
    root.add(MediaItem("C", make_source("C")))

    with pytest.raises(SourceError):
        root.play()

    assert event_log == ["A.load", "A.play", "B.load"]


def test_describe_reports_name_and_count(make_source) -> None:
    root = Playlist("Road trip")
    root.add(MediaItem("A", make_source("A")))

    assert root.describe() == "Playlist: Road trip (1 items)"
