import pytest

from aockit.mapcache import MapCache

GRID = "abc\ndef\nghi\n"


def test_initial_tile_is_first():
    cache = MapCache(GRID)
    assert cache.tile() == "a"
    assert cache.tile_id() == 0


def test_step_moves_in_four_directions():
    cache = MapCache(GRID)
    assert cache.step_right() == "b"
    assert cache.step_down() == "e"
    assert cache.step_down() == "h"
    assert cache.step_left() == "g"
    assert cache.step_up() == "d"
    assert cache.tile() == "d"


def test_step_off_edges_returns_none_and_stays():
    cache = MapCache(GRID)
    assert cache.step_left() is None
    assert cache.step_up() is None
    assert cache.tile() == "a"
    cache.step_right()
    cache.step_right()
    assert cache.tile() == "c"
    assert cache.step_right() is None
    assert cache.tile() == "c"


def test_step_down_off_bottom():
    cache = MapCache(GRID)
    cache.step_down()
    cache.step_down()
    assert cache.tile() == "g"
    assert cache.step_down() is None
    assert cache.tile() == "g"


def test_walk_wraps_rows_where_step_does_not():
    cache = MapCache(GRID)
    cache.step_right()
    cache.step_right()
    assert cache.peek_right() is None
    assert cache.walk_forward() == "d"
    assert cache.walk_backward() == "c"


def test_walk_visits_every_tile_in_order():
    cache = MapCache(GRID)
    seen = [cache.tile()]
    while (tile := cache.walk_forward()) is not None:
        seen.append(tile)
    assert "".join(seen) == GRID.replace("\n", "")
    assert cache.walk_forward() is None
    assert cache.tile() == "i"


def test_walk_backward_off_start():
    cache = MapCache(GRID)
    assert cache.walk_backward() is None
    assert cache.tile() == "a"


def test_peek_does_not_move():
    cache = MapCache(GRID)
    cache.step_right()
    cache.step_down()
    assert cache.tile() == "e"
    assert cache.peek_up() == "b"
    assert cache.peek_down() == "h"
    assert cache.peek_left() == "d"
    assert cache.peek_right() == "f"
    assert cache.tile() == "e"


def test_peek_at_corner_returns_none():
    cache = MapCache(GRID)
    assert cache.peek_up() is None
    assert cache.peek_left() is None
    assert cache.peek_right() == "b"
    assert cache.peek_down() == "d"


def test_set_start_and_reset():
    cache = MapCache(GRID)
    while cache.tile() != "e":
        cache.walk_forward()
    cache.set_start()
    start_id = cache.tile_id()
    cache.step_down()
    cache.step_right()
    assert cache.tile() == "i"
    cache.reset()
    assert cache.tile() == "e"
    assert cache.tile_id() == start_id


def test_reset_without_set_start_returns_to_origin():
    cache = MapCache(GRID)
    cache.walk_forward()
    cache.walk_forward()
    cache.reset()
    assert cache.tile() == "a"


def test_tile_ids_are_unique():
    cache = MapCache(GRID)
    ids = {cache.tile_id()}
    while cache.walk_forward() is not None:
        ids.add(cache.tile_id())
    assert len(ids) == len(GRID.replace("\n", ""))


def test_empty_map_tile_raises():
    cache = MapCache("")
    with pytest.raises(IndexError):
        cache.tile()
    assert cache.walk_forward() is None


def test_bytes_input():
    cache = MapCache(b"#.\n.#\n")
    assert cache.tile() == "#"
    assert cache.step_down() == "."
    assert cache.step_right() == "#"


def test_from_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_bytes(GRID.encode())
    cache = MapCache.from_file(path)
    assert cache.tile() == "a"
    assert cache.step_down() == "d"


def test_from_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        MapCache.from_file(tmp_path / "missing.txt")