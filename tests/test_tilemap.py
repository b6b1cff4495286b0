import pytest

from tilesprite.tilemap import Layer, TileMap


def test_new_map_is_filled_with_initial_tile():
    tm = TileMap(3, 2, 7)
    assert tm.tiles == bytes([7]) * 6
    assert tm.width == 3
    assert tm.height == 2


def test_defaults_for_depth_and_tileset():
    tm = TileMap(2, 2, 0)
    assert tm.z == 0.0
    assert tm.tid == 0


def test_set_then_get_round_trip():
    tm = TileMap(4, 3, 0)
    tm.set_tile(2, 1, 42)
    assert tm.tile(2, 1) == 42
    assert tm.tile(1, 2) == 0


def test_storage_is_row_major():
    tm = TileMap(4, 3, 0)
    tm.set_tile(3, 2, 9)
    assert tm.tiles.index(9) == 3 + 2 * 4


def test_tiles_returns_a_copy():
    tm = TileMap(2, 2, 1)
    snapshot = tm.tiles
    tm.set_tile(0, 0, 5)
    assert snapshot[0] == 1
    assert tm.tiles[0] == 5


@pytest.mark.parametrize("col,row", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_out_of_range_access_raises(col, row):
    tm = TileMap(3, 2, 0)
    with pytest.raises(IndexError):
        tm.tile(col, row)
    with pytest.raises(IndexError):
        tm.set_tile(col, row, 1)


def test_tile_value_must_fit_a_byte():
    tm = TileMap(2, 2, 0)
    with pytest.raises(ValueError):
        tm.set_tile(0, 0, 256)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        TileMap(-1, 3, 0)


def test_iteration_covers_every_cell_with_its_tile():
    tm = TileMap(3, 2, 0)
    tm.set_tile(1, 1, 8)
    cells = list(tm)
    assert len(cells) == 6
    assert {(c, r) for c, r, _ in cells} == {(c, r) for c in range(3) for r in range(2)}
    assert all(tm.tile(c, r) == t for c, r, t in cells)
    assert (1, 1, 8) in cells


def test_layer_holds_its_fields():
    layer = Layer(z=1.5, tid=3, filename="sky.png", offsetx=2.0, ratex=0.5)
    assert layer.filename == "sky.png"
    assert layer.ratex == 0.5
    assert layer.offsety == 0.0