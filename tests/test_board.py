import pytest

from hexlayers.board import HexMap
from hexlayers.grid import Grid
from hexlayers.position import Cell, Position


def make_grid(name):
    return Grid(Position(0, 0), name, 1, 1, None)


def test_new_map():
    m = HexMap(10, 20)
    assert m.dimensions == (10, 20)
    assert m.grids == []


def test_dimensions():
    assert HexMap(5, 15).dimensions == (5, 15)


def test_add_grid():
    m = HexMap(10, 10)
    grid1, grid2 = make_grid("grid1"), make_grid("grid2")
    m.add_grid(grid1)
    assert len(m.grids) == 1
    assert m.grids[0] is grid1
    m.add_grid(grid2)
    assert len(m.grids) == 2
    with pytest.raises(ValueError, match="cannot add a None grid"):
        m.add_grid(None)
    assert len(m.grids) == 2


def test_grids_lists_added():
    m = HexMap(5, 5)
    assert m.grids == []
    grid1 = make_grid("g1")
    m.add_grid(grid1)
    assert m.grids == [grid1]
    grid2 = make_grid("g2")
    m.add_grid(grid2)
    assert m.grids == [grid1, grid2]


def test_grid_by_name():
    m = HexMap(10, 10)
    alpha, beta = make_grid("gridAlpha"), make_grid("gridBeta")
    m.add_grid(alpha)
    m.add_grid(beta)
    assert m.grid_by_name("gridAlpha") is alpha
    assert m.grid_by_name("gridBeta") is beta
    with pytest.raises(KeyError, match="grid with name nonExistentGrid not found"):
        m.grid_by_name("nonExistentGrid")


def test_grid_by_index():
    m = HexMap(10, 10)
    grid1, grid2 = make_grid("grid1"), make_grid("grid2")
    m.add_grid(grid1)
    m.add_grid(grid2)
    assert m.grid_by_index(0) is grid1
    assert m.grid_by_index(1) is grid2
    for index in (-1, 2, 100):
        with pytest.raises(IndexError, match=f"index {index} out of bounds"):
            m.grid_by_index(index)


def test_remove_grid():
    m = HexMap(10, 10)
    one, two, three = make_grid("gridOne"), make_grid("gridTwo"), make_grid("gridThree")
    for g in (one, two, three):
        m.add_grid(g)

    m.remove_grid("gridTwo")
    assert m.grids == [one, three]

    with pytest.raises(KeyError, match="grid with name gridTwo not found"):
        m.remove_grid("gridTwo")
    assert len(m.grids) == 2

    m.remove_grid("gridOne")
    assert m.grids == [three]

    m.remove_grid("gridThree")
    assert m.grids == []

    with pytest.raises(KeyError):
        m.remove_grid("gridOne")


def test_remove_grid_by_index():
    m = HexMap(10, 10)
    g1, g2, g3 = make_grid("g1"), make_grid("g2"), make_grid("g3")
    for g in (g1, g2, g3):
        m.add_grid(g)

    m.remove_grid_by_index(1)
    assert m.grids == [g1, g3]

    m.remove_grid_by_index(0)
    assert m.grids == [g3]

    m.add_grid(g1)
    m.remove_grid_by_index(1)
    assert m.grids == [g3]

    m.remove_grid_by_index(0)
    assert m.grids == []

    for index in (-1, 0, 100):
        with pytest.raises(IndexError, match=f"index {index} out of bounds"):
            m.remove_grid_by_index(index)

    m.add_grid(g1)
    with pytest.raises(IndexError, match="index 1 out of bounds"):
        m.remove_grid_by_index(1)
    assert len(m.grids) == 1


def test_str():
    m = HexMap(5, 8)
    assert str(m) == "Map(width: 5, height: 8, grids: 0)"
    m.add_grid(make_grid("g1"))
    assert str(m) == "Map(width: 5, height: 8, grids: 1)"
    m.add_grid(make_grid("g2"))
    assert str(m) == "Map(width: 5, height: 8, grids: 2)"


def test_grids_returns_copy():
    m = HexMap(1, 1)
    grid1 = make_grid("grid1")
    m.add_grid(grid1)
    listing = m.grids
    listing.clear()
    assert m.grids == [grid1]


def _fill_generator(shape):
    b = shape.bounds
    cells = [[Cell(q, r) for q in range(b.width)] for r in range(b.height)]
    return Grid(Position(0, 0), shape.name, b.width, b.height, cells)


def test_add_layer():
    m = HexMap(5, 4)
    m.add_layer(_fill_generator)
    assert len(m.grids) == 1
    layer = m.grids[-1]
    assert layer.width == 5
    assert layer.height == 4
    assert layer.name == "Layer_0"


def test_add_layer_names_follow_count():
    m = HexMap(2, 2)
    m.add_layer(_fill_generator)
    m.add_layer(_fill_generator)
    assert [g.name for g in m.grids] == ["Layer_0", "Layer_1"]


def test_add_layer_none_generator():
    m = HexMap(2, 2)
    with pytest.raises(ValueError, match="generate function cannot be None"):
        m.add_layer(None)
    assert m.grids == []


def test_add_layer_generator_failure():
    def failing(shape):
        raise ValueError("boom")

    m = HexMap(2, 2)
    with pytest.raises(RuntimeError, match="failed to generate grid: boom") as info:
        m.add_layer(failing)
    assert isinstance(info.value.__cause__, ValueError)
    assert m.grids == []


def test_add_layer_generator_returning_none():
    m = HexMap(2, 2)
    with pytest.raises(ValueError, match="cannot add a None grid"):
        m.add_layer(lambda shape: None)
    assert m.grids == []