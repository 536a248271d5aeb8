import random

from delve.dungeon.geometry import Rect


def test_choose_stays_inside_bounds():
    rng = random.Random(5)
    for _ in range(500):
        r = Rect.choose((60, 45), (5, 5), (11, 9), rng)
        assert 5 <= r.w < 11
        assert 5 <= r.h < 9
        assert r.x >= 0 and r.y >= 0
        assert r.x + r.w <= 60
        assert r.y + r.h <= 45


def test_choose_clamps_size_to_small_bounds():
    rng = random.Random(3)
    for _ in range(50):
        r = Rect.choose((6, 7), (5, 5), (11, 9), rng)
        assert r.w == 5
        assert r.h in (5, 6)
        assert r.x == 0
        assert r.x + r.w <= 6 and r.y + r.h <= 7


def test_fits():
    assert Rect.fits((6, 6), (5, 5))
    assert not Rect.fits((5, 40), (5, 5))
    assert not Rect.fits((4, 4), (5, 5))


def test_cell_enumerations():
    r = Rect(2, 3, 5, 4)
    cells = list(r.cells())
    edges = list(r.edge_cells())
    interior = list(r.interior_cells())
    assert len(cells) == 20
    assert len(set(cells)) == 20
    assert len(edges) == 2 * 5 + 2 * 4 - 4
    assert len(interior) == 3 * 2
    assert set(edges) | set(interior) == set(cells)
    assert not set(edges) & set(interior)
    # row-major ordering
    assert cells[0] == (2, 3) and cells[1] == (3, 3) and cells[-1] == (6, 6)


def test_is_edge_and_center():
    r = Rect(0, 0, 5, 5)
    assert r.is_edge((0, 2))
    assert r.is_edge((4, 4))
    assert not r.is_edge((2, 2))
    assert r.center == (2, 2)
    assert Rect(10, 4, 11, 8).center == (15, 8)
