from identicon.config import GRID_CELLS, GRID_SIZE
from identicon.hashing import hash_string
from identicon.systems.grid import build_grid
from tests.test_utils import IDENTICON_GRID, cell_pairs, make_image


def test_build_grid_fixture() -> None:
    image = build_grid(make_image())
    assert cell_pairs(image) == IDENTICON_GRID


def test_build_grid_skips_first_byte() -> None:
    image = build_grid(make_image(list(range(16))))
    values = [cell.value for cell in image.grid]
    assert 0 not in values
    assert values[:5] == [1, 2, 3, 2, 1]
    assert values[-5:] == [13, 14, 15, 14, 13]


def test_build_grid_row_major_indices() -> None:
    image = build_grid(make_image())
    assert [cell.index for cell in image.grid] == list(range(GRID_CELLS))


def test_build_grid_rows_are_palindromes() -> None:
    for text in ["", "alice", "bob", "identicon", "🙂"]:
        image = build_grid(hash_string(text))
        assert len(image.grid) == GRID_CELLS
        values = [cell.value for cell in image.grid]
        for start in range(0, GRID_CELLS, GRID_SIZE):
            row = values[start : start + GRID_SIZE]
            assert row == row[::-1]


def test_build_grid_leaves_color_untouched() -> None:
    image = make_image()
    assert build_grid(image).color == image.color
