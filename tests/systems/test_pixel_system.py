from identicon.components import PixelRegion, Point
from identicon.systems.pixels import build_pixel_map
from tests.test_utils import IDENTICON_PAINTED, make_grid_image


def test_pixel_map_fixture_regions() -> None:
    image = build_pixel_map(make_grid_image(IDENTICON_PAINTED))
    assert len(image.pixel_map) == len(IDENTICON_PAINTED)
    assert image.pixel_map[0] == PixelRegion(Point(2, 52), Point(48, 98))
    assert image.pixel_map[1] == PixelRegion(Point(102, 52), Point(148, 98))
    assert image.pixel_map[-1] == PixelRegion(Point(202, 202), Point(248, 248))


def test_pixel_map_preserves_order() -> None:
    image = build_pixel_map(make_grid_image([(2, 24), (4, 0)]))
    assert [r.top_left for r in image.pixel_map] == [Point(202, 202), Point(2, 2)]


def test_pixel_map_empty_grid() -> None:
    image = build_pixel_map(make_grid_image([]))
    assert len(image.pixel_map) == 0
