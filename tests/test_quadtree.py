import pytest

from objmesh.quadtree import Pixel, QuadNode, average_color, measure_detail


def to_buffer(rows):
    return bytes(channel for row in rows for p in row for channel in (p.r, p.g, p.b))


def checkerboard(width, height):
    black = Pixel(0, 0, 0)
    white = Pixel(255, 255, 255)
    return [[white if (x + y) % 2 else black for x in range(width)] for y in range(height)]


def covered_cells(nodes):
    cells = []
    for node in nodes:
        cells.extend(
            (x, y)
            for y in range(node.y, node.y + node.height)
            for x in range(node.x, node.x + node.width)
        )
    return cells


def structure(node):
    if node is None:
        return None
    kids = None if node.children is None else [structure(c) for c in node.children]
    return (node.x, node.y, node.width, node.height, node.pixel, node.detail, kids)


def test_uniform_image_is_single_leaf():
    color = Pixel(10, 20, 30)
    rows = [[color] * 5 for _ in range(4)]
    root = QuadNode.from_rows(rows, 0, 0, 5, 4, 0)
    assert root.is_leaf()
    assert root.pixel == color
    assert root.detail == 0


def test_single_pixel():
    data = bytes([7, 8, 9])
    root = QuadNode.from_buffer(data, 1, 0, 0, 1, 1, 0)
    assert root.is_leaf()
    assert root.pixel == Pixel(7, 8, 9)
    assert root.detail == 0


def test_buffer_and_rows_build_same_tree():
    rows = checkerboard(7, 5)
    from_rows = QuadNode.from_rows(rows, 0, 0, 7, 5, 10)
    from_buffer = QuadNode.from_buffer(to_buffer(rows), 7, 0, 0, 7, 5, 10)
    assert structure(from_rows) == structure(from_buffer)


@pytest.mark.parametrize("size", [(1, 1), (3, 1), (1, 6), (5, 3), (8, 8)])
def test_leaves_cover_image_exactly(size):
    width, height = size
    root = QuadNode.from_rows(checkerboard(width, height), 0, 0, width, height, 0)
    cells = covered_cells(root.browse(0))
    assert sorted(cells) == sorted((x, y) for y in range(height) for x in range(width))


def test_zero_threshold_on_checkerboard_splits_to_pixels():
    rows = checkerboard(4, 4)
    root = QuadNode.from_rows(rows, 0, 0, 4, 4, 0)
    leaves = list(root.browse(0))
    assert len(leaves) == 16
    assert all(leaf.is_leaf() and leaf.detail == 0 for leaf in leaves)
    assert all(leaf.pixel == rows[leaf.y][leaf.x] for leaf in leaves)


def test_high_threshold_keeps_root_leaf():
    root = QuadNode.from_rows(checkerboard(4, 4), 0, 0, 4, 4, 255)
    assert root.is_leaf()
    assert list(root.browse(255)) == [root]


def test_browse_stops_at_coarse_nodes():
    root = QuadNode.from_rows(checkerboard(4, 4), 0, 0, 4, 4, 0)
    assert not root.is_leaf()
    assert list(root.browse(1000)) == [root]


def test_one_pixel_wide_image_has_no_right_children():
    root = QuadNode.from_rows(checkerboard(1, 6), 0, 0, 1, 6, 0)
    assert root.children[1] is None
    assert root.children[3] is None
    assert root.children[0].height + root.children[2].height == 6


def test_children_partition_parent():
    root = QuadNode.from_rows(checkerboard(5, 3), 0, 0, 5, 3, 0)
    first, second, third, _ = root.children
    assert first.width + second.width == root.width
    assert first.height + third.height == root.height
    assert second.x == root.x + first.width
    assert third.y == root.y + first.height


def test_average_and_detail_of_two_pixels():
    data = bytes([0, 0, 0, 255, 255, 255])
    average = average_color(data, 2, 0, 0, 2, 1)
    assert average == Pixel(127, 127, 127)
    assert measure_detail(data, 2, 0, 0, 2, 1, average) == pytest.approx(127.5)


def test_detail_of_uniform_region_is_zero():
    data = bytes([5, 6, 7] * 6)
    average = average_color(data, 3, 0, 0, 3, 2)
    assert average == Pixel(5, 6, 7)
    assert measure_detail(data, 3, 0, 0, 3, 2, average) == 0


def test_subregion_of_buffer():
    rows = [[Pixel(0, 0, 0), Pixel(9, 9, 9)], [Pixel(0, 0, 0), Pixel(9, 9, 9)]]
    data = to_buffer(rows)
    assert average_color(data, 2, 1, 0, 1, 2) == Pixel(9, 9, 9)
    node = QuadNode.from_buffer(data, 2, 1, 0, 1, 2, 0)
    assert node.x == 1
    assert node.pixel == Pixel(9, 9, 9)


def test_empty_region_rejected():
    with pytest.raises(ValueError):
        QuadNode.from_buffer(b"", 0, 0, 0, 0, 3, 0)


def test_negative_threshold_rejected():
    with pytest.raises(ValueError):
        QuadNode.from_rows(checkerboard(2, 2), 0, 0, 2, 2, -1)