from satchel.grid import Rotation, Zone, build_grid, clear_item, empty_grid, write_item


def test_empty_grid_has_no_owners():
    grid = empty_grid(4, 3)
    assert (grid.width, grid.height) == (4, 3)
    assert grid.occupied_ids() == set()
    assert grid.to_ascii() == ["....", "....", "...."]


def test_write_item_stamps_rotated_footprint(make_item):
    ell = make_item("L", ["#.", "#.", "##"], rotation=Rotation.R90)
    grid = write_item(empty_grid(4, 3), ell, 1, 0)

    assert grid.to_ascii() == [".LLL", ".L..", "...."]
    assert grid.cells_of("L") == [(1, 0), (2, 0), (3, 0), (1, 1)]


def test_write_then_clear_restores_grid(make_item):
    base = write_item(empty_grid(5, 4), make_item("A", ["##"]), 0, 0)
    tee = make_item("T", ["###", ".#."])

    written = write_item(base, tee, 1, 1)
    assert written != base
    assert clear_item(written, "T") == base


def test_operations_never_mutate_their_input(make_item):
    grid = empty_grid(3, 3)
    snapshot = grid.cells
    written = write_item(grid, make_item("A", ["##"]), 0, 0)
    clear_item(written, "A")

    assert grid.cells == snapshot
    assert written.owner_at(1, 0) == "A"


def test_clear_only_touches_the_given_item(make_item):
    grid = build_grid([make_item("A", ["##"]), make_item("B", ["#"], x=2)], 3, 1)
    assert clear_item(grid, "A").to_ascii() == ["..B"]


def test_owner_at_is_safe_out_of_bounds():
    grid = empty_grid(2, 2)
    assert grid.owner_at(-1, 0) is None
    assert grid.owner_at(0, 5) is None


def test_build_grid_uses_each_items_anchor_and_rotation(make_item):
    items = [
        make_item("A", ["###"], x=0, y=0, rotation=Rotation.R90),
        make_item("B", ["##"], x=1, y=2),
    ]
    grid = build_grid(items, 3, 3, equipment_rows=1)
    assert grid.to_ascii() == ["A..", "A..", "ABB"]
    assert grid.is_zoned


def test_zone_of_row():
    zoned = empty_grid(4, 6, equipment_rows=2)
    assert zoned.zone_of_row(0) is Zone.EQUIPMENT
    assert zoned.zone_of_row(1) is Zone.EQUIPMENT
    assert zoned.zone_of_row(2) is Zone.BACKPACK
    assert empty_grid(4, 4).zone_of_row(0) is None
