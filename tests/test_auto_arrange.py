import copy

import pytest

from satchel.grid import ArrangementStatus, Rotation, find_arrangement, iter_candidates

WIDTH, HEIGHT, EQUIPMENT_ROWS = 4, 6, 2


def _arrange(items, dragged, x, y, width=WIDTH, height=HEIGHT, equipment_rows=EQUIPMENT_ROWS):
    return find_arrangement(items, dragged, x, y, width, height, equipment_rows)


def test_displaced_item_moves_to_nearest_cell_row_first(make_item):
    a = make_item("A", ["#"], x=0, y=3)
    items = [a]
    snapshot = copy.deepcopy(items)
    b = make_item("B", ["##"])

    result = _arrange(items, b, 0, 3)

    assert result.status is ArrangementStatus.FOUND
    # (0,2) and (0,4) are both one step away; the lower row index wins
    assert result.relocated == (a.moved_to(0, 2, Rotation.R0),)
    assert items == snapshot
    assert items[0] is a


def test_packed_grid_reports_infeasible_and_changes_nothing(make_item):
    a = make_item("A", ["#"], x=0, y=3)
    fillers = [
        make_item(f"f{x}{y}", ["#"], x=x, y=y)
        for y in range(HEIGHT)
        for x in range(WIDTH)
        if (x, y) != (0, 3)
    ]
    items = [a] + fillers
    snapshot = copy.deepcopy(items)
    b = make_item("B", ["##"])

    result = _arrange(items, b, 0, 3)

    assert result.status is ArrangementStatus.INFEASIBLE
    assert result.relocated == ()
    assert items == snapshot


def test_no_collision_is_not_applicable(make_item):
    a = make_item("A", ["#"], x=0, y=3)
    result = _arrange([a], make_item("B", ["##"]), 1, 4)
    assert result.status is ArrangementStatus.NOT_APPLICABLE
    assert not result.found


@pytest.mark.parametrize("blocked", [False, True])
def test_zone_straddling_target_fails_before_search(make_item, blocked):
    items = [make_item("A", ["#"], x=0, y=2)] if blocked else []
    column = make_item("C", ["#", "#"])

    # rows 1 and 2 sit on either side of the equipment boundary
    result = _arrange(items, column, 0, 1)

    assert result.status is ArrangementStatus.INFEASIBLE


def test_out_of_bounds_target_is_infeasible(make_item):
    a = make_item("A", ["#"], x=3, y=5)
    result = _arrange([a], make_item("B", ["##"]), 3, 5)
    assert result.status is ArrangementStatus.INFEASIBLE


def test_unzoned_grid_allows_any_rows(make_item):
    a = make_item("A", ["#"], x=0, y=1)
    column = make_item("C", ["#", "#"])
    result = _arrange([a], column, 0, 1, width=2, height=4, equipment_rows=None)
    assert result.status is ArrangementStatus.FOUND
    assert result.relocated == (a.moved_to(0, 0),)


def test_larger_items_are_placed_first(make_item):
    single = make_item("S", ["#"], x=0, y=0)
    domino = make_item("D", ["##"], x=1, y=0)
    bar = make_item("X", ["###"])

    result = _arrange([single, domino], bar, 0, 0, width=4, height=4, equipment_rows=None)

    assert result.found
    assert [item.id for item in result.relocated] == ["D", "S"]
    assert result.relocated[0] == domino.moved_to(1, 1)
    assert result.relocated[1] == single.moved_to(0, 1)


def test_equal_sizes_keep_list_order(make_item):
    first = make_item("P", ["#"], x=1, y=0)
    second = make_item("Q", ["#"], x=0, y=0)
    result = _arrange([first, second], make_item("X", ["##"]), 0, 0, width=2, height=2, equipment_rows=None)

    assert [item.id for item in result.relocated] == ["P", "Q"]
    assert result.relocated[0] == first.moved_to(1, 1)
    assert result.relocated[1] == second.moved_to(0, 1)


def test_displaced_item_rotates_when_needed(make_item):
    bar = make_item("bar", ["##"], x=0, y=0)
    wall = make_item("K", ["#", "#"], x=1, y=1)
    dragged = make_item("X", ["##"])

    result = _arrange([bar, wall], dragged, 0, 0, width=2, height=3, equipment_rows=None)

    assert result.found
    assert result.relocated == (bar.moved_to(0, 1, Rotation.R90),)


def test_rotations_start_from_base_shape_not_current(make_item):
    # currently vertical, but the horizontal base orientation is tried first
    bar = make_item("bar", ["##"], x=0, y=0, rotation=Rotation.R90)
    dragged = make_item("X", ["#"])

    result = _arrange([bar], dragged, 0, 0, width=3, height=3, equipment_rows=None)

    assert result.relocated == (bar.moved_to(1, 0, Rotation.R0),)


def test_only_colliding_items_move(make_item):
    a = make_item("A", ["#"], x=0, y=3)
    bystander = make_item("Z", ["##"], x=2, y=5)
    result = _arrange([a, bystander], make_item("B", ["##"]), 0, 3)

    assert [item.id for item in result.relocated] == ["A"]


def test_dragged_items_old_cells_are_free_for_others(make_item):
    a = make_item("A", ["#"], x=0, y=0)
    b = make_item("B", ["#"], x=1, y=0)

    result = _arrange([a, b], b, 0, 0, width=2, height=1, equipment_rows=None)

    assert result.relocated == (a.moved_to(1, 0),)


def test_dragged_item_keeps_its_rotation(make_item):
    a = make_item("A", ["#"], x=0, y=3)
    vertical = make_item("V", ["##"], rotation=Rotation.R90)

    # vertical domino at (3,2) covers (3,2) and (3,3); A at (0,3) is untouched
    assert _arrange([a], vertical, 3, 2).status is ArrangementStatus.NOT_APPLICABLE
    result = _arrange([a], vertical, 0, 3)
    assert result.relocated == (a.moved_to(0, 2),)


def test_search_is_deterministic(make_item):
    items = [
        make_item("A", ["##", "#."], x=0, y=2),
        make_item("B", ["#"], x=2, y=3),
        make_item("C", ["###"], x=0, y=5),
    ]
    dragged = make_item("X", ["##", "##"])
    runs = {_arrange(items, dragged, 0, 2) for _ in range(3)}
    assert len(runs) == 1


@pytest.mark.parametrize("width,height,origin", [
    (3, 3, (1, 1)),
    (4, 6, (0, 3)),
    (5, 2, (4, 0)),
    (1, 1, (0, 0)),
    (3, 4, (-1, 5)),
])
def test_iter_candidates_matches_sorted_enumeration(width, height, origin):
    ox, oy = origin
    expected = sorted(
        ((x, y) for y in range(height) for x in range(width)),
        key=lambda c: (abs(c[0] - ox) + abs(c[1] - oy), c[1], c[0]),
    )
    assert list(iter_candidates(width, height, ox, oy)) == expected
