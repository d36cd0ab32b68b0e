from collections import Counter

import pytest

from strippack.checker import check_solution, parse_solution
from strippack.exhaustive import BranchAndBound, exhaustive_search, main
from strippack.greedy import greedy_placement
from strippack.problem import Placement, Rectangle, sort_by_area


def _demands(rectangles):
    return dict(Counter((min(r.width, r.height), max(r.width, r.height)) for r in rectangles))


INSTANCES = [
    (2, [Rectangle(1, 2), Rectangle(1, 2)]),
    (3, [Rectangle(2, 1), Rectangle(1, 1), Rectangle(3, 1)]),
    (4, [Rectangle(2, 2)] * 4),
    (5, [Rectangle(3, 2), Rectangle(2, 2), Rectangle(1, 3), Rectangle(1, 1)]),
]


@pytest.mark.parametrize("width, rectangles", INSTANCES)
def test_solution_is_valid(width, rectangles):
    length, placements = exhaustive_search(width, sort_by_area(rectangles))
    covered = check_solution(width, _demands(rectangles), length, placements)
    assert covered == sum(r.area for r in rectangles)


@pytest.mark.parametrize("width, rectangles", INSTANCES)
def test_never_worse_than_greedy(width, rectangles):
    ordered = sort_by_area(rectangles)
    length, _ = exhaustive_search(width, ordered)
    greedy_length, _ = greedy_placement(width, ordered)
    assert length <= greedy_length


@pytest.mark.parametrize("width, rectangles", INSTANCES)
def test_respects_area_lower_bound(width, rectangles):
    length, _ = exhaustive_search(width, sort_by_area(rectangles))
    total = sum(r.area for r in rectangles)
    assert length * width >= total


def test_perfect_tiling_reaches_area_bound():
    length, _ = exhaustive_search(4, [Rectangle(2, 2)] * 4)
    assert length == 4


def test_single_square_fills_the_strip():
    assert exhaustive_search(3, [Rectangle(3, 3)]) == (3, [Placement(0, 0, 2, 2)])


def test_no_rectangles_gives_empty_solution():
    assert exhaustive_search(5, []) == (0, [])


def test_rotates_when_needed():
    length, placements = exhaustive_search(2, [Rectangle(3, 1)])
    assert placements == [Placement(0, 0, 0, 2)]
    assert length == 3


def test_infeasible_raises():
    with pytest.raises(ValueError):
        exhaustive_search(3, [Rectangle(5, 5)])


def test_solve_is_repeatable():
    solver = BranchAndBound(3, [Rectangle(2, 1), Rectangle(1, 1), Rectangle(3, 1)])
    first = solver.solve()
    second = solver.solve()
    assert first == second
    assert solver.best_length == first[0]
    assert solver.best_placements == first[1]


def test_main_writes_a_valid_solution(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("3 3\n1 2 1\n1 1 1\n1 3 1\n")
    assert main([str(source), str(target)]) == 0
    length, placements = parse_solution(target.read_text())
    check_solution(3, {(1, 2): 1, (1, 1): 1, (1, 3): 1}, length, placements)
    assert len(placements) == 3


def test_main_usage_error():
    assert main(["only-one"]) == 1


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "missing.txt"), str(tmp_path / "out.txt")]) == 1
    assert not (tmp_path / "out.txt").exists()