import pytest

from strippack.checker import (
    CheckError,
    check_solution,
    main,
    parse_demands,
    parse_solution,
)
from strippack.problem import Placement


def test_parse_demands_stops_at_total():
    width, demands = parse_demands("4 3\n2 1 2\n1 2 2\n9 9 9\n")
    assert width == 4
    assert demands == {(1, 2): 2, (2, 2): 1}


def test_parse_demands_truncated():
    with pytest.raises(ValueError):
        parse_demands("4 3\n2 1 2\n")


def test_parse_solution_reads_groups_of_four():
    length, placements = parse_solution("0.3\n2\n0 0 1 1\n2 0 3 1\n5 5\n")
    assert length == 2
    assert placements == [Placement(0, 0, 1, 1), Placement(2, 0, 3, 1)]


def test_parse_solution_needs_header():
    with pytest.raises(ValueError):
        parse_solution("1.0\n")


def test_valid_solution_returns_covered_cells():
    demands = {(1, 2): 1, (2, 2): 1}
    placements = [Placement(0, 0, 1, 1), Placement(2, 0, 2, 1)]
    assert check_solution(3, demands, 2, placements) == 1 * 2 + 2 * 2
    assert demands == {(1, 2): 1, (2, 2): 1}


def test_out_of_bounds():
    with pytest.raises(CheckError, match=r"position \(3, 0\) is out of bounds"):
        check_solution(3, {(1, 1): 1}, 1, [Placement(3, 0, 3, 0)])


def test_invalid_rectangle():
    with pytest.raises(CheckError, match="do not define a valid rectangle"):
        check_solution(3, {(1, 1): 1}, 2, [Placement(1, 1, 0, 0)])


def test_unknown_dimensions():
    with pytest.raises(CheckError, match="does not match any in input data"):
        check_solution(3, {(1, 1): 1}, 2, [Placement(0, 0, 1, 1)])


def test_too_many():
    with pytest.raises(CheckError, match="too many rectangles of dimensions 1x1"):
        check_solution(3, {(1, 1): 1}, 1, [Placement(0, 0, 0, 0), Placement(1, 0, 1, 0)])


def test_overlap_reports_position():
    with pytest.raises(CheckError, match=r"overlaps .* at position \(1, 0\)"):
        check_solution(
            3, {(1, 2): 2}, 1, [Placement(0, 0, 1, 0), Placement(1, 0, 2, 0)]
        )


def test_wrong_length():
    with pytest.raises(CheckError, match="indicates L = 3 but the rectangles determine that L should be 1"):
        check_solution(3, {(1, 1): 1}, 3, [Placement(0, 0, 0, 0)])


@pytest.mark.parametrize("count, word", [(1, "rectangle"), (2, "rectangles")])
def test_missing(count, word):
    with pytest.raises(CheckError, match=f"^{count} {word} of dimensions 2x2 missing$"):
        check_solution(2, {(1, 1): 1, (2, 2): count}, 1, [Placement(0, 0, 0, 0)])


def test_main_ok(tmp_path, capsys):
    instance = tmp_path / "in.txt"
    instance.write_text("3 2\n1 1 2\n1 2 2\n")
    solution = tmp_path / "out.txt"
    solution.write_text("0.0\n2\n0 0 1 1\n2 0 2 1\n")
    assert main([str(instance), str(solution)]) == 0
    assert capsys.readouterr().out.splitlines() == ["OK"]


def test_main_failed(tmp_path, capsys):
    instance = tmp_path / "in.txt"
    instance.write_text("3 1\n1 1 1\n")
    solution = tmp_path / "out.txt"
    solution.write_text("0.0\n1\n5 0 5 0\n")
    assert main([str(instance), str(solution)]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out == ["Error: position (5, 0) is out of bounds", "FAILED"]


def test_main_help(capsys):
    assert main([]) == 0
    assert "Makes a sanity check of a solution" in capsys.readouterr().out