import random

from pushswap.cli import main
from pushswap.operations import PushSwap
from pushswap.sorting import solve


def moves_text(values):
    return "".join(f"{op}\n" for op in solve(values))


def test_prints_moves_for_separate_arguments(capsys):
    assert main(["3", "2", "1"]) == 0
    out = capsys.readouterr()
    assert out.out == moves_text([3, 2, 1])
    assert out.err == ""


def test_single_quoted_argument_matches_separate(capsys):
    assert main(["3 2 1"]) == 0
    joined = capsys.readouterr().out
    main(["3", "2", "1"])
    assert capsys.readouterr().out == joined


def test_output_sorts_the_input(capsys):
    values = random.Random(7).sample(range(-500, 500), 40)
    assert main([str(v) for v in values]) == 0
    lines = capsys.readouterr().out.splitlines()
    state = PushSwap(values)
    for op in lines:
        getattr(state, op)()
    assert state.a.values() == sorted(values)
    assert len(state.b) == 0


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_duplicates_report_error(capsys):
    assert main(["1", "1"]) == 1
    out = capsys.readouterr()
    assert out.err == "Error\n"
    assert out.out == ""


def test_non_numeric_reports_error(capsys):
    assert main(["abc"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_out_of_range_reports_error(capsys):
    assert main(["2147483648"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_reads_sys_argv_when_none(capsys, monkeypatch):
    monkeypatch.setattr("sys.argv", ["push_swap", "2", "1"])
    assert main() == 0
    assert capsys.readouterr().out == moves_text([2, 1])