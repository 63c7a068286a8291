import pytest

from pushswap.cli import main
from pushswap.stack import Stack


def _replay(values, ops):
    a, b = Stack(values), Stack()

    def rr():
        a.rotate()
        b.rotate()

    def rrr():
        a.reverse_rotate()
        b.reverse_rotate()

    actions = {
        "sa": a.swap,
        "ra": a.rotate,
        "rra": a.reverse_rotate,
        "rb": b.rotate,
        "rrb": b.reverse_rotate,
        "rr": rr,
        "rrr": rrr,
        "pa": lambda: b.push_to(a),
        "pb": lambda: a.push_to(b),
    }
    for op in ops:
        actions[op]()
    return a, b


def test_no_arguments(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_two_values(capsys):
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_sorted_input_prints_nothing(capsys):
    assert main(["1 2 3", "4"]) == 0
    assert capsys.readouterr().out == ""


def test_output_sorts_input(capsys):
    values = [8, -2, 15, 3, 0, 42, -17, 6, 11]
    assert main([" ".join(map(str, values))]) == 0
    out = capsys.readouterr().out
    assert out.endswith("\n")
    a, b = _replay(values, out.splitlines())
    assert list(a) == sorted(values)
    assert len(b) == 0


@pytest.mark.parametrize(
    "args", [["1", "1"], ["abc"], ["2147483648"], ["-2147483649"], ["3 x 1"]]
)
def test_errors(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""