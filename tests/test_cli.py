import itertools

import pytest

from pushswap.cli import main

MOVES = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def split_output(text):
    lines = text.splitlines()
    moves = [line for line in lines if line in MOVES]
    rows = [tuple(int(part) for part in line.split()) for line in lines if line not in MOVES]
    return moves, rows


def test_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_sorted_input_prints_nothing(capsys):
    assert main(["1 2 3"]) == 0
    assert capsys.readouterr().out == ""


def test_two_values_exact_output(capsys):
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "sa\n1     0\n2     1\n"


def test_duplicate_is_error(capsys):
    assert main(["1", "1"]) == 1
    assert capsys.readouterr().out == "Error\n"


def test_non_number_is_error(capsys):
    assert main(["4", "two"]) == 1
    assert capsys.readouterr().out == "Error\n"


def test_many_arguments_are_printed_unsorted(capsys):
    values = [6, 5, 4, 3, 2, 1]
    assert main([str(v) for v in values]) == 0
    moves, rows = split_output(capsys.readouterr().out)
    assert moves == []
    assert [content for content, _ in rows] == values
    assert sorted(index for _, index in rows) == list(range(len(values)))


def test_single_argument_with_many_numbers_is_sorted(capsys):
    values = [9, 7, 8, 1, 2, 3]
    assert main([" ".join(str(v) for v in values)]) == 0
    _, rows = split_output(capsys.readouterr().out)
    assert [content for content, _ in rows] == values
    ranks = dict(rows)
    assert ranks[min(values)] == 0
    assert ranks[max(values)] == len(values) - 1