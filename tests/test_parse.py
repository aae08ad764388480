import pytest

from pushswap.parse import (
    InputError,
    atoi,
    has_duplicates,
    is_blank,
    is_valid,
    parse_arguments,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42", -42),
        ("\t\n+17", 17),
        ("12abc", 12),
        ("abc", 0),
        ("+-5", 0),
        ("--5", 0),
        ("-", 0),
        ("", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_round_trip():
    for number in (-2147483648, -1, 0, 7, 2147483647):
        assert atoi(str(number)) == number


def test_is_blank():
    assert is_blank("   ") is True
    assert is_blank("") is True
    assert is_blank(" 1 ") is False
    assert is_blank("\t") is False


def test_has_duplicates():
    assert has_duplicates(["1", "2", "3"]) is False
    assert has_duplicates(["5", "+5"]) is True
    assert has_duplicates(["0", "-0"]) is True
    assert has_duplicates(["1", "01"]) is True


@pytest.mark.parametrize(
    "tokens",
    [
        ["1", "2", "3"],
        ["-2147483648", "2147483647"],
        ["+4", "-4"],
        ["0001"],
    ],
)
def test_is_valid_accepts(tokens):
    assert is_valid(tokens) is True


@pytest.mark.parametrize(
    "tokens",
    [
        ["2147483648"],
        ["-2147483649"],
        ["1", "1"],
        ["1a"],
        ["-"],
        ["+"],
        ["1-"],
        [""],
        ["0000000000001"],
        ["1 2"],
    ],
)
def test_is_valid_rejects(tokens):
    assert is_valid(tokens) is False


def test_parse_single_string():
    assert parse_arguments(["3 2 1"]) == [3, 2, 1]
    assert parse_arguments(["  3   -1 "]) == [3, -1]


def test_parse_many_arguments():
    assert parse_arguments(["5", "-4", "+9"]) == [5, -4, 9]


def test_parse_single_number():
    assert parse_arguments(["7"]) == [7]


@pytest.mark.parametrize("args", [[], [""], ["    "]])
def test_parse_nothing_to_do(args):
    assert parse_arguments(args) == []


@pytest.mark.parametrize(
    "args",
    [
        ["1", "", "2"],
        ["1 2", "3"],
        ["1", "1"],
        ["1\t2"],
        ["4 x"],
        ["2147483648 1"],
    ],
)
def test_parse_errors(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError, match="Error"):
        parse_arguments(["3 3"])