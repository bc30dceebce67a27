import pytest

from normalizer import NumberParser, fold_number_runs


@pytest.mark.parametrize("text,expected", [
    ("nine hundred twenty five", "925"),
    ("two thousand twenty one", "2021"),
    ("twenty five", "25"),
    ("five six", "5 6"),
    ("one hundred and five", "100 and 5"),
    ("a million", "a 1000000"),
    ("hundred", "100"),
    ("room nine oh five", "room 9 0 5"),
    ("nine hundred 25 dollars", "925 dollars"),
    ("the end", "the end"),
    ("", ""),
])
def test_fold_number_runs(text, expected):
    assert fold_number_runs(text) == expected


def test_digit_does_not_open_a_run():
    assert fold_number_runs("25 hundred") == "25 100"


def test_parse_sequence_emits_disjoint_numbers():
    parser = NumberParser()

    assert parser.parse_number_sequence(["twenty", "thirty"]) == ["20", "30"]
    assert parser.parse_number_sequence(["three", "hundred", "four"]) == ["304"]


def test_custom_tables():
    # Arrange
    parser = NumberParser(unit_values={"uno": 1, "due": 2}, multipliers={"cento": 100})

    # Act
    result = parser.fold_number_runs("due cento uno euro")

    # Assert
    assert result == "201 euro"
    assert not parser.is_number_word("five")
