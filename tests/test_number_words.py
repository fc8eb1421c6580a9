import pytest

from bill_maker.utils.number_words import to_words


@pytest.mark.parametrize("amount, words", [
    (0, "Zero Taka Only"),
    (7, "Seven Taka Only"),
    (13, "Thirteen Taka Only"),
    (50, "Fifty Taka Only"),
    (150, "One Hundred Fifty Taka Only"),
    (350, "Three Hundred Fifty Taka Only"),
    (800, "Eight Hundred Taka Only"),
    (1000, "One Thousand Taka Only"),
    (1250, "One Thousand Two Hundred Fifty Taka Only"),
    (2019, "Two Thousand Nineteen Taka Only"),
    (12600, "Twelve Thousand Six Hundred Taka Only"),
    (999999, "Nine Hundred Ninety Nine Thousand Nine Hundred Ninety Nine Taka Only"),
])
def test_to_words(amount, words):
    assert to_words(amount) == words
