import pytest

from songyear.errors import InvalidGuessInput
from songyear.services.game.guesses import parse_year_guess


@pytest.mark.parametrize('raw, expected', [
    ('1999', 1999),
    (' 2024 ', 2024),
    (1985, 1985),
])
def test_accepts_four_digit_years(raw, expected):
    assert parse_year_guess(raw) == expected


@pytest.mark.parametrize('raw', [None, '', '99', '19999', '19a9', '1999.0', 199, 10000, True, 1999.0, '١٩٩٩'])
def test_rejects_anything_not_shaped_like_a_year(raw):
    with pytest.raises(InvalidGuessInput):
        parse_year_guess(raw)
