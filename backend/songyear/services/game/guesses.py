import re

from songyear.errors import InvalidGuessInput

_YEAR_RE = re.compile(r'\d{4}', re.ASCII)


def parse_year_guess(raw) -> int:
    """Turn client input into a year, or raise InvalidGuessInput.

    Accepts an int in 1000..9999 or a string of exactly four digits.
    """
    if isinstance(raw, bool):
        raise InvalidGuessInput('Guess must be a 4-digit year')
    if isinstance(raw, int):
        if 1000 <= raw <= 9999:
            return raw
        raise InvalidGuessInput('Guess must be a 4-digit year')
    if isinstance(raw, str):
        text = raw.strip()
        if _YEAR_RE.fullmatch(text):
            return int(text)
    raise InvalidGuessInput('Guess must be a 4-digit year')
