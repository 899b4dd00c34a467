MAX_SCORE = 100
POINTS_PER_YEAR = 10
MAX_SCORING_DIFF = 10


def score_guess(correct_year: int, guessed_year: int) -> int:
    """Score a year guess by proximity.

    100 for an exact hit, minus 10 per year off; 0 once the guess is 10 or
    more years away. Inputs are trusted to be integers; checking that a guess
    looks like a year is done before this is called.
    """
    diff = abs(correct_year - guessed_year)
    if diff > MAX_SCORING_DIFF:
        return 0
    return max(0, MAX_SCORE - POINTS_PER_YEAR * diff)
