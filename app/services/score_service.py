"""
Score curve - points awarded for holding a given rank on the list.

Rank 1 is worth `max_score`, the last rank is worth `min_score`, and the
points in between decay geometrically, so the gap between neighbours shrinks
towards the bottom of the list.
"""

from decimal import Decimal, ROUND_HALF_UP


DEFAULT_MAX_SCORE = 250.0
DEFAULT_MIN_SCORE = 15.0


def score_for_rank(
    rank: int,
    level_count: int,
    max_score: float = DEFAULT_MAX_SCORE,
    min_score: float = DEFAULT_MIN_SCORE
) -> float:
    """
    Score for a 1-indexed rank out of `level_count` ranked levels.

    Raises:
        ValueError: rank outside 1..level_count or invalid curve bounds.
    """
    if min_score <= 0 or min_score > max_score:
        raise ValueError(f"Invalid score bounds: min={min_score}, max={max_score}")
    if rank < 1 or rank > level_count:
        raise ValueError(f"Rank {rank} out of range for {level_count} levels")

    if level_count == 1:
        return max_score

    progress = (rank - 1) / (level_count - 1)
    return max_score * (min_score / max_score) ** progress


def compute_score_curve(
    level_count: int,
    max_score: float = DEFAULT_MAX_SCORE,
    min_score: float = DEFAULT_MIN_SCORE
) -> list[float]:
    """
    Lookup table with one score per rank: entry i is the score for rank i + 1.

    Values are not rounded here; rounding happens on the final totals.
    """
    if level_count < 0:
        raise ValueError("level_count must be >= 0")

    return [
        score_for_rank(rank, level_count, max_score, min_score)
        for rank in range(1, level_count + 1)
    ]


def round_score(value: float, digits: int = 2) -> float:
    """Round half-up to `digits` decimals (2.675 -> 2.68, not 2.67)"""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
