import math
from typing import List, Tuple

# (lower bound, stars); first bound the score reaches wins
THRESHOLDS: List[Tuple[float, int]] = [(5.0, 5), (1.0, 4), (-1.0, 3), (-5.0, 2)]
LOWEST = 1
NEUTRAL = 3

def star_rating(score: float) -> int:
    if math.isnan(score):
        return NEUTRAL
    for bound, stars in THRESHOLDS:
        if score >= bound:
            return stars
    return LOWEST
