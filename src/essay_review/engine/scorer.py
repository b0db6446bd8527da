"""Band score aggregation and tier classification.

The overall band is the mean of the four criterion bands, but quarter
points do not follow plain half-rounding: a .25 mean always goes up to the
next half band and a .75 mean always goes up to the next whole band. Every
other mean is rounded to the nearest half.
"""

import math

from ..config import scoring_config
from ..schemas.scores import SubScores, Tier


def aggregate(
    task_response: float | None,
    coherence_cohesion: float | None,
    lexical_resource: float | None,
    grammar: float | None,
) -> float | None:
    scores = (task_response, coherence_cohesion, lexical_resource, grammar)
    if any(score is None for score in scores):
        return None

    # Work in whole hundredths so 6.2499999 reads as 6.25 and the quarter
    # checks behave the same at every band.
    hundredths = round(sum(scores) / 4 * 100)
    tolerance = max(1, round(scoring_config.band.epsilon * 100))
    whole, fraction = divmod(hundredths, 100)

    if abs(fraction - 25) < tolerance:
        return whole + 0.5
    if abs(fraction - 75) < tolerance:
        return whole + 1.0
    # Nearest half, ties up.
    return math.floor((hundredths + 25) / 50) / 2


def aggregate_scores(scores: SubScores) -> float | None:
    return aggregate(
        scores.task_response,
        scores.coherence_cohesion,
        scores.lexical_resource,
        scores.grammar,
    )


def color_tier(score: float | None) -> Tier | None:
    if score is None:
        return None
    tiers = scoring_config.tiers
    if score >= tiers.high:
        return Tier.HIGH
    if score >= tiers.good:
        return Tier.GOOD
    if score >= tiers.fair:
        return Tier.FAIR
    return Tier.LOW
