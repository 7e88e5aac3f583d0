# gamedata/utils/outcome_sampler.py
import logging
from typing import Sequence

from gamedata.exceptions import InvalidStateException, require

logger = logging.getLogger(__name__)


class _Exhausted:
    """Returned by sample_sequential once the cursor has run past the outcome set."""

    def __bool__(self):
        return False

    def __repr__(self):
        return "EXHAUSTED"


EXHAUSTED = _Exhausted()


def total_occurrences(outcomes: Sequence) -> int:
    return sum(outcome.occurrences for outcome in outcomes)


def outcome_from_occurrence_index(outcomes: Sequence, occurrence_index: int):
    """Maps an index in [0, total occurrences) onto the outcome whose weight band contains it."""
    running_weight = 0
    for outcome in outcomes:
        running_weight += outcome.occurrences
        if occurrence_index < running_weight:
            return outcome

    raise InvalidStateException(
        f"Could not find an outcome for occurrence index {occurrence_index}.",
        details={'occurrence_index': occurrence_index, 'total_occurrences': running_weight}
    )


def sample_random(outcomes: Sequence, rng):
    """Draws one outcome with probability proportional to its occurrence count."""
    require(rng, 'rng')
    if not outcomes:
        raise InvalidStateException("Cannot draw from an empty outcome set.")

    total = total_occurrences(outcomes)
    if total <= 0:
        raise InvalidStateException(
            "Cannot draw from an outcome set with no occurrences.",
            details={'outcome_count': len(outcomes)}
        )

    occurrence_index = rng.draw_uniform(1, 0, total - 1)[0]
    if not 0 <= occurrence_index < total:
        raise InvalidStateException(
            f"Random number {occurrence_index} is outside the draw range [0, {total - 1}].",
            details={'occurrence_index': occurrence_index, 'total_occurrences': total}
        )

    logger.debug(f"Drew occurrence index {occurrence_index} of {total}")
    return outcome_from_occurrence_index(outcomes, occurrence_index)


def sample_sequential(cache, query_key, outcomes: Sequence):
    """
    Returns the next outcome for `query_key` in stored order, or EXHAUSTED.

    The cursor advances on every call, including calls past the end of the set.
    """
    index = cache.next_index(query_key)
    if index < len(outcomes):
        return outcomes[index]
    return EXHAUSTED
