import logging
from typing import Callable, Dict, Hashable, List

logger = logging.getLogger(__name__)


class QueryResultCache:
    """
    Per-owner memo of resolved outcome sets and sequential cursors.

    Keys are value-equal query signatures (see gamedata.domain.OutcomeQuery), so
    two requests with the same paytable and bet shape share one store round-trip.
    Entries live as long as the cache does; nothing is evicted.

    The cache holds plain dictionaries with no locking. Use one instance per
    thread or serialize access externally.
    """

    def __init__(self):
        self._outcome_sets: Dict[Hashable, List] = {}
        self._cursors: Dict[Hashable, int] = {}

    def outcomes(self, key: Hashable, loader: Callable[[], List]) -> List:
        """Returns the cached outcome set for `key`, calling `loader` on the first request only."""
        cached = self._outcome_sets.get(key)
        if cached is not None:
            logger.debug(f"Outcome set cache hit for {key}")
            return cached

        outcomes = list(loader())
        self._outcome_sets[key] = outcomes
        logger.info(f"Cached {len(outcomes)} outcomes for {key}")
        return outcomes

    def next_index(self, key: Hashable) -> int:
        """Returns the current cursor for `key` (0 on first use) and advances it."""
        index = self._cursors.get(key, 0)
        self._cursors[key] = index + 1
        return index

    def cursor(self, key: Hashable) -> int:
        return self._cursors.get(key, 0)

    def __contains__(self, key):
        return key in self._outcome_sets

    def __len__(self):
        return len(self._outcome_sets)
