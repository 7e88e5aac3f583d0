"""
Value types passed between the resolver, the samplers and the data sources.

Everything here is immutable and compares by value, so a (paytable, bet) pair
can be used directly as a cache key.
"""
from dataclasses import dataclass, field, replace
from typing import Dict, Mapping, Optional, Tuple


def _freeze_custom_bet_data(custom_bet_data) -> Tuple[Tuple[str, int], ...]:
    if not custom_bet_data:
        return ()
    if isinstance(custom_bet_data, Mapping):
        items = custom_bet_data.items()
    else:
        items = custom_bet_data
    return tuple(sorted((str(key), int(value)) for key, value in items))


@dataclass(frozen=True)
class Bet:
    """A requested wager: sub bets (lines), amount per sub bet, side/extra bets and custom sub bets."""
    total_bet: int
    sub_bet: int
    bet_per_sub_bet: int
    extra_bet: int = 0
    side_bet: int = 0
    persistence_id: int = 0
    custom_bet_data: Tuple[Tuple[str, int], ...] = ()
    bet_id: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'custom_bet_data', _freeze_custom_bet_data(self.custom_bet_data))

    @property
    def custom_bets(self) -> Dict[str, int]:
        return dict(self.custom_bet_data)


@dataclass(frozen=True)
class PaytableConfiguration:
    paytable_id: int
    denomination: int = 1


@dataclass(frozen=True)
class StoredBetConfiguration:
    id: int
    lines: int
    bet_per_line: int
    side_bet: int
    extra_bet: int
    custom_bet_info: str
    total_bet: int
    persistence_id: int = 0


@dataclass(frozen=True)
class OutcomeRecord:
    id: int
    game_configuration_id: int
    total_win: int
    game_section_mask: int
    occurrences: int
    progressive_info: str = ""
    raw_random_numbers: Optional[bytes] = field(default=None, repr=False)

    def with_total_win(self, total_win: int) -> "OutcomeRecord":
        return replace(self, total_win=total_win)


@dataclass(frozen=True)
class ProgressiveWinGroup:
    level: int
    count: int


@dataclass(frozen=True)
class WinData:
    total_win: int
    game_section_mask: int
    progressives: Tuple[ProgressiveWinGroup, ...] = ()
    outcome_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'progressives', tuple(self.progressives))


@dataclass(frozen=True)
class GameData:
    random_numbers: Tuple[int, ...]
    outcome_id: str

    def __post_init__(self):
        object.__setattr__(self, 'random_numbers', tuple(self.random_numbers))


@dataclass(frozen=True)
class EvaluationData:
    win_data: WinData
    game_data: GameData


@dataclass(frozen=True)
class OutcomeQuery:
    """Cache signature of an outcome set request."""
    paytable: PaytableConfiguration
    bet: Bet
