# gamedata/utils/progressive_win_groups.py
import re
from typing import Iterable, List, Optional

from gamedata.domain import ProgressiveWinGroup
from gamedata.exceptions import ArgumentException

# Matches "level:count" optionally followed by commas. Text between matches is skipped.
PROGRESSIVE_GROUP_PATTERN = re.compile(r'((\d+):(\d+)(,*))', re.ASCII)


def encode(progressive_win_groups: Optional[Iterable[ProgressiveWinGroup]]) -> str:
    """Renders groups as 'level:count' joined by ',' in the order given."""
    if progressive_win_groups is None:
        raise ArgumentException("progressive_win_groups cannot be None.")

    return ",".join(f"{group.level}:{group.count}" for group in progressive_win_groups)


def decode(progressive_info: Optional[str]) -> List[ProgressiveWinGroup]:
    """
    Extracts every 'level:count' group from progressive_info, in order of appearance.

    Decoding is lenient: text that does not match the pattern is ignored rather
    than rejected.
    """
    if progressive_info is None:
        raise ArgumentException("progressive_info cannot be None.")

    return [
        ProgressiveWinGroup(level=int(match.group(2)), count=int(match.group(3)))
        for match in PROGRESSIVE_GROUP_PATTERN.finditer(progressive_info)
    ]
