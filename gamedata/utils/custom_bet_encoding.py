# gamedata/utils/custom_bet_encoding.py
"""
Text encoding for custom sub-bet data stored in BetConfiguration.CustomBetInfo.

    "" | "{" pair ("," pair)* "}"      pair := key ":" integer

Keys may not contain ',' or ':' since those are the pair and field delimiters.
"""
import re
from typing import Dict, Mapping, Optional

from gamedata.exceptions import ArgumentException, FormatException

PAIR_DELIMITER = ','
FIELD_DELIMITER = ':'

_INTEGER_PATTERN = re.compile(r'^\s*[+-]?[0-9]+\s*$')

# Values are stored as signed 64-bit integers.
MIN_VALUE = -2 ** 63
MAX_VALUE = 2 ** 63 - 1


def encode(custom_bet_data: Optional[Mapping[str, int]]) -> str:
    """Encodes custom bet data with its keys in ordinal order. None or empty encodes to ''."""
    if not custom_bet_data:
        return ""

    pairs = []
    for key in sorted(custom_bet_data):
        if PAIR_DELIMITER in key or FIELD_DELIMITER in key:
            raise FormatException(
                "Custom bet keys cannot include ',' or ':' as they are delimiter characters.",
                details={'key': key}
            )
        pairs.append(f"{key}{FIELD_DELIMITER}{int(custom_bet_data[key])}")

    return "{" + PAIR_DELIMITER.join(pairs) + "}"


def decode(custom_bet: Optional[str]) -> Dict[str, int]:
    """Decodes a custom bet string. None or '' decodes to an empty dict."""
    results: Dict[str, int] = {}
    if not custom_bet:
        return results

    if not custom_bet.startswith("{") or not custom_bet.endswith("}"):
        raise FormatException(
            "Custom bet encoding should start with '{' and end with '}'.",
            details={'source': custom_bet}
        )

    for pair in custom_bet.strip("{}").split(PAIR_DELIMITER):
        key_value = pair.split(FIELD_DELIMITER)
        if len(key_value) != 2:
            raise ArgumentException(
                f"Failed to generate key value pair for string: '{pair}' in source string: '{custom_bet}'",
                details={'pair': pair, 'source': custom_bet}
            )

        key, raw_value = key_value
        if not _INTEGER_PATTERN.match(raw_value):
            raise FormatException(
                f"Custom bet value '{raw_value}' for key '{key}' is not an integer.",
                details={'pair': pair, 'source': custom_bet}
            )
        if key in results:
            raise ArgumentException(
                f"Duplicate custom bet key '{key}' in source string: '{custom_bet}'",
                details={'key': key, 'source': custom_bet}
            )
        value = int(raw_value)
        if not MIN_VALUE <= value <= MAX_VALUE:
            raise FormatException(
                f"Custom bet value '{raw_value}' for key '{key}' is outside the 64-bit integer range.",
                details={'pair': pair, 'source': custom_bet}
            )
        results[key] = value

    return results
