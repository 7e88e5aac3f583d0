# gamedata/utils/random_numbers.py
import random
import secrets
import struct
from typing import List, Optional

from gamedata.exceptions import ArgumentException, DataCorruptionException

# Stored RNG payloads are packed little-endian signed 32-bit integers.
RANDOM_NUMBER_SIZE = struct.calcsize('<i')


class RandomNumberGenerator:
    """Source of uniformly distributed integers for outcome selection."""

    def draw_uniform(self, count: int, minimum: int, maximum: int) -> List[int]:
        """Returns `count` integers drawn uniformly from [minimum, maximum], both inclusive."""
        if count < 1:
            raise ArgumentException(f"count must be at least 1, got {count}.")
        if minimum > maximum:
            raise ArgumentException(f"minimum {minimum} is greater than maximum {maximum}.")
        return [self._randint(minimum, maximum) for _ in range(count)]

    def _randint(self, minimum: int, maximum: int) -> int:
        raise NotImplementedError


class SecureRandomNumberGenerator(RandomNumberGenerator):
    def __init__(self):
        self._random = secrets.SystemRandom()

    def _randint(self, minimum, maximum):
        return self._random.randint(minimum, maximum)


class SeededRandomNumberGenerator(RandomNumberGenerator):
    """Reproducible draws for verification runs."""

    def __init__(self, seed: int):
        self.seed = seed
        self._random = random.Random(seed)

    def _randint(self, minimum, maximum):
        return self._random.randint(minimum, maximum)


def create_random_number_generator(seed: Optional[int] = None) -> RandomNumberGenerator:
    if seed is None:
        return SecureRandomNumberGenerator()
    return SeededRandomNumberGenerator(seed)


def decode_random_numbers(raw_random_numbers: Optional[bytes]) -> List[int]:
    if raw_random_numbers is None:
        raise ArgumentException("Raw random numbers cannot be None.")

    size = len(raw_random_numbers)
    if size % RANDOM_NUMBER_SIZE != 0:
        raise DataCorruptionException(
            f"Raw random number payload of {size} bytes is not a multiple of {RANDOM_NUMBER_SIZE}.",
            details={'length': size}
        )
    return list(struct.unpack(f'<{size // RANDOM_NUMBER_SIZE}i', raw_random_numbers))


def encode_random_numbers(random_numbers) -> bytes:
    numbers = list(random_numbers)
    return struct.pack(f'<{len(numbers)}i', *numbers)
