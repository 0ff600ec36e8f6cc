"""
Unique ticket number allocation.

NumberAllocator draws numbers uniformly at random from an inclusive range
without ever returning the same number twice during its lifetime. One
allocator is shared by every page of a run, so numbers are unique across
the whole booklet, not just within a page.
"""

import random
from typing import FrozenSet, List, Optional

from .exceptions import ConfigurationError
from .models import NumberRange


class NumberAllocator:
    """
    Rejection-sampling allocator of unique integers.

    The capacity check happens once, at construction: asking for more
    numbers than the range holds would make `allocate()` loop forever, so
    it is refused up front.
    """

    def __init__(
        self,
        number_range: NumberRange,
        total_requested: int,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the allocator.

        Args:
            number_range: Inclusive range to draw from
            total_requested: Numbers the whole run will ask for
            rng: Optional random source (seed it for reproducible runs)

        Raises:
            ConfigurationError: If the range holds fewer than `total_requested` numbers
        """
        if total_requested > number_range.size:
            raise ConfigurationError(
                f"Not enough numbers: {total_requested} needed but only "
                f"{number_range.size} available in {number_range.min}-{number_range.max}"
            )

        self.number_range = number_range
        self.total_requested = total_requested
        self._rng = rng or random.Random()
        self._used = set()

    def allocate(self) -> int:
        """Draw a number not returned before."""
        while True:
            number = self._rng.randint(self.number_range.min, self.number_range.max)
            if number not in self._used:
                self._used.add(number)
                return number

    def allocate_many(self, count: int) -> List[int]:
        """Draw `count` numbers, in draw order."""
        return [self.allocate() for _ in range(count)]

    @property
    def used(self) -> FrozenSet[int]:
        """Snapshot of the numbers handed out so far."""
        return frozenset(self._used)

    @property
    def remaining(self) -> int:
        """Numbers still available in the range."""
        return self.number_range.size - len(self._used)

    def __len__(self) -> int:
        return len(self._used)
