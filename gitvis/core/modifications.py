"""Random file modifications used when a caller does not supply one."""

import random
from typing import Optional, Tuple

DEFAULT_MAX_INSERTIONS = 10
DEFAULT_MAX_DELETIONS = 5


class ModificationGenerator:
    """
    Produces (insertions, deletions) pairs for simulated file edits.

    Every edit changes at least one line.
    """

    def __init__(
        self,
        max_insertions: int = DEFAULT_MAX_INSERTIONS,
        max_deletions: int = DEFAULT_MAX_DELETIONS,
        seed: Optional[int] = None,
    ):
        """
        Initialize generator.

        Args:
            max_insertions: Upper bound for inserted lines per edit
            max_deletions: Upper bound for deleted lines per edit
            seed: Optional seed for reproducible sequences
        """
        if max_insertions < 0 or max_deletions < 0:
            raise ValueError("Modification limits must not be negative")

        self.max_insertions = max_insertions
        self.max_deletions = max_deletions
        self._random = random.Random(seed)

    def create(self) -> Tuple[int, int]:
        """
        Draw a random modification.

        Returns:
            Tuple of (insertions, deletions)
        """
        insertions = self._random.randint(0, self.max_insertions)
        deletions = self._random.randint(0, self.max_deletions)

        if insertions == 0 and deletions == 0 and self.max_insertions > 0:
            insertions = 1

        return insertions, deletions

    def __repr__(self) -> str:
        return f"ModificationGenerator(max_insertions={self.max_insertions}, max_deletions={self.max_deletions})"
