"""
File:       src/profile.py
Author:     Ivan Lazarević
Brief:      STR records and genetic profiles.
"""
# Standard library imports
from typing import NamedTuple, Tuple

# Local modules imports
from src.type_aliases import StrPairs


class STR(NamedTuple):
    """A short tandem repeat: the repeat unit and how many times it was observed"""
    repeat_unit: str
    occurrences: int


class Profile:
    """ A person's STRs together with the "of interest" flag.

        The STRs keep the order they were read in and are never changed afterwards.
        Only the flag is mutable, and it's set by the matching engine.
    """

    __slots__ = ("_strs", "of_interest")

    def __init__(self, strs=(), of_interest: bool = False) -> None:
        self._strs: Tuple[STR, ...] = tuple(strs)
        self.of_interest = of_interest

    @classmethod
    def from_pairs(cls, pairs: StrPairs) -> "Profile":
        """Build a profile from `(repeat_unit, occurrences)` pairs"""
        return cls(STR(unit, occurrences) for unit, occurrences in pairs)

    @property
    def strs(self) -> Tuple[STR, ...]:
        return self._strs

    def __len__(self) -> int:
        return len(self._strs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(strs={list(self._strs)!r}, of_interest={self.of_interest})"
