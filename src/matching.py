"""
File:       src/matching.py
Author:     Ivan Lazarević
Brief:      Matching of STR profiles against the two unknown sequences.
"""
# Standard library imports
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, cast

# Third party library imports
from Bio.Seq import Seq

# Local modules imports
from src.profile import STR, Profile


class OccurrenceCounter(ABC):
    """ Abstract Base Class for occurrence counters

        Counts non-overlapping, left-to-right occurrences of `needle` in `haystack`.
        Every match consumes its length before the next one is searched for,
        so "AA" occurs twice in "AAAA", not three times.
        Can be used to compare different implementations of the counting algorithm.
    """

    def count(self, haystack: str, needle: str) -> int:
        """Return the number of non-overlapping occurrences of `needle` in `haystack`."""
        # STRs can't be longer than a sequence.
        if not needle or len(needle) > len(haystack):
            return 0
        return self._count(haystack, needle)

    @abstractmethod
    def _count(self, haystack: str, needle: str) -> int:
        pass


class OccurrenceCounterNaive(OccurrenceCounter):
    """Naive implementation of counting, by repeated `str.find`"""

    def _count(self, haystack: str, needle: str) -> int:
        repeats = 0
        last_occurrence = haystack.find(needle)
        while last_occurrence != -1:
            repeats += 1
            last_occurrence = haystack.find(needle, last_occurrence + len(needle))
        return repeats


class OccurrenceCounterBiopython(OccurrenceCounter):
    """A *biopython* implementation of counting; `Seq.count` doesn't count overlapping matches"""

    def _count(self, haystack: str, needle: str) -> int:
        return Seq(haystack).count(needle)


def all_occurrence_counters() -> List[OccurrenceCounter]:
    return [
        cast(OccurrenceCounter, OccurrenceCounterNaive()),
        cast(OccurrenceCounter, OccurrenceCounterBiopython()),
    ]


_DEFAULT_COUNTER: OccurrenceCounter = OccurrenceCounterBiopython()


def count_occurrences(haystack: str, needle: str) -> int:
    """Count non-overlapping occurrences of `needle` in `haystack` by using the default `OccurrenceCounter`"""
    return _DEFAULT_COUNTER.count(haystack, needle)


class MatchingEngine:
    """ Decides which profiles are "of interest" with respect to two unknown sequences.

        An STR corroborates a profile when its recorded number of occurrences equals
        the sum of its occurrences in the first and in the second unknown sequence.
        A profile is of interest if at least half of its STRs, rounded up, corroborate it.
        A profile without STRs needs zero corroborating STRs, so it's always of interest.
    """

    def __init__(self, first_unknown: str, second_unknown: str, counter: Optional[OccurrenceCounter] = None) -> None:
        self.first_unknown = first_unknown
        self.second_unknown = second_unknown
        self.counter = counter if counter is not None else _DEFAULT_COUNTER

    def combined_occurrences(self, repeat_unit: str) -> int:
        return (self.counter.count(self.first_unknown, repeat_unit) +
                self.counter.count(self.second_unknown, repeat_unit))

    def corroborates(self, str_record: STR) -> bool:
        return self.combined_occurrences(str_record.repeat_unit) == str_record.occurrences

    def count_corroborating(self, profile: Profile) -> int:
        return sum(1 for str_record in profile.strs if self.corroborates(str_record))

    @staticmethod
    def required_matches(total_strs: int) -> int:
        """Half of `total_strs`, rounded up"""
        return (total_strs + 1) // 2

    def is_of_interest(self, profile: Profile) -> bool:
        return self.count_corroborating(profile) >= self.required_matches(len(profile))

    def flag(self, profile: Profile) -> bool:
        """ Set the profile's flag if it's of interest and return the flag.

            A flag that is already set is never reset.
        """
        if self.is_of_interest(profile):
            profile.of_interest = True
        return profile.of_interest

    def flag_profiles(self, profiles: Iterable[Profile]) -> int:
        """Flag each of `profiles` independently and return how many of them are flagged afterwards."""
        return sum(1 for profile in profiles if self.flag(profile))
