#!/usr/bin/env python3
"""
File:       tools/compare.py
Author:     Ivan Lazarević
Brief:      Script for comparing speed of various algorithms and data structures.
"""
# Standard library imports
import os
import random
import sys

# Local modules imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), r".."))
from src.config import ALPHABET  # noqa
from src.matching import OccurrenceCounter, all_occurrence_counters  # noqa
from src.utils import time_it  # noqa

_SEQUENCE_LEN = 1_000_000
_REPEAT_UNITS = ["AGAT", "AATG", "TATC", "GATA", "TCTG"]


def _random_sequence(length: int) -> str:
    return "".join(random.choices(ALPHABET, k=length))


@time_it
def _count_with(counter: OccurrenceCounter, sequence: str) -> None:
    for unit in _REPEAT_UNITS:
        counter.count(sequence, unit)


def _compare_occurrence_counters() -> None:
    print("\nComparing occurrence counters...")
    sequence = _random_sequence(_SEQUENCE_LEN)
    for counter in all_occurrence_counters():
        print(type(counter).__name__)
        _count_with(counter, sequence)


def _compare_everything() -> None:
    _compare_occurrence_counters()


if __name__ == "__main__":
    _compare_everything()
