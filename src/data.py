"""
File:       src/data.py
Author:     Ivan Lazarević
Brief:      Data-reading functions: the profile database.

Details:
            The database is a text file, optionally *gzip*-compressed, laid out as follows:
                1. one line containing the first unknown sequence,
                2. one line containing the second unknown sequence,
                3. one line containing the number of people in the database, say p,
                4. p records, each made of whitespace-separated tokens:
                   first name, last name, number of STRs n, and then n pairs of STR and its occurrences.
            A record may span any number of lines.
"""
# Standard library imports
from pathlib import Path
from typing import Iterator, List, TextIO

# Third party library imports
import pgzip

# Local modules imports
from src.config import NAME_SEPARATOR, OPEN_PARAMS
from src.profile import Profile
from src.store import ProfileStore
from src.type_aliases import Database, ProfileRecord, StrPair
from src.utils import time_it


class DatabaseFormatError(ValueError):
    """Raised when the database file doesn't follow the expected layout"""


def full_name(first_name: str, last_name: str) -> str:
    """Return the store key for a person: "Last, First"."""
    return f"{last_name}{NAME_SEPARATOR}{first_name}"


def _open_database(input_database: Path) -> TextIO:
    if input_database.suffix == ".gz":
        return pgzip.open(input_database, "rt", **OPEN_PARAMS, thread=None)
    return open(input_database, "rt", **OPEN_PARAMS)


def _read_line(handle: TextIO, what: str) -> str:
    line = handle.readline()
    if not line:
        raise DatabaseFormatError(f"Missing {what}.")
    return line.strip()


def _parse_int(token: str, what: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise DatabaseFormatError(f"Expected an integer for {what}, got '{token}'.") from None
    if value < 0:
        raise DatabaseFormatError(f"Expected a non-negative integer for {what}, got {value}.")
    return value


def _next_token(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise DatabaseFormatError(f"Unexpected end of file while reading {what}.") from None


def _read_record(tokens: Iterator[str]) -> ProfileRecord:
    first_name = _next_token(tokens, "a first name")
    last_name = _next_token(tokens, f"the last name of '{first_name}'")
    name = full_name(first_name, last_name)
    num_strs = _parse_int(_next_token(tokens, f"the number of STRs of '{name}'"), f"the number of STRs of '{name}'")
    strs: List[StrPair] = []
    for _ in range(num_strs):
        unit = _next_token(tokens, f"an STR of '{name}'")
        occurrences = _parse_int(_next_token(tokens, f"the occurrences of {unit} of '{name}'"),
                                 f"the occurrences of {unit} of '{name}'")
        strs.append((unit, occurrences))
    return name, strs


@time_it
def read_database(input_database: Path) -> Database:
    """ Read the database file and return both unknown sequences and all profile records.

        The records are returned in file order, as (name, STR pairs) tuples.
        Raises `DatabaseFormatError` if the file is malformed.
    """
    with _open_database(input_database) as handle:
        first_unknown = _read_line(handle, "the first unknown sequence")
        second_unknown = _read_line(handle, "the second unknown sequence")
        num_people = _parse_int(_read_line(handle, "the number of people"), "the number of people")
        tokens = iter(handle.read().split())

    records = [_read_record(tokens) for _ in range(num_people)]
    return first_unknown, second_unknown, records


def build_store(input_database: Path) -> ProfileStore:
    """Read the database file and insert every profile into a new `ProfileStore`, in file order."""
    first_unknown, second_unknown, records = read_database(input_database)
    store = ProfileStore(first_unknown, second_unknown)
    for name, strs in records:
        store.insert(name, Profile.from_pairs(strs))
    return store
