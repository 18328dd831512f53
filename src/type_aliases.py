"""
File:       src/type_aliases.py
Author:     Ivan Lazarević
Brief:      Type aliases for type annotations.
"""
from typing import Iterable, List, Tuple

# Type aliases
StrPair = Tuple[str, int]
StrPairs = Iterable[StrPair]

# One loader record: the "Last, First" key and its STR pairs, in input order.
ProfileRecord = Tuple[str, List[StrPair]]

# Both unknown sequences and all profile records of a database.
Database = Tuple[str, str, List[ProfileRecord]]
