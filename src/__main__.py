"""
File:       src/__main__.py
Author:     Ivan Lazarević
Brief:      The high-level main business logic file.
"""
# Standard library imports
import os
import sys
from pathlib import Path

# Local modules imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), r".."))
from src.config import INPUT_DATABASE
from src.config import OUTPUT_REPORT, OUTPUT_STATISTICS
from src.data import DatabaseFormatError, build_store
from src.matching import MatchingEngine
from src.report import write_report, write_statistics
from src.store import DuplicateNameError
from src.utils import exit_program, time_it


@time_it
def main_logic(input_database: Path, output_report: Path, output_stat: Path) -> None:
    """High-level implementation of the main matching logic."""
    store = build_store(input_database)
    print(f"Loaded {len(store)} profiles.")

    # Step 1: Flag the profiles of interest.
    store.flag_profiles_of_interest()
    num_flagged = store.count_by_interest(True)
    num_unmarked = store.count_by_interest(False)
    print(f"Profiles of interest: {num_flagged}, unmarked profiles: {num_unmarked}")

    # Step 2: Report on every profile, before anything is removed.
    engine = MatchingEngine(store.first_unknown, store.second_unknown)
    write_report(store, engine, output_report)

    # Step 3: Remove the unmarked profiles.
    removed = store.cleanup_tree()
    for name in removed:
        print(f"Removed '{name}'")

    # Step 4: Store the counts.
    write_statistics(output_stat, num_flagged, num_unmarked, len(store))


def main() -> None:
    """Local main"""
    try:
        main_logic(INPUT_DATABASE, OUTPUT_REPORT, OUTPUT_STATISTICS)
    except (OSError, DatabaseFormatError, DuplicateNameError) as err:
        exit_program(f"Couldn't process '{INPUT_DATABASE}': {err}")
