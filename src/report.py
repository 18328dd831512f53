"""
File:       src/report.py
Author:     Ivan Lazarević
Brief:      Reports on the profiles in a Profile Store.
"""
# Standard library imports
import csv
from pathlib import Path

# Third party library imports
import pandas as pd

# Local modules imports
from src.config import NEWLINE, REPORT_COLUMNS, REPORT_SEPARATOR
from src.matching import MatchingEngine
from src.store import ProfileStore


def profile_frame(store: ProfileStore, engine: MatchingEngine) -> pd.DataFrame:
    """Return a data frame with one row per stored profile, in ascending name order"""
    rows = [
        (name, profile.of_interest, len(profile), engine.count_corroborating(profile))
        for name, profile in store.in_order()
    ]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def write_report(store: ProfileStore, engine: MatchingEngine, output_report: Path) -> None:
    output_report.parent.mkdir(parents=True, exist_ok=True)
    frame = profile_frame(store, engine)
    frame.to_csv(
        output_report, index=False, sep=REPORT_SEPARATOR,
        quoting=csv.QUOTE_MINIMAL, lineterminator=NEWLINE
    )


def write_statistics(output_stat: Path, flagged: int, unmarked: int, remaining: int) -> None:
    """Store the number of profiles of interest, of unmarked profiles, and of profiles left after cleanup."""
    output_stat.parent.mkdir(parents=True, exist_ok=True)
    stats = f"profilesOfInterest:\t{flagged}{NEWLINE}" \
            f"unmarkedProfiles:\t{unmarked}{NEWLINE}" \
            f"remainingProfiles:\t{remaining}{NEWLINE}"
    with open(output_stat, "wt", newline=NEWLINE) as stat_handle:
        stat_handle.write(stats)
