"""
File:       src/config.py
Author:     Ivan Lazarević
Brief:      Program configuration and constants.
"""
from pathlib import Path
from typing import Dict, Final, List

DEBUG: Final[bool] = True

ALPHABET: Final[str] = "ACGT"
NEWLINE: Final[str] = "\n"  # Data files' line ending character(s).
NAME_SEPARATOR: Final[str] = ", "  # Keys are "Last, First".

OPEN_PARAMS: Final[Dict[str, str]] = {
    "encoding": "ascii",
    "errors": "strict",
    "newline": NEWLINE,
}

REPORT_SEPARATOR: Final[str] = "\t"
REPORT_COLUMNS: Final[List[str]] = ["name", "of_interest", "str_count", "corroborating"]

_ROOT_DIR = Path(__file__).resolve().parent.parent


# Data files
_INPUT_DATA_DIR = Path(_ROOT_DIR / "input_data")
INPUT_DATABASE = Path(_INPUT_DATA_DIR / "database.txt")

_OUTPUT_DATA_DIR = Path(_ROOT_DIR / "output_data")
OUTPUT_REPORT = Path(_OUTPUT_DATA_DIR / "report.tsv")
OUTPUT_STATISTICS = Path(_OUTPUT_DATA_DIR / "out.stat.txt")

OUTPUT_REPORT_SMALL = Path(_OUTPUT_DATA_DIR / "report_small.tsv")
OUTPUT_STATISTICS_SMALL = Path(_OUTPUT_DATA_DIR / "out_small.stat.txt")


# Test files
_TEST_INPUT_DATA_DIR = Path(_ROOT_DIR / "tests/data/inp")
TEST_INP_DATABASE_SMALL = Path(_TEST_INPUT_DATA_DIR / "database_small.txt")
TEST_INP_DATABASE_SMALL_GZ = Path(_TEST_INPUT_DATA_DIR / "database_small.txt.gz")

_TEST_OUTPUT_DATA_DIR = Path(_ROOT_DIR / "tests/data/out")
TEST_OUT_SMALL_STAT_REFERENCE = Path(_TEST_OUTPUT_DATA_DIR / "ref_out_small.stat.txt")
TEST_OUT_SMALL_REPORT_REFERENCE = Path(_TEST_OUTPUT_DATA_DIR / "ref_report_small.tsv")
