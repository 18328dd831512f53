#!/usr/bin/env python3
"""
File:       tools/make_gzip.py
Author:     Ivan Lazarević
Brief:      Script for making test *gzip* files.

Details:
            It is enough to run the script once from CLI.
            Alternatively, the `compress_file function can be called programmatically.
"""
# Standard library imports
import os
import sys
from pathlib import Path

# Third party library imports
import pgzip

# Local modules imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), r".."))
from src.config import OPEN_PARAMS
from src.config import TEST_INP_DATABASE_SMALL, TEST_INP_DATABASE_SMALL_GZ


def compress_file(source: Path, dst: Path) -> None:
    with open(source, "rt", **OPEN_PARAMS) as source_handle:
        with pgzip.open(dst, "wt", **OPEN_PARAMS, thread=None) as dst_handle:
            contents = source_handle.read()
            dst_handle.write(contents)


if __name__ == "__main__":
    compress_file(TEST_INP_DATABASE_SMALL, TEST_INP_DATABASE_SMALL_GZ)
