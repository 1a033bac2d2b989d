"""Ensure the pcg32 package is importable for local pytest runs."""

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(scope="session")
def official_sequences():
    """Sequences captured from the official PCG C library, parsed to ints."""

    raw = json.loads((DATA_DIR / "official_sequences.json").read_text())
    cases = {}
    for name, case in raw.items():
        seeds = None
        if case["initstate"] is not None:
            seeds = (int(case["initstate"], 16), int(case["initseq"], 16))
        cases[name] = (seeds, [int(value, 16) for value in case["values"]])
    return cases
