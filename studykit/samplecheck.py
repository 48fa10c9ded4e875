"""Check sample strings against a regular expression."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

ETISALAT = r"^(etisalat(\d?|\d+).ae(\d?|\d+))$"
ETISALAT_PLAIN = "etisalat.ae"
IMS = r"^(ims(\d?|\d+))$"
FIXED_LTE = r"^((.+|.?)fixedlte)$"
FIMS = r"^((.+|.?)fims)$"
STAT_SLOTS = "^[0-1][0-9]$|^[0-9]$"


@dataclass(frozen=True)
class Sample:
    sample: str
    expected: bool


def check_samples(samples: Iterable[Sample], pattern: str) -> list[bool]:
    """Search each sample for ``pattern``, print a report and return the matches.

    Raises :class:`re.error` if the pattern does not compile.
    """
    regex = re.compile(pattern, re.ASCII)
    print(pattern)
    results = []
    for sample in samples:
        matched = regex.search(sample.sample) is not None
        matched_text = str(matched).lower()
        if matched != sample.expected:
            expected_text = str(sample.expected).lower()
            print(
                f"Failed to check {sample.sample} result: "
                f"er {expected_text} - ar {matched_text}"
            )
        else:
            print(f"check '{sample.sample}' result: {matched_text}")
        results.append(matched)
    print()
    return results