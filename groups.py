# groups.py
from __future__ import annotations
import re
from typing import List, Sequence

_SEPARATOR_RE = re.compile(r"[,-]")


def split_groups(groups: str) -> List[int]:
    """
    Return the integers written in a groups string, left to right.

    Ranges are not expanded: "0,2-5" gives [0, 2, 5]. Only the bound
    check on the highest group needs these numbers.
    The string must already have passed validate_groups_format; a token
    that is not an integer raises ValueError.
    """
    return [int(token) for token in _SEPARATOR_RE.split(groups)]


def max_of(nums: Sequence[int]) -> int:
    if not nums:
        raise ValueError("Could not get max of empty sequence")
    return max(nums)
