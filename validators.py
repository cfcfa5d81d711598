# validators.py
from __future__ import annotations
import ipaddress
import math
import re
from typing import Callable, Tuple

from groups import split_groups, max_of

Validator = Callable[[str], Tuple[bool, str]]

# comma separated "<int>" or "<int>-<int>" segments, no whitespace
GROUPS_RE = re.compile(r"^\d+(-\d+)?(,\d+(-\d+)?)*$", re.ASCII)
_INT_RE = re.compile(r"^[+-]?\d+$", re.ASCII)

MIN_MEMORY_MB = 1025.00
MIN_TOTAL_GROUPS = 2


def parse_int(raw: str) -> int:
    """Strict integer parse: optional sign and digits only. Raises ValueError."""
    if not _INT_RE.fullmatch(raw):
        raise ValueError(f"invalid integer: {raw!r}")
    return int(raw)


def parse_float(raw: str) -> float:
    """Decimal float parse with no digit separators or padding. Raises ValueError."""
    if "_" in raw or raw != raw.strip():
        raise ValueError(f"invalid number: {raw!r}")
    num = float(raw)
    if not math.isfinite(num):
        raise ValueError(f"invalid number: {raw!r}")
    return num


def always_valid(raw: str) -> Tuple[bool, str]:
    return True, ""


def validate_required(raw: str) -> Tuple[bool, str]:
    if not raw:
        return False, "Value is required."
    return True, ""


def validate_fraction(raw: str) -> Tuple[bool, str]:
    try:
        num = parse_float(raw)
    except ValueError:
        return False, f"Invalid number. Got {raw}"
    if num > 1.0:
        return False, f"Answer must be less than 1.0. Got {num:.2f}"
    if num < 0.0:
        return False, f"Answer must be greater than 0.0. Got {num:.2f}"
    return True, ""


def validate_min_memory(raw: str) -> Tuple[bool, str]:
    try:
        num = parse_float(raw)
    except ValueError:
        return False, f"Invalid number. Got {raw}"
    if num < MIN_MEMORY_MB:
        return False, f"Answer must be at least {MIN_MEMORY_MB:.2f}. Got {num:.2f}"
    return True, ""


def validate_min_groups(raw: str) -> Tuple[bool, str]:
    try:
        num = parse_int(raw)
    except ValueError:
        return False, f"Invalid Integer. Got {raw}"
    if num < MIN_TOTAL_GROUPS:
        return False, f"Must be at least {MIN_TOTAL_GROUPS}. Got {raw}"
    return True, ""


def validate_ipv4(raw: str) -> Tuple[bool, str]:
    try:
        ipaddress.IPv4Address(raw)
    except ValueError:
        return False, f"Invalid IPv4 address. Got {raw}"
    return True, ""


def validate_port(raw: str) -> Tuple[bool, str]:
    try:
        num = parse_int(raw)
    except ValueError:
        return False, f"Invalid port {raw}"
    if num <= 0:
        return False, f"Port number must be positive. Got {num}"
    if num > 65535:
        return False, f"Port number cannot be larger than 65535. Got {num}"
    return True, ""


def validate_int(raw: str) -> Tuple[bool, str]:
    try:
        parse_int(raw)
    except ValueError:
        return False, f"Invalid Integer. Got {raw}"
    return True, ""


def validate_positive_int(raw: str) -> Tuple[bool, str]:
    try:
        num = parse_int(raw)
    except ValueError:
        return False, f"Invalid Integer. Got {raw}"
    if num <= 0:
        return False, f"Must be positive. Got {raw}"
    return True, ""


def validate_groups_format(raw: str) -> Tuple[bool, str]:
    if not GROUPS_RE.fullmatch(raw):
        return False, f"Invalid Groups format. Got {raw}"
    return True, ""


def groups_range_validator(total_groups: int) -> Validator:
    """Groups must be well formed and no token may exceed total_groups - 1."""
    highest = total_groups - 1

    def _validate(raw: str) -> Tuple[bool, str]:
        ok, msg = validate_groups_format(raw)
        if not ok:
            return ok, msg
        try:
            max_group = max_of(split_groups(raw))
        except ValueError:
            return False, "At least one group is required."
        if max_group > highest:
            return False, (
                f"The max group ({max_group}) exceeds the highest allowed "
                f"group ({highest}) for the configured total groups (total-1)."
            )
        return True, ""

    return _validate


def compose_validators(*validators: Validator) -> Validator:
    def _validate(raw: str) -> Tuple[bool, str]:
        for v in validators:
            ok, msg = v(raw)
            if not ok:
                return ok, msg
        return True, ""

    return _validate
