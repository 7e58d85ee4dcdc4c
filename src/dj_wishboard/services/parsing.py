"""Parsing of loosely typed form and JSON input.

Clients send settings either as JSON booleans/numbers or as form strings, so
each field gets an explicit truth table here.

=====================  ==========  ==========  =============
input                  create      update      active flag
=====================  ==========  ==========  =============
(field absent)         True        unchanged   n/a
``True``               True        True        True
``"true"``             True        True        True
``1`` / ``"1"``        False       False       True
anything else          False       False       False
=====================  ==========  ==========  =============
"""

import math

MISSING = object()


def parse_create_flag(value: object = MISSING) -> bool:
    """Parse a boolean setting on session creation; absent means enabled."""
    if value is MISSING:
        return True
    return parse_update_flag(value)


def parse_update_flag(value: object) -> bool:
    """Parse a boolean setting that was explicitly provided."""
    if isinstance(value, bool):
        return value
    return value == "true"


def parse_active_flag(value: object) -> bool:
    """Parse the session active toggle."""
    if value is True or value in ("true", "1"):
        return True
    if isinstance(value, int | float) and not isinstance(value, bool):
        return value == 1
    return False


def parse_wish_limit(value: object) -> int:
    """Coerce the per-guest wish limit; non-numeric or non-positive means 0.

    Fractions round up: a limit of 1.5 lets a guest submit twice.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            return 0
        try:
            number = float(cleaned)
        except ValueError:
            return 0
    else:
        return 0
    if not math.isfinite(number) or number <= 0:
        return 0
    return math.ceil(number)
