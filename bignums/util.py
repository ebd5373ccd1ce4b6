"""
Copyright (c) 2009 Satoshi Nakamoto
Distributed under the MIT/X11 software license

Utility functions - error reporting and limb buffer allocation
"""

from typing import List

from bignums.errors import ResourceExhaustion


def error(format_str: str, *args) -> bool:
    """
    Report a broken ArbInt invariant

    Prints "ERROR: " and the %-formatted message, then returns False so
    validators such as ArbInt.is_canonical() can `return error(...)` on the
    first limb or length violation they find.
    """
    try:
        message = format_str % args if args else format_str
    except (TypeError, ValueError):
        # Fallback if formatting fails
        message = format_str + " " + " ".join(str(arg) for arg in args)

    print(f"ERROR: {message}")
    return False


def alloc_limbs(n_size: int) -> List[int]:
    """Allocate a zeroed working buffer of n_size limbs"""
    try:
        return [0] * n_size
    except MemoryError as e:
        raise ResourceExhaustion(f"cannot allocate {n_size} limbs") from e
