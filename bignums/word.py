"""
Copyright (c) 2009 Satoshi Nakamoto
Distributed under the MIT/X11 software license

Machine word model - 64-bit unsigned limbs and checked word arithmetic
"""

from typing import Tuple

WORD_BITS = 64
WORD_MAX = (1 << WORD_BITS) - 1

# Half-word split used by multiplication
HALF_BITS = WORD_BITS // 2
HALF_MASK = (1 << HALF_BITS) - 1


def is_word(value) -> bool:
    """Check that value is an int in [0, WORD_MAX]"""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= WORD_MAX


def add_with_overflow(a: int, b: int) -> Tuple[int, bool]:
    """
    Add two words, wrapping at the word width

    Returns:
        (sum modulo 2**WORD_BITS, True if the addition wrapped)
    """
    n = a + b
    return n & WORD_MAX, n > WORD_MAX


def split_word(w: int) -> Tuple[int, int]:
    """Split word into (upper, lower) halves"""
    return w >> HALF_BITS, w & HALF_MASK


def mul_word(a: int, b: int) -> Tuple[int, int]:
    """
    Full product of two words as (high, low)

    Each operand is split into halves so the four partial products fit in
    one word. The cross terms are shifted up by half a word into the low
    word; their upper halves and the overflow flags go into the high word.
    """
    upp_a, low_a = split_word(a)
    upp_b, low_b = split_word(b)

    low_low = low_a * low_b
    upp_low = upp_a * low_b
    low_upp = low_a * upp_b
    upp_upp = upp_a * upp_b

    low, cry1 = add_with_overflow(low_low, (upp_low << HALF_BITS) & WORD_MAX)
    low, cry2 = add_with_overflow(low, (low_upp << HALF_BITS) & WORD_MAX)

    # Cannot overflow: a * b < 2**(2 * WORD_BITS)
    high = upp_upp + (upp_low >> HALF_BITS) + (low_upp >> HALF_BITS) + cry1 + cry2
    return high, low


def leading_zeros(w: int) -> int:
    """Number of leading 0 bits in a word"""
    return WORD_BITS - w.bit_length()


def leading_ones(w: int) -> int:
    """Number of leading 1 bits in a word"""
    return WORD_BITS - (~w & WORD_MAX).bit_length()


def word_bitstring(w: int) -> str:
    """Bit pattern of a word, most significant bit first"""
    return format(w, "0%db" % WORD_BITS)
