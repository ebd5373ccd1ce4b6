"""
Bignums - Arbitrary-precision unsigned integers

Unsigned integers of unbounded width stored as 64-bit limbs, with exact
addition and multiplication.
"""

__version__ = "0.1.0"

from bignums.addition import add, add_word
from bignums.arbint import ArbInt
from bignums.errors import InvalidInput, ResourceExhaustion
from bignums.multiplication import multiply, multiply_word
from bignums.util import error
from bignums.word import (
    HALF_BITS,
    WORD_BITS,
    WORD_MAX,
    add_with_overflow,
    leading_ones,
    leading_zeros,
    mul_word,
    split_word,
)

__all__ = [
    # ArbInt
    "ArbInt",
    # Addition
    "add",
    "add_word",
    # Multiplication
    "multiply",
    "multiply_word",
    # Errors
    "InvalidInput",
    "ResourceExhaustion",
    "error",
    # Word
    "HALF_BITS",
    "WORD_BITS",
    "WORD_MAX",
    "add_with_overflow",
    "leading_ones",
    "leading_zeros",
    "mul_word",
    "split_word",
]
