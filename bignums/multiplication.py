"""
Copyright (c) 2009 Satoshi Nakamoto
Distributed under the MIT/X11 software license

Multiplication of big integers and machine words

Machine-word products can overflow a single word, so every limb is split
into halves. For limbs aa|bb and cc|dd the partial products land as

            #bd
         #|bc
         #|ad
       #ac|
     -----------
       #oo|ffff

where ffff is the low result word and #oo the part carried into the next
limb. Each half-word product fits in one word; only the accumulation into
the result limbs needs explicit carry tracking.
"""

from bignums.arbint import ArbInt
from bignums.errors import InvalidInput
from bignums.util import alloc_limbs
from bignums.word import (
    HALF_BITS,
    WORD_BITS,
    WORD_MAX,
    add_with_overflow,
    is_word,
    mul_word,
    split_word,
)


def multiply_word(a: ArbInt, w: int, legacy_carry: bool = False) -> ArbInt:
    """
    Multiply a big integer by a single word

    Args:
        a: Big integer factor
        w: Word factor
        legacy_carry: Reproduce the carry count of the first release of this
            routine, which counted the first overflow flag twice and ignored
            the overflow from adding the running carry. Only for comparing
            against output produced by that release; results are wrong
            whenever the two flags differ. When w and the top limb both fit
            in half a word, the top limb cannot set either flag, so the final
            carry is zero in both modes.

    Returns:
        Canonical product
    """
    if not is_word(w):
        raise InvalidInput(f"{w!r} does not fit in a {WORD_BITS}-bit word")
    if w == 1:
        return a.deep_copy()
    if w == 0 or a.is_zero():
        return ArbInt.zero()

    upp_b, low_b = split_word(w)

    n_size = a.length + 1
    c = alloc_limbs(n_size)

    carry = 0
    for idx in range(a.length):
        upp_a, low_a = split_word(a.limbs[a.length - 1 - idx])

        low_low = low_a * low_b
        upp_low = upp_a * low_b
        low_upp = low_a * upp_b
        upp_upp = upp_a * upp_b

        tmp, cry1 = add_with_overflow(low_low, (upp_low << HALF_BITS) & WORD_MAX)
        tmp, cry2 = add_with_overflow(tmp, (low_upp << HALF_BITS) & WORD_MAX)
        tmp, cry3 = add_with_overflow(tmp, carry)
        c[n_size - 1 - idx] = tmp

        if legacy_carry:
            carry = cry1 + cry2 + cry1
        else:
            carry = cry1 + cry2 + cry3

        # Only upper halves are added here, the sum stays within one word
        carry += (upp_low >> HALF_BITS) + (low_upp >> HALF_BITS) + upp_upp
        if legacy_carry:
            # The doubled flag can push the count to 2**64, which wrapped
            carry &= WORD_MAX

    c[0] = carry

    return ArbInt._from_buffer(c)


def multiply(a, b) -> ArbInt:
    """
    Multiply two big integers, or a big integer and a word

    The operand with more limbs is used as the first factor.
    """
    if isinstance(b, int) and not isinstance(b, bool):
        if not isinstance(a, ArbInt):
            raise TypeError(f"Cannot multiply {type(a).__name__} and int")
        return multiply_word(a, b)
    if isinstance(a, int) and not isinstance(a, bool):
        if not isinstance(b, ArbInt):
            raise TypeError(f"Cannot multiply int and {type(b).__name__}")
        return multiply_word(b, a)
    if not isinstance(a, ArbInt) or not isinstance(b, ArbInt):
        raise TypeError(f"Cannot multiply {type(a).__name__} and {type(b).__name__}")

    if a.length > b.length:
        return _mul(a, b)
    return _mul(b, a)


def _mul(a: ArbInt, b: ArbInt) -> ArbInt:
    # b.length <= a.length is guaranteed
    if b.is_one():
        return a.deep_copy()
    if a.is_one():
        return b.deep_copy()
    if a.is_zero() or b.is_zero():
        return ArbInt.zero()

    # Working buffer is least significant limb first, reversed at the end
    n_size = a.length + b.length
    acc = alloc_limbs(n_size)

    for idx_b in range(b.length):
        b_el = b.limbs[b.length - 1 - idx_b]
        if b_el == 0:
            continue

        for idx_a in range(a.length):
            high, low = mul_word(a.limbs[a.length - 1 - idx_a], b_el)
            pos = idx_a + idx_b

            acc[pos], cry_low = add_with_overflow(acc[pos], low)
            acc[pos + 1], cry_high = add_with_overflow(acc[pos + 1], high)
            acc[pos + 1], cry_carry = add_with_overflow(acc[pos + 1], cry_low)

            # Adding the carry can wrap again; keep moving it left until absorbed
            carry = cry_high + cry_carry
            pos += 2
            while carry:
                acc[pos], wrapped = add_with_overflow(acc[pos], carry)
                carry = int(wrapped)
                pos += 1

    acc.reverse()
    return ArbInt._from_buffer(acc)
