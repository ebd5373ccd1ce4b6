"""
Copyright (c) 2009 Satoshi Nakamoto
Distributed under the MIT/X11 software license

Addition of big integers and machine words
"""

from bignums.arbint import ArbInt
from bignums.errors import InvalidInput
from bignums.util import alloc_limbs
from bignums.word import WORD_BITS, add_with_overflow, is_word


def add_word(a: ArbInt, w: int) -> ArbInt:
    """
    Add a single word to a big integer

    The result buffer gets one extra leading limb for a carry out of the
    most significant limb; it is dropped again when unused.
    """
    if not is_word(w):
        raise InvalidInput(f"{w!r} does not fit in a {WORD_BITS}-bit word")
    if w == 0:
        return a.deep_copy()

    n_size = a.length + 1
    c = alloc_limbs(n_size)
    c[-1], carry = add_with_overflow(a.limbs[-1], w)

    # c[-1] is done, walk the remaining limbs towards the most significant one
    idx = 1
    while idx < a.length:
        if carry:
            c[n_size - 1 - idx], carry = add_with_overflow(a.limbs[a.length - 1 - idx], 1)
        else:
            c[n_size - 1 - idx] = a.limbs[a.length - 1 - idx]
        idx += 1

    if carry:
        c[0] = 1

    return ArbInt._from_buffer(c)


def add(a, b) -> ArbInt:
    """
    Add two big integers, or a big integer and a word

    The operand with more limbs is used as the augend.
    """
    if isinstance(b, int) and not isinstance(b, bool):
        if not isinstance(a, ArbInt):
            raise TypeError(f"Cannot add {type(a).__name__} and int")
        return add_word(a, b)
    if isinstance(a, int) and not isinstance(a, bool):
        if not isinstance(b, ArbInt):
            raise TypeError(f"Cannot add int and {type(b).__name__}")
        return add_word(b, a)
    if not isinstance(a, ArbInt) or not isinstance(b, ArbInt):
        raise TypeError(f"Cannot add {type(a).__name__} and {type(b).__name__}")

    if a.length >= b.length:
        return _add(a, b)
    return _add(b, a)


def _add(a: ArbInt, b: ArbInt) -> ArbInt:
    # b.length <= a.length is guaranteed
    if b.is_zero():
        return a.deep_copy()
    if a.is_zero():
        return b.deep_copy()

    n_size = a.length + 1
    c = alloc_limbs(n_size)

    carry = False
    for idx in range(a.length):
        limb_a = a.limbs[a.length - 1 - idx]
        if idx < b.length:
            elem, carry_elems = add_with_overflow(limb_a, b.limbs[b.length - 1 - idx])
            if carry:
                # Either adding the limbs or adding the previous carry may wrap
                elem, carry_one = add_with_overflow(elem, 1)
                carry = carry_elems or carry_one
            else:
                carry = carry_elems
        elif carry:
            elem, carry = add_with_overflow(limb_a, 1)
        else:
            elem = limb_a
        c[n_size - 1 - idx] = elem

    if carry:
        c[0] = 1

    return ArbInt._from_buffer(c)
