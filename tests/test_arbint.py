"""
Tests for ArbInt representation and normalization
"""

import copy

from .context import bignums

WORD_MAX = bignums.WORD_MAX


def test_arbint_from_word():
    """Test one-limb construction"""
    a = bignums.ArbInt.from_word(42)
    assert a.limbs == [42]
    assert a.length == 1

    b = bignums.ArbInt(42)
    assert a == b

    z = bignums.ArbInt()
    assert z.limbs == [0]
    assert z.is_zero()


def test_arbint_from_word_out_of_range():
    """Test rejection of values wider than a word"""
    for value in (-1, WORD_MAX + 1):
        try:
            bignums.ArbInt.from_word(value)
            assert False, "Should have raised InvalidInput"
        except bignums.InvalidInput:
            pass


def test_arbint_from_limbs_normalizes():
    """Test leading zero limbs are stripped"""
    a = bignums.ArbInt.from_limbs([0, 0, 7, 0])
    assert a.limbs == [7, 0]
    assert a.length == 2

    z = bignums.ArbInt.from_limbs([0, 0, 0])
    assert z.limbs == [0]
    assert z.length == 1
    assert z == bignums.ArbInt.zero()


def test_arbint_from_limbs_empty():
    """Test empty limb sequence is rejected"""
    try:
        bignums.ArbInt.from_limbs([])
        assert False, "Should have raised InvalidInput"
    except bignums.InvalidInput:
        pass

    # InvalidInput is a ValueError
    try:
        bignums.ArbInt([])
        assert False, "Should have raised ValueError"
    except ValueError:
        pass


def test_arbint_from_limbs_bad_limb():
    """Test limbs outside the word range are rejected"""
    for seq in ([1, WORD_MAX + 1], [-3], [1, "2"]):
        try:
            bignums.ArbInt.from_limbs(seq)
            assert False, "Should have raised InvalidInput"
        except bignums.InvalidInput:
            pass


def test_arbint_bad_type():
    """Test unsupported constructor argument"""
    try:
        bignums.ArbInt("12")
        assert False, "Should have raised InvalidInput"
    except bignums.InvalidInput:
        pass


def test_arbint_round_trip():
    """Test from_limbs reproduces canonical limbs"""
    for seq in ([1], [WORD_MAX, 0, 5], [3, WORD_MAX, WORD_MAX, 0]):
        a = bignums.ArbInt.from_limbs(seq)
        assert a.limbs == seq
        assert bignums.ArbInt.from_limbs(a.limbs) == a

    # Tuples are accepted, the stored limbs are a list
    b = bignums.ArbInt.from_limbs((0, 9, 8))
    assert b.limbs == [9, 8]


def test_arbint_int_conversion():
    """Test conversion to and from Python int"""
    n = (5 << 128) | (WORD_MAX << 64) | 17
    a = bignums.ArbInt.from_int(n)
    assert a.limbs == [5, WORD_MAX, 17]
    assert a.to_int() == n
    assert int(a) == n

    assert bignums.ArbInt.from_int(0) == bignums.ArbInt.zero()
    assert bignums.ArbInt.from_int(WORD_MAX).limbs == [WORD_MAX]
    assert bignums.ArbInt.from_int(WORD_MAX + 1).limbs == [1, 0]

    try:
        bignums.ArbInt.from_int(-1)
        assert False, "Should have raised InvalidInput"
    except bignums.InvalidInput:
        pass


def test_arbint_predicates():
    """Test zero/one predicates"""
    assert bignums.ArbInt.zero().is_zero()
    assert not bignums.ArbInt.zero().is_one()
    assert bignums.ArbInt.one().is_one()
    assert not bignums.ArbInt.one().is_zero()

    # A one in the low limb of a wider value is not one
    a = bignums.ArbInt.from_limbs([1, 1])
    assert not a.is_one()
    assert not a.is_zero()
    assert a
    assert not bignums.ArbInt.zero()


def test_arbint_leading_bits():
    """Test leading bit counts look at the top limb only"""
    a = bignums.ArbInt.from_limbs([1, WORD_MAX])
    assert a.leading_zero_bits() == 63
    assert a.leading_one_bits() == 0

    b = bignums.ArbInt.from_limbs([0xFF00000000000000, 0])
    assert b.leading_zero_bits() == 0
    assert b.leading_one_bits() == 8

    assert bignums.ArbInt.zero().leading_zero_bits() == 64


def test_arbint_bit_length():
    """Test bit length combines limb count and leading zeros"""
    assert bignums.ArbInt.zero().bit_length() == 0
    assert bignums.ArbInt.one().bit_length() == 1
    a = bignums.ArbInt.from_limbs([1, 0])
    assert a.bit_length() == 65
    assert a.bit_length() == a.to_int().bit_length()


def test_arbint_equality():
    """Test equality and hashing"""
    a = bignums.ArbInt.from_limbs([1, 2, 3])
    b = bignums.ArbInt.from_limbs([0, 1, 2, 3])
    c = bignums.ArbInt.from_limbs([1, 2, 4])

    assert a == b
    assert a != c
    assert hash(a) == hash(b)
    assert bignums.ArbInt(100) == 100
    assert a != 3
    assert a != "abc"


def test_arbint_hash_matches_int():
    """Test values equal to an int hash like it"""
    assert hash(bignums.ArbInt(100)) == hash(100)
    assert bignums.ArbInt(5) in {5}
    assert 5 in {bignums.ArbInt(5)}

    wide = bignums.ArbInt.from_limbs([1, 2, 3])
    assert hash(wide) == hash(wide.to_int())
    assert {wide: "x"}[wide.to_int()] == "x"


def test_arbint_compare_wide_int():
    """Test ints wider than a word compare by value"""
    a = bignums.ArbInt.from_int(WORD_MAX + 1)
    assert a == WORD_MAX + 1
    assert WORD_MAX + 1 == a
    assert a != WORD_MAX
    assert a < WORD_MAX + 2
    assert a > WORD_MAX
    assert a >= WORD_MAX + 1
    assert WORD_MAX < a
    assert a > -1
    assert a != -1


def test_arbint_compare_foreign_type():
    """Test unsupported types are not equal and cannot be ordered"""
    a = bignums.ArbInt(7)
    assert a.__eq__("7") is NotImplemented
    assert not (a == "7")
    assert a != 7.5

    try:
        a < "7"
        assert False, "Should have raised TypeError"
    except TypeError:
        pass


def test_arbint_comparison():
    """Test ordering"""
    small = bignums.ArbInt(WORD_MAX)
    big = bignums.ArbInt.from_limbs([1, 0])
    bigger = bignums.ArbInt.from_limbs([1, 1])

    assert small < big
    assert big < bigger
    assert bigger > small
    assert big <= big
    assert big >= small
    assert small > 5
    assert sorted([bigger, small, big]) == [small, big, bigger]


def test_arbint_copy():
    """Test copies are independent"""
    a = bignums.ArbInt.from_limbs([4, 5, 6])
    for b in (a.deep_copy(), copy.copy(a), copy.deepcopy(a), bignums.ArbInt(a)):
        assert b == a
        assert b.limbs is not a.limbs
        b.limbs[0] = 99
        assert a.limbs == [4, 5, 6]


def test_arbint_string():
    """Test debug and bit string representations"""
    a = bignums.ArbInt.from_limbs([1, 2])
    assert str(a) == "2:[1, 2]"
    assert repr(a) == "ArbInt([1, 2])"

    bits = a.bitstring()
    assert len(bits) == 128
    assert bits == "0" * 63 + "1" + "0" * 62 + "10"


def test_arbint_is_canonical(capsys):
    """Test invariant check reports violations"""
    assert bignums.ArbInt.from_limbs([0, 3]).is_canonical()
    assert bignums.ArbInt.zero().is_canonical()

    a = bignums.ArbInt.from_limbs([1, 2])
    a.limbs[0] = 0
    assert not a.is_canonical()
    assert "ERROR: ArbInt.is_canonical() : leading zero limb" in capsys.readouterr().out

    b = bignums.ArbInt.from_limbs([1, 2])
    b.limbs.append(3)
    assert not b.is_canonical()
    assert "length 2 does not match 3 limbs" in capsys.readouterr().out
