"""
Copyright (c) 2009 Satoshi Nakamoto
Distributed under the MIT/X11 software license

Arbitrary-precision unsigned integer built from 64-bit limbs
"""

from typing import List, Sequence

from bignums.errors import InvalidInput
from bignums.util import error
from bignums.word import (
    WORD_BITS,
    WORD_MAX,
    is_word,
    leading_ones,
    leading_zeros,
    word_bitstring,
)


def _strip_leading_zeros(buf: List[int]) -> List[int]:
    """Drop leading zero limbs, keeping at least one limb"""
    idx = 0
    while idx < len(buf) - 1 and buf[idx] == 0:
        idx += 1
    return buf[idx:] if idx else buf


class ArbInt:
    """
    Unsigned integer of unbounded width

    limbs holds the base-2**64 digits, most significant limb first, and
    length the number of limbs in use. Values are always canonical: the first
    limb is non-zero unless the value is zero, which is exactly [0].
    Arithmetic never mutates an operand; every result is a new value.
    """

    def __init__(self, value=0):
        if isinstance(value, ArbInt):
            self.limbs = value.limbs[:]
        elif isinstance(value, (list, tuple)):
            self.limbs = self._checked_limbs(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            if not is_word(value):
                raise InvalidInput(f"{value} does not fit in a {WORD_BITS}-bit word")
            self.limbs = [value]
        else:
            raise InvalidInput(f"Cannot build ArbInt from {type(value).__name__}")
        self.length = len(self.limbs)

    @staticmethod
    def _checked_limbs(seq: Sequence[int]) -> List[int]:
        if len(seq) == 0:
            raise InvalidInput("limb sequence is empty")
        for limb in seq:
            if not is_word(limb):
                raise InvalidInput(f"limb {limb!r} does not fit in a {WORD_BITS}-bit word")
        return _strip_leading_zeros(list(seq))

    @classmethod
    def _from_buffer(cls, buf: List[int]) -> "ArbInt":
        """Take ownership of a working buffer, normalizing it"""
        result = cls.__new__(cls)
        result.limbs = _strip_leading_zeros(buf)
        result.length = len(result.limbs)
        return result

    @classmethod
    def from_word(cls, w: int) -> "ArbInt":
        """One-limb value"""
        if not is_word(w):
            raise InvalidInput(f"{w!r} does not fit in a {WORD_BITS}-bit word")
        return cls._from_buffer([w])

    @classmethod
    def from_limbs(cls, seq: Sequence[int]) -> "ArbInt":
        """Canonical value from a most-significant-first limb sequence"""
        return cls._from_buffer(cls._checked_limbs(seq))

    @classmethod
    def from_int(cls, n: int) -> "ArbInt":
        """Convert a non-negative Python int"""
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidInput(f"Cannot convert {type(n).__name__} to ArbInt")
        if n < 0:
            raise InvalidInput("ArbInt is unsigned")
        buf = []
        while n:
            buf.append(n & WORD_MAX)
            n >>= WORD_BITS
        if not buf:
            buf.append(0)
        buf.reverse()
        return cls._from_buffer(buf)

    @classmethod
    def zero(cls) -> "ArbInt":
        return cls._from_buffer([0])

    @classmethod
    def one(cls) -> "ArbInt":
        return cls._from_buffer([1])

    def to_int(self) -> int:
        """Convert to a Python int"""
        n = 0
        for limb in self.limbs:
            n = (n << WORD_BITS) | limb
        return n

    def __int__(self):
        return self.to_int()

    def is_zero(self) -> bool:
        return self.length == 1 and self.limbs[0] == 0

    def is_one(self) -> bool:
        return self.length == 1 and self.limbs[0] == 1

    def __bool__(self):
        return not self.is_zero()

    def leading_zero_bits(self) -> int:
        """Leading 0 bits of the most significant limb only"""
        return leading_zeros(self.limbs[0])

    def leading_one_bits(self) -> int:
        """Leading 1 bits of the most significant limb only"""
        return leading_ones(self.limbs[0])

    def bit_length(self) -> int:
        """Number of bits needed to represent the value (0 for zero)"""
        return self.length * WORD_BITS - self.leading_zero_bits()

    def is_canonical(self) -> bool:
        """Check the representation invariants"""
        if self.length != len(self.limbs):
            return error(
                "ArbInt.is_canonical() : length %d does not match %d limbs",
                self.length,
                len(self.limbs),
            )
        if self.length == 0:
            return error("ArbInt.is_canonical() : no limbs")
        for limb in self.limbs:
            if not is_word(limb):
                return error("ArbInt.is_canonical() : limb %r is not a word", limb)
        if self.length > 1 and self.limbs[0] == 0:
            return error("ArbInt.is_canonical() : leading zero limb in %s", self.limbs)
        return True

    def deep_copy(self) -> "ArbInt":
        """Independent copy with its own limb list"""
        return ArbInt(self)

    def __copy__(self):
        return self.deep_copy()

    def __deepcopy__(self, memo):
        return self.deep_copy()

    def __eq__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return self.to_int() == other
        if isinstance(other, ArbInt):
            return self.length == other.length and self.limbs == other.limbs
        return NotImplemented

    def _compare(self, other):
        """Return -1, 0 or 1, or None for unsupported types"""
        if isinstance(other, int) and not isinstance(other, bool):
            value = self.to_int()
            if value == other:
                return 0
            return -1 if value < other else 1
        if not isinstance(other, ArbInt):
            return None
        # Canonical form: more limbs means a larger value
        if self.length != other.length:
            return -1 if self.length < other.length else 1
        for a, b in zip(self.limbs, other.limbs):
            if a != b:
                return -1 if a < b else 1
        return 0

    def __lt__(self, other):
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other):
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other):
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other):
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result >= 0

    def __add__(self, other):
        from bignums.addition import add

        if not isinstance(other, (ArbInt, int)) or isinstance(other, bool):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        return self.__add__(other)

    def __mul__(self, other):
        from bignums.multiplication import multiply

        if not isinstance(other, (ArbInt, int)) or isinstance(other, bool):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def bitstring(self) -> str:
        """Bit patterns of every limb, most significant limb first"""
        return "".join(word_bitstring(limb) for limb in self.limbs)

    def __str__(self):
        return f"{self.length}:{self.limbs}"

    def __repr__(self):
        return f"ArbInt({self.limbs})"

    def __hash__(self):
        # Equal to the int of the same value, so hash like it
        return hash(self.to_int())
