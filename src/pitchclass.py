### this module contains the PitchClass class, the modular integer type that
### every other part of the library computes with.
### a PitchClass is one of the twelve chromatic positions 0-11, where C is 0,
### and all arithmetic between PitchClasses wraps around the octave.

from .util import unique
from . import _settings

from functools import total_ordering


@total_ordering
class PitchClass:
    """a pitch class: a position in the chromatic octave from 0 to 11,
    ignoring octave. addition, subtraction and multiplication are all
    performed modulo 12, negation is the identity, and enumeration is
    cyclic, so that the successor of 11 is 0 and the predecessor of 0 is 11."""

    span_size = 12 # semitones per octave
    min_value = 0
    max_value = 11

    def __init__(self, value=0):
        """value can be any int (which is reduced modulo 12, with negative
        values mapped onto their positive representative), another PitchClass,
        or anything else that casts to int, such as a NoteName."""
        if isinstance(value, PitchClass):
            value = value.value
        elif isinstance(value, float):
            raise TypeError(f'PitchClass must be initialised with an integer, not a float: {value}')
        self.value = int(value) % self.span_size

    @staticmethod
    def _operand(other):
        """cast the other side of an arithmetic operation to int"""
        if isinstance(other, (int, PitchClass)):
            return int(other)
        else:
            raise TypeError(f'PitchClass arithmetic is only defined with ints and other PitchClasses, not {type(other)}')

    #### modular arithmetic:
    def __add__(self, other):
        return PitchClass(self.value + self._operand(other))

    def __radd__(self, other):
        return PitchClass(self._operand(other) + self.value)

    def __sub__(self, other):
        return PitchClass(self.value - self._operand(other))

    def __rsub__(self, other):
        return PitchClass(self._operand(other) - self.value)

    def __mul__(self, other):
        return PitchClass(self.value * self._operand(other))

    def __rmul__(self, other):
        return PitchClass(self._operand(other) * self.value)

    def __neg__(self):
        # pitch classes are self-inverse under this representation:
        return self

    def __abs__(self):
        return self

    def _divisor(self, other):
        """validates the right-hand side of a division or modulo"""
        divisor = self._operand(other)
        if divisor == 0:
            raise ZeroDivisionError(f'{self!r} cannot be divided by zero')
        if divisor == -1 and self.value == self.min_value:
            raise ZeroDivisionError(f'{self!r} cannot be divided by -1 at the minimum pitch class')
        return divisor

    def __floordiv__(self, other):
        return PitchClass(self.value // self._divisor(other))

    def __mod__(self, other):
        return PitchClass(self.value % self._divisor(other))

    def __divmod__(self, other):
        quot, rem = divmod(self.value, self._divisor(other))
        return PitchClass(quot), PitchClass(rem)

    #### cyclic enumeration:
    def succ(self):
        """the next pitch class up, wrapping from 11 back to 0"""
        if self.value == self.max_value:
            return PitchClass(self.min_value)
        return PitchClass(self.value + 1)

    def pred(self):
        """the next pitch class down, wrapping from 0 up to 11"""
        if self.value == self.min_value:
            return PitchClass(self.max_value)
        return PitchClass(self.value - 1)

    #### casting and comparison:
    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __eq__(self, other):
        if isinstance(other, PitchClass):
            return self.value == other.value
        elif isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, (PitchClass, int)):
            return self.value < int(other)
        return NotImplemented

    def __hash__(self):
        # hash-equivalent to the int of the same value:
        return hash(self.value)

    def __str__(self):
        return f'{self._marker}{self.value}'

    def __repr__(self):
        return f'P{self.value}'

    _marker = _settings.MARKERS['PitchClass']


MIN_PC = PitchClass(PitchClass.min_value)
MAX_PC = PitchClass(PitchClass.max_value)


def pc(x):
    """convert any integral value (or a NoteName) into a PitchClass"""
    if isinstance(x, PitchClass):
        return x
    return PitchClass(int(x))

def pc_set(xs):
    """put a sequence of integers into a pitch class set (represented as a list),
    dropping repeats but keeping the order of first occurrence"""
    return unique([pc(x) for x in xs])

def integer(x):
    """project a PitchClass, NoteName or int onto a plain int between 0 and 11"""
    return pc(x).value

def integers(xs):
    """as integer, but over a whole sequence"""
    return [integer(x) for x in xs]
