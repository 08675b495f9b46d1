#!/usr/bin/python3

"""Numeric kinds and the promotion order between them.

Everything here works on plain values.  Boxes are unwrapped by the caller
before a value gets this far.
"""

import enum
import fractions
import numbers

from .errors import TypeMismatch

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

class Kind(enum.IntEnum):
    """The five kinds a box can hold, in promotion order.  A binary
    operation between two kinds is carried out in the higher one."""
    BOOL = 0
    INTEGER = 1
    RATIONAL = 2
    REAL = 3
    COMPLEX = 4

# Python type each kind is carried in
NATIVE = {
    Kind.BOOL: bool,
    Kind.INTEGER: int,
    Kind.RATIONAL: fractions.Fraction,
    Kind.REAL: float,
    Kind.COMPLEX: complex,
}

def kind_of(y):
    "Kind of the plain value y.  Raises TypeMismatch for non-numbers."
    # bool is an Integral too, so it goes first
    if isinstance(y, bool):
        return Kind.BOOL
    if isinstance(y, numbers.Integral):
        return Kind.INTEGER
    if isinstance(y, numbers.Rational):
        return Kind.RATIONAL
    if isinstance(y, numbers.Real):
        return Kind.REAL
    if isinstance(y, numbers.Complex):
        return Kind.COMPLEX
    raise TypeMismatch('%r is not a numeric value' % (y,))

def coerce(y, kind):
    "Carry plain y in the native type of kind.  kind must not rank below y."
    if kind == Kind.BOOL:
        return bool(y)
    if kind == Kind.INTEGER:
        return int(y)
    if kind == Kind.RATIONAL:
        if isinstance(y, fractions.Fraction):
            return y
        return fractions.Fraction(y.numerator, y.denominator)
    return NATIVE[kind](y)

def _in_int64(n):
    return INT64_MIN <= n <= INT64_MAX

def represent(y, kind):
    """Convert plain y into the native type of kind without losing
    anything: y must not rank above kind, booleans only go into BOOL,
    and integer parts must fit in 64 signed bits."""
    k = kind_of(y)
    if kind == Kind.BOOL and k != Kind.BOOL:
        raise TypeMismatch('%r is not a boolean' % (y,))
    if k > kind:
        raise TypeMismatch('%r does not fit in kind %s' % (y, kind.name))

    n = coerce(y, kind)
    if kind == Kind.INTEGER and not _in_int64(n):
        raise TypeMismatch('%d is outside the 64-bit integer range' % n)
    if kind == Kind.RATIONAL and not (_in_int64(n.numerator) and
                                      _in_int64(n.denominator)):
        raise TypeMismatch('%s is outside the 64-bit rational range' % n)
    return n

def promote(y, z, floor=Kind.BOOL):
    """Return (kind, y, z) with y and z carried in the higher of their two
    kinds, and never below floor."""
    kind = max(kind_of(y), kind_of(z), floor)
    return kind, coerce(y, kind), coerce(z, kind)
