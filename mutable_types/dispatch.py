#!/usr/bin/python3

"""One function per operator, on plain values.

Each function checks the operand kinds against the range the operator
accepts, promotes both operands to the higher kind (see kinds.Kind) and
applies the native Python operation.  The boxes in mutable_number unwrap
themselves and call in here, so the result is always a plain value.
"""

import cmath
import math

from .errors import TypeMismatch, InvalidArgument, DivideByZero
from .kinds import Kind, kind_of, coerce, promote

# Relative tolerance of approx_equal: single-precision machine epsilon,
# i.e. agreement to the precision of a 32-bit float.
APPROX_RTOL = 2.0 ** -23

def check(op, y, low=Kind.BOOL, high=Kind.COMPLEX):
    "Kind of y, or TypeMismatch if it lies outside [low, high] for op."
    k = kind_of(y)
    if not low <= k <= high:
        raise TypeMismatch('%s does not accept the %s operand %r'
                           % (op, k.name.lower(), y))
    return k

def _operands(op, y, z, floor=Kind.INTEGER, high=Kind.COMPLEX):
    check(op, y, high=high)
    check(op, z, high=high)
    return promote(y, z, floor)

# Comparisons

def eq(y, z): return y == z
def ne(y, z): return y != z

def _ordered(op, y, z):
    check(op, y, high=Kind.REAL)
    check(op, z, high=Kind.REAL)

# Mixed kinds compare exactly in Python, so the operands are not coerced.
def lt(y, z):
    _ordered('<', y, z)
    return y < z

def le(y, z):
    _ordered('<=', y, z)
    return y <= z

def gt(y, z):
    _ordered('>', y, z)
    return y > z

def ge(y, z):
    _ordered('>=', y, z)
    return y >= z

def approx_equal(y, z):
    """True when y and z agree to single (32-bit) floating-point precision.
    At least one operand must be real or complex."""
    ky = check('approx_equal', y, low=Kind.INTEGER)
    kz = check('approx_equal', z, low=Kind.INTEGER)
    kind = max(ky, kz)
    if kind < Kind.REAL:
        raise TypeMismatch('approx_equal needs a real or complex operand, '
                           'got %r and %r' % (y, z))
    if kind == Kind.COMPLEX:
        return cmath.isclose(complex(y), complex(z), rel_tol=APPROX_RTOL)
    return math.isclose(float(y), float(z), rel_tol=APPROX_RTOL)

# Arithmetic

def add(y, z):
    kind, y, z = _operands('+', y, z)
    return y + z

def sub(y, z):
    kind, y, z = _operands('-', y, z)
    return y - z

def mul(y, z):
    kind, y, z = _operands('*', y, z)
    return y * z

def _integer_operands(op, y, z):
    kind, y, z = _operands(op, y, z, high=Kind.INTEGER)
    if z == 0:
        raise DivideByZero('integer %s by zero' % op)
    return y, z

def _truncated(y, z):
    # quotient rounds toward zero; remainder takes the sign of y
    q = abs(y) // abs(z)
    if (y < 0) != (z < 0):
        q = -q
    return q, y - q * z

def floordiv(y, z):
    "Integer quotient, truncated toward zero."
    y, z = _integer_operands('//', y, z)
    return _truncated(y, z)[0]

def mod(y, z):
    "Integer remainder, with the sign of the dividend."
    y, z = _integer_operands('%', y, z)
    return _truncated(y, z)[1]

def divmod_(y, z):
    y, z = _integer_operands('divmod', y, z)
    return _truncated(y, z)

def rational_divide(y, z):
    "Exact division of integers or rationals, giving a Fraction."
    kind, y, z = _operands('rational_divide', y, z,
                           floor=Kind.RATIONAL, high=Kind.RATIONAL)
    if z == 0:
        raise DivideByZero('rational division by zero')
    return y / z

def _real_divide_by_zero(y, z):
    if y == 0 or math.isnan(y):
        return math.nan
    return math.copysign(math.inf, y) * math.copysign(1.0, z)

def truediv(y, z):
    """Real or complex division.  Dividing by zero gives IEEE infinities
    and NaNs instead of raising."""
    kind, y, z = _operands('/', y, z, floor=Kind.REAL)
    if z != 0:
        return y / z
    if kind == Kind.COMPLEX:
        return complex(_real_divide_by_zero(y.real, z.real),
                       _real_divide_by_zero(y.imag, z.real))
    return _real_divide_by_zero(y, z)

def _is_odd_integer(x):
    return x.is_integer() and x % 2 == 1

def _real_power(y, z):
    if y == 0 and z < 0:
        if _is_odd_integer(z):
            return math.copysign(math.inf, y)
        return math.inf
    if y < 0 and math.isfinite(z) and not z.is_integer():
        raise InvalidArgument('%r ** %r is not a real number' % (y, z))
    try:
        return y ** z
    except OverflowError:
        if y < 0 and _is_odd_integer(z):
            return -math.inf
        return math.inf

def pow_(y, z, modulo=None):
    """Exponentiation.  An integer base keeps integer results and refuses
    negative exponents; a rational base keeps rational results for integer
    exponents and falls back to real arithmetic otherwise."""
    if modulo is not None:
        check('pow', modulo, high=Kind.INTEGER)
        kind, y, z = _operands('pow', y, z, high=Kind.INTEGER)
        try:
            return pow(y, z, int(modulo))
        except ValueError as e:
            raise InvalidArgument(str(e)) from e

    kz = check('**', z)
    kind, y, z = _operands('**', y, z)
    if kind == Kind.INTEGER:
        if z < 0:
            raise InvalidArgument('integer %d raised to negative power %d'
                                  % (y, z))
        return y ** z
    if kind == Kind.RATIONAL:
        if kz <= Kind.INTEGER:
            if y == 0 and z < 0:
                raise DivideByZero('zero raised to negative power %s' % z)
            return y ** int(z)
        kind = Kind.REAL
        y, z = coerce(y, kind), coerce(z, kind)
    if kind == Kind.REAL:
        return _real_power(y, z)
    try:
        return y ** z
    except ZeroDivisionError as e:
        raise DivideByZero('complex zero raised to %r' % z) from e

# Logical and bitwise

def _bitwise(op, y, z):
    if kind_of(y) == Kind.BOOL and kind_of(z) == Kind.BOOL:
        return Kind.BOOL, y, z
    return _operands(op, y, z, high=Kind.INTEGER)

def and_(y, z):
    kind, y, z = _bitwise('&', y, z)
    return y & z

def or_(y, z):
    kind, y, z = _bitwise('|', y, z)
    return y | z

def xor(y, z):
    kind, y, z = _bitwise('^', y, z)
    return y ^ z

def lshift(y, z):
    kind, y, z = _operands('<<', y, z, high=Kind.INTEGER)
    return y << z

def rshift(y, z):
    kind, y, z = _operands('>>', y, z, high=Kind.INTEGER)
    return y >> z

# Unary

def invert(y):
    "Logical not for booleans, bitwise invert for integers."
    if check('~', y, high=Kind.INTEGER) == Kind.BOOL:
        return not y
    return ~y

def _unary(op, y):
    return coerce(y, max(check(op, y), Kind.INTEGER))

def neg(y): return -_unary('-', y)
def pos(y): return +_unary('+', y)
def abs_(y): return abs(_unary('abs', y))
