#!/usr/bin/python3

"""Math functions that accept boxes as well as plain numbers.

Every function unwraps its arguments and returns a plain number.  Complex
input goes through cmath and gives a complex result; integer, rational
and real input goes through math and gives a float.  A real argument
outside a function's domain raises InvalidArgument rather than silently
turning complex; overflow and poles such as log(0.0) give a signed
infinity.
"""

import cmath
import fractions
import logging
import math

from . import dispatch
from .errors import InvalidArgument
from .kinds import Kind
from .mutable_number import numeric

logger = logging.getLogger(__name__)

def _arg(name, y, high=Kind.COMPLEX):
    y = numeric(y)
    return y, dispatch.check(name, y, low=Kind.INTEGER, high=high)

def _real_call(name, fn, *args, odd=False):
    try:
        return fn(*args)
    except ValueError as e:
        logger.debug('%s%r outside the real domain: %s', name, args, e)
        raise InvalidArgument('%s%r: %s' % (name, args, e)) from e
    except OverflowError as e:
        logger.debug('%s%r overflowed: %s', name, args, e)
        if odd:
            return math.copysign(math.inf, args[0])
        return math.inf

def _forward(name, real_fn, complex_fn, poles=None, odd=False):
    # poles maps a real argument to the infinity returned there
    poles = poles or {}
    def forwarded(y):
        y, kind = _arg(name, y)
        if kind == Kind.COMPLEX:
            return complex_fn(y)
        x = float(y)
        if x in poles:
            return poles[x]
        return _real_call(name, real_fn, x, odd=odd)
    forwarded.__name__ = name
    forwarded.__qualname__ = name
    forwarded.__doc__ = ('%s of a plain or boxed number.  Complex in, '
                         'complex out; otherwise a float.' % name)
    return forwarded

# Operators without a Python spelling

def approx_equal(y, z):
    "True when y and z agree to at least single (32-bit) float precision."
    return dispatch.approx_equal(numeric(y), numeric(z))

def rational_divide(y, z):
    "Exact division of integers or rationals, giving a Fraction."
    return dispatch.rational_divide(numeric(y), numeric(z))

# All numeric kinds

def sign(y):
    """-1, 0 or 1 in the kind of y.  A complex y gives y/abs(y), or 0 for
    zero.  NaN and signed zeros pass through for reals."""
    y, kind = _arg('sign', y)
    if kind == Kind.COMPLEX:
        return y / abs(y) if y else 0j
    if kind == Kind.REAL:
        if y == 0 or math.isnan(y):
            return y
        return math.copysign(1.0, y)
    s = (y > 0) - (y < 0)
    if kind == Kind.RATIONAL:
        return fractions.Fraction(s)
    return s

# Rationals

def numerator(y):
    y, kind = _arg('numerator', y, high=Kind.RATIONAL)
    return y.numerator

def denominator(y):
    y, kind = _arg('denominator', y, high=Kind.RATIONAL)
    return y.denominator

# Rounding, non-complex kinds

def _rounded(name, fn, y):
    y, kind = _arg(name, y, high=Kind.REAL)
    if kind == Kind.REAL and not math.isfinite(y):
        return y
    return float(fn(y))

def round_(y):
    "Nearest integral value, as a float; halves go to even."
    return _rounded('round', round, y)

def ceil(y):
    return _rounded('ceil', math.ceil, y)

def floor(y):
    return _rounded('floor', math.floor, y)

def trunc(y):
    return _rounded('trunc', math.trunc, y)

# Non-complex kinds

def cbrt(y):
    y, kind = _arg('cbrt', y, high=Kind.REAL)
    return math.cbrt(float(y))

def atan2(y, x):
    "Inverse tangent of y/x in the quadrant given by the signs of both."
    y, ky = _arg('atan2', y, high=Kind.REAL)
    x, kx = _arg('atan2', x, high=Kind.REAL)
    return math.atan2(float(y), float(x))

# Complex accessors.  Non-complex numbers are complex with no imaginary part.

def abs2(y):
    "Squared magnitude."
    y, kind = _arg('abs2', y)
    if kind == Kind.COMPLEX:
        return y.real * y.real + y.imag * y.imag
    return y * y

def real(y):
    y, kind = _arg('real', y)
    return y.real

def imag(y):
    y, kind = _arg('imag', y)
    return y.imag

def conj(y):
    y, kind = _arg('conj', y)
    return y.conjugate()

def angle(y):
    "Phase angle in radians."
    y, kind = _arg('angle', y)
    return cmath.phase(complex(y))

# Roots, trigonometric, hyperbolic, logarithms and exponentials

sqrt = _forward('sqrt', math.sqrt, cmath.sqrt)
sin = _forward('sin', math.sin, cmath.sin)
cos = _forward('cos', math.cos, cmath.cos)
tan = _forward('tan', math.tan, cmath.tan)
sinh = _forward('sinh', math.sinh, cmath.sinh, odd=True)
cosh = _forward('cosh', math.cosh, cmath.cosh)
tanh = _forward('tanh', math.tanh, cmath.tanh)
asin = _forward('asin', math.asin, cmath.asin)
acos = _forward('acos', math.acos, cmath.acos)
asinh = _forward('asinh', math.asinh, cmath.asinh)
acosh = _forward('acosh', math.acosh, cmath.acosh)
atanh = _forward('atanh', math.atanh, cmath.atanh,
                 poles={1.0: math.inf, -1.0: -math.inf})

def atan(y, x=None):
    "Inverse tangent of y, or of y/x (atan2) when x is given."
    if x is not None:
        return atan2(y, x)
    y, kind = _arg('atan', y)
    if kind == Kind.COMPLEX:
        return cmath.atan(y)
    return math.atan(float(y))

_LOG_POLE = {0.0: -math.inf}

log = _forward('log', math.log, cmath.log, poles=_LOG_POLE)
log2 = _forward('log2', math.log2, lambda z: cmath.log(z) / math.log(2),
               poles=_LOG_POLE)
log10 = _forward('log10', math.log10, cmath.log10, poles=_LOG_POLE)
exp = _forward('exp', math.exp, cmath.exp)
exp2 = _forward('exp2', math.exp2, lambda z: cmath.exp(z * math.log(2)))
exp10 = _forward('exp10', lambda x: 10.0 ** x,
                 lambda z: cmath.exp(z * math.log(10)))
