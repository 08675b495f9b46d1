#!/usr/bin/python3

import copy
import logging
import math
import numbers
import operator

from . import dispatch
from .errors import TypeMismatch
from .kinds import Kind, represent

logger = logging.getLogger(__name__)

def unwrap(y):
    "The plain value held by box y, or y itself when it is not a box."
    if isinstance(y, MutableType):
        return y._n
    return y

def numeric(y):
    "Unwrap an arithmetic operand.  Boolean boxes are not numbers here."
    if isinstance(y, MutableBool):
        raise TypeMismatch('%r takes no part in arithmetic' % (y,))
    return unwrap(y)

class MutableType(numbers.Number):

    """Emulate numeric types based on "_n" attribute, based on
    https://docs.python.org/3/reference/datamodel.html#basic-customization
    https://docs.python.org/3/reference/datamodel.html#emulating-numeric-types

    This is a mutable container for a number, meant to sit as a field
    inside an otherwise immutable structure (a frozen dataclass, a
    namedtuple) whose value still has to change at runtime.

    The current immutable number is the '_n' attribute.  It always has the
    kind named by the class attribute '_kind', and is only replaced
    through set(), which refuses values that would not fit.

    All the numeric type dunder methods unwrap their operands and hand
    them to the matching function in dispatch, so they return plain
    numbers, never boxes.  The in-place operators are the exception: they
    store the result back into the box.

    """

    _kind = None

    # Basic customization
    def __init__(self, n): self.set(n)
    def __repr__(self): return '%s(%r)' % (self.__class__.__name__, self._n)
    def __str__(self): return str(self._n)
    def __format__(self, format_spec):
        return self._n.__format__(format_spec)

    # mutable, so not hashable
    __hash__ = None

    def __bool__(self): return bool(self._n)

    # Accessors
    def get(self): return self._n

    def set(self, n):
        if self._kind is None:
            raise TypeMismatch('%s is abstract; use one of its subclasses'
                               % self.__class__.__name__)
        try:
            n = represent(unwrap(n), self._kind)
        except TypeMismatch:
            logger.debug('%s refused %r', self.__class__.__name__, n)
            raise
        self._n = n

    @property
    def value(self): return self._n
    @value.setter
    def value(self, n): self.set(n)

    # Copies.  The held value is an immutable number, so a shallow copy
    # is already a deep one.
    def copy(self): return self.__class__(self._n)
    def deepcopy(self): return self.__class__(copy.deepcopy(self._n))
    def __copy__(self): return self.copy()
    def __deepcopy__(self, memo): return self.deepcopy()

    def __eq__(self, other):
        other = unwrap(other)
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return dispatch.eq(self._n, other)
    def __ne__(self, other):
        other = unwrap(other)
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return dispatch.ne(self._n, other)

    def __lt__(self, other): return dispatch.lt(numeric(self), numeric(other))
    def __le__(self, other): return dispatch.le(numeric(self), numeric(other))
    def __gt__(self, other): return dispatch.gt(numeric(self), numeric(other))
    def __ge__(self, other): return dispatch.ge(numeric(self), numeric(other))

    # math functions
    def _rounding(self, op):
        return dispatch.check(op, numeric(self), low=Kind.INTEGER,
                              high=Kind.REAL)
    def __ceil__(self):
        self._rounding('ceil')
        return math.ceil(self._n)
    def __floor__(self):
        self._rounding('floor')
        return math.floor(self._n)
    def __trunc__(self):
        self._rounding('trunc')
        return math.trunc(self._n)
    def __round__(self, n=None):
        self._rounding('round')
        return round(self._n, n)

    # Binary arithmetic operations
    def __add__(self, other): return dispatch.add(numeric(self), numeric(other))
    def __sub__(self, other): return dispatch.sub(numeric(self), numeric(other))
    def __mul__(self, other): return dispatch.mul(numeric(self), numeric(other))
    def __truediv__(self, other): return dispatch.truediv(numeric(self), numeric(other))
    def __floordiv__(self, other): return dispatch.floordiv(numeric(self), numeric(other))
    def __mod__(self, other): return dispatch.mod(numeric(self), numeric(other))
    def __divmod__(self, other): return dispatch.divmod_(numeric(self), numeric(other))
    def __pow__(self, other, modulo=None):
        if modulo is not None:
            modulo = numeric(modulo)
        return dispatch.pow_(numeric(self), numeric(other), modulo)

    # Right binary operations
    def __radd__(self, other): return dispatch.add(numeric(other), numeric(self))
    def __rsub__(self, other): return dispatch.sub(numeric(other), numeric(self))
    def __rmul__(self, other): return dispatch.mul(numeric(other), numeric(self))
    def __rtruediv__(self, other): return dispatch.truediv(numeric(other), numeric(self))
    def __rfloordiv__(self, other): return dispatch.floordiv(numeric(other), numeric(self))
    def __rmod__(self, other): return dispatch.mod(numeric(other), numeric(self))
    def __rdivmod__(self, other): return dispatch.divmod_(numeric(other), numeric(self))
    def __rpow__(self, other): return dispatch.pow_(numeric(other), numeric(self))

    # Logical / bitwise operations
    def __and__(self, other): return dispatch.and_(self._n, unwrap(other))
    def __or__(self, other): return dispatch.or_(self._n, unwrap(other))
    def __xor__(self, other): return dispatch.xor(self._n, unwrap(other))
    def __lshift__(self, other): return dispatch.lshift(numeric(self), numeric(other))
    def __rshift__(self, other): return dispatch.rshift(numeric(self), numeric(other))

    def __rand__(self, other): return dispatch.and_(unwrap(other), self._n)
    def __ror__(self, other): return dispatch.or_(unwrap(other), self._n)
    def __rxor__(self, other): return dispatch.xor(unwrap(other), self._n)
    def __rlshift__(self, other): return dispatch.lshift(numeric(other), numeric(self))
    def __rrshift__(self, other): return dispatch.rshift(numeric(other), numeric(self))

    # In-place binary operations.  The result goes through set(), so a
    # result of the wrong kind raises and leaves the box as it was.
    def _assign(self, n):
        self.set(n)
        return self
    def __iadd__(self, other): return self._assign(self + other)
    def __isub__(self, other): return self._assign(self - other)
    def __imul__(self, other): return self._assign(self * other)
    def __itruediv__(self, other): return self._assign(self / other)
    def __ifloordiv__(self, other): return self._assign(self // other)
    def __imod__(self, other): return self._assign(self % other)
    def __ipow__(self, other, modulo=None):
        return self._assign(self.__pow__(other, modulo))
    def __iand__(self, other): return self._assign(self & other)
    def __ior__(self, other): return self._assign(self | other)
    def __ixor__(self, other): return self._assign(self ^ other)
    def __ilshift__(self, other): return self._assign(self << other)
    def __irshift__(self, other): return self._assign(self >> other)

    # Unary arithmetic operations
    def __neg__(self): return dispatch.neg(numeric(self))
    def __pos__(self): return dispatch.pos(numeric(self))
    def __abs__(self): return dispatch.abs_(numeric(self))
    def __invert__(self): return dispatch.invert(self._n)

    # Conversion functions
    def __complex__(self): return complex(self._n)
    def __int__(self): return int(self._n)
    def __float__(self): return float(self._n)

class MutableBool(MutableType):
    """ Mutable boolean.  ~box is logical negation. """
    _kind = Kind.BOOL

    def __index__(self): return operator.index(self._n)

class MutableNumber(MutableType):
    "Base of the numeric family: integer, rational, real and complex boxes."

class MutableInteger(MutableNumber):
    """ Mutable signed 64-bit integer """
    _kind = Kind.INTEGER

    def __index__(self): return operator.index(self._n)

    # integer functions
    # https://docs.python.org/3/library/stdtypes.html#additional-methods-on-integer-types
    def bit_length(self): return self._n.bit_length()
    def to_bytes(self, length=8, byteorder='big', *, signed=True):
        return self._n.to_bytes(length, byteorder, signed=signed)

class MutableRational(MutableNumber):
    """ Mutable fraction with 64-bit numerator and denominator """
    _kind = Kind.RATIONAL

    @property
    def numerator(self): return self._n.numerator
    @property
    def denominator(self): return self._n.denominator

    def as_integer_ratio(self): return self._n.as_integer_ratio()

class MutableReal(MutableNumber):
    """ Mutable 64-bit float """
    _kind = Kind.REAL

    # float functions
    # https://docs.python.org/3/library/stdtypes.html#additional-methods-on-float
    def as_integer_ratio(self): return self._n.as_integer_ratio()
    def is_integer(self): return self._n.is_integer()
    def hex(self): return self._n.hex()

class MutableComplex(MutableNumber):
    """ Mutable complex with 64-bit float parts """
    _kind = Kind.COMPLEX

    def conjugate(self): return self._n.conjugate()

    @property
    def imag(self): return self._n.imag
    @property
    def real(self): return self._n.real
