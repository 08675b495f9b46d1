#!/usr/bin/python3

"""Display strings for plain and boxed numbers.

    >>> to_string(3.14159)
    '3.1416E+00'
    >>> to_string(3.14159, precision=3, format='e')
    '3.14e+00'
    >>> to_string(123456.0, format='F')
    '123460'
    >>> to_string(True, aligned=True)
    ' true'

'aligned' puts a space in front of "true" and of every non-negative number
so that a column of values lines up with "false" and with negative values.
'format' and 'precision' only matter for real and complex values: 'E' and
'e' pick scientific notation with that exponent letter, anything else
picks fixed-point, and 'precision' is the number of significant figures.
"""

import logging
import math

from .errors import InvalidArgument
from .kinds import Kind, kind_of, coerce
from .mutable_number import unwrap

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = 'E'
DEFAULT_PRECISION = 5
MIN_PRECISION = 3
MAX_PRECISION = 7

SCIENTIFIC = ('E', 'e')

def _check_precision(precision):
    if (isinstance(precision, bool) or not isinstance(precision, int) or
            not MIN_PRECISION <= precision <= MAX_PRECISION):
        raise InvalidArgument('precision must be an integer in [%d, %d], not %r'
                              % (MIN_PRECISION, MAX_PRECISION, precision))

def _fixed(x, precision):
    "x rounded to precision significant figures, without an exponent."
    if not math.isfinite(x):
        return '%f' % x

    # %e does the rounding, including a carry into the next decade
    # (9.99999 -> 1.0000e+01); only the decimal point is moved here.
    mantissa, exponent = ('%.*e' % (precision - 1, x)).split('e')
    exponent = int(exponent)
    sign = '-' if mantissa.startswith('-') else ''
    digits = mantissa.lstrip('-').replace('.', '')
    if exponent >= precision - 1:
        return sign + digits + '0' * (exponent - precision + 1)
    if exponent >= 0:
        return sign + digits[:exponent + 1] + '.' + digits[exponent + 1:]
    return sign + '0.' + '0' * (-exponent - 1) + digits

def _real(x, format, precision):
    if format in SCIENTIFIC:
        s = '%.*e' % (precision - 1, x)
        return s.upper() if format == 'E' else s
    return _fixed(x, precision)

def _complex(z, format, precision):
    re = _real(z.real, format, precision)
    im = _real(abs(z.imag), format, precision)
    sign = '-' if math.copysign(1.0, z.imag) < 0 else '+'
    return '%s %s %sj' % (re, sign, im)

def to_string(y, *, aligned=False, format=DEFAULT_FORMAT,
              precision=DEFAULT_PRECISION):
    """String for y, plain or boxed.

    Raises InvalidArgument when precision is outside [3, 7] and
    TypeMismatch when y is not a boolean or a number.
    """
    _check_precision(precision)
    y = unwrap(y)
    kind = kind_of(y)

    if kind == Kind.BOOL:
        if y:
            return ' true' if aligned else 'true'
        return 'false'

    if kind >= Kind.REAL and format not in SCIENTIFIC + ('F', 'f'):
        logger.debug('unknown format %r, writing %r in fixed-point', format, y)

    if kind == Kind.INTEGER:
        s = str(int(y))
    elif kind == Kind.RATIONAL:
        s = str(coerce(y, kind))
    elif kind == Kind.REAL:
        s = _real(float(y), format, precision)
    else:
        s = _complex(complex(y), format, precision)

    if aligned and not s.startswith('-'):
        s = ' ' + s
    return s
