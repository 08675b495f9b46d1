#!/usr/bin/python3

"""Mutable boolean, integer, rational, real and complex boxes, for use as
fields that must stay changeable inside otherwise immutable structures.

Operators and functions on boxes always give back plain numbers."""

from .errors import TypeMismatch, InvalidArgument, DivideByZero
from .kinds import Kind, kind_of, promote
from .mutable_number import (MutableType, MutableNumber, MutableBool,
                             MutableInteger, MutableRational, MutableReal,
                             MutableComplex, unwrap)
from .functions import approx_equal, rational_divide
from .to_string import (to_string, DEFAULT_FORMAT, DEFAULT_PRECISION,
                        MIN_PRECISION, MAX_PRECISION)
