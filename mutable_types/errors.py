#!/usr/bin/python3

class TypeMismatch(TypeError):
    "Operand kind unsupported by the operator, function or box."

class InvalidArgument(ValueError):
    "Argument has the right kind but an unusable value."

class DivideByZero(ZeroDivisionError):
    "Integer or rational division by zero."
