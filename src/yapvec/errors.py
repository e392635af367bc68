## exception taxonomy for yapVec

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Exceptions raised by yapVec vector and rotation operations.

Every failure is one of four kinds:

- ZeroLengthVector: an operation needed a direction and got a zero vector
- DivideByZero: a vector was divided by the scalar zero
- DegenerateRotation: the inputs do not determine a rotation
- InvalidRotationMatrix: a matrix is not a proper rotation

All of them derive from YapVecError, which is a ValueError, so code
that already guards geometry calls with ``except ValueError`` keeps
working.
"""


class YapVecError(ValueError):
    """Base exception for yapVec errors."""
    pass


class ZeroLengthVector(YapVecError):
    """A zero-length vector was used where a direction is required."""
    pass


class DivideByZero(YapVecError, ZeroDivisionError):
    """Scalar division of a vector by zero."""
    pass


class DegenerateRotation(YapVecError):
    """Rotation inputs that do not define a unique rotation."""
    pass


class InvalidRotationMatrix(YapVecError):
    """Matrix that is not orthogonal within tolerance, or a reflection."""

    def __init__(self, message, deviation=None):
        self.deviation = deviation
        super().__init__(message)
