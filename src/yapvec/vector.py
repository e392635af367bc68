## three-component vector algebra for yapVec

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

"""three-component vector algebra for **yapVec**

====================
OVERVIEW
====================

The yapvec.vector module provides the ``Vector3`` value type and the
operations defined on it: arithmetic, dot and cross products,
normalization, angles, and point-line/point-plane distance queries.

constants
=========

yapvec.vector provides the "constants" ``epsilon`` and
``default_tolerance``.  Redefine these at your peril.

``epsilon`` is the length below which a vector is treated as having no
direction.  Operations that need a direction (``normalize()``,
``getAngle()``, ``distanceToLine()``, ``distanceToPlane()``, ...) raise
``ZeroLengthVector`` for such input.

``default_tolerance`` is the relative tolerance used by
``isParallel()`` and ``isPerpendicular()``.

vectors
=======

A ``Vector3`` is an immutable triple of double-precision floats.  Every
operation returns a new vector; nothing is modified in place.  The
usual operators are defined: ::

   a = Vector3(1,2,3)
   b = Vector3(4,5,6)
   a + b              # Vector3(5.0, 7.0, 9.0)
   2*b - a/2          # Vector3(7.5, 9.0, 10.5)

Each operator and method has a functional counterpart in this module
(``add()``, ``sub()``, ``scale()``, ``divide()``, ``dot()``, ...).
The functions accept anything ``vect()`` accepts, so plain tuples and
numpy arrays can be passed where a vector is expected.

zero vectors
============

The zero vector is a perfectly good value.  ``isParallel()`` and
``isPerpendicular()`` are *vacuously true* when either argument is
zero, since both tests scale their tolerance by the product of the
lengths.  This is a defined edge case, not an accident.

distance queries
================

``distanceToLine()`` and ``distanceToPlane()`` return scalars (the
plane distance is signed).  ``distanceToLineSegment()``, despite its
name, returns the displacement *vector* from the point to the closest
point of the segment.  Callers depend on that shape, so it stays.

"""

from math import *
from dataclasses import dataclass
import numpy as np

from yapvec.errors import ZeroLengthVector, DivideByZero

## constants
epsilon = 1e-15
default_tolerance = 1e-7

## operations on scalars
## -----------------------

## booleans are ints in python, but we don't want True to sneak in as
## a coordinate.  nan and inf are not good numbers either

def isgoodnum(n):
    """ determine if an argument is actually a finite scalar number, and
    not boolean
    """
    return ((not isinstance(n,bool))
            and isinstance(n,(int,float,np.integer,np.floating))
            and isfinite(n))

def close(a,b):
    """ are two scalars the same within epsilon
    """
    return abs(a-b) < epsilon


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector for points, directions and displacements."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        for name in ('x','y','z'):
            val = getattr(self,name)
            if not isgoodnum(val):
                raise ValueError('bad {} component for Vector3: {}'.format(name,val))
            object.__setattr__(self,name,float(val))

    def __repr__(self):
        return "Vector3({}, {}, {})".format(self.x,self.y,self.z)

    ## sequence protocol, so x, y, z = v works
    def __len__(self):
        return 3

    def __getitem__(self,i):
        return (self.x,self.y,self.z)[i]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self,other):
        if not isinstance(other,Vector3):
            return NotImplemented
        return add(self,other)

    def __sub__(self,other):
        if not isinstance(other,Vector3):
            return NotImplemented
        return sub(self,other)

    def __mul__(self,s):
        if not isgoodnum(s):
            return NotImplemented
        return scale(self,s)

    __rmul__ = __mul__

    def __truediv__(self,s):
        if not isgoodnum(s):
            return NotImplemented
        return divide(self,s)

    def __neg__(self):
        return neg(self)

    @property
    def length(self):
        return length(self)

    def normalize(self):
        return normalize(self)

    def dot(self,other):
        return dot(self,other)

    def cross(self,other):
        return cross(self,other)

    def getAngle(self,other):
        return getAngle(self,other)

    def isParallel(self,other,tol=None):
        return isParallel(self,other,tol)

    def isPerpendicular(self,other,tol=None):
        return isPerpendicular(self,other,tol)

    def isEqual(self,other,tol=None):
        return isEqual(self,other,tol)

    def distanceToPoint(self,p):
        return distanceToPoint(self,p)

    def distanceToLine(self,p,d):
        return distanceToLine(self,p,d)

    def distanceToLineSegment(self,p1,p2):
        return distanceToLineSegment(self,p1,p2)

    def distanceToPlane(self,p,n):
        return distanceToPlane(self,p,n)

    def projectToLine(self,p,d):
        return projectToLine(self,p,d)

    def projectToPlane(self,p,n):
        return projectToPlane(self,p,n)

    def totuple(self):
        return (self.x,self.y,self.z)

    def toarray(self):
        """Convert to a numpy array of shape (3,)."""
        return np.array([self.x,self.y,self.z],dtype=float)

    @staticmethod
    def fromarray(arr):
        arr = np.asarray(arr,dtype=float).reshape(-1)
        if arr.shape != (3,):
            raise ValueError('bad array shape for Vector3: {}'.format(arr.shape))
        return Vector3(float(arr[0]),float(arr[1]),float(arr[2]))


def vect(a=False,b=False,c=False):
    """Convenience function for making a Vector3 from practically
anything: a Vector3, a three-element sequence or numpy array, or up to
three scalars (missing scalars are zero)
    """
    if isinstance(a,Vector3):
        return a
    if isgoodnum(a):
        r = [a,0.0,0.0]
        if isgoodnum(b):
            r[1]=b
            if isgoodnum(c):
                r[2]=c
        return Vector3(*r)
    if isinstance(a,np.ndarray):
        return Vector3.fromarray(a)
    if isinstance(a,(tuple,list)) and len(a) == 3:
        return Vector3(a[0],a[1],a[2])
    raise ValueError('bad thing used in attempt to make a vector: {}'.format(a))


## R^3 -> R^3 functions
## ------------------------------------------------
def add(a,b):
    """ 3 vector, `a + b`"""
    a = vect(a)
    b = vect(b)
    return Vector3(a.x+b.x,a.y+b.y,a.z+b.z)

def sub(a,b):
    """ 3 vector, `a - b`"""
    a = vect(a)
    b = vect(b)
    return Vector3(a.x-b.x,a.y-b.y,a.z-b.z)

subtract = sub

def scale(a,c):
    """ 3 vector ``a`` times scalar ``c``, `a * c`"""
    a = vect(a)
    if not isgoodnum(c):
        raise ValueError('bad scale factor: {}'.format(c))
    return Vector3(a.x*c,a.y*c,a.z*c)

def divide(a,c):
    """ 3 vector ``a`` divided by scalar ``c``, `a / c`"""
    a = vect(a)
    if not isgoodnum(c):
        raise ValueError('bad divisor: {}'.format(c))
    if c == 0:
        raise DivideByZero('division of vector {} by zero'.format(a))
    return Vector3(a.x/c,a.y/c,a.z/c)

def neg(a):
    """ 3 vector, `-a`"""
    a = vect(a)
    return Vector3(-a.x,-a.y,-a.z)

def cross(a,b):
    """Compute the cross product `a x b`.  Anti-commutative, and zero
    when ``a`` and ``b`` are parallel or either is zero.
    """
    a = vect(a)
    b = vect(b)
    return Vector3(a.y*b.z - a.z*b.y,
                   a.z*b.x - a.x*b.z,
                   a.x*b.y - a.y*b.x)

def normalize(a):
    """ unit vector in the direction of ``a``"""
    a = vect(a)
    m = length(a)
    if m < epsilon:
        raise ZeroLengthVector('cannot normalize zero-length vector {}'.format(a))
    return Vector3(a.x/m,a.y/m,a.z/m)


## R^3 -> R functions
## ----------------------------------------
def dot(a,b):
    """ 3 vector ``a`` dot ``b`` """
    a = vect(a)
    b = vect(b)
    return a.x*b.x+a.y*b.y+a.z*b.z

def length(a):
    """ compute the magnitude of 3 vector ``a``"""
    a = vect(a)
    ## hypot scales internally, so large components do not overflow
    return hypot(a.x,a.y,a.z)

mag = length

def distanceToPoint(a,b):
    """ euclidean distance between two points ``a`` and ``b``"""
    return length(sub(a,b))

def getAngle(a,b):
    """angle in radians, in the interval [0, pi], between vectors ``a``
    and ``b``.  Raises ``ZeroLengthVector`` if either has zero length.
    """
    a = vect(a)
    b = vect(b)
    if length(a) < epsilon or length(b) < epsilon:
        raise ZeroLengthVector('angle with zero-length vector is undefined: {}, {}'.format(a,b))
    a = normalize(a)
    b = normalize(b)
    ## atan2 stays accurate near 0 and pi where acos of the
    ## normalized dot product does not
    return atan2(length(cross(a,b)),dot(a,b))

def distanceToLine(v,p,d):
    """perpendicular distance from point ``v`` to the infinite line
    through ``p`` with direction ``d``
    """
    d = vect(d)
    dm = length(d)
    if dm < epsilon:
        raise ZeroLengthVector('zero-length line direction passed to distanceToLine')
    return length(cross(sub(v,p),d))/dm

def distanceToLineSegment(v,p1,p2):
    """
    Return the displacement *vector* from point ``v`` to the closest
    point of the segment ``[p1, p2]``.

    The closest point is the perpendicular foot when its parameter
    ``t = ((v-p1).(p2-p1)) / |p2-p1|^2`` lies in ``[0, 1]``, otherwise
    the nearer endpoint.  If ``p1 == p2`` the segment is a point and
    ``p1 - v`` is returned.

    **NOTE:** the name is historical; the result is a vector, not a
    scalar.  Take ``.length`` of it for the distance.
    """
    v = vect(v)
    p1 = vect(p1)
    p2 = vect(p2)
    seg = sub(p2,p1)
    len2 = dot(seg,seg)
    if len2 == 0.0:
        return sub(p1,v)
    rel = sub(v,p1)
    t = dot(rel,seg)/len2
    if t < 0.0:
        t = 0.0
    elif t > 1.0:
        t = 1.0
    return sub(scale(seg,t),rel)

def distanceToPlane(v,p,n):
    """signed distance from point ``v`` to the plane through ``p`` with
    normal ``n``.  Positive on the side ``n`` points toward.
    """
    n = vect(n)
    if length(n) < epsilon:
        raise ZeroLengthVector('zero-length plane normal passed to distanceToPlane')
    return dot(sub(v,p),normalize(n))

def projectToLine(v,p,d):
    """displacement vector from point ``v`` to its perpendicular foot on
    the line through ``p`` with direction ``d``
    """
    d = vect(d)
    if length(d) < epsilon:
        raise ZeroLengthVector('zero-length line direction passed to projectToLine')
    u = normalize(d)
    rel = sub(v,p)
    return sub(scale(u,dot(rel,u)),rel)

def projectToPlane(v,p,n):
    """orthogonal projection of point ``v`` onto the plane through
    ``p`` with normal ``n``
    """
    return sub(v,scale(normalize(n),distanceToPlane(v,p,n)))


## R^3 -> bool functions
## ---------------------

def isParallel(a,b,tol=None):
    """
    are ``a`` and ``b`` parallel (or anti-parallel), i.e. is
    ``|a x b| <= tol * |a| * |b|``?  Vacuously true if either vector
    is zero.
    """
    if tol is None:
        tol = default_tolerance
    return length(cross(a,b)) <= tol*length(a)*length(b)

def isPerpendicular(a,b,tol=None):
    """
    are ``a`` and ``b`` perpendicular, i.e. is ``|a . b| <= tol * |a| *
    |b|``?  Vacuously true if either vector is zero.
    """
    if tol is None:
        tol = default_tolerance
    return abs(dot(a,b)) <= tol*length(a)*length(b)

def isEqual(a,b,tol=None):
    """ are ``a`` and ``b`` within ``tol`` (default ``epsilon``) of each other"""
    if tol is None:
        tol = epsilon
    return length(sub(a,b)) <= tol

vclose = isEqual
