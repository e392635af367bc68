## quaternion rotations for yapVec

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

"""quaternion rotations for **yapVec**

====================
OVERVIEW
====================

A ``Rotation`` is an immutable unit quaternion ``(a, b, c, d)`` with
``d = cos(angle/2)`` and ``(a, b, c) = sin(angle/2) * axis``.  It can
be built from any of several equivalent descriptions, composed with
``multiply()`` (or ``*``), applied to vectors with ``multVec()``,
compared with ``isSame()`` and interpolated with ``slerp()``.

construction
============

``Rotation(...)`` looks at its arguments and picks a constructor.
Each form also has a named class method: ::

   Rotation()                          # identity
   Rotation(Vector3(0,0,1), 90)        # axis and angle in degrees: fromAxisAngle()
   Rotation(10, 20, 30)                # yaw, pitch, roll in degrees: fromEuler()
   Rotation(yaw=10, pitch=20, roll=30) # same thing
   Rotation(Vector3(1,0,0), Vector3(0,1,0))   # shortest arc from v1 to v2: fromVectors()
   Rotation(matrix)                    # 3x3/4x4 rotation matrix: fromMatrix()
   Rotation(xdir, ydir, zdir, "ZXY")   # axis triad plus priority: fromAxes()
   Rotation(0, 0, 0.7071, 0.7071)      # raw quaternion: fromQuaternion()

The raw quaternion form is rarely the right entry point, it is here for
the times you already have one from somewhere else.

Euler angles are intrinsic z-y'-x'': first yaw about Z, then pitch
about the new Y, then roll about the newest X.  The result is
``Rz(yaw) * (Ry(pitch) * Rx(roll))``.

composition order
=================

``multiply(r1, r2)`` is the quaternion product ``r1 * r2``, and

   multVec(r1 * r2, v) == multVec(r1, multVec(r2, v))

so, about *fixed* (world, extrinsic) axes, ``r2`` happens first and
``r1`` second.  Read as *intrinsic* rotations about axes that travel
with the body, ``r1`` happens first and ``r2`` is then applied about the
already rotated axes.  Intrinsic chains multiply left to right in the
order they are performed, fixed-axis chains right to left.  For
example ``Rz(90) * Rx(90)`` is "Rx(90) then Rz(90) about the world
axes", and also "Rz(90) then Rx(90) about the body axes"; either way it
is the 120 degree rotation about (1,1,1).

axis and angle
==============

``axis`` and ``angle`` are derived from the stored quaternion, not
remembered from construction.  ``angle`` is in radians in ``[0, 2pi]``
and ``axis`` is always unit length.  An input of -270 degrees about +Z
is stored as the negated quaternion of 90 degrees about +Z and reports
270 degrees about -Z.  Both are the same rotation, which is why
``isSame()`` exists.  The identity reports axis (0,0,1), angle 0.

sameness
========

``q`` and ``-q`` are the same rotation.  ``isSame(r1, r2, tol)`` checks
``min(|q1 - q2|^2, |q1 + q2|^2) <= tol``; with ``tol == 0`` the
components must match exactly for one of the two signs.  ``==`` is
``isSame()`` with zero tolerance.

"""

import logging
from math import *

import mpmath as mpm
import numpy as np

import yapvec.vector as vector
from yapvec.vector import Vector3, vect, isgoodnum
from yapvec.xform import Matrix
from yapvec.errors import ZeroLengthVector, DegenerateRotation, InvalidRotationMatrix

logger = logging.getLogger(__name__)

## constants
## quaternions drifting further than this from |q|^2 == 1 are renormalized
renormalize_epsilon = 1e-14
## slerp falls back to normalized linear interpolation when |q1.q2|
## is within this of 1
slerp_linear_threshold = 1e-9
## |sin(pitch)| this close to 1 is treated as gimbal lock
gimbal_epsilon = 1e-12

_IDENTITY = (0.0,0.0,0.0,1.0)


## operations on raw quaternion tuples (a, b, c, d) == (x, y, z, w)
## -----------------------------------------------------------------

def _unit(q):
    for x in q:
        if not isgoodnum(x):
            raise ValueError('bad quaternion component: {}'.format(x))
    n = hypot(*q)
    n2 = n*n
    if n < vector.epsilon:
        raise DegenerateRotation('zero-magnitude quaternion does not define a rotation')
    if abs(n2-1.0) > renormalize_epsilon:
        logger.debug('renormalizing quaternion %s, |q|^2 = %r', q, n2)
        return tuple(float(x/n) for x in q)
    return tuple(float(x) for x in q)

def _qmul(q1,q2):
    x1,y1,z1,w1 = q1
    x2,y2,z2,w2 = q2
    return ( x1*w2 + y1*z2 - z1*y2 + w1*x2,
            -x1*z2 + y1*w2 + z1*x2 + w1*y2,
             x1*y2 - y1*x2 + z1*w2 + w1*z2,
            -x1*x2 - y1*y2 - z1*z2 + w1*w2)

def _qdot(q1,q2):
    return q1[0]*q2[0]+q1[1]*q2[1]+q1[2]*q2[2]+q1[3]*q2[3]

def _axisangle(axis,degrees):
    axis = vect(axis)
    if not isgoodnum(degrees):
        raise ValueError('bad rotation angle: {}'.format(degrees))
    if axis.length < vector.epsilon:
        raise ZeroLengthVector('zero-length rotation axis not allowed')
    u = vector.normalize(axis)
    half = radians(degrees)/2.0
    s = sin(half)
    return _unit((u.x*s,u.y*s,u.z*s,cos(half)))

def _euler(yaw,pitch,roll):
    for x in (yaw,pitch,roll):
        if not isgoodnum(x):
            raise ValueError('bad euler angle: {}'.format(x))
    rz = _axisangle(Vector3(0,0,1),yaw)
    ry = _axisangle(Vector3(0,1,0),pitch)
    rx = _axisangle(Vector3(1,0,0),roll)
    return _unit(_qmul(rz,_unit(_qmul(ry,rx))))

def _vectors(v1,v2):
    v1 = vect(v1)
    v2 = vect(v2)
    if v1.length < vector.epsilon or v2.length < vector.epsilon:
        raise DegenerateRotation('zero-length vector passed to two-vector rotation: {}, {}'.format(v1,v2))
    u1 = vector.normalize(v1)
    u2 = vector.normalize(v2)
    if vector.isParallel(u1,u2) and vector.dot(u1,u2) < 0.0:
        raise DegenerateRotation('anti-parallel vectors do not define a unique rotation axis: {}, {}'.format(v1,v2))
    ## (u1 x u2, 1 + u1.u2) is the half-angle quaternion up to scale;
    ## the dot product and the sum are carried at 30 digits
    with mpm.workdps(30):
        w = float(mpm.mpf(1) + mpm.fdot(list(u1),list(u2)))
    c = vector.cross(u1,u2)
    return _unit((c.x,c.y,c.z,w))

def _matrixq(R):
    """Shepperd's extraction of a unit quaternion from a proper
    rotation matrix ``R`` (3x3 numpy array)"""
    trace = R[0][0]+R[1][1]+R[2][2]
    if trace > 0.0:
        s = 0.5/sqrt(trace+1.0)
        q = ((R[2][1]-R[1][2])*s,
             (R[0][2]-R[2][0])*s,
             (R[1][0]-R[0][1])*s,
             0.25/s)
    elif R[0][0] > R[1][1] and R[0][0] > R[2][2]:
        s = 2.0*sqrt(1.0+R[0][0]-R[1][1]-R[2][2])
        q = (0.25*s,
             (R[0][1]+R[1][0])/s,
             (R[0][2]+R[2][0])/s,
             (R[2][1]-R[1][2])/s)
    elif R[1][1] > R[2][2]:
        s = 2.0*sqrt(1.0+R[1][1]-R[0][0]-R[2][2])
        q = ((R[0][1]+R[1][0])/s,
             0.25*s,
             (R[1][2]+R[2][1])/s,
             (R[0][2]-R[2][0])/s)
    else:
        s = 2.0*sqrt(1.0+R[2][2]-R[0][0]-R[1][1])
        q = ((R[0][2]+R[2][0])/s,
             (R[1][2]+R[2][1])/s,
             0.25*s,
             (R[1][0]-R[0][1])/s)
    return _unit(tuple(float(x) for x in q))

def _matrix(m):
    if not isinstance(m,Matrix):
        m = Matrix(m)
    deviation = m.orthogonality()
    if not m.isorthogonal():
        raise InvalidRotationMatrix('matrix is not a proper rotation (orthogonality error {})'.format(deviation),
                                    deviation=deviation)
    return _matrixq(m.rotationpart())

def _axes(xdir,ydir,zdir,priority):
    if not isinstance(priority,str) or sorted(priority.upper()) != ['X','Y','Z']:
        raise ValueError('bad axis priority string: {}'.format(priority))
    priority = priority.upper()
    names = 'XYZ'
    dirs = dict(zip(names,(vect(xdir),vect(ydir),vect(zdir))))
    first,second,third = priority

    if dirs[first].length < vector.epsilon:
        raise DegenerateRotation('zero-length {} axis has top priority'.format(first))
    u = {first: vector.normalize(dirs[first])}

    ## Gram-Schmidt step against the trusted axis; None if nothing is left
    def _orth(name):
        v = dirs[name]
        if v.length < vector.epsilon or vector.isParallel(v,u[first]):
            return None
        return vector.normalize(v - u[first]*vector.dot(v,u[first]))

    s = _orth(second)
    if s is not None:
        u[second] = s
        missing = third
    else:
        s = _orth(third)
        if s is None:
            raise DegenerateRotation('axes {} and {} are both zero or parallel to {}'.format(second,third,first))
        u[third] = s
        missing = second

    ## right-handed frame: X = Y x Z, Y = Z x X, Z = X x Y
    k = names.index(missing)
    u[missing] = vector.cross(u[names[(k+1)%3]],u[names[(k+2)%3]])

    ## the axes are the columns of the rotation matrix
    R = np.array([[u[n][i] for n in names] for i in range(3)])
    return _matrixq(R)


class Rotation:
    """
    Immutable rotation stored as a unit quaternion.  See the module
    documentation for the accepted constructor arguments.
    """

    __slots__ = ('_q',)

    def __init__(self,*args,**kwargs):
        if kwargs:
            if args:
                raise ValueError('mixed positional and keyword arguments to Rotation')
            keys = set(kwargs)
            if keys <= {'yaw','pitch','roll'}:
                q = _euler(kwargs.get('yaw',0.0),kwargs.get('pitch',0.0),kwargs.get('roll',0.0))
            elif keys == {'axis','angle'}:
                q = _axisangle(kwargs['axis'],kwargs['angle'])
            else:
                raise ValueError('bad keyword arguments to Rotation: {}'.format(sorted(keys)))
        elif len(args) == 0:
            q = _IDENTITY
        elif len(args) == 1:
            a = args[0]
            if isinstance(a,Rotation):
                q = a._q
            elif isinstance(a,(Matrix,np.ndarray,list,tuple)):
                q = _matrix(a)
            else:
                raise ValueError('bad thing used in attempt to make a rotation: {}'.format(a))
        elif len(args) == 2:
            if isgoodnum(args[1]):
                q = _axisangle(args[0],args[1])
            else:
                q = _vectors(args[0],args[1])
        elif len(args) == 3 and all(isgoodnum(x) for x in args):
            q = _euler(*args)
        elif len(args) == 4 and all(isgoodnum(x) for x in args):
            q = _unit(args)
        elif len(args) == 4 and isinstance(args[3],str):
            q = _axes(*args)
        else:
            raise ValueError('bad arguments used in attempt to make a rotation: {}'.format(args))
        self._q = q

    @classmethod
    def _fromq(cls,q):
        r = cls.__new__(cls)
        r._q = q
        return r

    ## named constructors
    ## ------------------

    @classmethod
    def fromQuaternion(cls,a,b,c,d):
        """
        low-level constructor from raw quaternion components, with
        ``d`` the scalar part.  The quaternion is normalized; a zero
        quaternion raises ``DegenerateRotation``.  You probably want one
        of the other constructors.
        """
        return cls._fromq(_unit((a,b,c,d)))

    @classmethod
    def fromEuler(cls,yaw,pitch,roll):
        """intrinsic yaw (Z), pitch (Y'), roll (X'') in degrees"""
        return cls._fromq(_euler(yaw,pitch,roll))

    @classmethod
    def fromAxisAngle(cls,axis,angle):
        """rotation of ``angle`` degrees about ``axis`` (need not be unit length)"""
        return cls._fromq(_axisangle(axis,angle))

    @classmethod
    def fromVectors(cls,v1,v2):
        """
        shortest-arc rotation taking the direction of ``v1`` to the
        direction of ``v2``, about ``v1 x v2``.  Raises
        ``DegenerateRotation`` if either is zero or they are
        anti-parallel, since then no unique axis exists.
        """
        return cls._fromq(_vectors(v1,v2))

    @classmethod
    def fromMatrix(cls,m):
        """
        rotation from a ``Matrix``, a 3x3 or 4x4 nested sequence, or a
        numpy array.  Translation is ignored.  Raises
        ``InvalidRotationMatrix`` unless the rotation block is
        orthogonal to within ``xform.matrix_tolerance`` with a positive
        determinant.
        """
        return cls._fromq(_matrix(m))

    @classmethod
    def fromAxes(cls,xdir,ydir,zdir,priority='ZXY'):
        """
        rotation taking the unit X, Y, Z axes onto the triad ``xdir``,
        ``ydir``, ``zdir``.  The triad need not be orthogonal:
        ``priority`` (a permutation of "XYZ") names the axis trusted
        exactly, then the one made orthogonal to it, and the last is
        derived from the other two.  If the second axis is zero or
        parallel to the first, the third takes its place.
        """
        return cls._fromq(_axes(xdir,ydir,zdir,priority))

    ## derived properties
    ## ------------------

    @property
    def q(self):
        """raw quaternion ``(a, b, c, d)``"""
        return self._q

    @property
    def axis(self):
        x,y,z,w = self._q
        s = sqrt(x*x+y*y+z*z)
        if s < vector.epsilon:
            return Vector3(0,0,1)
        return Vector3(x/s,y/s,z/s)

    @property
    def angle(self):
        x,y,z,w = self._q
        return 2.0*atan2(sqrt(x*x+y*y+z*z),w)

    @property
    def angleDegrees(self):
        return degrees(self.angle)

    ## operations
    ## ----------

    def multiply(self,other):
        return multiply(self,other)

    def __mul__(self,other):
        if not isinstance(other,Rotation):
            return NotImplemented
        return multiply(self,other)

    def multVec(self,v):
        return multVec(self,v)

    def inverted(self):
        return invert(self)

    def isSame(self,other,tol=0.0):
        return isSame(self,other,tol)

    def isIdentity(self,tol=0.0):
        return isSame(self,Rotation(),tol)

    def slerp(self,other,t):
        return slerp(self,other,t)

    def toMatrix(self):
        """4x4 rotation ``Matrix`` with zero translation"""
        x,y,z,w = self._q
        return Matrix([[1.0-2.0*(y*y+z*z), 2.0*(x*y-w*z), 2.0*(x*z+w*y)],
                       [2.0*(x*y+w*z), 1.0-2.0*(x*x+z*z), 2.0*(y*z-w*x)],
                       [2.0*(x*z-w*y), 2.0*(y*z+w*x), 1.0-2.0*(x*x+y*y)]])

    def getYawPitchRoll(self):
        """
        decompose into intrinsic yaw, pitch, roll in degrees, the
        inverse of ``fromEuler()``.  Pitch is in [-90, 90].  At gimbal
        lock (pitch of +/-90) only yaw - roll or yaw + roll is defined,
        so roll is reported as 0.
        """
        R = self.toMatrix().rotationpart()
        sp = max(-1.0,min(1.0,-R[2][0]))
        pitch = asin(sp)
        if abs(sp) >= 1.0-gimbal_epsilon:
            logger.debug('gimbal lock in yaw/pitch/roll decomposition of %r', self)
            yaw = atan2(-R[0][1],R[1][1])
            roll = 0.0
            pitch = copysign(pi/2.0,sp)
        else:
            yaw = atan2(R[1][0],R[0][0])
            roll = atan2(R[2][1],R[2][2])
        return (degrees(yaw),degrees(pitch),degrees(roll))

    toEuler = getYawPitchRoll

    def __eq__(self,other):
        if not isinstance(other,Rotation):
            return NotImplemented
        return isSame(self,other)

    def __hash__(self):
        ## q and -q hash alike: flip so the first non-zero component is positive
        q = self._q
        for x in q:
            if x != 0.0:
                if x < 0.0:
                    q = tuple(-c for c in q)
                break
        return hash(q)

    def __repr__(self):
        return "Rotation({}, {}, {}, {})".format(*self._q)


## functional interface
## --------------------

def multiply(r1,r2):
    """
    composed rotation ``r1 * r2``: ``r2`` then ``r1`` about fixed axes,
    or ``r1`` then ``r2`` about body axes
    """
    return Rotation._fromq(_unit(_qmul(r1._q,r2._q)))

def multVec(r,v):
    """rotate vector ``v`` by ``r``, i.e. the vector part of q (v,0) q^-1"""
    v = vect(v)
    x,y,z,w = r._q
    u = Vector3(x,y,z)
    t = vector.cross(u,v)*2.0
    return v + t*w + vector.cross(u,t)

def invert(r):
    x,y,z,w = r._q
    return Rotation._fromq((-x,-y,-z,w))

def isSame(r1,r2,tol=0.0):
    """
    do ``r1`` and ``r2`` act identically, allowing for the double cover
    (q == -q)?  ``tol`` bounds the squared distance between the
    quaternions, ``min(|q1-q2|^2, |q1+q2|^2)``, which is
    ``2 - 2|q1.q2|`` for unit quaternions.  With ``tol == 0`` the
    components must match exactly for one sign.
    """
    q1 = r1._q
    q2 = r2._q
    if tol == 0.0:
        return q1 == q2 or q1 == tuple(-c for c in q2)
    dminus = sum((a-b)*(a-b) for a,b in zip(q1,q2))
    dplus = sum((a+b)*(a+b) for a,b in zip(q1,q2))
    return min(dminus,dplus) <= tol

def slerp(r1,r2,t):
    """
    spherical linear interpolation from ``r1`` (``t == 0``) to ``r2``
    (``t == 1``) along the shorter great arc.  ``t`` is clamped to
    [0, 1].
    """
    if not isgoodnum(t):
        raise ValueError('bad interpolation parameter: {}'.format(t))
    t = max(0.0,min(1.0,float(t)))
    if t == 0.0:
        return Rotation(r1)
    if t == 1.0:
        return Rotation(r2)

    q1 = r1._q
    q2 = r2._q
    c = _qdot(q1,q2)
    ## -q2 is the same rotation and the nearer one
    if c < 0.0:
        q2 = tuple(-x for x in q2)
        c = -c

    if c > 1.0-slerp_linear_threshold:
        logger.debug('slerp endpoints nearly coincide, interpolating linearly')
        k1 = 1.0-t
        k2 = t
    else:
        theta = acos(c)
        st = sin(theta)
        k1 = sin((1.0-t)*theta)/st
        k2 = sin(t*theta)/st
    return Rotation._fromq(_unit(tuple(k1*a+k2*b for a,b in zip(q1,q2))))
