## 4x4 homogeneous matrices for moving rotations in and out of
## matrix form in yapVec

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

import numpy as np
import yapvec.vector as vector

## a matrix is represented as a list of four rows of four numbers.
## Rows are rows unless the transpose flag is true.  Vectors multiplied
## by a matrix are treated as column vectors in the w=1 hyperplane,
## which is to say as points, so Mx applies both the rotation and the
## translation part of M.

## 3x3 input is embedded in the upper left corner of the identity, so
## a pure rotation matrix has zero translation.

## orthogonality tolerance for isorthogonal(), measured as the largest
## absolute element of R^T R - I
matrix_tolerance = 1e-6


def _checknum(x):
    if vector.isgoodnum(x):
        return float(x)
    raise ValueError('bad element in matrix initialization: {}'.format(x))


class Matrix:
    """4x4 transformation matrix class for homogeneous 3D coordinates"""

    def __init__(self,a=None,trans=False):
        self.m = [[1.0,0.0,0.0,0.0],
                  [0.0,1.0,0.0,0.0],
                  [0.0,0.0,1.0,0.0],
                  [0.0,0.0,0.0,1.0]]

        if isinstance(a,Matrix):
            for i in range(4):
                self.m[i] = list(a.getrow(i))

        elif isinstance(a,np.ndarray):
            if a.shape not in ((3,3),(4,4)):
                raise ValueError('bad array shape for matrix initialization: {}'.format(a.shape))
            n = a.shape[0]
            for i in range(n):
                for j in range(n):
                    self.m[i][j] = _checknum(a[i][j])

        elif isinstance(a,(tuple,list)):
            if len(a) in (3,4) and all(isinstance(r,(tuple,list,np.ndarray)) for r in a):
                n = len(a)
                if not all(len(r) == n for r in a):
                    raise ValueError('ragged rows in matrix initialization: {}'.format(a))
                for i in range(n):
                    for j in range(n):
                        self.m[i][j] = _checknum(a[i][j])
            elif len(a) in (9,16):
                n = 3 if len(a) == 9 else 4
                for i in range(n):
                    for j in range(n):
                        self.m[i][j] = _checknum(a[i*n+j])
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        self.trans = trans

    def __repr__(self):
        return "Matrix({},{},{},{},{})".format(self.m[0],self.m[1],
                                               self.m[2],self.m[3],self.trans)

    def __eq__(self,other):
        if not isinstance(other,Matrix):
            return NotImplemented
        return all(self.getrow(i) == other.getrow(i) for i in range(4))

    __hash__ = None

    #return value indexed by i,j
    def get(self,i,j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i,j))
        if self.trans:
            return self.m[j][i]
        else:
            return self.m[i][j]

    def getrow(self,i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        if self.trans:
            return [self.m[0][i],
                    self.m[1][i],
                    self.m[2][i],
                    self.m[3][i]]
        else:
            return list(self.m[i])

    def getcol(self,j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        if not self.trans:
            return [self.m[0][j],
                    self.m[1][j],
                    self.m[2][j],
                    self.m[3][j]]
        else:
            return list(self.m[j])

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # Vector3, compute Mx for the point [x,y,z,1] and return the
    # homogenized result. If x is a scalar, compute xM.  Respects
    # transpose flag.

    def mul(self,x):
        if isinstance(x,Matrix):
            return Matrix(self.toarray() @ x.toarray())
        elif isinstance(x,vector.Vector3):
            p = self.toarray() @ np.array([x.x,x.y,x.z,1.0])
            if p[3] == 0.0:
                raise ValueError('point mapped to infinity by matrix: {}'.format(x))
            return vector.Vector3(p[0]/p[3],p[1]/p[3],p[2]/p[3])
        elif vector.isgoodnum(x):
            return Matrix(self.toarray()*x)

        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def transposed(self):
        return Matrix(self.toarray().T)

    def toarray(self):
        """the matrix as a 4x4 numpy array, transpose flag applied"""
        return np.array([self.getrow(i) for i in range(4)],dtype=float)

    def rotationpart(self):
        """upper left 3x3 block as a numpy array"""
        return self.toarray()[:3,:3]

    def translation(self):
        return vector.Vector3(self.get(0,3),self.get(1,3),self.get(2,3))

    def orthogonality(self):
        """largest absolute element of R^T R - I for the 3x3 block R"""
        R = self.rotationpart()
        return float(np.max(np.abs(R.T @ R - np.eye(3))))

    def isorthogonal(self,tol=None):
        """
        is the upper left 3x3 block a proper rotation, i.e. orthogonal
        to within ``tol`` and not a reflection?
        """
        if tol is None:
            tol = matrix_tolerance
        return self.orthogonality() <= tol and np.linalg.det(self.rotationpart()) > 0.0


def Translation(delta,inverse=False):
    """pure translation matrix moving points by ``delta``"""
    delta = vector.vect(delta)
    if inverse:
        delta = -delta
    T = [[1,0,0,delta.x],
         [0,1,0,delta.y],
         [0,0,1,delta.z],
         [0,0,0,1]]
    return Matrix(T)
