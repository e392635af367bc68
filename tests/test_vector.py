import pytest
import numpy as np
from math import *
from yapvec.vector import *
from yapvec.errors import ZeroLengthVector, DivideByZero, YapVecError
## unit tests for yapVec vector.py

class TestVector3:
    """unit tests for yapVec Vector3 creation and protocol"""

    def test_create(self):
        a = Vector3(1,2,3)
        b = Vector3()
        assert a.x == 1.0 and a.y == 2.0 and a.z == 3.0
        assert isinstance(a.x,float)
        assert b == Vector3(0,0,0)
        x, y, z = a
        assert (x,y,z) == (1.0,2.0,3.0)
        assert a[2] == 3.0
        assert len(a) == 3
        assert a.totuple() == (1.0,2.0,3.0)
        assert repr(a) == 'Vector3(1.0, 2.0, 3.0)'

    def test_bad_components(self):
        with pytest.raises(ValueError):
            Vector3(True,0,0)
        with pytest.raises(ValueError):
            Vector3('1',0,0)
        ## nan and inf never make it into a vector
        for bad in [nan,inf,-inf,np.float64(nan)]:
            with pytest.raises(ValueError):
                Vector3(bad,0,0)
            with pytest.raises(ValueError):
                vect((0,bad,0))
        with pytest.raises(ValueError):
            scale(Vector3(1,0,0),inf)
        assert not isgoodnum(nan)
        assert not isgoodnum(inf)
        assert isgoodnum(1e308)

    def test_immutable(self):
        a = Vector3(1,2,3)
        with pytest.raises(AttributeError):
            a.x = 5.0
        assert hash(a) == hash(Vector3(1.0,2.0,3.0))

    def test_vect(self):
        a = Vector3(1,2,3)
        assert vect(a) is a
        assert vect((1,2,3)) == a
        assert vect([1,2,3]) == a
        assert vect(np.array([1.0,2.0,3.0])) == a
        assert vect(1,2) == Vector3(1,2,0)
        assert vect(a.toarray()) == a
        with pytest.raises(ValueError):
            vect((1,2))
        with pytest.raises(ValueError):
            vect('abc')

class TestArithmetic:

    def test_operators(self):
        assert Vector3(1,2,3) + Vector3(4,5,6) == Vector3(5,7,9)
        assert 2*Vector3(4,5,6) - Vector3(1,2,3)/2 == Vector3(7.5,9,10.5)
        assert Vector3(4,5,6)*2 == 2*Vector3(4,5,6)
        assert -Vector3(1,-2,3) == Vector3(-1,2,-3)

    def test_functions(self):
        a = Vector3(1,2,3)
        b = Vector3(4,5,6)
        assert add(a,b) == a + b
        assert sub(a,b) == Vector3(-3,-3,-3)
        assert subtract(a,b) == sub(a,b)
        assert scale(a,3) == Vector3(3,6,9)
        assert divide(b,2) == Vector3(2,2.5,3)
        ## plain tuples are accepted by the functional interface
        assert add((1,2,3),(4,5,6)) == Vector3(5,7,9)

    def test_bad_operands(self):
        with pytest.raises(TypeError):
            Vector3(1,2,3)*Vector3(1,2,3)
        with pytest.raises(TypeError):
            Vector3(1,2,3) + 1

    def test_divide_by_zero(self):
        with pytest.raises(DivideByZero):
            Vector3(1,2,3)/0
        with pytest.raises(ZeroDivisionError):
            divide(Vector3(1,2,3),0.0)

class TestProducts:

    def test_dot(self):
        vecs = [Vector3(1,2,3),Vector3(-4.5,0.25,7),Vector3(0,0,0),Vector3(1e3,-2e-3,5)]
        for a in vecs:
            for b in vecs:
                assert dot(a,b) == dot(b,a)
        assert dot(Vector3(1,0,0),Vector3(0,1,0)) == 0.0
        assert dot(Vector3(1,2,3),Vector3(4,5,6)) == 32.0

    def test_cross(self):
        vecs = [Vector3(1,2,3),Vector3(-4.5,0.25,7),Vector3(0,0,0),Vector3(1e3,-2e-3,5)]
        for a in vecs:
            for b in vecs:
                assert cross(a,b) == -cross(b,a)
        assert cross(Vector3(1,0,0),Vector3(0,1,0)) == Vector3(0,0,1)
        assert cross(Vector3(1,2,3),Vector3(2,4,6)) == Vector3(0,0,0)
        assert cross(Vector3(1,2,3),Vector3(0,0,0)) == Vector3(0,0,0)

    def test_length(self):
        assert length(Vector3(3,4,0)) == 5.0
        assert Vector3(0,0,-2).length == 2.0
        assert length(Vector3(0,0,0)) == 0.0

    def test_normalize(self):
        for v in [Vector3(1,2,3),Vector3(-1e-6,3e-7,0),Vector3(1e8,1,1)]:
            assert isclose(normalize(v).length,1.0,abs_tol=1e-12)
        assert normalize(Vector3(0,0,5)) == Vector3(0,0,1)
        with pytest.raises(ZeroLengthVector):
            normalize(Vector3(0,0,0))
        with pytest.raises(ValueError):
            Vector3(0,0,0).normalize()

    def test_large_magnitude(self):
        ## squares of these components overflow a float
        big = Vector3(1e200,0,0)
        assert big.length == 1e200
        assert length(Vector3(3e200,4e200,0)) == pytest.approx(5e200)
        assert normalize(big) == Vector3(1,0,0)
        for v in [Vector3(1e200,-2e200,3e200),Vector3(-1e300,1e300,1e-300)]:
            assert isclose(normalize(v).length,1.0,abs_tol=1e-12)
        assert isclose(getAngle(big,Vector3(0,1e200,0)),pi/2)

class TestAngles:

    def test_getAngle(self):
        assert isclose(getAngle(Vector3(1,0,0),Vector3(0,2,0)),pi/2)
        assert isclose(getAngle(Vector3(1,0,0),Vector3(-3,0,0)),pi)
        assert getAngle(Vector3(1,1,0),Vector3(2,2,0)) == pytest.approx(0.0,abs=1e-15)
        assert isclose(Vector3(1,0,0).getAngle(Vector3(1,1,0)),pi/4)

    def test_getAngle_zero(self):
        with pytest.raises(ZeroLengthVector):
            getAngle(Vector3(0,0,0),Vector3(1,0,0))
        with pytest.raises(ZeroLengthVector):
            getAngle(Vector3(1,0,0),Vector3(0,0,0))

    def test_parallel(self):
        assert isParallel(Vector3(1,2,3),Vector3(2,4,6))
        assert isParallel(Vector3(1,2,3),Vector3(-2,-4,-6))
        assert not isParallel(Vector3(1,0,0),Vector3(0,1,0))
        assert not isParallel(Vector3(1,0,0),Vector3(1,1e-3,0))
        assert isParallel(Vector3(1,0,0),Vector3(1,1e-3,0),tol=1e-2)
        assert Vector3(0,0,3).isParallel(Vector3(0,0,-1))

    def test_perpendicular(self):
        assert isPerpendicular(Vector3(1,0,0),Vector3(0,5,0))
        assert isPerpendicular(Vector3(1,1,0),Vector3(-1,1,7))
        assert not isPerpendicular(Vector3(1,0,0),Vector3(1,1,0))
        assert isPerpendicular(Vector3(1,0,0),Vector3(1e-3,1,0),tol=1e-2)
        assert not Vector3(1,0,0).isPerpendicular(Vector3(1e-3,1,0))

    def test_zero_vectors_are_vacuous(self):
        zero = Vector3(0,0,0)
        a = Vector3(1,2,3)
        assert isParallel(zero,a)
        assert isParallel(a,zero)
        assert isPerpendicular(zero,a)
        assert isPerpendicular(a,zero)
        assert isParallel(zero,zero) and isPerpendicular(zero,zero)
        assert isParallel(zero,a,tol=0.0)
        assert isPerpendicular(zero,a,tol=0.0)

class TestDistance:

    def test_distanceToPoint(self):
        assert distanceToPoint(Vector3(1,1,1),Vector3(4,5,1)) == 5.0

    def test_distanceToLine(self):
        v = Vector3(0,5,0)
        assert isclose(distanceToLine(v,Vector3(0,0,0),Vector3(1,0,0)),5.0)
        assert isclose(distanceToLine(v,Vector3(-7,0,0),Vector3(3,0,0)),5.0)
        assert isclose(v.distanceToLine(Vector3(0,0,0),Vector3(0,1,0)),0.0)
        assert isclose(distanceToLine(Vector3(1,1,5),Vector3(0,0,0),Vector3(1,1,0)),5.0)
        with pytest.raises(ZeroLengthVector):
            distanceToLine(v,Vector3(0,0,0),Vector3(0,0,0))

    def test_distanceToLineSegment(self):
        p1 = Vector3(0,0,0)
        p2 = Vector3(10,0,0)
        ## perpendicular foot inside the segment
        assert distanceToLineSegment(Vector3(5,5,0),p1,p2) == Vector3(0,-5,0)
        ## beyond p1
        assert distanceToLineSegment(Vector3(-3,4,0),p1,p2) == Vector3(3,-4,0)
        ## beyond p2
        assert distanceToLineSegment(Vector3(13,4,0),p1,p2) == Vector3(-3,-4,0)
        ## the result is a vector, its length is the distance
        d = Vector3(13,4,0).distanceToLineSegment(p1,p2)
        assert isinstance(d,Vector3)
        assert d.length == 5.0

    def test_distanceToLineSegment_degenerate(self):
        p = Vector3(1,1,1)
        assert distanceToLineSegment(Vector3(0,0,0),p,p) == Vector3(1,1,1)

    def test_distanceToPlane(self):
        p = Vector3(0,0,1)
        n = Vector3(0,0,2)
        assert isclose(distanceToPlane(Vector3(1,2,3),p,n),2.0)
        assert isclose(distanceToPlane(Vector3(1,2,-1),p,n),-2.0)
        assert isclose(Vector3(5,5,1).distanceToPlane(p,-n),0.0,abs_tol=1e-15)
        with pytest.raises(ZeroLengthVector):
            distanceToPlane(Vector3(1,2,3),p,Vector3(0,0,0))

    def test_projections(self):
        assert projectToLine(Vector3(5,5,0),Vector3(0,0,0),Vector3(2,0,0)) == Vector3(0,-5,0)
        assert vclose(projectToPlane(Vector3(1,2,3),Vector3(0,0,1),Vector3(0,0,1)),Vector3(1,2,1))
        with pytest.raises(ZeroLengthVector):
            projectToLine(Vector3(5,5,0),Vector3(0,0,0),Vector3(0,0,0))
        with pytest.raises(YapVecError):
            projectToPlane(Vector3(5,5,0),Vector3(0,0,0),Vector3(0,0,0))

    def test_isEqual(self):
        assert isEqual(Vector3(1,2,3),Vector3(1,2,3))
        assert not isEqual(Vector3(1,2,3),Vector3(1,2,3.001))
        assert Vector3(1,2,3).isEqual(Vector3(1,2,3.001),tol=0.01)
