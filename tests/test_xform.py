import pytest

import tubesweep.geom as geom
from tubesweep.xform import Basis, Matrix, Rotation, Translation
## unit tests for tubesweep xform.py


def _approx(v, expected):
    return all(abs(a - b) < 1e-9 for a, b in zip(v, expected))


class TestXform:
    """unit tests for matrix operations"""

    def test_matrix(self):
        foo = Matrix([[1,2,3,4],[5,6,7,8],[9,10,11,12],[13,14,15,16]])
        bar = Matrix([[1,0,0,1],[0,1,0,1],[0,0,1,1],[0,0,0,1]])
        baz = geom.vect(1,2,3)
        I = Matrix()
        assert(I.mul(bar).m == bar.m)
        assert(I.mul(foo).m == foo.m)
        assert(foo.mul(I).m == foo.m)
        assert(I.mul(I).m == I.m)
        assert(foo.mul(bar).m == [[1,2,3,10],[5,6,7,26],[9,10,11,42],[13,14,15,58]])
        assert(foo.mul(baz) == [18, 46, 74, 102])
        assert(I.mul(baz) == baz)
        assert(foo.getrow(1) == [5,6,7,8])
        assert(foo.getcol(0) == [1,5,9,13])

    def test_bad_matrix(self):
        with pytest.raises(ValueError):
            Matrix([1,2,3])
        with pytest.raises(ValueError):
            Matrix([1,2,3,4])
        with pytest.raises(ValueError):
            Matrix([[1,0,0,0],[0,1,0,0],[0,0,True,0],[0,0,0,1]])
        with pytest.raises(ValueError):
            Matrix().getrow(4)
        with pytest.raises(ValueError):
            Matrix().set(0,0,'x')
        with pytest.raises(ValueError):
            Matrix().mul('nope')
        with pytest.raises(ValueError):
            Matrix().mul(2.0)

    def test_rotation(self):
        R = Rotation(geom.vect(0,0,1,0),90)
        assert _approx(R.mul(geom.point(1,0,0)), [0,1,0,1])
        R = Rotation(geom.vect(0,0,5,0),-90)
        assert _approx(R.mul(geom.point(1,0,0)), [0,-1,0,1])
        R = Rotation(geom.vect(1,0,0,0),90)
        assert _approx(R.mul(geom.point(0,1,0)), [0,0,1,1])
        with pytest.raises(ValueError):
            Rotation(geom.vect(0,0,0,0),45)

    def test_translation(self):
        T = Translation(geom.point(1,2,3))
        assert T.mul(geom.point(1,1,1)) == [2,3,4,1]
        Ti = Translation(geom.point(-1,-2,-3))
        assert Ti.mul(T).m == Matrix().m
        # directions are not translated
        assert T.mul(geom.direction(1,0,0)) == [1,0,0,0]

    def test_basis(self):
        x = geom.direction(0,1,0)
        y = geom.direction(-1,0,0)
        z = geom.direction(0,0,1)
        B = Basis(x,y,z)
        assert B.mul(geom.direction(1,0,0)) == x
        assert B.mul(geom.direction(0,1,0)) == y
        assert B.mul(geom.direction(0,0,1)) == z
        assert B.getcol(3) == [0,0,0,1]
