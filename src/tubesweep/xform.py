## matrix transformation operations for 3D homogeneous coordinates
## in tubesweep

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2026 tubesweep contributors
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

from math import *
import tubesweep.geom as geom

## a matrix is represented as a list of four four vectors, one per
## row.  Because vectors are represented as lists (not as instances
## of a class with meta-info) we assume that operations like Mx imply
## a column vector.


class Matrix:
    """4x4 transformation matrix class for transforming homogeneous 3D coordinates"""

    def __init__(self,a=False):
        self.m = [[1,0,0,0],
                  [0,1,0,0],
                  [0,0,1,0],
                  [0,0,0,1]]

        if isinstance(a,(tuple,list)):
            if len(a) != 4 or not all(isinstance(r,(tuple,list)) and len(r) == 4 for r in a):
                raise ValueError('bad rows in matrix initialization: {}'.format(a))
            for i in range(4):
                for j in range(4):
                    self.set(i,j,a[i][j])
        elif a is not False:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

    def __repr__(self):
        return "Matrix({},{},{},{})".format(self.m[0],self.m[1],
                                            self.m[2],self.m[3])

    #set value indexed by i,j
    def set(self,i,j,x):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to set: {},{}'.format(i,j))
        if geom.isgoodnum(x):
            self.m[i][j]=x
        else:
            raise ValueError('bad element in matrix: {}'.format(x))

    def getrow(self,i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return self.m[i]

    def getcol(self,j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return [self.m[0][j],
                self.m[1][j],
                self.m[2][j],
                self.m[3][j]]

    # matrix multiply.  If x is a matrix, compute MX.  If X is a
    # vector, compute Mx.

    def mul(self,x):
        if isinstance(x,Matrix):
            result = Matrix()
            for i in range(4):
                for j in range(4):
                    result.set(i,j,
                               geom.dot4(self.getrow(i),x.getcol(j)))
            return result
        elif geom.isvect(x):
            result = geom.vect()
            for i in range(4):
                result[i]=geom.dot4(self.getrow(i),x)
            return result

        raise ValueError('bad thing passed to mul(): {}'.format(x))


# return the generalized 4x4 arbitrary axis rotation matrix, angle in
# degrees, right-handed about ``axis``
def Rotation(axis,angle):
    m = geom.mag(axis)
    if m < geom.epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    u = geom.normalize(axis)

    rad = geom.deg2rad(angle%360.0)

    ux = u[0]
    uy = u[1]
    uz = u[2]

    cang = cos(rad)
    cmin = 1.0-cang
    sang = sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang,0],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang,0],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin,0],
         [0,0,0,1]]

    return Matrix(R)

def Translation(delta):
    dx = delta[0]
    dy = delta[1]
    dz = delta[2]
    T = [[1,0,0,dx],
         [0,1,0,dy],
         [0,0,1,dz],
         [0,0,0,1]]
    return Matrix(T)

# rotation whose columns are the basis vectors x, y, z, with zero
# translation: maps local (1,0,0) to x, (0,1,0) to y, (0,0,1) to z
def Basis(x,y,z):
    B = [[x[0],y[0],z[0],0],
         [x[1],y[1],z[1],0],
         [x[2],y[2],z[2],0],
         [0,0,0,1]]
    return Matrix(B)
