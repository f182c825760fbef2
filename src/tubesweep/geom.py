## foundational vector operations for tubesweep
## Copyright (c) 2020 Richard DeVaul
## Copyright (c) 2026 tubesweep contributors

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

"""foundational vector operations for **tubesweep**

====================
OVERVIEW
====================

Points and direction vectors are represented the way yapCAD represents
them: as plain Python lists of four numbers in homogeneous
coordinates, ``[x, y, z, w]``.  Points have ``w == 1``, direction
vectors have ``w == 0``.  Operations in the R^3 family ignore the
``w`` component of their arguments.

Anything that leaves the sweep pipeline (ring vertices, mesh
vertices) is converted to an immutable ``(x, y, z)`` tuple with
``to_vec3()``.

constants
=========

``epsilon`` is the geometric tolerance used throughout, and ``pi2`` is
2*pi.  Angles passed around the library are in degrees.

"""

from math import *

## constants
epsilon=0.000005
pi2 = 2.0*pi

## operations on scalars
## -----------------------

## booleans are ints to Python, but never numbers to us
def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

def deg2rad(a):
    """ degrees to radians"""
    return a*pi2/360.0

## operations on vectors
## ------------------------

def vect(a=False,b=False,c=False,d=False):
    """Convenience function for making a homogeneous coordinates 4 vector
from practically anything
    """
    r = [0,0,0,1]
    if isgoodnum(a):
        r[0]=a
        if isgoodnum(b):
            r[1]=b
            if isgoodnum(c):
                r[2]=c
                if isgoodnum(d):
                    r[3]=d
    elif isinstance(a,(tuple,list)):
        for i in range(min(4,len(a))):
            x=a[i]
            if isgoodnum(x):
                r[i]=x
    return r

def point(x=False,y=False,z=False):
    """Point creation from a point-like sequence or scalars"""
    if isinstance(x,(tuple,list)):
        return [float(x[0]),float(x[1]),
                float(x[2]) if len(x) > 2 else 0.0, 1.0]
    return vect(x,y,z,1.0)

def direction(x=False,y=False,z=False):
    """Direction vector (w=0) from a sequence or scalars"""
    if isinstance(x,(tuple,list)):
        return [float(x[0]),float(x[1]),
                float(x[2]) if len(x) > 2 else 0.0, 0.0]
    return vect(x,y,z,0.0)

def isvect(x):
    """
    check to see if argument is a proper vector for our purposes
    """
    return isinstance(x,list) and len(x) == 4 and isgoodnum(x[0]) and isgoodnum(x[1]) and isgoodnum(x[2]) and isgoodnum(x[3])

## R^3 -> R^3 functions: ignore w component
## ------------------------------------------------
def sub(a,b):
    """ 3 vector, `a - b`"""
    return [a[0]-b[0],a[1]-b[1],a[2]-b[2],1.0]

def scale3(a,c):
    """ 3 vector, vector ''a'' times scalar ``c``, `a * c`"""
    return [a[0]*c,a[1]*c,a[2]*c,1.0]

## Compute the cross product of a x b, assuming that both fall into
## the w=1 hyperplane
def cross(a,b):
    """Compute the cross product of a x b, ignoring w"""

    return [ a[1]*b[2] - a[2]*b[1],
             a[2]*b[0] - a[0]*b[2],
             a[0]*b[1] - a[1]*b[0],
             1.0 ]

## R^4 -> R functions
def dot4(a,b):
    """ 4 vector ``a`` dot ``b``"""
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]+a[3]*b[3]

def scale4(a,c):
    """ 4 vector ``a`` times scalar ``c``"""
    return [a[0]*c,a[1]*c,a[2]*c,a[3]*c]

## R^3 -> R functions -- ignore w component
## ----------------------------------------
def dot(a,b):
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]

def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

def dist(a,b):
    """ compute the euclidean distance between two 3 vector points ``a`` and ``b``"""
    return mag(sub(a,b))

## normalization is undefined for (near) zero-length vectors, so
## refuse rather than divide by something tiny
def normalize(a):
    """return the unit direction vector (w=0) parallel to ``a``.
    Raises ``ValueError`` if ``a`` has magnitude below ``epsilon``."""
    m = mag(a)
    if m < epsilon:
        raise ValueError('cannot normalize zero-length vector: {}'.format(vstr(a)))
    return [a[0]/m,a[1]/m,a[2]/m,0.0]

def to_vec3(a):
    """return the XYZ components of a point or vector as an immutable tuple"""
    return (float(a[0]),float(a[1]),float(a[2]))

## bounding box of a collection of points, as [min, max] points
def pointbbox(pts):
    if not pts:
        raise ValueError('empty point list passed to pointbbox')
    mn = [pts[0][0],pts[0][1],pts[0][2]]
    mx = list(mn)
    for p in pts[1:]:
        for k in range(3):
            if p[k] < mn[k]:
                mn[k] = p[k]
            elif p[k] > mx[k]:
                mx[k] = p[k]
    return [point(mn),point(mx)]

def vstr(a):
    """ compact string representation of a vector, for error messages"""
    return '[{:.6g}, {:.6g}, {:.6g}]'.format(a[0],a[1],a[2])
