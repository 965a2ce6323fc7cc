#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class and scalar multiplication.

The EllipticCurve does not have to be a cyclic group:
the choice of a generator and of its order
is left to the ECDSA context (see the eclab.ecc.dsa module).
"""

from eclab.alias import Integer
from eclab.ecc.field import FiniteField
from eclab.ecc.number_theory import is_probable_prime
from eclab.ecc.point import INF, Coordinate, Identity, Point
from eclab.exceptions import (
    EClabTypeError,
    InvalidCurveParameters,
    InvalidPoint,
    InvalidScalar,
)
from eclab.utils import int_from_integer, int_repr


class EllipticCurve:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    All coordinate arithmetic is delegated to the FiniteField self.field.
    """

    def __init__(self, a: Integer, b: Integer, p: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        a = int_from_integer(a)
        b = int_from_integer(b)
        p = int_from_integer(p)

        # 1) check that p is a prime
        if not is_probable_prime(p):
            raise InvalidCurveParameters(f"p is not prime: {int_repr(p)}")

        # 2. check that a and b are integers in the interval [0, p−1]
        if not 0 <= a < p:
            raise InvalidCurveParameters(f"a not in 0..p-1: {int_repr(a)}")
        if not 0 <= b < p:
            raise InvalidCurveParameters(f"b not in 0..p-1: {int_repr(b)}")

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        if (4 * a * a * a + 27 * b * b) % p == 0:
            raise InvalidCurveParameters("zero discriminant")

        self.a = a
        self.b = b
        self.p = p
        self.field = FiniteField(p)

    def __str__(self) -> str:
        return f"y^2 = x^3 + {self.a}x + {self.b} (mod {int_repr(self.p)})"

    def __repr__(self) -> str:
        a, b, p = int_repr(self.a), int_repr(self.b), int_repr(self.p)
        return f"EllipticCurve({a}, {b}, {p})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EllipticCurve):
            return NotImplemented
        return (self.a, self.b, self.p) == (other.a, other.b, other.p)

    def __hash__(self) -> int:
        return hash((self.a, self.b, self.p))

    def _y2(self, x: int) -> int:
        # x^3 + a*x + b
        F = self.field
        return F.add(F.mul(F.add(F.mul(x, x), self.a), x), self.b)

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if isinstance(Q, Identity):
            return True
        if not isinstance(Q, Coordinate):
            raise EClabTypeError(f"not a point: {Q!r}")
        if not 0 <= Q.x < self.p or not 0 <= Q.y < self.p:
            return False
        return self.field.mul(Q.y, Q.y) == self._y2(Q.x)

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise InvalidPoint(f"point not on curve: {Q}")

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if isinstance(Q, Identity):
            return INF
        return Coordinate(Q.x, self.field.neg(Q.y))

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """
        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def double(self, Q: Point) -> Point:
        """Return the sum of the point with itself.

        The input point must be on the curve.
        """
        self.require_on_curve(Q)
        return self.double_aff(Q)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve
        if isinstance(Q, Identity):
            return R
        if isinstance(R, Identity):
            return Q

        F = self.field
        # opposite points, including the self-opposite (x, 0) one
        if Q.x == R.x and F.add(Q.y, R.y) == 0:
            return INF
        if Q == R:
            return self.double_aff(Q)

        lam = F.div(F.sub(R.y, Q.y), F.sub(R.x, Q.x))
        x = F.sub(F.sub(F.mul(lam, lam), Q.x), R.x)
        y = F.sub(F.mul(lam, F.sub(Q.x, x)), Q.y)
        return Coordinate(x, y)

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve
        if isinstance(Q, Identity):
            return INF
        if Q.y == 0:
            return INF

        F = self.field
        lam = F.div(F.add(3 * F.mul(Q.x, Q.x), self.a), 2 * Q.y)
        x = F.sub(F.mul(lam, lam), 2 * Q.x)
        y = F.sub(F.mul(lam, F.sub(Q.x, x)), Q.y)
        return Coordinate(x, y)

    def scalar_mult(self, Q: Point, m: int) -> Point:
        """Return m*Q, i.e. Q added to itself m times.

        The input point must be on the curve
        and m must be a non-negative int.
        """
        self.require_on_curve(Q)
        return mult_aff(m, Q, self)


def mult_aff(m: int, Q: Point, ec: EllipticCurve) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.

    It needs O(log m) point operations,
    instead of the O(m) of the naive repeated addition.
    It is not constant-time.

    The input point is assumed to be on curve.
    """

    if isinstance(m, bool) or not isinstance(m, int):
        raise InvalidScalar(f"not an integer scalar: {m!r}")
    if m < 0:
        raise InvalidScalar(f"negative m: {hex(m)}")

    # R is the running result
    R: Point = INF
    while m > 0:
        # if least significant bit of m is 1, then add Q to R
        if m & 1:
            R = ec.add_aff(R, Q)
        # the doubling part of 'double & add'
        Q = ec.double_aff(Q)
        # remove the bit just accounted for
        m >>= 1
    return R
