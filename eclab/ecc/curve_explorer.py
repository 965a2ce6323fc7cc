#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""EllipticCurve explorer functions.

These functions are meant to explore low-cardinality curves,
for didactical (and fun) reason only.
"""

from typing import Dict, List

from eclab.ecc.curve import EllipticCurve
from eclab.ecc.point import INF, Coordinate, Point
from eclab.exceptions import EClabValueError

MAX_EXPLORER_P = 10000


def _square_roots(p: int) -> Dict[int, List[int]]:
    "Return the {y^2: [y, ...]} map of all the square roots mod p."
    roots: Dict[int, List[int]] = {}
    for y in range(p):
        roots.setdefault(y * y % p, []).append(y)
    return roots


def find_all_points(ec: EllipticCurve) -> List[Point]:
    """Attempt to find all group points, if p is low.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    """
    if ec.p > MAX_EXPLORER_P:
        err_msg = f"p is too big to count all group points: {ec.p}"
        raise EClabValueError(err_msg)

    roots = _square_roots(ec.p)
    points: List[Point] = [INF]
    for x in range(ec.p):
        y2 = (x * x * x + ec.a * x + ec.b) % ec.p
        points.extend(Coordinate(x, y) for y in roots.get(y2, []))

    return points


def find_subgroup_points(ec: EllipticCurve, G: Point) -> List[Point]:
    """Attempt to find all G-generated subgroup points, if p is low.

    The list starts with G and ends with INF.
    Very unsophisticated walk-through approach,
    for didactical sake only.
    """
    if ec.p > MAX_EXPLORER_P:
        err_msg = f"p is too big to count all subgroup points: {ec.p}"
        raise EClabValueError(err_msg)

    points: List[Point] = [G]
    while points[-1] != INF:
        Q = ec.add(points[-1], G)
        points.append(Q)

    return points


def point_order(ec: EllipticCurve, G: Point) -> int:
    "Return the smallest m > 0 such that m*G = INF, if p is low."
    return len(find_subgroup_points(ec, G))
