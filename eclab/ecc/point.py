#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points.

A Point is a tagged union of two immutable variants:

* Coordinate(x, y), an affine point
* Identity, the point at infinity (the group neutral element)

The Identity has no coordinates at all,
so that no affine (x, y) pair is reserved to represent it:
affine points with y=0 (of order 2) are ordinary Coordinate values.
Equality is structural: INF differs from any Coordinate,
two Coordinate values are equal iff both components are equal.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Identity:
    def __repr__(self) -> str:
        return "INF"

    __str__ = __repr__


Point = Union[Coordinate, Identity]

INF = Identity()
