#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime finite field Fp.

FiniteField is a stateless provider of modular operations:
field elements are plain ints.
Inputs do not need to be reduced mod p,
while results are always in [0, p-1].
"""

from dataclasses import dataclass

from eclab.exceptions import DivisionByZero, EClabValueError
from eclab.utils import int_repr


@dataclass(frozen=True)
class FiniteField:
    """Modular arithmetic over the prime p.

    p is assumed to be a prime:
    the multiplicative inverse relies on Fermat's little theorem.
    """

    p: int

    def __post_init__(self) -> None:
        if not isinstance(self.p, int) or self.p < 2:
            raise EClabValueError(f"invalid field modulus: {self.p!r}")

    def add(self, x: int, y: int) -> int:
        return (x + y) % self.p

    def sub(self, x: int, y: int) -> int:
        return (x - y) % self.p

    def mul(self, x: int, y: int) -> int:
        return (x * y) % self.p

    def neg(self, x: int) -> int:
        return (self.p - x) % self.p

    def inv(self, y: int) -> int:
        """Return the multiplicative inverse of y.

        y^(p-2) = y^-1 (mod p) for y ≠ 0 (mod p),
        computed with square-and-multiply modular exponentiation.
        """
        y %= self.p
        if y == 0:
            raise DivisionByZero(f"no inverse for 0 mod {int_repr(self.p)}")
        return pow(y, self.p - 2, self.p)

    def div(self, x: int, y: int) -> int:
        return (x * self.inv(y)) % self.p
