#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.
"Tests for the `eclab.ecc.curves` module."

from eclab.ecc.curve_explorer import point_order
from eclab.ecc.curves import CURVES, ec17_19
from eclab.ecc.number_theory import is_probable_prime
from eclab.ecc.point import INF, Coordinate


def test_curves() -> None:
    assert len(CURVES) == 9
    for ec_name, dsa in CURVES.items():
        ec = dsa.ec
        assert ec_name == f"ec{ec.p}_{dsa.n}"
        assert is_probable_prime(dsa.n)
        assert ec.is_on_curve(dsa.G)
        assert dsa.G != INF
        assert ec.scalar_mult(dsa.G, dsa.n) == INF
        assert point_order(ec, dsa.G) == dsa.n


def test_ec17_19() -> None:
    assert ec17_19 is CURVES["ec17_19"]
    assert (ec17_19.ec.a, ec17_19.ec.b, ec17_19.ec.p) == (2, 2, 17)
    assert ec17_19.G == Coordinate(5, 1)
    assert ec17_19.n == 19
