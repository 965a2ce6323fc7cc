#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.
"Tests for the `eclab.ecc.curve_explorer` module."

import pytest

from eclab.ecc.curve import EllipticCurve
from eclab.ecc.curve_explorer import find_all_points, find_subgroup_points, point_order
from eclab.ecc.point import INF, Coordinate
from eclab.exceptions import EClabValueError
from tests.ecc.test_curve import ec17_19, ec17_19_multiples, low_card_curves


def test_ec17_19() -> None:
    ec = ec17_19.ec
    all_points = find_all_points(ec)
    assert len(all_points) == 19
    assert all_points[0] == INF
    assert set(all_points[1:]) == set(ec17_19_multiples)

    points = find_subgroup_points(ec, ec17_19.G)
    assert points == ec17_19_multiples + [INF]
    assert point_order(ec, ec17_19.G) == 19
    assert point_order(ec, INF) == 1


def test_low_card_curves() -> None:
    for dsa in low_card_curves.values():
        ec = dsa.ec
        all_points = find_all_points(ec)
        assert len(set(all_points)) == len(all_points)
        for P in all_points:
            assert ec.is_on_curve(P)
        # Lagrange theorem
        assert len(all_points) % dsa.n == 0
        assert point_order(ec, dsa.G) == dsa.n


def test_cryptohack_challenge() -> None:
    # challenge = 'Curves and Logs'
    ec = EllipticCurve(497, 1768, 9739)
    all_points = find_all_points(ec)
    assert len(all_points) == 9735
    G = Coordinate(1804, 5368)
    points = find_subgroup_points(ec, G)
    assert len(points) == 9735


def test_exceptions() -> None:
    ec = EllipticCurve(497, 1768, 10007)

    err_msg = "p is too big to count all group points: "
    with pytest.raises(EClabValueError, match=err_msg):
        find_all_points(ec)

    err_msg = "p is too big to count all subgroup points: "
    with pytest.raises(EClabValueError, match=err_msg):
        find_subgroup_points(ec, Coordinate(2, 3265))
