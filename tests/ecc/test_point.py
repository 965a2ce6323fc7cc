#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.
"Tests for the `eclab.ecc.point` module."

import dataclasses

import pytest

from eclab.ecc.point import INF, Coordinate, Identity


def test_identity() -> None:
    assert INF == Identity()
    assert hash(INF) == hash(Identity())
    assert str(INF) == "INF"
    assert repr(INF) == "INF"
    assert INF != Coordinate(0, 0)
    assert Coordinate(0, 0) != INF


def test_coordinate() -> None:
    P = Coordinate(5, 1)
    assert P == Coordinate(5, 1)
    assert P != Coordinate(5, 16)
    assert P != Coordinate(1, 5)
    assert hash(P) == hash(Coordinate(5, 1))
    assert len({P, Coordinate(5, 1), INF, Identity()}) == 2
    assert str(P) == "(5, 1)"
    assert repr(P) == "Coordinate(x=5, y=1)"

    with pytest.raises(dataclasses.FrozenInstanceError):
        P.x = 6  # type: ignore
