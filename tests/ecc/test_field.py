#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.
"Tests for the `eclab.ecc.field` module."

import dataclasses

import pytest

from eclab.ecc.field import FiniteField
from eclab.exceptions import DivisionByZero, EClabValueError


def test_field_properties() -> None:
    for p in (2, 3, 13, 17, 19, 23, 9739):
        F = FiniteField(p)
        for x in range(p):
            assert F.add(x, F.neg(x)) == 0
            assert F.sub(x, x) == 0
            assert F.mul(x, 0) == 0
            if x:
                assert F.mul(x, F.div(1, x)) == 1
                assert F.mul(x, F.inv(x)) == 1
                assert F.div(x, x) == 1
            with pytest.raises(DivisionByZero, match="no inverse for 0 mod "):
                F.div(x, 0)


def test_unreduced_inputs() -> None:
    F = FiniteField(17)
    assert F.add(20, 30) == 16
    assert F.sub(3, 5) == 15
    assert F.sub(-3, 40) == 8
    assert F.mul(-1, 2) == 15
    assert F.mul(18, 35) == 1
    assert F.neg(0) == 0
    assert F.neg(17) == 0
    assert F.neg(1) == 16
    assert F.neg(18) == 16
    assert F.div(1, 18) == 1
    assert F.div(3, 2) == 10
    assert F.inv(-1) == 16

    # 17 is 0 mod 17
    with pytest.raises(DivisionByZero):
        F.div(3, 17)
    # DivisionByZero is a ZeroDivisionError too
    with pytest.raises(ZeroDivisionError):
        F.inv(-34)


def test_large_prime() -> None:
    p = 2**255 - 19
    F = FiniteField(p)
    for x in (2, 3, 2**200 + 1, p - 1, p + 5):
        assert 0 <= F.inv(x) < p
        assert F.mul(x, F.inv(x)) == 1
    assert F.neg(p - 1) == 1
    assert F.add(p - 1, 2) == 1


def test_exceptions() -> None:
    with pytest.raises(EClabValueError, match="invalid field modulus: "):
        FiniteField(1)
    with pytest.raises(EClabValueError, match="invalid field modulus: "):
        FiniteField(-7)
    with pytest.raises(EClabValueError, match="invalid field modulus: "):
        FiniteField("17")  # type: ignore

    F = FiniteField(17)
    with pytest.raises(dataclasses.FrozenInstanceError):
        F.p = 19  # type: ignore
    assert F == FiniteField(17)
