#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Named low-cardinality ECDSA domain parameters.

The parameters are read from data/ec_small.json,
each entry being

    name: [a, b, p, [Gx, Gy], n]

with the curve y^2 = x^3 + a*x + b (mod p),
the generator G = (Gx, Gy) and its prime order n.
The name follows the ec{p}_{n} convention.

These curves are meant for didactical purposes
and correctness checks only: they are not secure.
"""

import json
from os import path
from typing import Dict

from eclab.ecc.curve import EllipticCurve
from eclab.ecc.dsa import ECDSA
from eclab.ecc.point import Coordinate

datadir = path.join(path.dirname(__file__), "data")


def _load_curves(filename: str) -> Dict[str, ECDSA]:
    with open(filename, "r", encoding="ascii") as file_:
        params = json.load(file_)
    curves: Dict[str, ECDSA] = {}
    for ec_name, (a, b, p, (Gx, Gy), n) in params.items():
        curves[ec_name] = ECDSA(EllipticCurve(a, b, p), Coordinate(Gx, Gy), n)
    return curves


CURVES = _load_curves(path.join(datadir, "ec_small.json"))

ec17_19 = CURVES["ec17_19"]
