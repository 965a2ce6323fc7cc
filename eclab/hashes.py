#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib

from eclab.alias import HashF, String
from eclab.utils import bytes_from_string


def reduce_to_hlen(msg: String, hf: HashF = hashlib.sha256) -> bytes:
    "Return the hf digest of the message."
    msg = bytes_from_string(msg)
    h = hf()
    h.update(msg)
    return bytes(h.digest())


def int_from_digest(msg: String, n: int, hf: HashF = hashlib.sha256) -> int:
    """Return the hf digest of the message reduced mod n.

    The whole digest is read as a big-endian integer
    and then reduced, so that the result is in [0, n-1]
    whatever the digest size and the bit-length of n.
    """
    digest = reduce_to_hlen(msg, hf)
    return int.from_bytes(digest, byteorder="big", signed=False) % n
