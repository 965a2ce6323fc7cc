#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable, Union

# hex-string or bytes representation of an int, e.g.:
# 3735928559
# "0xdeadbeef"
# "deadbeef"
# b'\xde\xad\xbe\xef'
#
# use eclab.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# bytes or text string (not hex-string)
#
# this is for a message to be signed:
# text strings are converted to bytes using encode()
String = Union[bytes, str]

# Hash digest constructor, e.g. hashlib.sha256:
# h = hf(); h.update(msg); h.digest()
HashF = Callable[[], Any]

# Source of randomness: given a positive bound,
# return a uniform int in [0, bound), e.g.
# secrets.randbelow or random.Random(seed).randrange
#
# The same provider may be invoked by concurrent sign/generate calls:
# it must be either thread-confined or internally synchronized
# (secrets.randbelow and a private random.Random instance both qualify).
RandBelow = Callable[[int], int]
