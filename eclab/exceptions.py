#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The generic classes are only meant to discriminate between Exceptions
being raised by eclab from those raised by other codebase.
The specific ones name the failure:
an invalid curve, point, or scalar,
a field division by zero,
or the (unexpected) exhaustion of the signature nonce attempts.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the eclab versions are derived.
"""


class EClabValueError(ValueError):
    pass


class EClabTypeError(TypeError):
    pass


class EClabRuntimeError(RuntimeError):
    pass


class InvalidCurveParameters(EClabValueError):
    pass


class InvalidPoint(EClabValueError):
    pass


class InvalidScalar(EClabValueError):
    pass


class DivisionByZero(EClabValueError, ZeroDivisionError):
    pass


class SignatureGenerationFailure(EClabRuntimeError):
    pass
