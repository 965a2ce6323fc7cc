#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""eclab.ecc subpackage: finite fields, curves, and ECDSA."""
