#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the eclab package."

name = "eclab"
__version__ = "2024.6.1"
__author__ = "The eclab developers"
__author_email__ = "devs@eclab.dev"
__copyright__ = "Copyright (C) 2024 The eclab developers"
__license__ = "MIT License"
