#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module cairo_hints.ecc."""

from cairo_hints.ecc.curve import ALPHA, BETA, FIELD_PRIME, Curve, stark_curve
from cairo_hints.ecc.random_ec_point import random_ec_point, seed_from_felts

__all__ = [
    "ALPHA",
    "BETA",
    "FIELD_PRIME",
    "Curve",
    "stark_curve",
    "random_ec_point",
    "seed_from_felts",
]
