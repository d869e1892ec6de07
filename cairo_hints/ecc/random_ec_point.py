#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Deterministic derivation of a pseudorandom curve point from a seed.

The point is obtained by rejection sampling:
the seed is hashed once, then the digest tail is repeatedly hashed
together with an attempt counter until a valid x-coordinate is found.
The sign of y is taken from the lowest bit of the first digest byte.
"""

import logging
from typing import Iterable

from cairo_hints.alias import Octets, Point
from cairo_hints.ecc.curve import Curve, stark_curve
from cairo_hints.ecc.number_theory import to_padded_bytes
from cairo_hints.exceptions import RandomEcPointNotOnCurve
from cairo_hints.hashes import sha256

logger = logging.getLogger(__name__)

RANDOM_EC_POINT_ATTEMPTS = 100
# the attempt counter is padded to this many bytes
COUNTER_SIZE = 10


def seed_from_felts(felts: Iterable[int]) -> bytes:
    "Return the concatenation of the 32 bytes encodings of the field elements."
    return b"".join(to_padded_bytes(felt) for felt in felts)


def random_ec_point(seed: Octets, ec: Curve = stark_curve) -> Point:
    """Return a point on the curve, deterministically derived from the seed.

    The curve equation is y^2 = x^3 + a*x + b (mod p).
    Up to RANDOM_EC_POINT_ATTEMPTS x-coordinates are tried;
    RandomEcPointNotOnCurve is raised if none of them is valid.
    """

    seed = sha256(seed)
    sign_bit = seed[0] & 1
    for i in range(RANDOM_EC_POINT_ATTEMPTS):
        i_bytes = i.to_bytes(1, byteorder="little", signed=False)
        block = seed[1:] + i_bytes + b"\x00" * (COUNTER_SIZE - len(i_bytes))
        # x is not reduced mod p before computing y
        x = int.from_bytes(sha256(block), byteorder="big", signed=False)
        y = ec.recover_y(x)
        if y is None:
            continue
        logger.debug("random_ec_point: found x-coordinate at attempt %d", i)
        Q = x % ec.p, y
        return ec.negate(Q) if sign_bit else Q

    raise RandomEcPointNotOnCurve()
