#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "0000000000000000000000000000000000000000000000000000000000000001"
#
# use cairo_hints.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for the seed of random_ec_point
# and for the 32 bytes serialization of field elements
Octets = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# Field element: an int in [0, p-1]
#
# use cairo_hints.ecc.number_theory.felt_from_int
# to reduce any (possibly negative) int into the field
Felt = int

# Elliptic curve point in affine coordinates.
# Warning: to make Point a NamedTuple would slow down the code
Point = Tuple[int, int]
