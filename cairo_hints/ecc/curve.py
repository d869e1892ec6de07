#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Short Weierstrass elliptic curve over a prime field.

Only the curve equation is modelled here: there is no group law,
i.e. no point addition nor scalar multiplication.
The STARK-friendly curve used by the Cairo signature scheme
is available as stark_curve.
"""

from typing import Optional

from cairo_hints.alias import Integer, Point
from cairo_hints.ecc.number_theory import CAIRO_PRIME, is_quad_residue, sqrt
from cairo_hints.exceptions import CairoHintsTypeError, CairoHintsValueError
from cairo_hints.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr

FIELD_PRIME = CAIRO_PRIME
ALPHA = 1
BETA = 3141592653589793238462643383279502884197169399375105820974944592307816406665


class Curve:
    """Elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime).
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # 1) check that p is a prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 2 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise CairoHintsValueError(f"p is not prime: {int_repr(p)}")

        self.p = p

        # 2. check that a and b are integers in the interval [0, p−1]
        if a < 0:
            raise CairoHintsValueError(f"negative a: {a}")
        if p <= a:
            raise CairoHintsValueError(f"p <= a: {int_repr(p)} <= {int_repr(a)}")
        if b < 0:
            raise CairoHintsValueError(f"negative b: {b}")
        if p <= b:
            raise CairoHintsValueError(f"p <= b: {int_repr(p)} <= {int_repr(b)}")

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * a * a * a + 27 * b * b
        if d % p == 0:
            raise CairoHintsValueError("zero discriminant")
        self.a = a
        self.b = b

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self.a > HEX_THRESHOLD or self.b > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self.a)}"
            result += f"\n b   = {hex_string(self.b)}"
        else:
            result += f"\n a   = {self.a}"
            result += f"\n b   = {self.b}"

        return result

    def __repr__(self) -> str:
        result = "Curve("
        result += f"'{hex_string(self.p)}'" if self.p > HEX_THRESHOLD else f"{self.p}"
        if self.a > HEX_THRESHOLD or self.b > HEX_THRESHOLD:
            result += f", '{hex_string(self.a)}', '{hex_string(self.b)}'"
        else:
            result += f", {self.a}, {self.b}"

        result += ")"
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return (self.p, self.a, self.b) == (other.p, other.a, other.b)

    def __hash__(self) -> int:
        return hash((self.p, self.a, self.b))

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        # % self.p is required to account for y == 0
        if len(Q) == 2:
            return Q[0], (self.p - Q[1]) % self.p
        raise CairoHintsTypeError("not a point")

    def y2(self, x: int) -> int:
        """Return x^3 + a*x + b, the candidate y^2 for x.

        Only the cube is reduced mod p: x may exceed p
        and the result is left unreduced.
        """
        return pow(x, 3, self.p) + self.a * x + self.b

    def recover_y(self, x: int) -> Optional[int]:
        """Return the canonical y coordinate for x, None if there is none.

        x does not need to be reduced mod p.
        """
        y2 = self.y2(x)
        if not is_quad_residue(y2, self.p):
            return None
        return sqrt(y2, self.p)

    def y(self, x: int) -> int:
        """Return the canonical y coordinate from x, as in (x, y)."""
        if not 0 <= x < self.p:
            raise CairoHintsValueError(f"x-coordinate not in 0..p-1: {int_repr(x)}")
        y = self.recover_y(x)
        if y is None:
            raise CairoHintsValueError(f"invalid x-coordinate: {int_repr(x)}")
        return y

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if len(Q) != 2:
            raise CairoHintsValueError("point must be a tuple[int, int]")
        if not 0 <= Q[0] < self.p:
            raise CairoHintsValueError(f"x-coordinate not in 0..p-1: {int_repr(Q[0])}")
        if not 0 <= Q[1] < self.p:
            raise CairoHintsValueError(f"y-coordinate not in 0..p-1: {int_repr(Q[1])}")
        return self.y2(Q[0]) % self.p == Q[1] * Q[1] % self.p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise CairoHintsValueError("point not on curve")


stark_curve = Curve(FIELD_PRIME, ALPHA, BETA)
