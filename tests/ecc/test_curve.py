#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `cairo_hints.ecc.curve` module."

import pytest

from cairo_hints.ecc.curve import ALPHA, BETA, FIELD_PRIME, Curve, stark_curve
from cairo_hints.ecc.number_theory import CAIRO_PRIME
from cairo_hints.exceptions import CairoHintsTypeError, CairoHintsValueError

# y^2 = x^3 + 2 (mod 13): (1, 9) and (1, 4) are on the curve
ec13 = Curve(13, 0, 2)


def test_exceptions() -> None:

    # good curve
    Curve(13, 0, 2)

    with pytest.raises(CairoHintsValueError, match="p is not prime: "):
        Curve(15, 0, 2)

    with pytest.raises(CairoHintsValueError, match="negative a: "):
        Curve(13, -1, 2)

    with pytest.raises(CairoHintsValueError, match="p <= a: "):
        Curve(13, 13, 2)

    with pytest.raises(CairoHintsValueError, match="negative b: "):
        Curve(13, 0, -1)

    with pytest.raises(CairoHintsValueError, match="p <= b: "):
        Curve(13, 0, 13)

    with pytest.raises(CairoHintsValueError, match="zero discriminant"):
        Curve(13, 0, 0)


def test_stark_curve() -> None:
    assert FIELD_PRIME == CAIRO_PRIME
    assert ALPHA == 1
    assert BETA < FIELD_PRIME
    assert stark_curve.p == FIELD_PRIME
    assert stark_curve.a == ALPHA
    assert stark_curve.b == BETA
    assert stark_curve == Curve(hex(FIELD_PRIME), ALPHA, BETA)
    assert hash(stark_curve) == hash(Curve(FIELD_PRIME, ALPHA, BETA))
    assert stark_curve != ec13
    assert stark_curve != "stark"


def test_str_repr() -> None:
    assert str(ec13) == "Curve\n p   = 13\n a   = 0\n b   = 2"
    assert repr(ec13) == "Curve(13, 0, 2)"

    assert str(stark_curve).startswith("Curve\n p   = 08000000 00000011")
    assert repr(stark_curve).startswith("Curve('08000000 00000011")
    assert ", '01', '" in repr(stark_curve)


def test_y() -> None:
    # canonical root is the smaller one
    assert ec13.y(1) == 4
    assert ec13.recover_y(1) == 4
    # x is not required to be reduced
    assert ec13.recover_y(1 + 13) == 4
    # x^3 + 2 = 2 is not a square mod 13
    assert ec13.recover_y(0) is None

    with pytest.raises(CairoHintsValueError, match="invalid x-coordinate: "):
        ec13.y(0)
    with pytest.raises(CairoHintsValueError, match="x-coordinate not in 0..p-1: "):
        ec13.y(13)
    with pytest.raises(CairoHintsValueError, match="x-coordinate not in 0..p-1: "):
        ec13.y(-1)


def test_y2() -> None:
    assert ec13.y2(1) == 3
    assert ec13.y2(14) == 3
    # only the cube is reduced
    x = FIELD_PRIME + 5
    assert stark_curve.y2(x) == pow(x, 3, FIELD_PRIME) + x + BETA


def test_on_curve() -> None:
    assert ec13.is_on_curve((1, 9))
    assert ec13.is_on_curve((1, 4))
    assert not ec13.is_on_curve((1, 5))
    ec13.require_on_curve((1, 9))
    with pytest.raises(CairoHintsValueError, match="point not on curve"):
        ec13.require_on_curve((1, 5))

    with pytest.raises(CairoHintsValueError, match="point must be a tuple"):
        ec13.is_on_curve((1, 9, 1))  # type: ignore
    with pytest.raises(CairoHintsValueError, match="y-coordinate not in 0..p-1: "):
        ec13.is_on_curve((1, 13))
    with pytest.raises(CairoHintsValueError, match="x-coordinate not in 0..p-1: "):
        ec13.is_on_curve((13, 1))

    x = 1
    while stark_curve.recover_y(x) is None:
        x += 1
    y = stark_curve.y(x)
    assert stark_curve.is_on_curve((x, y))
    assert stark_curve.is_on_curve(stark_curve.negate((x, y)))


def test_negate() -> None:
    assert ec13.negate((1, 9)) == (1, 4)
    assert ec13.negate((1, 4)) == (1, 9)
    assert ec13.negate((5, 0)) == (5, 0)
    assert stark_curve.negate((0, 1)) == (0, FIELD_PRIME - 1)
    with pytest.raises(CairoHintsTypeError, match="not a point"):
        ec13.negate((1, 9, 1))  # type: ignore
