#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions over prime fields.

Square root implementations originally from
https://codereview.stackexchange.com/questions/43210/tonelli-shanks-algorithm-implementation-of-prime-modular-square-root/43267
with the following modifications:

* type annotated python3
* canonical (smaller) root selection for the Cairo field
* added extensive unit test
"""

from cairo_hints.alias import Felt
from cairo_hints.exceptions import CairoHintsValueError
from cairo_hints.utils import int_repr

CAIRO_PRIME = 2**251 + 17 * 2**192 + 1

FELT_SIZE = 32


def felt_from_int(i: int, p: int = CAIRO_PRIME) -> Felt:
    """Return the field element congruent to i (mod p).

    Negative ints are mapped to their additive inverse,
    e.g. -1 becomes p - 1, while -0 stays 0.
    """
    return i % p


def to_padded_bytes(n: int, size: int = FELT_SIZE) -> bytes:
    """Return the big-endian encoding of n, left padded with zeros.

    The encoding is never truncated: an error is raised
    if n does not fit into size bytes.
    """

    if n < 0:
        raise CairoHintsValueError(f"negative integer: {n}")
    if n.bit_length() > size * 8:
        err_msg = f"too big integer: {int_repr(n)}"
        err_msg += f" does not fit into {size} bytes"
        raise CairoHintsValueError(err_msg)
    return n.to_bytes(size, byteorder="big", signed=False)


def legendre_symbol(a: int, p: int) -> int:
    """Compute the Legendre symbol a|p using Euler's criterion.

    p is a prime, a is relatively prime to p (if p divides a,
    then a|p = 0).
    It returns 1 if a has a square root modulo p, -1 otherwise.

    https://codereview.stackexchange.com/questions/43210/tonelli-shanks-algorithm-implementation-of-prime-modular-square-root/43267
    """

    ls = pow(a, p >> 1, p)
    return -1 if ls == p - 1 else ls


def is_quad_residue(a: int, p: int = CAIRO_PRIME) -> bool:
    """Return True if a has a square root modulo the prime p.

    Euler's criterion is used, with a shortcut for 0 and 1:
    0 is a square (0^2 = 0) even if its Legendre symbol is 0.
    The input is not reduced before the shortcut.
    """

    if a < 2:
        return True
    return pow(a, (p - 1) // 2, p) == 1


def _no_root(a: int, p: int) -> CairoHintsValueError:
    return CairoHintsValueError(f"no root for {int_repr(a)} mod {int_repr(p)}")


def mod_sqrt(a: int, p: int) -> int:
    """Return a square root of a (mod p); p must be a prime.

    Solve the equation:
        x^2 = a mod p

    and return x. Note that p - x is also a root.

    If a simple solution is not available for p,
    then the Tonelli-Shanks algorithm is used.
    """

    a %= p

    if p % 4 == 3:
        # inverse candidate is pow(a, (p + 1) // 4, p)
        r = pow(a, (p >> 2) + 1, p)
    elif p % 8 == 5:
        # inverse candidate is pow(a, (p + 3) // 8, p)
        r = pow(a, (p >> 3) + 1, p)
        if r * r % p == a:
            return r
        # another inverse candidate
        r = r * pow(2, p >> 2, p) % p
    else:
        return tonelli(a, p)

    if r * r % p != a:
        raise _no_root(a, p)
    return r


def tonelli(a: int, p: int) -> int:
    """Return a square root of a (mod p); p must be a prime.

    The Tonelli-Shanks algorithm is used.

    https://codereview.stackexchange.com/questions/43210/tonelli-shanks-algorithm-implementation-of-prime-modular-square-root/43267
    """

    a %= p
    if a == 0 or p == 2:
        return a

    # Check solution existence for an odd prime p
    if legendre_symbol(a, p) != 1:
        raise _no_root(a, p)

    # Factor p-1 on the form q * 2^s (with q odd)
    q, s = p - 1, 0
    while q & 1 == 0:
        s += 1
        q >>= 1
    if s == 1:
        return pow(a, (p + 1) // 4, p)

    # Select a z which is a quadratic non residue modulo p
    z = 1
    while legendre_symbol(z, p) != -1:
        z += 1
    c = pow(z, q, p)
    r = pow(a, (q + 1) // 2, p)
    t = pow(a, q, p)
    while t != 1:
        # Find the lowest i such that t^(2^i) = 1
        t2i = t
        for i in range(1, s):
            t2i = t2i * t2i % p
            if t2i == 1:
                # Update next value to iterate
                b = pow(c, 1 << (s - i - 1), p)
                r = (r * b) % p
                c = (b * b) % p
                t = (t * c) % p
                s = i
                break

    return r


def sqrt(a: int, p: int = CAIRO_PRIME) -> int:
    """Return the canonical square root of a (mod p).

    Of the two roots r and p - r the smaller one is returned,
    so that the result is deterministic whatever algorithm is used.
    The input must be a quadratic residue.
    """

    r = mod_sqrt(a, p)
    return min(r, p - r)
