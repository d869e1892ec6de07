#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Relocatable memory addresses.

An address is a (segment_index, offset) pair: segments are
relocated to absolute addresses only at the end of the run,
so during execution only same-segment arithmetic is allowed.
"""

from dataclasses import dataclass
from typing import Union

from cairo_hints.exceptions import CairoHintsTypeError, VirtualMachineError


@dataclass(frozen=True)
class Relocatable:
    segment_index: int
    offset: int

    def __str__(self) -> str:
        return f"{self.segment_index}:{self.offset}"

    def __add__(self, other: int) -> "Relocatable":
        if not isinstance(other, int):
            raise CairoHintsTypeError(f"cannot add {type(other).__name__} to {self}")
        offset = self.offset + other
        if offset < 0:
            raise VirtualMachineError(f"negative offset: {self} + {other}")
        return Relocatable(self.segment_index, offset)

    def __sub__(self, other: Union[int, "Relocatable"]) -> Union[int, "Relocatable"]:
        if isinstance(other, Relocatable):
            if other.segment_index != self.segment_index:
                err_msg = "cannot subtract addresses of different segments: "
                err_msg += f"{self} - {other}"
                raise VirtualMachineError(err_msg)
            return self.offset - other.offset
        return self + (-other)


MaybeRelocatable = Union[int, Relocatable]
