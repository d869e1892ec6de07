#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Virtual machine state as seen by hints.

Only registers and memory are modelled:
hints read their inputs from memory and write their outputs back.
"""

from typing import Optional, Sequence

from cairo_hints.vm.memory import Memory, MemorySegmentManager
from cairo_hints.vm.relocatable import MaybeRelocatable, Relocatable


class VirtualMachine:
    def __init__(
        self,
        ap: Optional[Relocatable] = None,
        fp: Optional[Relocatable] = None,
        pc: Optional[Relocatable] = None,
    ) -> None:
        self.segments = MemorySegmentManager()
        program_base = self.segments.add()
        execution_base = self.segments.add()
        self.pc = program_base if pc is None else pc
        self.ap = execution_base if ap is None else ap
        self.fp = self.ap if fp is None else fp

    @property
    def memory(self) -> Memory:
        return self.segments.memory

    def get_ap(self) -> Relocatable:
        return self.ap

    def get_fp(self) -> Relocatable:
        return self.fp

    def get_pc(self) -> Relocatable:
        return self.pc

    def get_integer(self, addr: Relocatable) -> int:
        return self.segments.memory.get_integer(addr)

    def get_relocatable(self, addr: Relocatable) -> Relocatable:
        return self.segments.memory.get_relocatable(addr)

    def insert_value(self, addr: Relocatable, value: MaybeRelocatable) -> None:
        self.segments.memory.insert(addr, value)

    def insert_values(
        self, base: Relocatable, values: Sequence[MaybeRelocatable]
    ) -> None:
        """Write values into consecutive cells starting at base.

        Either all cells are written or, if any of them
        would be inconsistent, none is.
        """
        memory = self.segments.memory
        checked = [memory.validate(base + i, value) for i, value in enumerate(values)]
        for i, value in enumerate(checked):
            memory.insert(base + i, value)
