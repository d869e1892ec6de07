#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Segmented write-once memory.

Each cell holds either a field element or a Relocatable address.
Once written, a cell can only be written again with the same value.
"""

from typing import Dict, Iterable, Optional

from cairo_hints.ecc.number_theory import felt_from_int
from cairo_hints.exceptions import (
    CairoHintsTypeError,
    ExpectedInteger,
    ExpectedRelocatable,
    InconsistentMemory,
    UnknownMemoryCell,
)
from cairo_hints.vm.relocatable import MaybeRelocatable, Relocatable


class Memory:
    def __init__(self) -> None:
        self.data: Dict[Relocatable, MaybeRelocatable] = {}

    def __contains__(self, addr: Relocatable) -> bool:
        return addr in self.data

    def __len__(self) -> int:
        return len(self.data)

    def get(self, addr: Relocatable) -> Optional[MaybeRelocatable]:
        return self.data.get(addr)

    def _normalize(self, value: MaybeRelocatable) -> MaybeRelocatable:
        if isinstance(value, Relocatable):
            return value
        if isinstance(value, int):
            return felt_from_int(value)
        raise CairoHintsTypeError(f"invalid memory value: {value!r}")

    def validate(self, addr: Relocatable, value: MaybeRelocatable) -> MaybeRelocatable:
        """Return the value as it would be stored at addr.

        InconsistentMemory is raised if the cell
        already holds a different value.
        """
        if not isinstance(addr, Relocatable):
            raise CairoHintsTypeError(f"invalid memory address: {addr!r}")
        value = self._normalize(value)
        current = self.data.get(addr)
        if current is not None and current != value:
            raise InconsistentMemory(addr, current, value)
        return value

    def insert(self, addr: Relocatable, value: MaybeRelocatable) -> None:
        self.data[addr] = self.validate(addr, value)

    def get_integer(self, addr: Relocatable) -> int:
        value = self.data.get(addr)
        if value is None:
            raise UnknownMemoryCell(addr)
        if not isinstance(value, int):
            raise ExpectedInteger(addr)
        return value

    def get_relocatable(self, addr: Relocatable) -> Relocatable:
        value = self.data.get(addr)
        if value is None:
            raise UnknownMemoryCell(addr)
        if not isinstance(value, Relocatable):
            raise ExpectedRelocatable(addr)
        return value


class MemorySegmentManager:
    def __init__(self) -> None:
        self.memory = Memory()
        self.n_segments = 0

    def add(self) -> Relocatable:
        "Return the base address of a new memory segment."
        segment = Relocatable(self.n_segments, 0)
        self.n_segments += 1
        return segment

    def load_data(
        self, ptr: Relocatable, data: Iterable[MaybeRelocatable]
    ) -> Relocatable:
        """Write data into consecutive cells starting at ptr.

        Return the address following the last written cell.
        """
        for value in data:
            self.memory.insert(ptr, value)
            ptr += 1
        return ptr

