#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module cairo_hints.vm."""

from cairo_hints.vm.memory import Memory, MemorySegmentManager
from cairo_hints.vm.relocatable import MaybeRelocatable, Relocatable
from cairo_hints.vm.vm_core import VirtualMachine

__all__ = [
    "Memory",
    "MemorySegmentManager",
    "MaybeRelocatable",
    "Relocatable",
    "VirtualMachine",
]
