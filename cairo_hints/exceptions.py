#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by cairo_hints from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the cairo_hints versions are derived.

Errors surfaced to the virtual machine while executing a hint
derive from HintError; memory access errors derive from
VirtualMachineError.
"""

from typing import Any


class CairoHintsValueError(ValueError):
    pass


class CairoHintsTypeError(TypeError):
    pass


class CairoHintsRuntimeError(RuntimeError):
    pass


class VirtualMachineError(CairoHintsRuntimeError):
    pass


class UnknownMemoryCell(VirtualMachineError):
    def __init__(self, address: Any) -> None:
        self.address = address
        super().__init__(f"unknown value for memory cell {address}")


class ExpectedInteger(VirtualMachineError):
    def __init__(self, address: Any) -> None:
        self.address = address
        super().__init__(f"expected integer at address {address}")


class ExpectedRelocatable(VirtualMachineError):
    def __init__(self, address: Any) -> None:
        self.address = address
        super().__init__(f"expected relocatable at address {address}")


class InconsistentMemory(VirtualMachineError):
    def __init__(self, address: Any, current: Any, new: Any) -> None:
        self.address = address
        self.current = current
        self.new = new
        err_msg = f"inconsistent memory assignment at address {address}: "
        err_msg += f"{current} != {new}"
        super().__init__(err_msg)


class HintError(CairoHintsRuntimeError):
    pass


class UnknownIdentifier(HintError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown identifier {name}")


class FailedToGetIds(HintError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"failed to get ids for identifier {name}")


class IdentifierNotInteger(HintError):
    def __init__(self, name: str, address: Any) -> None:
        self.name = name
        self.address = address
        super().__init__(f"identifier {name} at address {address} is not an integer")


class IdentifierHasNoMember(HintError):
    def __init__(self, name: str, member: str) -> None:
        self.name = name
        self.member = member
        super().__init__(f"identifier {name} has no member {member}")


class RandomEcPointNotOnCurve(HintError):
    def __init__(self) -> None:
        super().__init__("random_ec_point: could not find a point on the curve")


class UnknownHint(HintError):
    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"unknown hint: {code!r}")
