#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Resolution of identifiers (ids.name) to memory addresses and values."""

from typing import Mapping, Optional

from cairo_hints.exceptions import (
    FailedToGetIds,
    IdentifierNotInteger,
    UnknownIdentifier,
    VirtualMachineError,
)
from cairo_hints.hint_processor.hint_reference import (
    ApTracking,
    HintReference,
    Immediate,
    OffsetValue,
    Reference,
    Register,
    Value,
)
from cairo_hints.vm.relocatable import Relocatable
from cairo_hints.vm.vm_core import VirtualMachine

IdsData = Mapping[str, HintReference]


def get_reference_from_var_name(name: str, ids_data: IdsData) -> HintReference:
    try:
        return ids_data[name]
    except KeyError:
        raise UnknownIdentifier(name) from None


def apply_ap_tracking_correction(
    ap: Relocatable, ref_ap_tracking: ApTracking, hint_ap_tracking: ApTracking
) -> Optional[Relocatable]:
    """Return the value ap had when the reference was defined.

    None is returned if the reference and the hint
    belong to different ap-tracking groups.
    """
    if ref_ap_tracking.group != hint_ap_tracking.group:
        return None
    ap_diff = hint_ap_tracking.offset - ref_ap_tracking.offset
    return ap - ap_diff  # type: ignore


def _register_addr(
    vm: VirtualMachine,
    reference: HintReference,
    hint_ap_tracking: ApTracking,
    offset_value: Reference,
) -> Optional[Relocatable]:
    "Return register + offset, without dereferencing it."
    if offset_value.register == Register.FP:
        base_addr: Optional[Relocatable] = vm.get_fp()
    elif reference.ap_tracking_data is None:
        return None
    else:
        base_addr = apply_ap_tracking_correction(
            vm.get_ap(), reference.ap_tracking_data, hint_ap_tracking
        )
    if base_addr is None or base_addr.offset + offset_value.offset < 0:
        return None
    return base_addr + offset_value.offset


def compute_addr_from_reference(
    reference: HintReference, vm: VirtualMachine, hint_ap_tracking: ApTracking
) -> Optional[Relocatable]:
    """Return the address the reference points to.

    The outer dereference of the reference is not applied:
    for '[cast(fp + (-3), felt*)]' the address fp - 3 is returned.
    None is returned if the address cannot be computed.
    """

    offset1 = reference.offset1
    if not isinstance(offset1, Reference):
        return None
    try:
        addr = _register_addr(vm, reference, hint_ap_tracking, offset1)
        if addr is None:
            return None
        if offset1.dereference:
            addr = vm.get_relocatable(addr)

        offset2: OffsetValue = reference.offset2
        if isinstance(offset2, Value):
            return addr + offset2.value
        # a relocatable cannot be added to another relocatable:
        # offset2 must dereference to an integer
        if isinstance(offset2, Reference) and offset2.dereference:
            addr2 = _register_addr(vm, reference, hint_ap_tracking, offset2)
            if addr2 is None:
                return None
            return addr + vm.get_integer(addr2)
    except VirtualMachineError:
        return None
    return None


def get_relocatable_from_var_name(
    name: str, vm: VirtualMachine, ids_data: IdsData, ap_tracking: ApTracking
) -> Relocatable:
    "Return the address of the identifier."
    reference = get_reference_from_var_name(name, ids_data)
    addr = compute_addr_from_reference(reference, vm, ap_tracking)
    if addr is None:
        raise FailedToGetIds(name)
    return addr


def get_integer_from_var_name(
    name: str, vm: VirtualMachine, ids_data: IdsData, ap_tracking: ApTracking
) -> int:
    "Return the field element value of the identifier."
    reference = get_reference_from_var_name(name, ids_data)
    # immediate values do not live in memory
    if isinstance(reference.offset1, Immediate):
        return reference.offset1.value
    addr = compute_addr_from_reference(reference, vm, ap_tracking)
    if addr is None:
        raise FailedToGetIds(name)
    try:
        return vm.get_integer(addr)
    except VirtualMachineError as e:
        raise IdentifierNotInteger(name, addr) from e
