#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `cairo_hints.hint_processor.ec_utils` module."

from typing import Dict

import pytest

from cairo_hints.ecc.curve import stark_curve
from cairo_hints.ecc.number_theory import CAIRO_PRIME
from cairo_hints.ecc.random_ec_point import random_ec_point, seed_from_felts
from cairo_hints.exceptions import (
    ExpectedInteger,
    FailedToGetIds,
    IdentifierHasNoMember,
    IdentifierNotInteger,
    InconsistentMemory,
    UnknownIdentifier,
    UnknownMemoryCell,
)
from cairo_hints.hint_processor.ec_utils import EcPoint, random_ec_point_hint
from cairo_hints.hint_processor.hint_reference import ApTracking, HintReference
from cairo_hints.vm.relocatable import Relocatable
from cairo_hints.vm.vm_core import VirtualMachine

# fp-relative layout: p at fp - 10, m at fp - 8, q at fp - 7, s at fp - 5
FP = Relocatable(1, 10)
P_ADDR = Relocatable(1, 0)
M_ADDR = Relocatable(1, 2)
Q_ADDR = Relocatable(1, 3)
S_ADDR = Relocatable(1, 5)


def make_ids_data() -> Dict[str, HintReference]:
    return {
        "p": HintReference.new_simple(-10),
        "m": HintReference.new_simple(-8),
        "q": HintReference.new_simple(-7),
        "s": HintReference.new_simple(-5),
    }


def make_vm(p_x: int, p_y: int, m: int, q_x: int, q_y: int) -> VirtualMachine:
    vm = VirtualMachine(ap=FP, fp=FP)
    vm.segments.load_data(P_ADDR, [p_x, p_y, m, q_x, q_y])
    return vm


def assert_s_not_written(vm: VirtualMachine) -> None:
    assert S_ADDR not in vm.memory
    assert S_ADDR + 1 not in vm.memory


def test_ec_point_from_var_name() -> None:
    vm = make_vm(1, 2, 3, 4, 5)
    ids_data = make_ids_data()
    p = EcPoint.from_var_name("p", vm, ids_data, ApTracking())
    assert p == EcPoint(1, 2)
    q = EcPoint.from_var_name("q", vm, ids_data, ApTracking())
    assert q == EcPoint(4, 5)


def test_random_ec_point_hint() -> None:
    vm = make_vm(1, 2, 3, 4, 5)
    random_ec_point_hint(vm, make_ids_data(), ApTracking())

    x, y = random_ec_point(seed_from_felts([1, 2, 3, 4, 5]))
    assert vm.get_integer(S_ADDR) == x
    assert vm.get_integer(S_ADDR + 1) == y
    assert stark_curve.is_on_curve((x, y))
    # only the two cells of s have been written
    assert len(vm.memory) == 7

    # running the hint again on the same memory is consistent
    random_ec_point_hint(vm, make_ids_data(), ApTracking())
    assert vm.get_integer(S_ADDR) == x


def test_random_ec_point_hint_large_inputs() -> None:
    felts = [CAIRO_PRIME - k for k in range(1, 6)]
    vm = make_vm(*felts)
    random_ec_point_hint(vm, make_ids_data(), ApTracking())
    Q = vm.get_integer(S_ADDR), vm.get_integer(S_ADDR + 1)
    assert Q == random_ec_point(seed_from_felts(felts))
    assert stark_curve.is_on_curve(Q)


def test_random_ec_point_hint_ap_based() -> None:
    vm = make_vm(1, 2, 3, 4, 5)
    ap_tracking_data = {"group": 2, "offset": 4}
    references = {
        "p": "[cast(ap + (-10), starkware.cairo.common.ec_point.EcPoint*)]",
        "m": "[cast(ap + (-8), felt*)]",
        "q": "[cast(ap + (-7), starkware.cairo.common.ec_point.EcPoint*)]",
        "s": "[cast(ap + (-5), starkware.cairo.common.ec_point.EcPoint*)]",
    }
    ids_data = {
        name: HintReference.from_dict(
            {"ap_tracking_data": ap_tracking_data, "value": value}
        )
        for name, value in references.items()
    }
    # ap advanced by one since the references were defined
    vm.ap = FP + 1
    random_ec_point_hint(vm, ids_data, ApTracking(2, 5))
    x, y = random_ec_point(seed_from_felts([1, 2, 3, 4, 5]))
    assert vm.get_integer(S_ADDR) == x
    assert vm.get_integer(S_ADDR + 1) == y


def test_missing_member() -> None:
    # p.y is not an integer
    vm = VirtualMachine(ap=FP, fp=FP)
    vm.insert_value(P_ADDR, 1)
    vm.insert_value(P_ADDR + 1, Relocatable(0, 0))
    vm.segments.load_data(M_ADDR, [3, 4, 5])
    err_msg = "identifier p has no member y"
    with pytest.raises(IdentifierHasNoMember, match=err_msg) as excinfo:
        random_ec_point_hint(vm, make_ids_data(), ApTracking())
    assert excinfo.value.name == "p"
    assert excinfo.value.member == "y"
    assert isinstance(excinfo.value.__cause__, ExpectedInteger)
    assert_s_not_written(vm)

    # p.y is missing
    vm = VirtualMachine(ap=FP, fp=FP)
    vm.insert_value(P_ADDR, 1)
    vm.segments.load_data(M_ADDR, [3, 4, 5])
    with pytest.raises(IdentifierHasNoMember, match="identifier p has no member y"):
        random_ec_point_hint(vm, make_ids_data(), ApTracking())
    assert_s_not_written(vm)

    # q.x is missing
    vm = VirtualMachine(ap=FP, fp=FP)
    vm.segments.load_data(P_ADDR, [1, 2, 3])
    vm.insert_value(Q_ADDR + 1, 5)
    err_msg = "identifier q has no member x"
    with pytest.raises(IdentifierHasNoMember, match=err_msg) as excinfo:
        random_ec_point_hint(vm, make_ids_data(), ApTracking())
    assert isinstance(excinfo.value.__cause__, UnknownMemoryCell)
    assert_s_not_written(vm)


def test_m_not_integer() -> None:
    vm = VirtualMachine(ap=FP, fp=FP)
    vm.segments.load_data(P_ADDR, [1, 2, Relocatable(0, 0), 4, 5])
    with pytest.raises(IdentifierNotInteger, match="identifier m at address 1:2"):
        random_ec_point_hint(vm, make_ids_data(), ApTracking())
    assert_s_not_written(vm)


def test_unknown_identifiers() -> None:
    vm = make_vm(1, 2, 3, 4, 5)
    ids_data = make_ids_data()
    del ids_data["s"]
    with pytest.raises(UnknownIdentifier, match="unknown identifier s"):
        random_ec_point_hint(vm, ids_data, ApTracking())
    assert_s_not_written(vm)

    ids_data = make_ids_data()
    ids_data["s"] = HintReference.new_simple(-11)
    with pytest.raises(FailedToGetIds, match="identifier s"):
        random_ec_point_hint(vm, ids_data, ApTracking())
    assert len(vm.memory) == 5


def test_atomic_write() -> None:
    vm = make_vm(1, 2, 3, 4, 5)
    x, y = random_ec_point(seed_from_felts([1, 2, 3, 4, 5]))
    # s.y already holds a different value
    vm.insert_value(S_ADDR + 1, y + 1)
    with pytest.raises(InconsistentMemory):
        random_ec_point_hint(vm, make_ids_data(), ApTracking())
    assert S_ADDR not in vm.memory
    assert vm.get_integer(S_ADDR + 1) == (y + 1) % CAIRO_PRIME
