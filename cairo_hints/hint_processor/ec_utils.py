#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve hints.

Implements the hint (see hint_code.RANDOM_EC_POINT):

    seed = b"".join(map(to_bytes, [ids.p.x, ids.p.y, ids.m, ids.q.x, ids.q.y]))
    ids.s.x, ids.s.y = random_ec_point(FIELD_PRIME, ALPHA, BETA, seed)

The seed depends on all the inputs, so that the added point s
is deterministic and it is hard to choose inputs
for which the builtin would fail.
"""

import logging
from dataclasses import dataclass
from typing import Type

from cairo_hints.ecc.random_ec_point import random_ec_point, seed_from_felts
from cairo_hints.exceptions import IdentifierHasNoMember, VirtualMachineError
from cairo_hints.hint_processor.hint_reference import ApTracking
from cairo_hints.hint_processor.hint_utils import (
    IdsData,
    get_integer_from_var_name,
    get_relocatable_from_var_name,
)
from cairo_hints.vm.vm_core import VirtualMachine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EcPoint:
    x: int
    y: int

    @classmethod
    def from_var_name(
        cls: Type["EcPoint"],
        name: str,
        vm: VirtualMachine,
        ids_data: IdsData,
        ap_tracking: ApTracking,
    ) -> "EcPoint":
        "Return the EcPoint struct stored at the address of the identifier."

        point_addr = get_relocatable_from_var_name(name, vm, ids_data, ap_tracking)
        try:
            x = vm.get_integer(point_addr)
        except VirtualMachineError as e:
            raise IdentifierHasNoMember(name, "x") from e
        try:
            y = vm.get_integer(point_addr + 1)
        except VirtualMachineError as e:
            raise IdentifierHasNoMember(name, "y") from e
        return cls(x, y)


def random_ec_point_hint(
    vm: VirtualMachine, ids_data: IdsData, ap_tracking: ApTracking
) -> None:
    p = EcPoint.from_var_name("p", vm, ids_data, ap_tracking)
    q = EcPoint.from_var_name("q", vm, ids_data, ap_tracking)
    m = get_integer_from_var_name("m", vm, ids_data, ap_tracking)
    seed = seed_from_felts([p.x, p.y, m, q.x, q.y])
    x, y = random_ec_point(seed)
    s_addr = get_relocatable_from_var_name("s", vm, ids_data, ap_tracking)
    logger.debug("random_ec_point_hint: writing s at %s", s_addr)
    vm.insert_values(s_addr, [x, y])
