#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Builtin hint processor.

Hints are recognized by their code, which is looked up verbatim
in a table of handlers. Each handler reads its inputs from VM memory
through the ids_data references and writes its outputs back.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, MutableMapping, Optional

from cairo_hints.exceptions import UnknownHint
from cairo_hints.hint_processor import hint_code
from cairo_hints.hint_processor.ec_utils import random_ec_point_hint
from cairo_hints.hint_processor.hint_reference import ApTracking, HintReference
from cairo_hints.vm.vm_core import VirtualMachine

logger = logging.getLogger(__name__)

HintFunc = Callable[[VirtualMachine, Mapping[str, HintReference], ApTracking], None]


@dataclass
class HintProcessorData:
    code: str
    ap_tracking: ApTracking = field(default_factory=ApTracking)
    ids_data: Dict[str, HintReference] = field(default_factory=dict)


class BuiltinHintProcessor:
    def __init__(self, extra_hints: Optional[Mapping[str, HintFunc]] = None) -> None:
        self.hints: MutableMapping[str, HintFunc] = {
            hint_code.RANDOM_EC_POINT: random_ec_point_hint,
        }
        if extra_hints:
            for code, func in extra_hints.items():
                self.add_hint(code, func)

    def add_hint(self, code: str, func: HintFunc) -> None:
        "Register func as the handler of the hint code."
        self.hints[code] = func

    def compile_hint(
        self,
        code: str,
        ap_tracking_data: ApTracking,
        reference_ids: Mapping[str, int],
        references: Mapping[int, Any],
    ) -> HintProcessorData:
        """Return the data needed to execute the hint.

        reference_ids maps full identifier names
        (e.g. '__main__.main.p') to reference indexes,
        references maps those indexes to HintReference
        (or to compiled program reference records).
        Identifiers are made available by their last name component.
        """

        ids_data: Dict[str, HintReference] = {}
        for path, ref_id in reference_ids.items():
            name = path.rsplit(".", 1)[-1]
            reference = references[ref_id]
            if not isinstance(reference, HintReference):
                reference = HintReference.from_dict(reference)
            ids_data[name] = reference
        return HintProcessorData(code, ap_tracking_data, ids_data)

    def execute_hint(self, vm: VirtualMachine, hint_data: HintProcessorData) -> None:
        try:
            func = self.hints[hint_data.code]
        except KeyError:
            raise UnknownHint(hint_data.code) from None
        logger.debug("executing hint %s", getattr(func, "__name__", func))
        func(vm, hint_data.ids_data, hint_data.ap_tracking)
