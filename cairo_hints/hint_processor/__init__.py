#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module cairo_hints.hint_processor."""

from cairo_hints.hint_processor.builtin_hint_processor import (
    BuiltinHintProcessor,
    HintProcessorData,
)
from cairo_hints.hint_processor.hint_reference import ApTracking, HintReference

__all__ = [
    "BuiltinHintProcessor",
    "HintProcessorData",
    "ApTracking",
    "HintReference",
]
