#!/usr/bin/env python3

# Copyright (C) The cairo_hints developers
#
# This file is part of cairo_hints. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cairo_hints including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Identifier references and ap-tracking data.

A reference describes where the value of an identifier (ids.name)
lives, as an expression of the ap/fp registers, e.g.
'[cast(fp + (-3), felt*)]' or '[cast([ap + (-1)] + 2, felt*)]'.
References to ap are only valid together with the ap-tracking data
recorded at the point of definition.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from cairo_hints.ecc.number_theory import felt_from_int
from cairo_hints.exceptions import CairoHintsValueError


class Register(Enum):
    AP = "ap"
    FP = "fp"


@dataclass(frozen=True)
class Immediate:
    value: int


@dataclass(frozen=True)
class Value:
    value: int


@dataclass(frozen=True)
class Reference:
    register: Register
    offset: int
    dereference: bool


OffsetValue = Union[Immediate, Value, Reference]


@dataclass(frozen=True)
class ApTracking:
    group: int = 0
    offset: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"group": self.group, "offset": self.offset}

    @classmethod
    def from_dict(cls: Type["ApTracking"], dict_: Mapping[str, Any]) -> "ApTracking":
        return cls(int(dict_["group"]), int(dict_["offset"]))


_CAST_RE = re.compile(r"(\[)?cast\((.+?), (.+)\)(\])?")
_REGISTER_RE = re.compile(r"(ap|fp)(?: \+ (?:\((-?\d+)\)|(-?\d+)))?")
_INT_RE = re.compile(r"\(?(-?\d+)\)?")


def _split_terms(expr: str) -> List[str]:
    "Split a sum of terms at its top level ' + ' separators."
    terms: List[str] = []
    depth = 0
    start = 0
    for i, c in enumerate(expr):
        if c in "[(":
            depth += 1
        elif c in "])":
            depth -= 1
        elif depth == 0 and expr.startswith(" + ", i):
            terms.append(expr[start:i])
            start = i + 3
    terms.append(expr[start:])
    return terms


def _parse_term(term: str) -> OffsetValue:
    dereference = term.startswith("[") and term.endswith("]")
    inner = term[1:-1] if dereference else term
    match = _REGISTER_RE.fullmatch(inner)
    if match:
        offset = match.group(2) or match.group(3) or "0"
        return Reference(Register(match.group(1)), int(offset), dereference)
    match = _INT_RE.fullmatch(term)
    if match:
        return Value(int(match.group(1)))
    raise CairoHintsValueError(f"invalid reference term: {term!r}")


def _parse_terms(expr: str) -> List[OffsetValue]:
    terms = _split_terms(expr)
    # 'fp + (-3)' is a single register term, not a sum
    if (
        len(terms) > 1
        and _REGISTER_RE.fullmatch(terms[0])
        and _INT_RE.fullmatch(terms[1])
    ):
        terms = [f"{terms[0]} + {terms[1]}"] + terms[2:]
    return [_parse_term(term) for term in terms]


def _format_term(term: OffsetValue) -> str:
    if isinstance(term, Reference):
        result = term.register.value
        if term.offset < 0:
            result += f" + ({term.offset})"
        elif term.offset > 0:
            result += f" + {term.offset}"
        return f"[{result}]" if term.dereference else result
    if term.value < 0:
        return f"({term.value})"
    return f"{term.value}"


@dataclass
class HintReference:
    offset1: OffsetValue
    offset2: OffsetValue = Value(0)
    dereference: bool = True
    ap_tracking_data: Optional[ApTracking] = None
    cairo_type: Optional[str] = None

    @classmethod
    def new_simple(
        cls: Type["HintReference"], offset1: int, dereference: bool = True
    ) -> "HintReference":
        "Return the reference to the fp-relative cell [fp + offset1]."
        return cls(Reference(Register.FP, offset1, False), Value(0), dereference)

    def to_dict(self) -> Dict[str, Any]:
        cairo_type = self.cairo_type or "felt"
        if isinstance(self.offset1, Immediate):
            value = f"cast({self.offset1.value}, {cairo_type})"
        else:
            expr = _format_term(self.offset1)
            if self.offset2 != Value(0):
                expr += " + " + _format_term(self.offset2)
            value = f"cast({expr}, {cairo_type})"
            if self.dereference:
                value = f"[{value}]"
        dict_: Dict[str, Any] = {"value": value}
        if self.ap_tracking_data is not None:
            dict_["ap_tracking_data"] = self.ap_tracking_data.to_dict()
        return dict_

    @classmethod
    def from_dict(
        cls: Type["HintReference"], dict_: Mapping[str, Any]
    ) -> "HintReference":
        """Return the reference from a compiled program reference record.

        The record is a mapping such as
        {"ap_tracking_data": {"group": 0, "offset": 0},
        "pc": 0, "value": "[cast(fp + (-3), felt*)]"}.
        """

        value = dict_["value"].strip()
        match = _CAST_RE.fullmatch(value)
        if not match or bool(match.group(1)) != bool(match.group(4)):
            raise CairoHintsValueError(f"invalid reference value: {value!r}")
        dereference = bool(match.group(1))
        expr, cairo_type = match.group(2), match.group(3)

        ap_tracking_data = None
        if dict_.get("ap_tracking_data") is not None:
            ap_tracking_data = ApTracking.from_dict(dict_["ap_tracking_data"])

        terms = _parse_terms(expr)
        if len(terms) > 2:
            raise CairoHintsValueError(f"invalid reference value: {value!r}")
        offset1: OffsetValue = terms[0]
        offset2: OffsetValue = terms[1] if len(terms) == 2 else Value(0)
        if isinstance(offset1, Value):
            if len(terms) == 2 or dereference:
                raise CairoHintsValueError(f"invalid reference value: {value!r}")
            offset1 = Immediate(felt_from_int(offset1.value))
        return cls(offset1, offset2, dereference, ap_tracking_data, cairo_type)
