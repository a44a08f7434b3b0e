# Copyright 2026 Reef Contributors
# SPDX-License-Identifier: Apache-2.0

"""Abstract syntax tree nodes produced by the Reef parser."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class NumberNode(BaseModel):
    """A numeric literal."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: float


class IdentNode(BaseModel):
    """A reference to a named value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["ident"] = "ident"
    name: str


class SumNode(BaseModel):
    """An additive chain: ``operands[0] <operator> operands[1] <operator> ...``, evaluated left to right."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sum"] = "sum"
    operator: Literal["+", "-"]
    operands: list[ParseNode] = _Field(default_factory=list)


class ProductNode(BaseModel):
    """A multiplicative chain: ``operands[0] <operator> operands[1] <operator> ...``, evaluated left to right."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["product"] = "product"
    operator: Literal["*", "/"]
    operands: list[ParseNode] = _Field(default_factory=list)


# An expression node. New node kinds are added here; the `kind`
# discriminator keeps JSON round-trips unambiguous.
ParseNode = Annotated[
    NumberNode | IdentNode | SumNode | ProductNode,
    _Field(discriminator="kind"),
]


class Program(BaseModel):
    """The root of a parsed source unit: one child per top-level expression."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["program"] = "program"
    children: list[ParseNode] = _Field(default_factory=list)


# Resolve forward references for models that use ParseNode.
SumNode.model_rebuild()
ProductNode.model_rebuild()
Program.model_rebuild()
