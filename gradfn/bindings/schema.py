from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from ..autograd import Function
from ..types import Tensor, Variable
from .descriptors import FieldKind
from .errors import ArgumentCountError, ArgumentError, ArgumentTypeError, ConstructionNotSupportedError

_EXPECTED = {
    FieldKind.TENSOR: "Tensor",
    FieldKind.VARIABLE: "Variable",
    FieldKind.SCALAR: "float",
    FieldKind.FLAG: "bool",
    FieldKind.INTEGER: "int",
    FieldKind.STRING: "str",
}


def _parse_tensor(value: Any) -> Tensor | None:
    if isinstance(value, Variable):
        return value.value
    if isinstance(value, Tensor):
        return value
    return None


def _parse_variable(value: Any) -> Variable | None:
    return value if isinstance(value, Variable) else None


def _parse_scalar(value: Any) -> float | None:
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, float, np.integer, np.floating)):
        return float(value)
    return None


def _parse_flag(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def _parse_integer(value: Any) -> int | None:
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, np.integer)):
        return int(value)
    return None


def _parse_string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


# Each parser returns None when the value is not acceptable for its kind.
_PARSERS: dict[FieldKind, Callable[[Any], Any]] = {
    FieldKind.TENSOR: _parse_tensor,
    FieldKind.VARIABLE: _parse_variable,
    FieldKind.SCALAR: _parse_scalar,
    FieldKind.FLAG: _parse_flag,
    FieldKind.INTEGER: _parse_integer,
    FieldKind.STRING: _parse_string,
}


@dataclass(frozen=True)
class ArgumentSchema:
    """
    Ordered list of `(name, kind)` pairs describing a positional constructor.

    `parse` checks the whole argument tuple up front: a call either yields
    every converted value or raises before anything is built.
    """

    fields: tuple[tuple[str, FieldKind], ...]

    def __post_init__(self):
        for name, kind in self.fields:
            if kind not in _PARSERS:
                raise ValueError(f"Argument '{name}' has unsupported kind {kind.value}")

    @property
    def arity(self) -> int:
        return len(self.fields)

    def parse(self, fn_name: str, args: Sequence[Any]) -> dict[str, Any]:
        if len(args) != self.arity:
            raise ArgumentCountError(
                f"{fn_name}() takes exactly {self.arity} arguments ({len(args)} given)"
            )

        values = {}
        for position, ((name, kind), value) in enumerate(zip(self.fields, args)):
            parsed = _PARSERS[kind](value)
            if parsed is None:
                raise ArgumentTypeError(
                    f"{fn_name}(): argument '{name}' (position {position}) must be "
                    f"{_EXPECTED[kind]}, not {type(value).__name__}"
                )
            values[name] = parsed
        return values


class Constructor:
    """Builds a native node from positional Python arguments."""

    def __init__(self, schema: ArgumentSchema, build: Callable[..., Function]):
        self.schema = schema
        self.build = build

    def __call__(self, fn_name: str, args: Sequence[Any], kwargs: dict[str, Any]) -> Function:
        if kwargs:
            raise ArgumentError(f"{fn_name}() does not accept keyword arguments")
        return self.build(**self.schema.parse(fn_name, args))


class _NoConstructor:
    """Marker for types whose nodes are only ever created by the graph."""

    def __call__(self, fn_name: str, args: Sequence[Any], kwargs: dict[str, Any]) -> Function:
        raise ConstructionNotSupportedError(f"Cannot construct {fn_name}")

    def __repr__(self) -> str:
        return "NO_CONSTRUCTOR"


NO_CONSTRUCTOR = _NoConstructor()


def constructor(*fields: tuple[str, FieldKind]) -> Callable[[Callable[..., Function]], Constructor]:
    """Decorator turning a keyword-only builder into a `Constructor`."""

    def decorator(build: Callable[..., Function]) -> Constructor:
        return Constructor(ArgumentSchema(tuple(fields)), build)

    return decorator
