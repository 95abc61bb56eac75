from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from operator import attrgetter
from typing import Any

import numpy as np

from ..types import Tensor, Variable
from .errors import AttributeConversionError


class FieldKind(Enum):
    """Kinds of values a node field (or constructor argument) can hold."""

    TENSOR = "tensor"
    VARIABLE = "variable"
    SCALAR = "scalar"
    FLAG = "flag"
    INTEGER = "integer"
    STRING = "string"
    SEQUENCE = "sequence"


def _tensor_to_py(value: Any) -> Tensor | None:
    if value is None:
        return None
    if not isinstance(value, Tensor):
        raise TypeError(f"expected Tensor, got {type(value).__name__}")
    return value if value.defined else None


def _variable_to_py(value: Any) -> Variable | None:
    if value is not None and not isinstance(value, Variable):
        raise TypeError(f"expected Variable, got {type(value).__name__}")
    return value


def _scalar_to_py(value: Any) -> float:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise TypeError(f"expected a real number, got {type(value).__name__}")
    return float(value)


def _flag_to_py(value: Any) -> bool:
    if not isinstance(value, (bool, np.bool_)):
        raise TypeError(f"expected bool, got {type(value).__name__}")
    return bool(value)


def _integer_to_py(value: Any) -> int:
    if not isinstance(value, (int, np.integer)):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return int(value)


def _string_to_py(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    return value


TO_PY: dict[FieldKind, Callable[[Any], Any]] = {
    FieldKind.TENSOR: _tensor_to_py,
    FieldKind.VARIABLE: _variable_to_py,
    FieldKind.SCALAR: _scalar_to_py,
    FieldKind.FLAG: _flag_to_py,
    FieldKind.INTEGER: _integer_to_py,
    FieldKind.STRING: _string_to_py,
}


@dataclass(frozen=True, slots=True)
class AttributeDescriptor:
    """
    Read-only attribute exposed on a function type.

    Attributes:
        name: Attribute name seen from Python.
        kind: How the field value is converted.
        source: Dotted path of the field on the node (defaults to `name`),
                e.g. "params.running_mean".
        element: Element kind, required when `kind` is SEQUENCE.
        doc: Optional docstring for the generated property.
    """

    name: str
    kind: FieldKind
    source: str | None = None
    element: FieldKind | None = None
    doc: str | None = None

    def __post_init__(self):
        if self.kind is FieldKind.SEQUENCE:
            if self.element is None or self.element is FieldKind.SEQUENCE:
                raise ValueError(
                    f"Sequence attribute '{self.name}' needs a non-sequence element kind"
                )
        elif self.element is not None:
            raise ValueError(f"Only sequence attributes take an element kind ('{self.name}')")

    def convert(self, value: Any) -> Any:
        if self.kind is FieldKind.SEQUENCE:
            to_py = TO_PY[self.element]
            return tuple(to_py(item) for item in value)
        return TO_PY[self.kind](value)

    def read(self, node: Any) -> Any:
        """Read the field from `node` and convert it, without any caching."""
        try:
            return self.convert(attrgetter(self.source or self.name)(node))
        except Exception as e:
            raise AttributeConversionError(
                f"Failed to read attribute '{self.name}' of {type(node).__name__}: {e}"
            ) from e

    def as_property(self) -> property:
        descriptor = self

        def fget(obj):
            return descriptor.read(obj._cdata)

        fget.__name__ = self.name
        return property(fget, doc=self.doc)


def attribute_table(*entries: tuple[str, FieldKind] | AttributeDescriptor, prefix: str = "") -> tuple[AttributeDescriptor, ...]:
    """
    Build a table of descriptors from `(name, kind)` pairs.

    With `prefix`, each source becomes `f"{prefix}.{name}"` so a single table
    can describe the fields of a parameter struct embedded in the node.
    """
    table = []
    for entry in entries:
        if isinstance(entry, AttributeDescriptor):
            table.append(entry)
            continue
        name, kind = entry
        source = f"{prefix}.{name}" if prefix else None
        table.append(AttributeDescriptor(name, kind, source=source))
    _check_unique(d.name for d in table)
    return tuple(table)


def _check_unique(names: Iterable[str]) -> None:
    seen = set()
    for name in names:
        if name in seen:
            raise ValueError(f"Duplicate attribute '{name}'")
        seen.add(name)
