from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from ..autograd import Function
from .errors import RegistrationError
from .python_function import FunctionObject

logger = logging.getLogger("bindings.registry")


class FunctionTypeRegistry(Mapping):
    """
    Immutable map from native `Function` classes to their Python types.

    Built once by `RegistryBuilder.freeze()` and handed out by reference;
    generic code uses it to wrap arbitrary graph nodes.
    """

    def __init__(self, types: Mapping[type[Function], type[FunctionObject]]):
        self._types = MappingProxyType(dict(types))

    def __getitem__(self, native_class: type[Function]) -> type[FunctionObject]:
        return self._types[native_class]

    def __iter__(self) -> Iterator[type[Function]]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def lookup(self, native_class: type[Function]) -> type[FunctionObject] | None:
        return self._types.get(native_class)

    def wrap(self, node: Function | None) -> FunctionObject | None:
        """Wrap `node` in its registered type, or in `FunctionObject` if it has none."""
        if node is None:
            return None
        py_type = self._types.get(type(node), FunctionObject)
        return py_type._from_node(node, self)

    def __repr__(self) -> str:
        return f"FunctionTypeRegistry({len(self)} types)"


class RegistryBuilder:
    """Collects (native class, Python type) pairs before freezing them."""

    def __init__(self):
        self._types: dict[type[Function], type[FunctionObject]] = {}
        self._names: set[str] = set()
        self._frozen = False

    def add(self, native_class: type[Function], py_type: type[FunctionObject]) -> None:
        if self._frozen:
            raise RegistrationError("Cannot register into a frozen registry")
        if native_class in self._types:
            raise RegistrationError(
                f"{native_class.__name__} is already registered as {self._types[native_class].__name__}"
            )
        if py_type.__name__ in self._names:
            raise RegistrationError(f"A function type named '{py_type.__name__}' is already registered")
        self._types[native_class] = py_type
        self._names.add(py_type.__name__)
        logger.debug(f"Registered {py_type.__name__} for {native_class.__qualname__}")

    def freeze(self) -> FunctionTypeRegistry:
        """Build the registry and attach it to every collected type."""
        registry = FunctionTypeRegistry(self._types)
        for py_type in self._types.values():
            py_type._type_registry = registry
        self._frozen = True
        return registry
