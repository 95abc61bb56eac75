from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..autograd import Function
from ..types import Tensor
from .descriptors import AttributeDescriptor
from .schema import NO_CONSTRUCTOR

if TYPE_CHECKING:
    from .registry import FunctionTypeRegistry


class FunctionObject:
    """
    Python-facing view over a native `Function` node.

    The wrapper only holds a reference to the node; the node's lifetime is
    shared with the graph. Subclasses are built by `create_function_type` and
    carry a constructor (or `NO_CONSTRUCTOR`) and the registry they belong to.
    Instances created without a registered type fall back to this class.
    """

    __slots__ = ("_cdata", "_registry")

    _native_class: type[Function] = Function
    _constructor = NO_CONSTRUCTOR
    _type_registry: FunctionTypeRegistry | None = None

    def __new__(cls, *args, **kwargs):
        node = cls._constructor(cls.__name__, args, kwargs)
        return cls._from_node(node, cls._type_registry)

    def __init__(self, *args, **kwargs):
        pass

    @classmethod
    def _from_node(cls, node: Function, registry: FunctionTypeRegistry | None = None):
        obj = object.__new__(cls)
        obj._cdata = node
        obj._registry = registry if registry is not None else cls._type_registry
        return obj

    @property
    def next_functions(self) -> tuple[tuple[FunctionObject | None, int], ...]:
        wrap = self._registry.wrap if self._registry is not None else _wrap_unregistered
        return tuple(
            (wrap(edge.function), edge.input_nr) for edge in self._cdata.next_edges
        )

    @property
    def metadata(self) -> dict[str, Any]:
        return self._cdata.metadata

    def name(self) -> str:
        return self._cdata.name()

    def __call__(self, *inputs: Tensor) -> tuple[Tensor, ...]:
        return self._cdata(*inputs)

    def __eq__(self, other):
        if not isinstance(other, FunctionObject):
            return NotImplemented
        return self._cdata is other._cdata

    def __hash__(self):
        return id(self._cdata)

    def __repr__(self) -> str:
        return f"<{type(self).__module__}.{type(self).__name__} object at {id(self._cdata):#x}>"


def _wrap_unregistered(node: Function | None) -> FunctionObject | None:
    return None if node is None else FunctionObject._from_node(node)


def create_function_type(
    name: str,
    native_class: type[Function],
    constructor=NO_CONSTRUCTOR,
    attributes: tuple[AttributeDescriptor, ...] = (),
    module: str | None = None,
) -> type[FunctionObject]:
    """Build the Python type exposing `native_class` under `name`."""
    namespace: dict[str, Any] = {
        "__slots__": (),
        "__doc__": native_class.__doc__,
        "_native_class": native_class,
        "_constructor": constructor,
    }
    if module is not None:
        namespace["__module__"] = module
    for descriptor in attributes:
        if descriptor.name in namespace or hasattr(FunctionObject, descriptor.name):
            raise ValueError(f"Attribute '{descriptor.name}' of {name} shadows an existing member")
        namespace[descriptor.name] = descriptor.as_property()
    return type(name, (FunctionObject,), namespace)
