from . import _C, autograd, bindings, jit, types
from .types import Tensor, Variable

__all__ = [
    "_C",
    "autograd",
    "bindings",
    "jit",
    "types",
    "Tensor",
    "Variable",
]
