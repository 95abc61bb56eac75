from __future__ import annotations

from ...types import Tensor
from ..function import Edge, Function


class Error(Function):
    """Node that fails as soon as the engine reaches it."""

    def __init__(self, msg: str, next_edges=()):
        super().__init__(next_edges)
        self.msg = msg

    def apply(self, inputs: tuple[Tensor, ...]) -> tuple[Tensor, ...]:
        raise RuntimeError(self.msg)


class DelayedError(Function):
    """
    Forward pass-through whose backward is an `Error`.

    Used to postpone a failure (e.g. differentiating a non-differentiable
    op) until someone actually asks for the gradient.
    """

    def __init__(self, msg: str, next_edges=()):
        super().__init__(next_edges)
        self.msg = msg

    def apply(self, inputs: tuple[Tensor, ...]) -> tuple[Tensor, ...]:
        return inputs

    def backward_function(self) -> Error:
        return Error(self.msg, [Edge(self, i) for i in range(self.num_outputs)])


class Add(Function):
    pass


class AddBackward_Deprecated(Function):
    pass
