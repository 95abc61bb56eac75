from __future__ import annotations

from ...types import Tensor, Variable
from ..function import Function


class AccumulateGrad(Function):
    """Graph leaf that sums incoming gradients into `variable.grad`."""

    def __init__(self, variable: Variable):
        super().__init__()
        self.variable = variable

    def apply(self, inputs: tuple[Tensor, ...]) -> tuple[Tensor, ...]:
        if len(inputs) != 1:
            raise ValueError(f"AccumulateGrad expects 1 input, got {len(inputs)}")
        if self.variable.requires_grad:
            self.variable.accumulate_grad(inputs[0])
        return ()
