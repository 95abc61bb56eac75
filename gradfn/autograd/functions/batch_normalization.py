from __future__ import annotations

from dataclasses import dataclass

from ...types import Tensor
from ..function import Function


@dataclass(frozen=True, slots=True)
class BatchNormParams:
    """
    Parameters shared by the batch normalization forward node and its
    backward / double-backward counterparts.

    Attributes:
        running_mean: Running mean buffer, undefined when not tracked.
        running_var: Running variance buffer, undefined when not tracked.
        training: Whether batch statistics are used instead of running ones.
        momentum: Update factor for the running statistics.
        eps: Value added to the variance for numerical stability.
        cudnn_enabled: Whether an accelerated kernel may be selected.
    """

    running_mean: Tensor
    running_var: Tensor
    training: bool
    momentum: float
    eps: float
    cudnn_enabled: bool


class BatchNormForward(Function):
    def __init__(self, params: BatchNormParams, next_edges=()):
        super().__init__(next_edges)
        self.params = params


class BatchNormBackward(Function):
    def __init__(self, params: BatchNormParams, next_edges=()):
        super().__init__(next_edges)
        self.params = params


class BatchNormBackwardBackward(Function):
    def __init__(self, params: BatchNormParams, next_edges=()):
        super().__init__(next_edges)
        self.params = params
