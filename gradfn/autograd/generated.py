"""Backward nodes of elementary ops, declared as plain field carriers."""

from __future__ import annotations

from collections.abc import Sequence

from ..types import Tensor
from .function import Function


class AddBackward0(Function):
    def __init__(self, alpha: float = 1.0, next_edges=()):
        super().__init__(next_edges)
        self.alpha = alpha


class MulBackward0(Function):
    def __init__(self, self_: Tensor, other: Tensor, next_edges=()):
        super().__init__(next_edges)
        self.self_ = self_
        self.other = other


class SumBackward0(Function):
    def __init__(self, self_sizes: Sequence[int], next_edges=()):
        super().__init__(next_edges)
        self.self_sizes = list(self_sizes)
