from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..function import Function


@dataclass(frozen=True, slots=True)
class TensorGeometry:
    """Sizes, strides and offset of a tensor's view into its storage."""

    sizes: tuple[int, ...]
    strides: tuple[int, ...]
    storage_offset: int = 0

    def __post_init__(self):
        if len(self.sizes) != len(self.strides):
            raise ValueError(
                f"sizes and strides must have the same length. Got {len(self.sizes)} and {len(self.strides)}"
            )


class Identity(Function):
    pass


class Clone(Function):
    pass


class Contiguous(Function):
    pass


class Transpose(Function):
    def __init__(self, dim1: int, dim2: int, next_edges=()):
        super().__init__(next_edges)
        self.dim1 = dim1
        self.dim2 = dim2


class View(Function):
    def __init__(self, size: Sequence[int], next_edges=()):
        super().__init__(next_edges)
        self.size = list(size)


class Expand(Function):
    def __init__(self, size: Sequence[int], next_edges=()):
        super().__init__(next_edges)
        self.size = list(size)


class Narrow(Function):
    def __init__(self, dim: int, start: int, size: int, next_edges=()):
        super().__init__(next_edges)
        self.dim = dim
        self.start = start
        self.size = size


class Cat(Function):
    def __init__(self, dim: int, next_edges=()):
        super().__init__(next_edges)
        self.dim = dim


class CopyBackwards(Function):
    pass


class CopySlices(Function):
    """
    Backward of an in-place op applied to a view of `base`.

    Attributes:
        base: Geometry of the base tensor the view was taken from.
    """

    def __init__(self, base: TensorGeometry, next_edges=()):
        super().__init__(next_edges)
        self.base = base
