from __future__ import annotations

from typing import Self

import numpy as np

from .tensor import Tensor


class Variable:
    """A mutable, named slot around a Tensor that can receive gradients."""

    def __init__(
        self,
        value: np.typing.ArrayLike | Tensor | None = None,
        shape: tuple[int, ...] | None = None,
        dtype: np.typing.DTypeLike | None = None,
        requires_grad: bool = True,
        name: str | None = None,
    ):
        if isinstance(value, Tensor):
            value = value.data
        self.__tensor = Tensor(
            value=value, shape=shape, dtype=dtype, name=f"{name}/Tensor"
        )
        self.__name = name
        self.__requires_grad = requires_grad
        self.__grad: Tensor | None = None

    def assign(self, value: np.typing.ArrayLike | Tensor) -> Self:
        if isinstance(value, Tensor):
            value = value.data
        value = np.asarray(value)
        if value.shape != self.shape:
            raise ValueError(
                f"Cannot assign value with shape {value.shape} to Variable with shape {self.shape}. Shapes must match for in-place assignment."
            )
        self.__tensor = Tensor(
            value=value, shape=self.shape, dtype=self.dtype, name=f"{self.name}/Tensor"
        )
        return self

    def accumulate_grad(self, grad: Tensor) -> None:
        """Add `grad` into `.grad`, creating it on first use."""
        if grad.shape != self.shape:
            raise ValueError(
                f"Gradient shape {grad.shape} does not match Variable shape {self.shape}"
            )
        self.__grad = grad if self.__grad is None else self.__grad + grad

    @property
    def requires_grad(self) -> bool:
        return self.__requires_grad

    @property
    def grad(self) -> Tensor | None:
        return self.__grad

    @property
    def name(self) -> str | None:
        return self.__name

    @property
    def shape(self) -> tuple[int, ...]:
        return self.__tensor.shape

    @property
    def dtype(self) -> np.typing.DTypeLike:
        return self.__tensor.dtype

    @property
    def value(self) -> Tensor:
        return self.__tensor

    @property
    def numpy(self) -> np.ndarray:
        return self.__tensor.numpy

    def __repr__(self):
        return self.__tensor.__repr__().replace("Tensor", "Variable", 1)
