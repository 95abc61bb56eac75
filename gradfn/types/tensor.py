from __future__ import annotations

from typing import Self

import numpy as np


class Tensor:
    """
    Read-only numpy-backed tensor.

    A Tensor may be *undefined*: it then carries no data at all and stands
    for an unset tensor field (e.g. the running statistics of a batch norm
    that does not track them). Undefined tensors are created with
    `Tensor.undefined()`.
    """

    __slots__ = ("__data", "_name", "_dtype", "_shape")

    def __init__(
        self,
        value: np.ndarray | float | int | complex | None = None,
        *,
        shape: tuple[int, ...] | None = None,
        dtype: np.dtype | str | None = None,
        name: str | None = None,
    ):
        if value is None:
            arr = np.zeros(()) if shape is None else np.zeros(shape, dtype=dtype)
        else:
            arr = np.asarray(value, dtype=dtype)
            if shape is not None and arr.shape != shape:
                try:
                    arr = arr.reshape(shape)
                except ValueError as e:
                    raise ValueError(f"Shape mismatch: got {arr.shape}, expected {shape}") from e

        self.__data = arr.copy()
        self.__data.setflags(write=False)

        self._name = name
        self._dtype = self.__data.dtype
        self._shape = self.__data.shape

    @classmethod
    def undefined(cls, name: str | None = None) -> Self:
        """Return a tensor with no storage."""
        obj = cls.__new__(cls)
        obj.__data = None
        obj._name = name
        obj._dtype = None
        obj._shape = None
        return obj

    @property
    def defined(self) -> bool:
        return self.__data is not None

    @property
    def name(self) -> str | None:
        """Return the user-provided name (or None)."""
        return self._name

    @property
    def shape(self) -> tuple[int, ...] | None:
        return self._shape

    @property
    def dtype(self) -> np.dtype | None:
        return self._dtype

    @property
    def data(self) -> np.ndarray:
        """Internal read-only NumPy array."""
        self._check_defined("data")
        return self.__data

    @property
    def numpy(self) -> np.ndarray:
        """Return a writable copy of the underlying array."""
        return self.data.copy()

    def _check_defined(self, what: str) -> None:
        if self.__data is None:
            raise RuntimeError(f"Cannot access {what} of an undefined Tensor.")

    def equal(self, other: Tensor) -> bool:
        """True when both tensors are undefined, or hold the same shape and values."""
        if not self.defined or not other.defined:
            return self.defined == other.defined
        return self._shape == other.shape and bool(np.array_equal(self.__data, other.data))

    def __add__(self, other) -> Self:
        other_val = other.data if isinstance(other, Tensor) else other
        return Tensor(self.data + other_val)

    def __repr__(self) -> str:
        if self.__data is None:
            return "Tensor(<undefined>)"
        return f"Tensor{repr(self.__data).removeprefix('array')}"
