from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NamedTuple

from ..types import Tensor


class Edge(NamedTuple):
    """A link to the `input_nr`-th input of `function` in the backward graph."""

    function: Function | None
    input_nr: int


class Function:
    """
    Base class of every node in the backward graph.

    A node is shared by reference between the graph and any Python-facing
    wrapper looking at it. Subclasses keep their parameters as plain
    attributes (usually a frozen parameter struct) and override `apply`.

    Attributes:
        next_edges: Edges to the functions that receive this node's outputs.
        metadata: Free-form per-node storage, exposed as-is to Python.
    """

    def __init__(self, next_edges: Sequence[Edge] = ()):
        self.next_edges: tuple[Edge, ...] = tuple(next_edges)
        self.metadata: dict[str, Any] = {}

    @property
    def num_outputs(self) -> int:
        return len(self.next_edges)

    def name(self) -> str:
        return type(self).__name__

    def apply(self, inputs: tuple[Tensor, ...]) -> tuple[Tensor, ...]:
        raise NotImplementedError(f"{self.name()} does not implement apply")

    def __call__(self, *inputs: Tensor) -> tuple[Tensor, ...]:
        return self.apply(tuple(inputs))

    def __repr__(self) -> str:
        return f"<{self.name()} object at {id(self):#x}>"
