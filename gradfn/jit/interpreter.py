from __future__ import annotations

from ..autograd import Function
from .tracer import TracingState


class InterpreterAutogradFunction(Function):
    """
    Function node that replays one stage of a traced graph.

    Attributes:
        code: Snapshot of the traced nodes taken when the factory was called.
        stage: Index of the backward stage this node executes.
    """

    def __init__(self, code: tuple[Function, ...], stage: int = 0, next_edges=()):
        super().__init__(next_edges)
        self.code = code
        self.stage = stage


class InterpreterFunctionFactory:
    """Builds `InterpreterAutogradFunction` nodes out of a tracing state."""

    def __init__(self, tracing_state: TracingState):
        self.tracing_state = tracing_state

    def construct(self, stage: int = 0) -> InterpreterAutogradFunction:
        if not 0 <= stage < self.tracing_state.num_stages:
            raise ValueError(
                f"Stage {stage} out of range for a trace with {self.tracing_state.num_stages} stage(s)"
            )
        return InterpreterAutogradFunction(tuple(self.tracing_state.graph), stage)
