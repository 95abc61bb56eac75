from __future__ import annotations

from dataclasses import dataclass, field

from ..autograd import Function


@dataclass
class TracingState:
    """
    Capture state of a trace in progress.

    Attributes:
        graph: Nodes recorded so far, in execution order.
        num_stages: Number of backward stages the trace has been split into.
        active: False once the trace has been finished.
    """

    graph: list[Function] = field(default_factory=list)
    num_stages: int = 1
    active: bool = True

    def record(self, node: Function) -> None:
        if not self.active:
            raise RuntimeError("Cannot record into a finished trace.")
        self.graph.append(node)

    def finish(self) -> None:
        self.active = False
