from __future__ import annotations

from ..function import Function


class Eval(Function):
    """Placeholder node marking the boundary of a traced subgraph."""
