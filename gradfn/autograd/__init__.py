from . import functions, generated
from .function import Edge, Function

__all__ = ["Edge", "Function", "functions", "generated"]
