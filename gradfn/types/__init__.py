from .tensor import Tensor
from .variable import Variable

__all__ = ["Tensor", "Variable"]
