from .accumulate_grad import AccumulateGrad
from .basic_ops import Add, AddBackward_Deprecated, DelayedError, Error
from .batch_normalization import (
    BatchNormBackward,
    BatchNormBackwardBackward,
    BatchNormForward,
    BatchNormParams,
)
from .special import Eval
from .tensor import (
    Cat,
    Clone,
    Contiguous,
    CopyBackwards,
    CopySlices,
    Expand,
    Identity,
    Narrow,
    TensorGeometry,
    Transpose,
    View,
)

__all__ = [
    "AccumulateGrad",
    "Add",
    "AddBackward_Deprecated",
    "BatchNormBackward",
    "BatchNormBackwardBackward",
    "BatchNormForward",
    "BatchNormParams",
    "Cat",
    "Clone",
    "Contiguous",
    "CopyBackwards",
    "CopySlices",
    "DelayedError",
    "Error",
    "Eval",
    "Expand",
    "Identity",
    "Narrow",
    "TensorGeometry",
    "Transpose",
    "View",
]
