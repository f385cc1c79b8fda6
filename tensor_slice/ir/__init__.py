from .node import TensorNode
from .graph import topological_sort
from .dtypes import DType, TensorSignature, Backend

__all__ = [
    "TensorNode",
    "topological_sort",
    "DType",
    "TensorSignature",
    "Backend",
]
