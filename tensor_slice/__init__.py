# Expose main components for easy access
from .ir.node import TensorNode
from .ir.dtypes import DType, Backend
from .ops.atomic_types import OpType
from .ops.slice import (
    SliceSpec,
    SlicePlan,
    SliceResult,
    SliceError,
    SliceConfigurationError,
    InvalidArgumentError,
    StaticSlice,
    DynamicSlice,
    prepare_slice,
)
