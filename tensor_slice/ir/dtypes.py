from enum import Enum
from dataclasses import dataclass
from typing import Tuple, Optional, Any

import numpy as np


class KernelUnavailableError(RuntimeError):
    """Raised when a kernel is not available for the requested backend."""


class DType(Enum):
    FP32 = "float32"
    FP16 = "float16"
    INT32 = "int32"
    INT64 = "int64"
    BOOL = "bool"


_NUMPY_DTYPES = {
    DType.FP32: np.float32,
    DType.FP16: np.float16,
    DType.INT32: np.int32,
    DType.INT64: np.int64,
    DType.BOOL: np.bool_,
}


def to_numpy_dtype(dtype: DType) -> Any:
    return _NUMPY_DTYPES[dtype]


class Backend(Enum):
    CPU_NUMPY = "cpu_numpy"
    CPU_TORCH = "cpu_torch"


@dataclass(frozen=True)
class TensorSignature:
    """
    Represents the Type, Shape, and Backend state of a tensor for kernel matching.

    - shape=None: Wildcard (matches any shape)
    - backend=None: Wildcard (matches any backend)
    """

    dtype: DType
    shape: Optional[Tuple[Optional[int], ...]] = None
    backend: Optional[Backend] = None

    def __repr__(self):
        shape_str = "*"
        if self.shape is not None:
            shape_str = ",".join(str(d) if d is not None else "*" for d in self.shape)

        backend_str = self.backend.value if self.backend else "*"
        return f"<{self.dtype.value} [{shape_str}] @ {backend_str}>"
