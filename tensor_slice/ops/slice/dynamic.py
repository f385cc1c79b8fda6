"""
File: tensor_slice/ops/slice/dynamic.py

Slice whose ranges arrive as runtime tensors. The SliceSpec is rebuilt and
revalidated on every call.
"""

from typing import Any, Optional, Sequence

import numpy as np

from ...config import DEBUG_SLICE, ENABLE_FLATTENING, SUPPORTED_INDEX_DTYPES
from .errors import InvalidArgumentError, SliceError, SliceErrorKind, SliceResult
from .normalize import prepare_slice
from .types import SliceSpec


def read_index_input(value: Any, name: str) -> Optional[np.ndarray]:
    """
    Reads one starts/ends/axes/steps input as a 1-D int64 array.
    Returns None for an omitted optional input.
    """
    if value is None:
        return None

    arr = np.asarray(value)
    if arr.ndim != 1:
        raise InvalidArgumentError(
            SliceErrorKind.INVALID_RANK,
            f"'{name}' must be a 1-D tensor, got shape {arr.shape}",
        )
    if arr.dtype.name not in SUPPORTED_INDEX_DTYPES:
        raise InvalidArgumentError(
            SliceErrorKind.UNSUPPORTED_DTYPE,
            f"'{name}' has unsupported element type {arr.dtype.name}, "
            f"expected one of {SUPPORTED_INDEX_DTYPES}",
        )
    return arr.astype(np.int64)


def read_slice_inputs(starts, ends, axes=None, steps=None) -> SliceSpec:
    """Validates runtime index tensors and widens them into a SliceSpec."""
    starts_arr = read_index_input(starts, "starts")
    ends_arr = read_index_input(ends, "ends")
    if starts_arr is None or ends_arr is None:
        raise InvalidArgumentError(
            SliceErrorKind.MISSING_INPUT, "Slice requires 'starts' and 'ends' inputs"
        )
    axes_arr = read_index_input(axes, "axes")
    steps_arr = read_index_input(steps, "steps")

    if len(starts_arr) != len(ends_arr):
        raise InvalidArgumentError(
            SliceErrorKind.LENGTH_MISMATCH,
            f"Starts and ends shape mismatch: {starts_arr.shape} vs {ends_arr.shape}",
        )
    if axes_arr is not None and len(axes_arr) != len(starts_arr):
        raise InvalidArgumentError(
            SliceErrorKind.LENGTH_MISMATCH,
            f"Starts and axes shape mismatch: {starts_arr.shape} vs {axes_arr.shape}",
        )
    if steps_arr is not None and len(steps_arr) != len(starts_arr):
        raise InvalidArgumentError(
            SliceErrorKind.LENGTH_MISMATCH,
            f"Starts and steps shape mismatch: {starts_arr.shape} vs {steps_arr.shape}",
        )

    return SliceSpec(starts_arr, ends_arr, axes_arr, steps_arr)


class DynamicSlice:
    """
    inputs[0]: Data tensor (Any Rank)
    inputs[1]: Starts (1D INT32/INT64)
    inputs[2]: Ends (1D INT32/INT64)
    inputs[3]: Axes (optional, may be None)
    inputs[4]: Steps (optional, may be None)
    """

    def __init__(self, flatten: bool = ENABLE_FLATTENING):
        self.flatten = flatten

    def prepare(
        self, input_shape: Sequence[int], starts, ends, axes=None, steps=None
    ) -> SliceResult:
        try:
            spec = read_slice_inputs(starts, ends, axes, steps)
        except SliceError as e:
            if DEBUG_SLICE:
                print(f"[DynamicSlice.prepare] rejected inputs: {e!r}")
            return SliceResult.failure(e)
        return prepare_slice(spec, input_shape, flatten=self.flatten)

    def prepare_inputs(self, inputs: Sequence[Any]) -> SliceResult:
        """Same as prepare(), taking the positional operator inputs."""
        if len(inputs) < 3:
            return SliceResult.failure(
                InvalidArgumentError(
                    SliceErrorKind.MISSING_INPUT,
                    f"Slice requires at least 3 inputs (data, starts, ends), got {len(inputs)}",
                )
            )
        optional = list(inputs[3:5]) + [None] * (5 - max(len(inputs), 3))
        return self.prepare(tuple(inputs[0].shape), inputs[1], inputs[2], *optional)
