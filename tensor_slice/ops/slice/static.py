"""
File: tensor_slice/ops/slice/static.py
"""

from typing import Dict, Any, Optional, Sequence

from ...config import ENABLE_FLATTENING
from .errors import SliceConfigurationError, SliceErrorKind, SliceResult
from .normalize import prepare_slice
from .types import SliceSpec


class StaticSlice:
    """
    Slice configured once from attributes.

    attrs['starts']: List[int] (required)
    attrs['ends']: List[int] (required, same length as starts)
    attrs['axes']: List[int] (optional)
    attrs['steps']: List[int] (optional, all 1 when absent)

    The resolved SliceSpec is read-only and may be shared between concurrent
    prepare() calls.
    """

    def __init__(self, attrs: Optional[Dict[str, Any]]):
        attrs = attrs or {}
        starts = attrs.get("starts")
        ends = attrs.get("ends")
        axes = attrs.get("axes")
        steps = attrs.get("steps")

        if starts is None or ends is None:
            raise SliceConfigurationError(
                SliceErrorKind.MISSING_ATTRIBUTE,
                "Missing or invalid starts and ends attribute",
            )
        if len(starts) != len(ends):
            raise SliceConfigurationError(
                SliceErrorKind.LENGTH_MISMATCH,
                "Missing or invalid starts and ends attribute",
            )
        if axes is not None and len(axes) != len(starts):
            raise SliceConfigurationError(
                SliceErrorKind.LENGTH_MISMATCH,
                "Invalid axes attribute, axes attribute (if present) should have "
                "the same size as starts/ends attributes",
            )
        if steps is not None and len(steps) != len(starts):
            raise SliceConfigurationError(
                SliceErrorKind.LENGTH_MISMATCH,
                "Invalid steps attribute, steps attribute (if present) should have "
                "the same size as starts/ends attributes",
            )

        self._spec = SliceSpec(starts, ends, axes, steps)

    @property
    def spec(self) -> SliceSpec:
        return self._spec

    def prepare(
        self, input_shape: Sequence[int], flatten: bool = ENABLE_FLATTENING
    ) -> SliceResult:
        return prepare_slice(self._spec, input_shape, flatten=flatten)
