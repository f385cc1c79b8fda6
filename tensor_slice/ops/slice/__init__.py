from .types import SliceSpec, NormalizedRange, FlattenedSlice, SlicePlan
from .errors import (
    SliceErrorKind,
    SliceError,
    SliceConfigurationError,
    InvalidArgumentError,
    SliceResult,
)
from .normalize import (
    normalize_axis,
    normalize_axes,
    clamp_range,
    output_length,
    compute_output_shape,
    flatten_ranges,
    resolve_ranges,
    prepare_slice,
)
from .static import StaticSlice
from .dynamic import DynamicSlice, read_slice_inputs, read_index_input

__all__ = [
    "SliceSpec",
    "NormalizedRange",
    "FlattenedSlice",
    "SlicePlan",
    "SliceErrorKind",
    "SliceError",
    "SliceConfigurationError",
    "InvalidArgumentError",
    "SliceResult",
    "normalize_axis",
    "normalize_axes",
    "clamp_range",
    "output_length",
    "compute_output_shape",
    "flatten_ranges",
    "resolve_ranges",
    "prepare_slice",
    "StaticSlice",
    "DynamicSlice",
    "read_slice_inputs",
    "read_index_input",
]
