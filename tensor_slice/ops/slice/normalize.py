"""
File: tensor_slice/ops/slice/normalize.py

Turns a SliceSpec and a concrete input shape into a SlicePlan:
axis normalization, sign-aware clamping of start/end, output shape and the
optional flattened view of trailing unsliced axes.
"""

import math
from typing import List, Optional, Sequence, Tuple

from ...config import DEBUG_SLICE, ENABLE_FLATTENING
from .errors import InvalidArgumentError, SliceError, SliceErrorKind, SliceResult
from .types import FlattenedSlice, NormalizedRange, Shape, SlicePlan, SliceSpec


def normalize_axis(axis: int, rank: int) -> int:
    """Maps a possibly negative axis into [0, rank)."""
    normalized = axis + rank if axis < 0 else axis
    if normalized < 0 or normalized >= rank:
        raise InvalidArgumentError(
            SliceErrorKind.AXIS_OUT_OF_RANGE,
            f"'axes' has an axis outside of the tensor dimension count: {axis} (rank {rank})",
        )
    return normalized


def normalize_axes(raw_axes: Sequence[int], rank: int) -> Tuple[int, ...]:
    """
    Normalizes every axis and rejects duplicates.
    Duplicates are detected after normalization, so -1 and rank-1 collide.
    """
    seen = set()
    axes = []
    for raw in raw_axes:
        axis = normalize_axis(int(raw), rank)
        if axis in seen:
            raise InvalidArgumentError(
                SliceErrorKind.DUPLICATE_AXIS, f"'axes' has duplicates: {list(raw_axes)}"
            )
        seen.add(axis)
        axes.append(axis)
    return tuple(axes)


def check_steps(steps: Sequence[int]):
    for step in steps:
        if step == 0:
            raise InvalidArgumentError(
                SliceErrorKind.ZERO_STEP, "'step' value cannot be 0"
            )


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def clamp_range(start: int, end: int, step: int, dim: int) -> NormalizedRange:
    """
    Resolves one (start, end, step) triple against an axis of size `dim`.

    Negative start/end count from the end of the axis. Both are then clamped
    to [0, dim] for a positive step and to [-1, dim - 1] for a negative one,
    so a backward slice can run down to and including index 0.
    """
    if step == 0:
        raise InvalidArgumentError(SliceErrorKind.ZERO_STEP, "'step' value cannot be 0")

    if start < 0:
        start += dim
    if end < 0:
        end += dim

    if step > 0:
        low, high = 0, dim
    else:
        low, high = -1, dim - 1

    return NormalizedRange(_clamp(start, low, high), _clamp(end, low, high), step)


def output_length(start: int, end: int, step: int) -> int:
    """max(0, ceil((end - start) / step)) using integer arithmetic only."""
    return max(0, -((start - end) // step))


def compute_output_shape(ranges: Sequence[NormalizedRange]) -> Shape:
    return tuple(output_length(r.start, r.end, r.step) for r in ranges)


def flatten_ranges(
    input_shape: Shape, output_shape: Shape, ranges: Sequence[NormalizedRange]
) -> Optional[FlattenedSlice]:
    """
    Collapses the innermost run of unsliced, unit-step axes into one block.
    Returns None when the innermost axis is itself sliced or stepped.
    """
    rank = len(input_shape)
    merged = 0
    while merged < rank and ranges[rank - 1 - merged].is_identity(
        input_shape[rank - 1 - merged]
    ):
        merged += 1

    if merged == 0:
        return None

    lead = rank - merged
    block_size = math.prod(input_shape[lead:])
    return FlattenedSlice(
        input_shape=tuple(input_shape[:lead]) + (block_size,),
        output_shape=tuple(output_shape[:lead]) + (block_size,),
        ranges=tuple(ranges[:lead]) + (NormalizedRange(0, block_size, 1),),
        block_size=block_size,
        merged_axes=merged,
    )


def resolve_ranges(spec: SliceSpec, input_shape: Shape) -> Tuple[NormalizedRange, ...]:
    """
    Full per-axis ranges for `input_shape`. Axes that `spec` does not list keep
    the identity range (0, dim, 1).

    All validation runs before any range is clamped.
    """
    rank = len(input_shape)
    axes = normalize_axes(spec.raw_axes, rank)
    steps = spec.raw_steps
    check_steps(steps)

    ranges: List[NormalizedRange] = [NormalizedRange(0, dim, 1) for dim in input_shape]
    for i, axis in enumerate(axes):
        ranges[axis] = clamp_range(
            spec.starts[i], spec.ends[i], steps[i], input_shape[axis]
        )
    return tuple(ranges)


def prepare_slice(
    spec: SliceSpec, input_shape: Sequence[int], flatten: bool = ENABLE_FLATTENING
) -> SliceResult:
    """
    Computes the SlicePlan for one invocation.

    Never raises for bad ranges; the failure is returned in the SliceResult.
    """
    shape = tuple(int(d) for d in input_shape)
    try:
        ranges = resolve_ranges(spec, shape)
    except SliceError as e:
        if DEBUG_SLICE:
            print(f"[Slice.prepare] {shape} rejected: {e!r}")
        return SliceResult.failure(e)

    output_shape = compute_output_shape(ranges)
    flattened = flatten_ranges(shape, output_shape, ranges) if flatten else None

    if DEBUG_SLICE:
        print(f"[Slice.prepare] {shape} -> {output_shape} ranges={ranges}")
        if flattened is not None:
            print(
                f"[Slice.prepare]  flattened {flattened.merged_axes} axes, "
                f"block={flattened.block_size}"
            )

    return SliceResult.success(
        SlicePlan(
            input_shape=shape,
            output_shape=output_shape,
            ranges=ranges,
            flattened=flattened,
        )
    )
