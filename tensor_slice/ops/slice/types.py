"""
File: tensor_slice/ops/slice/types.py

Immutable value types shared by the static and dynamic slice adapters.
"""

import math
from dataclasses import dataclass
from typing import Tuple, Optional, Iterable

from .errors import InvalidArgumentError, SliceErrorKind

Shape = Tuple[int, ...]


def _as_int_tuple(values: Optional[Iterable]) -> Optional[Tuple[int, ...]]:
    if values is None:
        return None
    return tuple(int(v) for v in values)


@dataclass(frozen=True)
class SliceSpec:
    """
    Parallel range descriptors for one slice configuration.

    axes=None means the identity order 0..len(starts)-1.
    steps=None means a step of 1 on every listed axis.
    An empty axes or steps sequence is treated the same as None.
    """

    starts: Tuple[int, ...]
    ends: Tuple[int, ...]
    axes: Optional[Tuple[int, ...]] = None
    steps: Optional[Tuple[int, ...]] = None

    def __post_init__(self):
        starts = _as_int_tuple(self.starts)
        ends = _as_int_tuple(self.ends)
        axes = _as_int_tuple(self.axes) or None
        steps = _as_int_tuple(self.steps) or None

        if len(starts) != len(ends):
            raise InvalidArgumentError(
                SliceErrorKind.LENGTH_MISMATCH,
                f"'starts' and 'ends' must have the same length, got {len(starts)} and {len(ends)}",
            )
        if axes is not None and len(axes) != len(starts):
            raise InvalidArgumentError(
                SliceErrorKind.LENGTH_MISMATCH,
                f"'axes' has {len(axes)} entries but 'starts' has {len(starts)}",
            )
        if steps is not None and len(steps) != len(starts):
            raise InvalidArgumentError(
                SliceErrorKind.LENGTH_MISMATCH,
                f"'steps' has {len(steps)} entries but 'starts' has {len(starts)}",
            )

        object.__setattr__(self, "starts", starts)
        object.__setattr__(self, "ends", ends)
        object.__setattr__(self, "axes", axes)
        object.__setattr__(self, "steps", steps)

    def __len__(self) -> int:
        return len(self.starts)

    @property
    def raw_axes(self) -> Tuple[int, ...]:
        if self.axes is None:
            return tuple(range(len(self.starts)))
        return self.axes

    @property
    def raw_steps(self) -> Tuple[int, ...]:
        if self.steps is None:
            return (1,) * len(self.starts)
        return self.steps


@dataclass(frozen=True)
class NormalizedRange:
    """
    Resolved (start, end, step) for one axis.

    With a negative step, end may be -1, meaning "up to and including index 0".
    """

    start: int
    end: int
    step: int = 1

    def is_identity(self, dim: int) -> bool:
        return self.start == 0 and self.end == dim and self.step == 1

    def to_slice(self) -> slice:
        if self.start < 0:
            # start == -1 only occurs on an empty backward range
            return slice(0, 0, self.step)
        # A stop of -1 would mean "last element" to Python's slicing.
        end = None if self.end < 0 else self.end
        return slice(self.start, end, self.step)

    def indices(self) -> range:
        return range(self.start, self.end, self.step)


@dataclass(frozen=True)
class FlattenedSlice:
    """
    Lower-rank view of a SlicePlan: the trailing `merged_axes` axes, all of
    them unsliced, are collapsed into one innermost block of `block_size`
    contiguous elements.
    """

    input_shape: Shape
    output_shape: Shape
    ranges: Tuple[NormalizedRange, ...]
    block_size: int
    merged_axes: int


@dataclass(frozen=True)
class SlicePlan:
    """Everything a copy routine needs to materialize one slice invocation."""

    input_shape: Shape
    output_shape: Shape
    ranges: Tuple[NormalizedRange, ...]
    flattened: Optional[FlattenedSlice] = None

    @property
    def rank(self) -> int:
        return len(self.input_shape)

    @property
    def starts(self) -> Tuple[int, ...]:
        return tuple(r.start for r in self.ranges)

    @property
    def ends(self) -> Tuple[int, ...]:
        return tuple(r.end for r in self.ranges)

    @property
    def steps(self) -> Tuple[int, ...]:
        return tuple(r.step for r in self.ranges)

    @property
    def num_elements(self) -> int:
        return math.prod(self.output_shape)

    def to_slices(self) -> Tuple[slice, ...]:
        return tuple(r.to_slice() for r in self.ranges)
