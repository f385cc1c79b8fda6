"""
File: tensor_slice/ops/slice/errors.py

Failure taxonomy for slice preparation and the explicit result type
returned by the normalization pipeline.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .types import SlicePlan


class SliceErrorKind(Enum):
    MISSING_ATTRIBUTE = "missing_attribute"
    MISSING_INPUT = "missing_input"
    LENGTH_MISMATCH = "length_mismatch"
    INVALID_RANK = "invalid_rank"
    ZERO_STEP = "zero_step"
    AXIS_OUT_OF_RANGE = "axis_out_of_range"
    DUPLICATE_AXIS = "duplicate_axis"
    UNSUPPORTED_DTYPE = "unsupported_dtype"


class SliceError(ValueError):
    """Base class for every slice preparation failure."""

    def __init__(self, kind: SliceErrorKind, message: str):
        super().__init__(message)
        self.kind = kind

    def __repr__(self):
        return f"{type(self).__name__}({self.kind.value}: {self})"


class SliceConfigurationError(SliceError):
    """Static attributes are missing or inconsistent. Raised at construction."""


class InvalidArgumentError(SliceError):
    """Runtime inputs or ranges cannot be normalized against the input shape."""


@dataclass(frozen=True)
class SliceResult:
    """
    Outcome of a prepare call. Exactly one of `plan` / `error` is set.
    """

    plan: Optional["SlicePlan"] = None
    error: Optional[SliceError] = None

    def __post_init__(self):
        if (self.plan is None) == (self.error is None):
            raise ValueError("SliceResult needs exactly one of plan or error")

    @classmethod
    def success(cls, plan: "SlicePlan") -> "SliceResult":
        return cls(plan=plan)

    @classmethod
    def failure(cls, error: SliceError) -> "SliceResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[SliceErrorKind]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> "SlicePlan":
        """Returns the plan, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.plan
