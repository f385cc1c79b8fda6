import dataclasses
import pytest
from tensor_slice.ops.slice import (
    InvalidArgumentError,
    SliceConfigurationError,
    SliceErrorKind,
    SliceResult,
    SliceSpec,
    StaticSlice,
)


def test_spec_coerces_to_int_tuples():
    spec = SliceSpec([0, 1], [3, 4], axes=[1, 0])
    assert spec.starts == (0, 1)
    assert spec.ends == (3, 4)
    assert spec.axes == (1, 0)
    assert spec.steps is None
    assert spec.raw_steps == (1, 1)
    assert len(spec) == 2


def test_spec_empty_axes_means_default():
    spec = SliceSpec([0, 1], [3, 4], axes=[], steps=[])
    assert spec.axes is None
    assert spec.raw_axes == (0, 1)


def test_spec_length_mismatch():
    with pytest.raises(InvalidArgumentError) as exc:
        SliceSpec(starts=[0, 0], ends=[5])
    assert exc.value.kind == SliceErrorKind.LENGTH_MISMATCH


def test_spec_steps_length_mismatch():
    with pytest.raises(InvalidArgumentError) as exc:
        SliceSpec([0, 0], [5, 5], steps=[1])
    assert exc.value.kind == SliceErrorKind.LENGTH_MISMATCH


def test_spec_is_immutable():
    spec = SliceSpec([0], [1])
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.starts = (2,)


def test_static_missing_ends():
    with pytest.raises(SliceConfigurationError) as exc:
        StaticSlice({"starts": [0]})
    assert exc.value.kind == SliceErrorKind.MISSING_ATTRIBUTE


def test_static_no_attrs():
    with pytest.raises(SliceConfigurationError):
        StaticSlice(None)


def test_static_length_mismatch_at_construction():
    with pytest.raises(SliceConfigurationError) as exc:
        StaticSlice({"starts": [0, 0], "ends": [5]})
    assert exc.value.kind == SliceErrorKind.LENGTH_MISMATCH
    # Configuration errors are still ValueErrors
    assert isinstance(exc.value, ValueError)


def test_static_axes_length_mismatch():
    with pytest.raises(SliceConfigurationError):
        StaticSlice({"starts": [0], "ends": [5], "axes": [0, 1]})


def test_static_reused_across_shapes():
    op = StaticSlice({"starts": [1], "ends": [-1]})
    assert op.prepare((5,)).unwrap().output_shape == (3,)
    assert op.prepare((3, 4)).unwrap().output_shape == (1, 4)
    assert op.spec == SliceSpec([1], [-1])


def test_static_axis_error_surfaces_at_invocation():
    op = StaticSlice({"starts": [0], "ends": [1], "axes": [3]})
    result = op.prepare((2, 2))
    assert not result.ok
    assert result.kind == SliceErrorKind.AXIS_OUT_OF_RANGE
    assert op.prepare((2, 2, 2, 2)).ok


def test_result_requires_exactly_one_side():
    with pytest.raises(ValueError):
        SliceResult()


def test_result_failure_unwrap_raises_carried_error():
    err = InvalidArgumentError(SliceErrorKind.ZERO_STEP, "'step' value cannot be 0")
    result = SliceResult.failure(err)
    assert not result.ok
    assert result.kind == SliceErrorKind.ZERO_STEP
    with pytest.raises(InvalidArgumentError) as exc:
        result.unwrap()
    assert exc.value is err
