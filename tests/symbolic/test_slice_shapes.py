import pytest
import numpy as np
from tensor_slice.ir.node import TensorNode
from tensor_slice.ir.dtypes import DType
from tensor_slice.ir.graph import topological_sort
from tensor_slice.ops.atomic_types import OpType
from tensor_slice.ops.slice import InvalidArgumentError
from tensor_slice.compiler.shape_inference import ShapeInference


def test_static_slice_shape():
    a = TensorNode(OpType.INPUT, DType.FP32, [], (20, 10, 5), "a")
    slc = TensorNode(
        OpType.SLICE,
        DType.FP32,
        [a],
        None,
        "slice",
        attrs={"starts": [0, 0], "ends": [3, 10], "axes": [0, 1]},
    )

    ShapeInference.infer(topological_sort(slc), {})
    assert slc.shape == (3, 10, 5)


def test_static_slice_unknown_dim_stays_unknown():
    a = TensorNode(OpType.INPUT, DType.FP32, [], (None, 8), "a")
    slc = TensorNode(
        OpType.SLICE,
        DType.FP32,
        [a],
        None,
        "slice",
        attrs={"starts": [2], "ends": [6], "axes": [1]},
    )

    ShapeInference.infer(topological_sort(slc), {})
    assert slc.shape == (None, 4)


def test_input_shape_resolved_from_known_values():
    a = TensorNode(OpType.INPUT, DType.FP32, [], None, "a")
    slc = TensorNode(
        OpType.SLICE,
        DType.FP32,
        [a],
        None,
        "slice",
        attrs={"starts": [-1], "ends": [-1000], "steps": [-1]},
    )

    ShapeInference.infer(topological_sort(slc), {"a": np.zeros((6, 2))})
    assert a.shape == (6, 2)
    assert slc.shape == (6, 2)


def test_dynamic_slice_with_constant_ranges():
    a = TensorNode(OpType.INPUT, DType.FP32, [], (10, 4), "a")
    starts = TensorNode(OpType.CONSTANT, DType.INT64, [], None, "s", attrs={"value": [0]})
    ends = TensorNode(OpType.CONSTANT, DType.INT64, [], None, "e", attrs={"value": [10]})
    axes = TensorNode(OpType.CONSTANT, DType.INT64, [], None, "ax", attrs={"value": [0]})
    steps = TensorNode(OpType.CONSTANT, DType.INT64, [], None, "st", attrs={"value": [3]})
    slc = TensorNode(OpType.SLICE, DType.FP32, [a, starts, ends, axes, steps], None, "slice")

    ShapeInference.infer(topological_sort(slc), {})
    assert starts.shape == (1,)
    assert slc.shape == (4, 4)


def test_dynamic_slice_with_runtime_ranges():
    a = TensorNode(OpType.INPUT, DType.FP32, [], (10, 4), "a")
    starts = TensorNode(OpType.INPUT, DType.INT32, [], (1,), "starts")
    ends = TensorNode(OpType.INPUT, DType.INT32, [], (1,), "ends")
    slc = TensorNode(OpType.SLICE, DType.FP32, [a, starts, ends], None, "slice")

    ShapeInference.infer(topological_sort(slc), {})
    assert slc.shape == (None, None)

    ShapeInference.infer(
        topological_sort(slc),
        {"starts": np.array([2], np.int32), "ends": np.array([5], np.int32)},
    )
    assert slc.shape == (3, 4)


def test_dynamic_slice_invalid_ranges_raise():
    a = TensorNode(OpType.INPUT, DType.FP32, [], (10, 4), "a")
    starts = TensorNode(OpType.CONSTANT, DType.INT64, [], None, "s", attrs={"value": [0]})
    ends = TensorNode(OpType.CONSTANT, DType.INT64, [], None, "e", attrs={"value": [1]})
    axes = TensorNode(OpType.CONSTANT, DType.INT64, [], None, "ax", attrs={"value": [2]})
    slc = TensorNode(OpType.SLICE, DType.FP32, [a, starts, ends, axes], None, "slice")

    with pytest.raises(InvalidArgumentError):
        ShapeInference.infer(topological_sort(slc), {})
