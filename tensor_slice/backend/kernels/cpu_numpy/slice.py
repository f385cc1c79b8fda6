"""
File: tensor_slice/backend/kernels/cpu_numpy/slice.py

Copy routines that materialize a SlicePlan with numpy basic indexing.
"""

import numpy as np
from ....backend.registry import KernelRegistry
from ....ir.dtypes import DType, TensorSignature, Backend
from ....ops.atomic_types import OpType
from ....ops.slice import DynamicSlice, SlicePlan, StaticSlice
from ....config import ENABLE_FLATTENING

INDEX_DTYPES = (DType.INT32, DType.INT64)


def copy_slice(data: np.ndarray, plan: SlicePlan) -> np.ndarray:
    """Copies the elements selected by `plan` into a new contiguous array."""
    if plan.flattened is not None:
        flat = plan.flattened
        view = data.reshape(flat.input_shape)[tuple(r.to_slice() for r in flat.ranges)]
        return np.array(view).reshape(plan.output_shape)
    return np.array(data[plan.to_slices()])


def slice_static(inputs, attrs=None):
    """
    Slice configured by attributes.
    inputs[0]: Data tensor (Any Rank)
    attrs["starts"], attrs["ends"], attrs["axes"] (optional), attrs["steps"] (optional)
    """
    data = np.asarray(inputs[0])
    plan = StaticSlice(attrs).prepare(data.shape, flatten=ENABLE_FLATTENING).unwrap()
    return copy_slice(data, plan)


def slice_dynamic(inputs, attrs=None):
    """
    Slice configured by runtime tensors.
    inputs[0]: Data tensor (Any Rank)
    inputs[1]: Starts (1D INT32/INT64)
    inputs[2]: Ends (1D INT32/INT64)
    inputs[3]: Axes (optional)
    inputs[4]: Steps (optional)
    """
    data = np.asarray(inputs[0])
    plan = DynamicSlice(ENABLE_FLATTENING).prepare_inputs([data] + list(inputs[1:])).unwrap()
    return copy_slice(data, plan)


def _register_all():
    for data_dtype in DType:
        data_sig = TensorSignature(data_dtype, shape=None, backend=Backend.CPU_NUMPY)
        KernelRegistry.register(OpType.SLICE, [data_sig], backend=Backend.CPU_NUMPY)(
            slice_static
        )
        for index_dtype in INDEX_DTYPES:
            index_sig = TensorSignature(
                index_dtype, shape=(None,), backend=Backend.CPU_NUMPY
            )
            # data, starts, ends [, axes [, steps]]
            for num_index_inputs in (2, 3, 4):
                KernelRegistry.register(
                    OpType.SLICE,
                    [data_sig] + [index_sig] * num_index_inputs,
                    backend=Backend.CPU_NUMPY,
                )(slice_dynamic)


_register_all()
