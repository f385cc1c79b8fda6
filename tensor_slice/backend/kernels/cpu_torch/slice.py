"""
File: tensor_slice/backend/kernels/cpu_torch/slice.py
"""

import torch
from typing import Sequence, Tuple
from ....backend.registry import KernelRegistry
from ....ir.dtypes import DType, TensorSignature, Backend
from ....ops.atomic_types import OpType
from ....ops.slice import DynamicSlice, NormalizedRange, SlicePlan, StaticSlice
from ....config import ENABLE_FLATTENING

_TORCH_DTYPES = {
    DType.FP32: torch.float32,
    DType.FP16: torch.float16,
    DType.INT32: torch.int32,
    DType.INT64: torch.int64,
    DType.BOOL: torch.bool,
}


def _select(
    data: torch.Tensor, shape: Tuple[int, ...], ranges: Sequence[NormalizedRange]
) -> torch.Tensor:
    # torch views reject negative steps, so gather explicit indices per axis
    out = data
    for axis, r in enumerate(ranges):
        if r.is_identity(shape[axis]):
            continue
        idx = torch.tensor(list(r.indices()), dtype=torch.int64, device=data.device)
        out = out.index_select(axis, idx)
    return out


def copy_slice_torch(data: torch.Tensor, plan: SlicePlan) -> torch.Tensor:
    if plan.flattened is not None:
        flat = plan.flattened
        out = _select(data.reshape(flat.input_shape), flat.input_shape, flat.ranges)
        return out.reshape(plan.output_shape).contiguous()
    return _select(data, plan.input_shape, plan.ranges).contiguous()


def slice_static_torch(inputs, attrs=None):
    data = inputs[0]
    plan = StaticSlice(attrs).prepare(tuple(data.shape), flatten=ENABLE_FLATTENING).unwrap()
    return copy_slice_torch(data, plan)


def slice_dynamic_torch(inputs, attrs=None):
    data = inputs[0]
    # Index tensors are read on the host
    index_inputs = [x.cpu().numpy() if x is not None else None for x in inputs[1:]]
    plan = DynamicSlice(ENABLE_FLATTENING).prepare_inputs([data] + index_inputs).unwrap()
    return copy_slice_torch(data, plan)


def _register_all():
    for data_dtype in _TORCH_DTYPES:
        data_sig = TensorSignature(data_dtype, shape=None, backend=Backend.CPU_TORCH)
        KernelRegistry.register(OpType.SLICE, [data_sig], backend=Backend.CPU_TORCH)(
            slice_static_torch
        )
        for index_dtype in (DType.INT32, DType.INT64):
            index_sig = TensorSignature(
                index_dtype, shape=(None,), backend=Backend.CPU_TORCH
            )
            for num_index_inputs in (2, 3, 4):
                KernelRegistry.register(
                    OpType.SLICE,
                    [data_sig] + [index_sig] * num_index_inputs,
                    backend=Backend.CPU_TORCH,
                )(slice_dynamic_torch)


_register_all()
