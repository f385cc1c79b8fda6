from tensor_slice.ir.dtypes import DType, TensorSignature, Backend
from tensor_slice.ops.atomic_types import OpType
from tensor_slice.backend.registry import KernelRegistry
from tensor_slice.backend.kernels.cpu_numpy.slice import slice_static, slice_dynamic


def _sig(dtype, shape):
    return TensorSignature(dtype, shape, Backend.CPU_NUMPY)


def test_static_signature_selects_attribute_kernel():
    kernel = KernelRegistry.select_best_kernel(
        OpType.SLICE, [_sig(DType.FP16, (3, 4))], Backend.CPU_NUMPY, DType.FP16
    )
    assert kernel is slice_static


def test_dynamic_signature_selects_input_kernel():
    for index_dtype in (DType.INT32, DType.INT64):
        for n in (2, 3, 4):
            sigs = [_sig(DType.FP32, (3, 4))] + [_sig(index_dtype, (2,))] * n
            kernel = KernelRegistry.select_best_kernel(
                OpType.SLICE, sigs, Backend.CPU_NUMPY, DType.FP32
            )
            assert kernel is slice_dynamic


def test_mixed_index_dtypes_have_no_kernel():
    sigs = [_sig(DType.FP32, (3,)), _sig(DType.INT32, (1,)), _sig(DType.INT64, (1,))]
    assert KernelRegistry.select_best_kernel(OpType.SLICE, sigs) is None


def test_matrix_index_input_has_no_kernel():
    sigs = [_sig(DType.FP32, (3,)), _sig(DType.INT32, (1, 1)), _sig(DType.INT32, (1,))]
    assert KernelRegistry.select_best_kernel(OpType.SLICE, sigs) is None


def test_target_dtype_must_match_data():
    kernel = KernelRegistry.select_best_kernel(
        OpType.SLICE, [_sig(DType.FP32, (3,))], Backend.CPU_NUMPY, DType.INT32
    )
    assert kernel is None


def test_has_kernel():
    assert KernelRegistry.has_kernel(OpType.SLICE, Backend.CPU_NUMPY)
    assert not KernelRegistry.has_kernel(OpType.INPUT, Backend.CPU_NUMPY)
