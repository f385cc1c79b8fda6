# tensor_slice/backend/executor.py
import numpy as np
from typing import Dict, Any
from tqdm import tqdm
from ..ir.node import TensorNode
from ..ir.graph import topological_sort
from ..ir.dtypes import Backend, KernelUnavailableError, to_numpy_dtype
from ..ops.atomic_types import OpType
from ..config import DEBUG_EXECUTION, DEBUG_DETAILED
from .registry import KernelRegistry
from . import kernels  # noqa: F401  (registers kernels)


def _load_leaf(node: TensorNode, inputs: Dict[str, Any]) -> Any:
    if node.op_type == OpType.INPUT:
        if node.name not in inputs:
            raise ValueError(f"Missing input data for node: {node.name}")
        val = inputs[node.name]
    else:
        val = node.attrs.get("value")

    if node.backend == Backend.CPU_NUMPY:
        return np.asarray(val, dtype=to_numpy_dtype(node.dtype))
    return val


def evaluate_graph(root: TensorNode, inputs: Dict[str, Any]) -> Any:
    """
    Evaluates the graph ending at `root`, dispatching each node to the best
    registered kernel for its parents' signatures.
    """
    values: Dict[TensorNode, Any] = {}
    order = topological_sort(root)

    for node in tqdm(order, desc="evaluate", disable=not DEBUG_EXECUTION):
        if DEBUG_EXECUTION and DEBUG_DETAILED:
            print(f"[Executor] Evaluating node: {node}")

        if node.op_type in (OpType.INPUT, OpType.CONSTANT):
            values[node] = _load_leaf(node, inputs)
            continue

        if not KernelRegistry.has_kernel(node.op_type, node.backend):
            raise KernelUnavailableError(
                f"No kernels for '{node.op_type}' on backend '{node.backend.value}'"
            )

        input_sigs = [p.signature for p in node.parents]
        kernel = KernelRegistry.select_best_kernel(
            node.op_type, input_sigs, node.backend, target_dtype=node.dtype
        )
        if kernel is None:
            raise NotImplementedError(
                f"No registered kernel for '{node.op_type}' with inputs {input_sigs}"
            )

        values[node] = kernel([values[p] for p in node.parents], node.attrs)

    return values[root]
