from typing import List, Dict, Any, Callable, Optional, Tuple
import numpy as np
from tqdm import tqdm
from ..ir.node import TensorNode
from ..ops.atomic_types import OpType
from ..ops.slice import DynamicSlice, SliceResult, StaticSlice
from ..config import DEBUG_EXECUTION


class ShapeInference:
    _handlers: Dict[str, Callable] = {}

    @classmethod
    def register_handler(cls, op_type: str):
        def decorator(func):
            cls._handlers[op_type] = func
            return func

        return decorator

    @staticmethod
    def infer(nodes: List[TensorNode], known_values: Optional[Dict[str, Any]] = None):
        """
        Updates the shapes of nodes in-place based on shape inference.
        If known_values are provided, attempts to resolve shapes to concrete integers.
        """
        computed_values = dict(known_values or {})

        def get_val(node):
            if node.name in computed_values:
                return computed_values[node.name]
            if node.op_type == OpType.CONSTANT:
                val = node.attrs.get("value")
                if val is None:
                    return None
                val = np.asarray(val)
                computed_values[node.name] = val
                return val
            return None

        for node in tqdm(nodes, desc="shape inference", disable=not DEBUG_EXECUTION):
            if node.shape is not None:
                node.shape = tuple(d if isinstance(d, int) else None for d in node.shape)

            if node.op_type in ShapeInference._handlers:
                ShapeInference._handlers[node.op_type](node, get_val)
            elif DEBUG_EXECUTION:
                print(f"[ShapeInference] No handler for {node.op_type}, keeping {node.shape}")


# ==============================================================================
# Op Handlers
# ==============================================================================


@ShapeInference.register_handler(OpType.INPUT)
def handle_input(node: TensorNode, get_val):
    val = get_val(node)
    if val is not None and hasattr(val, "shape"):
        node.shape = tuple(int(d) for d in val.shape)


@ShapeInference.register_handler(OpType.CONSTANT)
def handle_constant(node: TensorNode, get_val):
    val = get_val(node)
    if val is not None:
        node.shape = tuple(int(d) for d in val.shape)


def _masked_shape(
    result: SliceResult, data_shape: Tuple[Optional[int], ...]
) -> Tuple[Optional[int], ...]:
    # Dims that were unknown on the input stay unknown on the output
    plan = result.unwrap()
    return tuple(
        out if dim is not None else None
        for out, dim in zip(plan.output_shape, data_shape)
    )


@ShapeInference.register_handler(OpType.SLICE)
def handle_slice(node: TensorNode, get_val):
    if not node.parents or node.parents[0].shape is None:
        return

    data_shape = node.parents[0].shape
    concrete = tuple(d if d is not None else 0 for d in data_shape)

    if len(node.parents) == 1:
        result = StaticSlice(node.attrs).prepare(concrete, flatten=False)
        node.shape = _masked_shape(result, data_shape)
        return

    if len(node.parents) < 3:
        raise ValueError(
            f"Slice node '{node.name}' requires either attributes or data, starts and ends inputs"
        )

    index_vals = [get_val(p) for p in node.parents[1:5]]
    if any(v is None for v in index_vals):
        # Ranges are only known at runtime
        node.shape = (None,) * len(data_shape)
        return

    result = DynamicSlice(flatten=False).prepare(concrete, *index_vals)
    node.shape = _masked_shape(result, data_shape)
