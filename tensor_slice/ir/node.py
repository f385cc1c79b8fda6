from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any
import uuid
from .dtypes import DType, TensorSignature, Backend
from ..ops.atomic_types import OpType

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)


@dataclass(eq=False)
class TensorNode:
    op_type: str
    dtype: DType
    parents: List["TensorNode"]
    shape: Optional[Tuple[Optional[int], ...]] = None
    name: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    attrs: Dict[str, Any] = field(default_factory=dict)
    backend: Backend = Backend.CPU_NUMPY

    @property
    def signature(self) -> TensorSignature:
        return TensorSignature(self.dtype, self.shape, self.backend)

    def __getitem__(self, key) -> "TensorNode":
        """
        Builds a static Slice node from basic indexing.
        Integer indices keep their axis with length 1.
        """
        from ..ops.slice import StaticSlice

        if self.shape is None:
            raise ValueError(
                f"Cannot slice node '{self.name}' because its shape is undefined."
            )

        if not isinstance(key, tuple):
            key = (key,)

        if Ellipsis in key:
            idx = key.index(Ellipsis)
            num_missing = len(self.shape) - (len(key) - 1)
            key = key[:idx] + (slice(None),) * num_missing + key[idx + 1 :]

        if len(key) > len(self.shape):
            raise IndexError(
                f"Too many indices for node '{self.name}' of rank {len(self.shape)}"
            )

        starts = []
        ends = []
        steps = []

        for k, dim_size in zip(key, self.shape):
            if isinstance(k, int):
                if dim_size is not None and not -dim_size <= k < dim_size:
                    raise IndexError(
                        f"Index {k} is out of bounds for axis with size {dim_size}"
                    )
                start = k + dim_size if k < 0 and dim_size is not None else k
                starts.append(start)
                ends.append(start + 1 if start != -1 else INT64_MAX)
                steps.append(1)
            elif isinstance(k, slice):
                step = k.step if k.step is not None else 1
                if k.start is not None:
                    start = k.start
                else:
                    start = 0 if step > 0 else INT64_MAX
                if k.stop is not None:
                    stop = k.stop
                else:
                    stop = INT64_MAX if step > 0 else INT64_MIN
                starts.append(start)
                ends.append(stop)
                steps.append(step)
            else:
                raise ValueError(f"Unsupported index type: {type(k)}")

        attrs = {"starts": starts, "ends": ends, "steps": steps}
        concrete = tuple(d if d is not None else 0 for d in self.shape)
        plan = StaticSlice(attrs).prepare(concrete, flatten=False).unwrap()
        new_shape = tuple(
            out if dim is not None else None
            for out, dim in zip(plan.output_shape, self.shape)
        )

        return TensorNode(
            OpType.SLICE,
            self.dtype,
            [self],
            new_shape,
            f"{self.name}_slice",
            attrs=attrs,
            backend=self.backend,
        )

    def __repr__(self):
        attr_keys = list(self.attrs.keys()) if self.attrs else []
        attrs_summary = f" | attrs={attr_keys}" if attr_keys else ""
        return f"[{self.dtype.value}|{self.shape}{attrs_summary}] {self.op_type}({self.name})"
