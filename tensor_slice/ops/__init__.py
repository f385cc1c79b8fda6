from .atomic_types import OpType
