from .batch_operations import (
    BatchOperations,
    divide_all,
    multiply_all,
    percentage_all,
)

__all__ = [
    "BatchOperations",
    "multiply_all",
    "divide_all",
    "percentage_all",
]
