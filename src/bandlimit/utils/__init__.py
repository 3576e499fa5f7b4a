from .array import ensure_1d, frozen_copy
from .integrate import np_integrate, piecewise_linear_mean
from .io import read_text
from .logging import get_logger
from .numeric import machine_epsilon, rel_equal

__all__ = [
    "ensure_1d",
    "frozen_copy",
    "get_logger",
    "machine_epsilon",
    "np_integrate",
    "piecewise_linear_mean",
    "read_text",
    "rel_equal",
]
