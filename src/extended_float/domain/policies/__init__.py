from .float32_policy import FLOAT32_POLICY
from .float64_policy import FLOAT64_POLICY
from .float_policy import FloatPolicy
from .ieee_float_policy import IeeeFloatPolicy

__all__ = [
    "FLOAT32_POLICY",
    "FLOAT64_POLICY",
    "FloatPolicy",
    "IeeeFloatPolicy",
]
