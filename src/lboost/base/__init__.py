from .estimation_method import EstimationMethod
from .estimator import LboostEstimatorMixin

__all__ = [
    "EstimationMethod",
    "LboostEstimatorMixin",
]
