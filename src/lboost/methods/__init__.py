from .elasticnet import ElasticNetPath
from .factory import get_estimation_method
from .l2boost import L2BoostPath, l2boost_path
from .lasso_path import LassoPath

__all__ = [
    "get_estimation_method",
    "ElasticNetPath",
    "LassoPath",
    "L2BoostPath",
    "l2boost_path",
]
