from .active_set import ActiveSet, extract_active_sets, plan_reuse
from .error import ActiveSetMappingError, ShapeMismatchError
from .estimators import LassoedBoost, lboost
from .information_criteria import InformationCriterion
from .methods import ElasticNetPath, L2BoostPath, LassoPath
from .result import LassoedBoostResult
from .scaler import WeightedScaler
from .stats import CenteringStats, centering_stats

try:
    from importlib.metadata import version

    __version__ = version("lboost")
except Exception:
    __version__ = "dev"

__all__ = [
    "lboost",
    "LassoedBoost",
    "LassoedBoostResult",
    "ActiveSet",
    "extract_active_sets",
    "plan_reuse",
    "ElasticNetPath",
    "LassoPath",
    "L2BoostPath",
    "InformationCriterion",
    "WeightedScaler",
    "CenteringStats",
    "centering_stats",
    "ShapeMismatchError",
    "ActiveSetMappingError",
]
