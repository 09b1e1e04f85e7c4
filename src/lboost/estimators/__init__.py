from .lassoed_boost import LassoedBoost, lboost

__all__ = [
    "LassoedBoost",
    "lboost",
]
