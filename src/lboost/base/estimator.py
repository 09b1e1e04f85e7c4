from abc import ABC

from sklearn.utils.validation import check_is_fitted


class LboostEstimatorMixin(ABC):

    @property
    def is_fitted(self) -> bool:
        """Has the estimator been fitted."""
        return hasattr(self, "n_observations_")

    @property
    def n_samples_(self) -> int:
        check_is_fitted(self, "n_observations_")
        return self.n_observations_

    def _print_message(self, message, level=0):
        if level <= self.verbose:
            print(f"[{self.__class__.__name__}]", message)
