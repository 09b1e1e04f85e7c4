class ShapeMismatchError(ValueError):
    """Exception raised when an input does not have the expected length."""

    def __init__(self, message="Input does not have the expected shape."):
        self.message = message
        super().__init__(self.message)


class ActiveSetMappingError(ValueError):
    """Exception raised when boosting coefficients cannot be mapped onto an active set."""

    def __init__(self, message="Coefficients cannot be mapped onto the active set."):
        self.message = message
        super().__init__(self.message)


def check_length(name: str, actual: int, expected: int, expected_name: str) -> None:
    """Raise a `ShapeMismatchError` if `actual != expected`."""
    if actual != expected:
        raise ShapeMismatchError(
            f"The length of {name} ({actual}) needs to be the same as "
            f"{expected_name} ({expected})."
        )
