"""Amortization exceptions."""


class InvalidParameter(ValueError):
    """A loan parameter is outside its valid domain.

    Raised at construction time only; a schedule built from valid
    parameters cannot fail.
    """

    def __init__(self, parameter: str, value, constraint: str):
        super().__init__(f"{parameter} must be {constraint}, got {value!r}")
        self.parameter = parameter
        self.value = value
        self.constraint = constraint
