class InvalidParameter(ValueError):
    """Raised when an input falls outside its valid domain."""


class DegeneratePosterior(ArithmeticError):
    """Raised when a posterior cannot be normalized or approximated."""
