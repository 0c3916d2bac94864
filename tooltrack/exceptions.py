class InvalidArgumentError(ValueError):
    """Raised when a caller passes arguments outside the documented contract."""
