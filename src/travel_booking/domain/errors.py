class InvalidArgumentError(ValueError):
    """Raised when a domain operation receives an argument it cannot accept."""
