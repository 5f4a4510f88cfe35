"""
Exceptions raised while parsing magnet links.

- MagnetError: Base exception for all magnet link errors
- NotAMagnetURL: Raised when the string does not start with 'magnet:?'
- InvalidMagnetError: Raised by strict parsing for malformed parameters
"""


class MagnetError(Exception):
    """Base exception for magnet link errors."""
    pass


class NotAMagnetURL(MagnetError):
    """Raised when the provided string is not a magnet link."""

    def __init__(self, message="provided link is not a valid magnet URL"):
        super().__init__(message)


class InvalidMagnetError(MagnetError):
    """Raised in strict mode when a parameter cannot be interpreted."""
    pass
