"""Exception types raised by fit-avatar."""


class FitAvatarError(Exception):
    """Base class for all fit-avatar errors."""


class InvalidInputError(FitAvatarError, ValueError):
    """Raised when a caller supplies a value the engine cannot accept."""


class DeserializationError(FitAvatarError, ValueError):
    """Raised when persisted or imported data cannot be decoded."""
