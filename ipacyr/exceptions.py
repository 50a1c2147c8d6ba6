"""Custom exceptions for IpaCyr."""


class IpaCyrError(Exception):
    """Base exception for all IpaCyr errors."""


class NotationError(IpaCyrError):
    """Raised when IPA notation text cannot be parsed."""

    def __init__(self, message: str, text: str = "", position: int | None = None) -> None:
        if position is not None:
            message = f"{message} at position {position} in {text!r}"
        super().__init__(message)
        self.text = text
        self.position = position


class UnsupportedPhonemeError(IpaCyrError):
    """Raised when a sound has no counterpart in the Russian phoneme inventory."""

    def __init__(self, sound: object) -> None:
        super().__init__(f"Unsupported sound: {sound!r}")
        self.sound = sound


class ConfigurationError(IpaCyrError):
    """Raised when configuration is invalid."""
