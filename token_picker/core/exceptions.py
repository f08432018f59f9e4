"""Custom exceptions for the token picker."""


class TokenPickerError(Exception):
    """Base exception for all token picker errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CircularReferenceError(TokenPickerError):
    """Raised when a chain of token references loops back on itself."""

    def __init__(self, chain: list[str]):
        message = f"Circular token reference: {' -> '.join(chain)}"
        super().__init__(message, {"chain": chain})
        self.chain = chain


class DocumentError(TokenPickerError):
    """Raised when a supplied token document cannot be used."""

    def __init__(self, source: str, message: str):
        full_message = f"[{source}] {message}"
        super().__init__(full_message, {"source": source})
        self.source = source


class ConfigurationError(TokenPickerError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, message: str):
        full_message = f"Configuration error [{config_key}]: {message}"
        super().__init__(full_message, {"config_key": config_key})
        self.config_key = config_key
