# twml/core/errors.py


class ApplicationError(Exception):
    """Base application error."""

    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(ApplicationError):
    """Raised when settings loaded from the environment fail validation."""

    pass
