"""Fatal configuration error."""


class ConfigurationError(ValueError):
    """Raised when configuration or command arguments cannot be used.

    Always raised before any filesystem mutation.
    """
