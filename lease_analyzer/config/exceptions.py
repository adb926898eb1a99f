class ConfigurationError(Exception):
    """Raised when a required configuration value is missing or invalid."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Configuration error for {key}: {reason}")
        self.key = key
        self.reason = reason
