"""Exception raised for invalid resolver configuration."""


class ConfigError(ValueError):
    """Raised when a configuration value is missing or out of its domain."""
