"""Domain-level exceptions."""


class DomainError(Exception):
    """Base exception for the domain layer."""


class ConfigError(DomainError):
    """Raised when a game configuration is internally inconsistent."""
