"""Service-layer exceptions."""

from dopewars.domain.errors import ConfigError


class GameCoreError(Exception):
    """Base exception for misuse of the service layer."""


class EncounterError(GameCoreError):
    """Raised when a police encounter is resolved with an unknown choice."""


__all__ = ["ConfigError", "EncounterError", "GameCoreError"]
