"""Exceptions for profile-trophy with user-facing messages."""

from __future__ import annotations


class TrophyError(Exception):
    """Base exception for trophy computation and rendering errors."""

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message)
        self.user_message = user_message or message


class CatalogConfigurationError(TrophyError):
    """Raised when a trophy ladder is malformed (gap or missing next-rank threshold)."""


class StatisticsError(TrophyError):
    """Raised when aggregate statistics cannot be read or parsed."""


class UnknownThemeError(TrophyError):
    def __init__(self, name: str, available: list[str]):
        super().__init__(
            f"Unknown theme '{name}'",
            f"Unknown theme '{name}'. Available: {', '.join(available)}",
        )
        self.name = name


class InvalidFilterError(TrophyError):
    def __init__(self, value: str):
        super().__init__(
            f"Unknown rank '{value}' in rank filter",
            f"Unknown rank '{value}'. Use one of: SECRET, SSS, SS, S, AAA, AA, A, B, C, ?",
        )
        self.value = value


class ConfigError(TrophyError):
    """Raised when a render default cannot be stored (unknown key or bad value)."""
