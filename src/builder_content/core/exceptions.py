"""Custom exceptions for builder-content."""


class BuilderContentError(Exception):
    """Base exception for all builder-content errors."""


class ConfigError(BuilderContentError):
    """Configuration is missing or invalid."""


class FetchError(BuilderContentError):
    """Failed to fetch content from the Builder.io API."""
