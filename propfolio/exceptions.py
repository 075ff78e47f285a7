"""Custom exception hierarchy for propfolio."""


class PropfolioError(Exception):
    """Base exception for all propfolio errors."""


class EntityNotFoundError(PropfolioError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a refinance references a property that is not stored."""


class InvalidEntityStateError(PropfolioError):
    """Raised when an entity is in an invalid state for the operation."""


class ConfigurationError(PropfolioError):
    """Raised when configuration is invalid or missing."""


class SinkError(PropfolioError):
    """Raised when a sink operation fails."""


class NotificationError(SinkError):
    """Raised when an alert message cannot be delivered."""
