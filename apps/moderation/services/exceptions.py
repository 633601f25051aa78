"""Domain exceptions for moderation app."""

from apps.core.exceptions import InvalidStateError


class ModerationServiceError(Exception):
    """Base exception for all moderation service errors."""
    pass


class InvalidModerationActionError(ModerationServiceError, InvalidStateError):
    default_detail = 'invalid action'
