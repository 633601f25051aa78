from .moderation import moderate_user, moderate_product
from .exceptions import ModerationServiceError, InvalidModerationActionError

__all__ = [
    'moderate_user',
    'moderate_product',
    'ModerationServiceError',
    'InvalidModerationActionError',
]
