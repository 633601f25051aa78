"""Moderation service - staff actions mapped onto account and product status."""

import logging
from uuid import UUID

from apps.accounts.models import UserStatus
from apps.accounts.services import set_user_status
from apps.products.models import ProductStatus
from apps.products.services import set_product_status
from .exceptions import InvalidModerationActionError

logger = logging.getLogger(__name__)

USER_ACTIONS = {
    'suspend': UserStatus.SUSPENDED,
    'activate': UserStatus.ACTIVE,
}

PRODUCT_ACTIONS = {
    'approve': ProductStatus.ACTIVE,
    'reject': ProductStatus.REJECTED,
}


def moderate_user(*, moderator, user_id: UUID, action: str):
    """
    Suspend or reactivate a user.

    Raises:
        InvalidModerationActionError: If action is not suspend/activate
        UserNotFoundError: If user doesn't exist
    """
    if action not in USER_ACTIONS:
        raise InvalidModerationActionError()

    user = set_user_status(user_id=user_id, status=USER_ACTIONS[action])
    logger.info("Moderator %s applied %s to user %s", moderator.id, action, user_id)
    return user


def moderate_product(*, moderator, product_id: UUID, action: str):
    """
    Approve (publish) or reject a product listing.

    Raises:
        InvalidModerationActionError: If action is not approve/reject
        ProductNotFoundError: If product doesn't exist
    """
    if action not in PRODUCT_ACTIONS:
        raise InvalidModerationActionError()

    product = set_product_status(product_id=product_id, status=PRODUCT_ACTIONS[action])
    logger.info("Moderator %s applied %s to product %s", moderator.id, action, product_id)
    return product
