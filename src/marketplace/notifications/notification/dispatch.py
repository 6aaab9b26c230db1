"""Best-effort delivery of user notifications.

Business operations call ``notify`` after their state change is decided.
A failing sink is logged and swallowed: notifications never undo or block
the operation that triggered them.
"""

from protean.utils.globals import current_domain

from marketplace.identity.user.user import User
from marketplace.notifications.sink import get_sink
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


def notify(user_id, message: str) -> bool:
    """Deliver ``message`` to ``user_id``. Returns False when delivery failed."""
    try:
        get_sink().notify(str(user_id), message)
    except Exception as e:
        logger.error(
            "Notification delivery failed",
            user_id=str(user_id),
            error=str(e),
        )
        return False

    logger.info("Notification delivered", user_id=str(user_id))
    return True


def notify_roles(roles, message: str) -> int:
    """Notify every active user holding one of ``roles``.

    Returns the number of successful deliveries.
    """
    delivered = 0
    repo = current_domain.repository_for(User)
    for role in roles:
        try:
            recipients = repo.list_by_role(role)
        except Exception as e:
            logger.error("Could not resolve notification recipients", role=role, error=str(e))
            continue

        for user in recipients:
            if notify(user.id, message):
                delivered += 1
    return delivered
