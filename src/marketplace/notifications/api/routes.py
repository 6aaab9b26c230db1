"""FastAPI endpoints for the Notifications context."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from marketplace.notifications.api.schemas import NotificationResponse, StatusResponse
from marketplace.notifications.notification.management import DeleteNotification, MarkNotificationRead
from marketplace.notifications.notification.notification import Notification
from marketplace.shared.identifiers import ensure_identifier

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_response(notification: Notification) -> NotificationResponse:
    return NotificationResponse(
        id=str(notification.id),
        user_id=str(notification.user_id),
        message=notification.message,
        is_read=notification.is_read,
        created_at=notification.created_at,
        read_at=notification.read_at,
    )


@router.get("/users/{user_id}", response_model=list[NotificationResponse])
async def list_user_notifications(user_id: str) -> list[NotificationResponse]:
    """A user's notifications, newest first."""
    repo = current_domain.repository_for(Notification)
    return [_notification_response(n) for n in repo.list_for_user(ensure_identifier(user_id, "user_id"))]


@router.put("/{notification_id}/read", response_model=StatusResponse)
async def mark_notification_read(notification_id: str) -> StatusResponse:
    current_domain.process(MarkNotificationRead(notification_id=notification_id), asynchronous=False)
    return StatusResponse()


@router.delete("/{notification_id}", response_model=StatusResponse)
async def delete_notification(notification_id: str) -> StatusResponse:
    current_domain.process(DeleteNotification(notification_id=notification_id), asynchronous=False)
    return StatusResponse()
